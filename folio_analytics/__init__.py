"""
Folio Analytics - portfolio risk and performance analytics engine.
"""

from folio_analytics.__version__ import __version__

__all__ = ["__version__"]
