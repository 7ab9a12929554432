"""
Custom exceptions for the analytics engine.

Provides a hierarchical exception structure so callers can tell "no data"
apart from "degenerate data" and "bad argument".
"""

from folio_analytics.exceptions.analytics import (
    DivisionByZeroError,
    InsufficientDataError,
    InvalidArgumentError,
)
from folio_analytics.exceptions.base import AnalyticsError

__all__ = [
    # Base
    "AnalyticsError",
    # Calculation
    "InsufficientDataError",
    "DivisionByZeroError",
    "InvalidArgumentError",
]
