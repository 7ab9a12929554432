"""
Configuration constants for the analytics engine.

Centralizes defaults, thresholds and formats to avoid magic numbers in the calculators.
"""

from typing import Final

# Performance Defaults
DEFAULT_RISK_FREE_RATE: Final[float] = 0.02  # Same period units as the return series

# Risk Limits
MAX_POSITION_RISK_PCT: Final[float] = 10.0  # Ceiling on a single position's heat contribution
RISK_LEVEL_MEDIUM_THRESHOLD: Final[float] = 5.0
RISK_LEVEL_HIGH_THRESHOLD: Final[float] = 15.0

# Risk level display colors
RISK_LEVEL_COLORS: Final[dict[str, str]] = {
    "Low": "green",
    "Medium": "yellow",
    "High": "red",
}

# Time
SECONDS_PER_DAY: Final[float] = 86_400.0

# Presentation placeholder for metrics that could not be computed
NOT_AVAILABLE: Final[str] = "N/A"

# Logging Configuration
LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
