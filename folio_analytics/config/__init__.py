"""Configuration package."""

from folio_analytics.config.constants import (
    DEFAULT_RISK_FREE_RATE,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    MAX_POSITION_RISK_PCT,
    NOT_AVAILABLE,
    RISK_LEVEL_COLORS,
    RISK_LEVEL_HIGH_THRESHOLD,
    RISK_LEVEL_MEDIUM_THRESHOLD,
    SECONDS_PER_DAY,
)

__all__ = [
    "DEFAULT_RISK_FREE_RATE",
    "MAX_POSITION_RISK_PCT",
    "RISK_LEVEL_MEDIUM_THRESHOLD",
    "RISK_LEVEL_HIGH_THRESHOLD",
    "RISK_LEVEL_COLORS",
    "SECONDS_PER_DAY",
    "NOT_AVAILABLE",
    "LOG_FORMAT",
    "LOG_DATE_FORMAT",
]
