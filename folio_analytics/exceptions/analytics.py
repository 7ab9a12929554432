"""Calculation errors raised by the metrics and risk calculators."""

from folio_analytics.exceptions.base import AnalyticsError


class InsufficientDataError(AnalyticsError, ValueError):
    """Input series or collection is empty or too short for the statistic."""

    kind = "insufficient_data"


class DivisionByZeroError(AnalyticsError, ZeroDivisionError):
    """A denominator (std, peak value, previous value) is zero for present but degenerate input."""

    kind = "division_by_zero"


class InvalidArgumentError(AnalyticsError, ValueError):
    """A required input is missing, negative, non-finite or otherwise out of domain."""

    kind = "invalid_argument"
