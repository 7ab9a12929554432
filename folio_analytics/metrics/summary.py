"""
Aggregate performance metrics.

Computes every metric independently so that a missing or degenerate input for
one field does not block the others.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from folio_analytics.config import DEFAULT_RISK_FREE_RATE
from folio_analytics.exceptions import AnalyticsError, InsufficientDataError
from folio_analytics.metrics.models import PerformanceMetrics
from folio_analytics.metrics.performance import (
    calculate_average_hold_time,
    calculate_max_drawdown,
    calculate_sharpe_ratio,
    calculate_volatility,
    calculate_win_rate,
)
from folio_analytics.portfolio import Position
from folio_analytics.utils.logger import get_logger
from folio_analytics.utils.stats import SeriesLike, calculate_returns

logger = get_logger(__name__)

__all__ = ["calculate_performance_metrics"]


def _fail(error: AnalyticsError) -> Callable[[], float]:
    def fail() -> float:
        raise error

    return fail


def _missing(what: str) -> Callable[[], float]:
    return _fail(InsufficientDataError(f"No {what} supplied"))


def calculate_performance_metrics(
    returns: SeriesLike | None = None,
    values: SeriesLike | None = None,
    positions: Iterable[Position] | None = None,
    risk_free_rate: float = DEFAULT_RISK_FREE_RATE,
) -> PerformanceMetrics:
    """
    Calculate all performance metrics that the supplied data supports.

    Args:
        returns: Period returns. Derived from values when omitted.
        values: Portfolio value series (for max drawdown).
        positions: Position snapshots (for win rate and average hold time).
        risk_free_rate: Risk-free rate in the same period units as returns.

    Returns:
        PerformanceMetrics with None and an error kind for each field that failed.
    """
    position_list = list(positions) if positions is not None else None

    returns_error: AnalyticsError | None = None
    if returns is None and values is not None:
        try:
            returns = calculate_returns(values)
        except AnalyticsError as e:
            logger.debug("Could not derive returns from values: %s", e)
            returns_error = e
    no_returns = _fail(returns_error) if returns_error is not None else _missing("returns")

    calculators: dict[str, Callable[[], float]] = {
        "sharpe_ratio": (
            (lambda: calculate_sharpe_ratio(returns, risk_free_rate))
            if returns is not None
            else no_returns
        ),
        "volatility": (
            (lambda: calculate_volatility(returns)) if returns is not None else no_returns
        ),
        "max_drawdown": (
            (lambda: calculate_max_drawdown(values)) if values is not None else _missing("values")
        ),
        "win_rate": (
            (lambda: calculate_win_rate(position_list))
            if position_list is not None
            else _missing("positions")
        ),
        "average_hold_time": (
            (lambda: calculate_average_hold_time(position_list))
            if position_list is not None
            else _missing("positions")
        ),
    }

    results: dict[str, float | None] = {}
    errors: dict[str, str] = {}
    for name, calculate in calculators.items():
        try:
            results[name] = calculate()
        except AnalyticsError as e:
            logger.debug("%s unavailable: %s", name, e)
            results[name] = None
            errors[name] = e.kind

    return PerformanceMetrics(errors=errors, **results)
