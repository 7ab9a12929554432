"""
Core performance metric calculations.

Single source of truth for Sharpe ratio, max drawdown, volatility, win rate and
average hold time. Degenerate input raises a typed error instead of producing
NaN or infinity.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from folio_analytics.config import DEFAULT_RISK_FREE_RATE
from folio_analytics.exceptions import (
    DivisionByZeroError,
    InsufficientDataError,
    InvalidArgumentError,
)
from folio_analytics.portfolio import Position
from folio_analytics.utils.logger import get_logger
from folio_analytics.utils.stats import SeriesLike, as_float_array, mean, population_std

logger = get_logger(__name__)

__all__ = [
    "calculate_average_hold_time",
    "calculate_drawdown_series",
    "calculate_max_drawdown",
    "calculate_sharpe_ratio",
    "calculate_volatility",
    "calculate_win_rate",
]


def calculate_sharpe_ratio(
    returns: SeriesLike,
    risk_free_rate: float = DEFAULT_RISK_FREE_RATE,
) -> float:
    """Calculate the (non-annualized) Sharpe ratio.

    Uses excess returns (returns - risk_free_rate) and population std (ddof=0).

    Args:
        returns: Chronological period returns as fractions (0.01 = 1%).
        risk_free_rate: Risk-free rate in the same period units as returns.

    Returns:
        Mean excess return divided by its standard deviation.

    Raises:
        InsufficientDataError: If returns is empty.
        DivisionByZeroError: If the excess returns have zero standard deviation.
    """
    arr = as_float_array(returns, "returns")
    if arr.size == 0:
        raise InsufficientDataError("Sharpe ratio needs at least one return")
    excess = arr - risk_free_rate
    std = population_std(excess)
    if std == 0:
        raise DivisionByZeroError(
            "Sharpe ratio is undefined for zero-volatility returns",
            {"periods": int(arr.size)},
        )
    return mean(excess) / std


def calculate_drawdown_series(values: SeriesLike) -> np.ndarray:
    """Calculate the drawdown fraction at each point against the running peak.

    Args:
        values: Chronological portfolio values.

    Returns:
        Array of drawdown fractions (0 = at peak, 1 = total loss).

    Raises:
        InsufficientDataError: If values is empty.
        InvalidArgumentError: If any value is negative.
        DivisionByZeroError: If the running peak is zero at any point.
    """
    arr = as_float_array(values, "values")
    if arr.size == 0:
        raise InsufficientDataError("Drawdown needs at least one value")
    if np.any(arr < 0):
        raise InvalidArgumentError(
            "Portfolio values must be non-negative",
            {"index": int(np.flatnonzero(arr < 0)[0])},
        )
    peaks = np.maximum.accumulate(arr)
    if np.any(peaks == 0):
        raise DivisionByZeroError(
            "Drawdown is undefined while the peak value is zero",
            {"index": int(np.flatnonzero(peaks == 0)[0])},
        )
    drawdown: np.ndarray = (peaks - arr) / peaks
    return drawdown


def calculate_max_drawdown(values: SeriesLike) -> float:
    """Calculate the largest peak-to-trough decline as a fraction of the peak.

    Example:
        >>> calculate_max_drawdown([100, 80, 120, 60])
        0.5

    Raises:
        InsufficientDataError: If values is empty.
        InvalidArgumentError: If any value is negative.
        DivisionByZeroError: If the running peak is zero at any point.
    """
    return float(np.max(calculate_drawdown_series(values)))


def calculate_volatility(returns: SeriesLike) -> float:
    """Population standard deviation of period returns (not annualized).

    Raises:
        InsufficientDataError: If returns is empty.
    """
    arr = as_float_array(returns, "returns")
    if arr.size == 0:
        raise InsufficientDataError("Volatility needs at least one return")
    return population_std(arr)


def calculate_win_rate(positions: Iterable[Position]) -> float:
    """Percentage of closed positions with a positive gross P&L.

    Open positions are ignored. No closed positions yields 0.0, the
    steady state of a portfolio that has not traded yet.

    Returns:
        Win rate in [0, 100].
    """
    closed = [p for p in positions if p.is_closed]
    if not closed:
        return 0.0
    winners = sum(1 for p in closed if p.gross_pl > 0)
    return 100.0 * winners / len(closed)


def calculate_average_hold_time(positions: Iterable[Position]) -> float:
    """Average days between open and close over closed positions.

    Closed positions without both timestamps are skipped.

    Raises:
        InsufficientDataError: If no closed position carries both timestamps.
        InvalidArgumentError: If a position closes before it opens.
    """
    durations: list[float] = []
    skipped = 0
    for p in positions:
        if not p.is_closed:
            continue
        days = p.holding_days()
        if days is None:
            skipped += 1
            continue
        durations.append(days)

    if skipped:
        logger.debug("Skipped %d closed positions without open/close timestamps", skipped)
    if not durations:
        raise InsufficientDataError("No closed positions with open and close timestamps")
    return mean(durations)
