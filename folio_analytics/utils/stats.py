"""
Shared statistics helpers.

Population moments (divide by n, not n-1) used by the Sharpe ratio and
volatility calculations, plus return derivation from a value series.
All functions copy their input and never mutate it.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd

from folio_analytics.exceptions import (
    DivisionByZeroError,
    InsufficientDataError,
    InvalidArgumentError,
)

SeriesLike = Sequence[float] | np.ndarray | pd.Series

__all__ = [
    "SeriesLike",
    "as_float_array",
    "calculate_returns",
    "mean",
    "population_std",
    "population_variance",
]


def as_float_array(values: SeriesLike, name: str = "values") -> np.ndarray:
    """Convert a series to a 1-D float64 array, rejecting NaN and infinities.

    Raises:
        InvalidArgumentError: If the input is not 1-D numeric or holds non-finite values.
    """
    try:
        arr = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{name} must be a sequence of numbers") from e
    if arr.ndim != 1:
        raise InvalidArgumentError(f"{name} must be one-dimensional", {"ndim": arr.ndim})
    if not np.all(np.isfinite(arr)):
        raise InvalidArgumentError(f"{name} contains NaN or infinite values")
    return arr


def _require_data(arr: np.ndarray, name: str) -> None:
    if arr.size == 0:
        raise InsufficientDataError(f"{name} is empty")


def mean(values: SeriesLike) -> float:
    """Arithmetic mean.

    Raises:
        InsufficientDataError: If values is empty.
    """
    arr = as_float_array(values)
    _require_data(arr, "values")
    return float(np.mean(arr))


def population_variance(values: SeriesLike) -> float:
    """Sum of squared deviations from the mean divided by n.

    Raises:
        InsufficientDataError: If values is empty.
    """
    arr = as_float_array(values)
    _require_data(arr, "values")
    # Constant series: exact zero, not mean-rounding residue
    if np.ptp(arr) == 0:
        return 0.0
    return float(np.var(arr, ddof=0))


def population_std(values: SeriesLike) -> float:
    """Square root of the population variance.

    Raises:
        InsufficientDataError: If values is empty.
    """
    return float(np.sqrt(population_variance(values)))


def calculate_returns(values: SeriesLike) -> np.ndarray:
    """Simple period-over-period returns from a value series.

    Args:
        values: Chronological portfolio values.

    Returns:
        Array of length len(values) - 1 (empty for fewer than 2 values).

    Raises:
        DivisionByZeroError: If any value other than the last is zero.
    """
    arr = as_float_array(values)
    if arr.size < 2:
        return np.array([], dtype=np.float64)
    prev = arr[:-1]
    if np.any(prev == 0):
        idx = int(np.flatnonzero(prev == 0)[0])
        raise DivisionByZeroError("Cannot derive a return from a zero value", {"index": idx})
    returns: np.ndarray = np.diff(arr) / prev
    return returns
