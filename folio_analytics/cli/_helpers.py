"""Shared CLI helpers: input file loading and metric formatting."""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pandas as pd

from folio_analytics.config import NOT_AVAILABLE
from folio_analytics.portfolio import Position


def load_series(path: str | Path, column: str | None = None) -> np.ndarray:
    """Load a numeric series from a CSV file.

    Uses the named column, or the first numeric column when none is given.

    Raises:
        ValueError: If the column is missing or the file has no numeric column.
    """
    df = pd.read_csv(path)
    if column is not None:
        if column not in df.columns:
            raise ValueError(f"Column {column!r} not found in {path}")
        series = df[column]
    else:
        numeric = df.select_dtypes(include="number")
        if numeric.empty:
            raise ValueError(f"No numeric column in {path}")
        series = numeric.iloc[:, 0]
    return series.dropna().to_numpy(dtype=np.float64)


def load_positions(path: str | Path) -> list[Position]:
    """Load positions from a JSON array of API records (or {"data": [...]})."""
    with Path(path).open(encoding="utf-8") as f:
        payload = json.load(f)
    if isinstance(payload, dict):
        payload = payload.get("data", [])
    if not isinstance(payload, list):
        raise ValueError(f"Expected a list of positions in {path}")
    return [Position.from_dict(record) for record in payload]


def format_value(value: float | None, suffix: str = "", precision: int = 2) -> str:
    """Format a metric value, or the N/A placeholder."""
    if value is None:
        return NOT_AVAILABLE
    return f"{value:,.{precision}f}{suffix}"
