"""
Performance result models.

Contains the flat metric records returned to presentation layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from folio_analytics.config import NOT_AVAILABLE

METRIC_FIELDS: tuple[str, ...] = (
    "sharpe_ratio",
    "max_drawdown",
    "volatility",
    "win_rate",
    "average_hold_time",
)


@dataclass(frozen=True)
class PerformanceMetrics:
    """Risk-adjusted performance metrics.

    A field is None when it could not be computed; errors maps that field
    name to the error kind (insufficient_data, division_by_zero, invalid_argument).
    """

    sharpe_ratio: float | None = None
    max_drawdown: float | None = None  # Fraction of peak, 0 to 1
    volatility: float | None = None
    win_rate: float | None = None  # Percentage, 0 to 100
    average_hold_time: float | None = None  # Days
    errors: dict[str, str] = field(default_factory=dict)

    def is_available(self, name: str) -> bool:
        """True when the named metric was computed (it may still be 0.0)."""
        return getattr(self, name) is not None

    def display(self, name: str, precision: int = 2) -> str:
        """Render one metric for display, or "N/A" when it is missing."""
        if not self.is_available(name):
            return NOT_AVAILABLE
        return f"{getattr(self, name):.{precision}f}"

    def to_dict(self) -> dict[str, float | None]:
        """Metric values keyed by field name (errors excluded)."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "errors"}

    def __repr__(self) -> str:
        parts = ", ".join(f"{name}={self.display(name, 4)}" for name in METRIC_FIELDS)
        return f"PerformanceMetrics({parts})"


@dataclass(frozen=True)
class TradeStatistics:
    """Summary statistics over closed trades."""

    total_trades: int = 0
    winning_trades: int = 0
    losing_trades: int = 0  # gross P&L <= 0
    win_rate: float = 0.0  # Percentage
    average_win: float = 0.0
    average_loss: float = 0.0  # Negative or zero
    profit_factor: float | None = None  # None when there are no losses to divide by
    total_pl: float = 0.0
    most_traded_symbol: str | None = None
    most_traded_count: int = 0


__all__ = ["METRIC_FIELDS", "PerformanceMetrics", "TradeStatistics"]
