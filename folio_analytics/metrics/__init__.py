"""
Performance metrics module.

Provides return-based statistics and closed-trade summaries used by the
dashboard's analytics views.
"""

from folio_analytics.metrics.models import METRIC_FIELDS, PerformanceMetrics, TradeStatistics
from folio_analytics.metrics.performance import (
    calculate_average_hold_time,
    calculate_drawdown_series,
    calculate_max_drawdown,
    calculate_sharpe_ratio,
    calculate_volatility,
    calculate_win_rate,
)
from folio_analytics.metrics.summary import calculate_performance_metrics
from folio_analytics.metrics.trades import calculate_trade_statistics

__all__ = [
    # Models
    "METRIC_FIELDS",
    "PerformanceMetrics",
    "TradeStatistics",
    # Metrics
    "calculate_sharpe_ratio",
    "calculate_drawdown_series",
    "calculate_max_drawdown",
    "calculate_volatility",
    "calculate_win_rate",
    "calculate_average_hold_time",
    "calculate_performance_metrics",
    "calculate_trade_statistics",
]
