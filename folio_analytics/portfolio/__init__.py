"""Portfolio position models consumed by the analytics engine."""

from folio_analytics.portfolio.models import Position, PositionStatus

__all__ = ["Position", "PositionStatus"]
