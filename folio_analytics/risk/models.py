"""
Risk assessment models.

Contains the risk level classification and the portfolio assessment result.
"""

from dataclasses import dataclass
from enum import StrEnum


class RiskLevel(StrEnum):
    """Portfolio heat tiers."""

    LOW = "Low"  # heat < 5
    MEDIUM = "Medium"  # 5 <= heat < 15
    HIGH = "High"  # heat >= 15


@dataclass(frozen=True)
class RiskLevelInfo:
    """Risk level with its display color."""

    level: RiskLevel
    color: str


@dataclass(frozen=True)
class RiskAssessment:
    """Aggregate portfolio heat and its classification."""

    heat: float  # Sum of capped per-position risk percentages
    level: RiskLevel
    color: str

    def __repr__(self) -> str:
        return f"RiskAssessment(heat={self.heat:.2f}, level={self.level.value})"


__all__ = ["RiskAssessment", "RiskLevel", "RiskLevelInfo"]
