"""Risk management module for position sizing and portfolio heat."""

from folio_analytics.risk.heat import (
    assess_portfolio_risk,
    calculate_portfolio_heat,
    calculate_position_risk,
    classify_risk_level,
)
from folio_analytics.risk.models import RiskAssessment, RiskLevel, RiskLevelInfo
from folio_analytics.risk.position_sizing import calculate_position_size

__all__ = [
    "RiskAssessment",
    "RiskLevel",
    "RiskLevelInfo",
    "calculate_position_size",
    "calculate_position_risk",
    "calculate_portfolio_heat",
    "classify_risk_level",
    "assess_portfolio_risk",
]
