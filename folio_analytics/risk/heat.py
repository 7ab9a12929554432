"""
Portfolio heat and risk level classification.

Heat is the sum of each open position's unrealized P&L as a percentage of its
market value, with every position capped at MAX_POSITION_RISK_PCT.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from folio_analytics.config import (
    MAX_POSITION_RISK_PCT,
    RISK_LEVEL_COLORS,
    RISK_LEVEL_HIGH_THRESHOLD,
    RISK_LEVEL_MEDIUM_THRESHOLD,
)
from folio_analytics.exceptions import InvalidArgumentError
from folio_analytics.portfolio import Position
from folio_analytics.risk.models import RiskAssessment, RiskLevel, RiskLevelInfo
from folio_analytics.utils.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "assess_portfolio_risk",
    "calculate_portfolio_heat",
    "calculate_position_risk",
    "classify_risk_level",
]


def calculate_position_risk(position: Position) -> float:
    """
    Risk contribution of a single position, in percent.

    Closed positions contribute 0. A zero current value is treated as the
    capped maximum rather than an infinite ratio.

    Returns:
        min(|unrealized_pl / current_value| * 100, MAX_POSITION_RISK_PCT)
    """
    if not position.is_open:
        return 0.0
    if position.current_value == 0:
        logger.debug("Zero current value for %s, using capped risk", position.symbol or "position")
        return MAX_POSITION_RISK_PCT
    risk = abs(position.unrealized_pl / position.current_value) * 100.0
    return min(risk, MAX_POSITION_RISK_PCT)


def calculate_portfolio_heat(positions: Iterable[Position]) -> float:
    """Sum of capped risk contributions over open positions."""
    return float(sum(calculate_position_risk(p) for p in positions))


def classify_risk_level(heat: float) -> RiskLevelInfo:
    """
    Map portfolio heat to a three-tier risk level.

    Each tier includes its lower bound: 5 is Medium, 15 is High.

    Raises:
        InvalidArgumentError: If heat is negative or NaN.
    """
    if math.isnan(heat) or heat < 0:
        raise InvalidArgumentError("Heat must be a non-negative number", {"heat": heat})

    if heat < RISK_LEVEL_MEDIUM_THRESHOLD:
        level = RiskLevel.LOW
    elif heat < RISK_LEVEL_HIGH_THRESHOLD:
        level = RiskLevel.MEDIUM
    else:
        level = RiskLevel.HIGH
    return RiskLevelInfo(level=level, color=RISK_LEVEL_COLORS[level.value])


def assess_portfolio_risk(positions: Iterable[Position]) -> RiskAssessment:
    """Compute portfolio heat and classify it."""
    heat = calculate_portfolio_heat(positions)
    info = classify_risk_level(heat)
    return RiskAssessment(heat=heat, level=info.level, color=info.color)
