"""Position sizing from a fixed-fractional risk budget and a stop distance."""

from __future__ import annotations

import math

from folio_analytics.utils.logger import get_logger

logger = get_logger(__name__)

__all__ = ["calculate_position_size"]


def _is_positive(value: float | None) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number) and number > 0


def calculate_position_size(
    portfolio_value: float | None,
    risk_percent: float | None,
    stop_loss_percent: float | None,
) -> float:
    """
    Calculate the notional size whose stop-out loses exactly risk_percent of the portfolio.

    Formula: portfolio_value * (risk_percent / 100) / (stop_loss_percent / 100)

    Args:
        portfolio_value: Total portfolio value
        risk_percent: Share of the portfolio to risk, in percent (2 = 2%)
        stop_loss_percent: Stop distance from entry, in percent (5 = 5%)

    Returns:
        Notional position size, or 0.0 when any input is missing,
        zero, negative or non-finite (no size can be taken).

    Example:
        >>> calculate_position_size(100_000, 2, 5)
        40000.0
    """
    inputs = {
        "portfolio_value": portfolio_value,
        "risk_percent": risk_percent,
        "stop_loss_percent": stop_loss_percent,
    }
    invalid = [name for name, value in inputs.items() if not _is_positive(value)]
    if invalid:
        logger.debug("Position size is 0: non-positive or missing %s", ", ".join(invalid))
        return 0.0

    # The /100 factors cancel; dividing once keeps round inputs exact
    return float(portfolio_value) * float(risk_percent) / float(stop_loss_percent)  # type: ignore[arg-type]
