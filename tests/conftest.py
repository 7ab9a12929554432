"""
Shared fixtures for analytics tests.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from folio_analytics.portfolio import Position, PositionStatus


@pytest.fixture
def closed_positions() -> list[Position]:
    """Four closed trades: two winners, one loser, one flat."""
    return [
        Position(
            status=PositionStatus.CLOSED,
            gross_pl=100.0,
            symbol="AAPL",
            open_time=datetime(2024, 1, 1),
            close_time=datetime(2024, 1, 11),
        ),
        Position(
            status=PositionStatus.CLOSED,
            gross_pl=-50.0,
            symbol="MSFT",
            open_time=datetime(2024, 2, 1),
            close_time=datetime(2024, 2, 6),
        ),
        Position(status=PositionStatus.CLOSED, gross_pl=200.0, symbol="AAPL"),
        Position(status=PositionStatus.CLOSED, gross_pl=0.0, symbol="TSLA"),
    ]


@pytest.fixture
def open_positions() -> list[Position]:
    """Open positions with 2% and 4% unrealized moves."""
    return [
        Position(
            status=PositionStatus.OPEN,
            gross_pl=-200.0,
            unrealized_pl=-200.0,
            current_value=10_000.0,
            symbol="AAPL",
        ),
        Position(
            status=PositionStatus.OPEN,
            gross_pl=200.0,
            unrealized_pl=200.0,
            current_value=5_000.0,
            symbol="NVDA",
        ),
    ]


@pytest.fixture
def mixed_positions(
    closed_positions: list[Position], open_positions: list[Position]
) -> list[Position]:
    return closed_positions + open_positions
