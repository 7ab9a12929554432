"""
Position data models.

Contains the subset of a portfolio position consumed by the analytics engine,
and parsing from the API's record shape.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

import pandas as pd

from folio_analytics.config import SECONDS_PER_DAY
from folio_analytics.exceptions import InvalidArgumentError

# API field name -> dataclass field name
_FIELD_ALIASES: dict[str, str] = {
    "grossPL": "gross_pl",
    "unrealizedPL": "unrealized_pl",
    "currentValue": "current_value",
    "openTime": "open_time",
    "closeTime": "close_time",
}


class PositionStatus(StrEnum):
    """Lifecycle status of a position."""

    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class Position:
    """A position snapshot as supplied by the data-access layer."""

    status: PositionStatus
    gross_pl: float = 0.0  # Realized (closed) or running (open) P&L
    unrealized_pl: float = 0.0  # Meaningful only while open
    current_value: float = 0.0  # Market value, risk denominator
    symbol: str | None = None
    open_time: datetime | None = None
    close_time: datetime | None = None

    def __post_init__(self) -> None:
        """Coerce status to PositionStatus and reject non-finite amounts.

        Raises:
            InvalidArgumentError: On an unknown status or a NaN/infinite amount.
        """
        if not isinstance(self.status, PositionStatus):
            try:
                status = PositionStatus(str(self.status).lower())
            except ValueError as e:
                raise InvalidArgumentError("Unknown position status", {"status": self.status}) from e
            object.__setattr__(self, "status", status)

        for name in ("gross_pl", "unrealized_pl", "current_value"):
            value = getattr(self, name)
            try:
                amount = float(value)
            except (TypeError, ValueError) as e:
                raise InvalidArgumentError(f"{name} must be numeric", {name: value}) from e
            if not math.isfinite(amount):
                raise InvalidArgumentError(f"{name} must be finite", {name: value})
            object.__setattr__(self, name, amount)

    @property
    def is_open(self) -> bool:
        return self.status is PositionStatus.OPEN

    @property
    def is_closed(self) -> bool:
        return self.status is PositionStatus.CLOSED

    def holding_days(self, as_of: datetime | None = None) -> float | None:
        """Fractional days the position has been (or was) held.

        Closed positions use close_time; open positions use as_of (default: now).

        Returns:
            Days held, or None if the required timestamps are missing.

        Raises:
            InvalidArgumentError: If the end timestamp precedes open_time.
        """
        if self.open_time is None:
            return None
        if self.is_closed:
            end = self.close_time
        else:
            end = as_of or datetime.now(self.open_time.tzinfo)
        if end is None:
            return None
        try:
            seconds = (end - self.open_time).total_seconds()
        except TypeError as e:
            # naive vs. aware timestamps
            raise InvalidArgumentError("Position timestamps mix naive and aware datetimes") from e
        if seconds < 0:
            raise InvalidArgumentError(
                "Position closes before it opens",
                {"open_time": self.open_time.isoformat(), "end": end.isoformat()},
            )
        return seconds / SECONDS_PER_DAY

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> Position:
        """Build a Position from an API record.

        Accepts camelCase (grossPL, unrealizedPL, currentValue, openTime, closeTime)
        or snake_case keys. Missing or null numeric fields count as zero.

        Raises:
            InvalidArgumentError: On an unknown status, a non-numeric amount
                or an unparseable timestamp.
        """
        data = {_FIELD_ALIASES.get(k, k): v for k, v in record.items()}

        symbol = data.get("symbol")
        return cls(
            status=data.get("status"),  # validated in __post_init__
            gross_pl=_parse_amount(data.get("gross_pl"), "gross_pl"),
            unrealized_pl=_parse_amount(data.get("unrealized_pl"), "unrealized_pl"),
            current_value=_parse_amount(data.get("current_value"), "current_value"),
            symbol=str(symbol) if symbol is not None else None,
            open_time=_parse_time(data.get("open_time"), "open_time"),
            close_time=_parse_time(data.get("close_time"), "close_time"),
        )


def _parse_amount(value: Any, name: str) -> float:
    if value is None:
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{name} must be numeric", {name: value}) from e
    if math.isnan(amount):
        return 0.0
    if math.isinf(amount):
        raise InvalidArgumentError(f"{name} must be finite", {name: value})
    return amount


def _parse_time(value: Any, name: str) -> datetime | None:
    if value is None or value == "" or pd.isna(value):
        return None
    if isinstance(value, datetime):
        return value
    try:
        # API timestamps are ISO-8601, usually with a trailing "Z"
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError as e:
        raise InvalidArgumentError(f"{name} is not an ISO-8601 timestamp", {name: value}) from e
    if parsed.tzinfo is None:
        return parsed
    return parsed.astimezone(timezone.utc)


__all__ = ["Position", "PositionStatus"]
