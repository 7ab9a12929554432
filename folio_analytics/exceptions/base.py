"""Base exception for the analytics engine."""

from __future__ import annotations

from typing import Any


class AnalyticsError(Exception):
    """
    Base class for all analytics engine errors.

    Attributes:
        message: Human-readable description
        details: Optional context (input sizes, offending values)
    """

    kind: str = "analytics_error"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        ctx = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({ctx})"
