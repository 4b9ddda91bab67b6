"""Base exception shared by every calendarpage error."""

from typing import Any, Optional


class CalendarPageError(Exception):
    """Base exception for calendar page errors.

    Args:
        message: Human-readable error description
        details: Optional context such as the offending field or file path
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
