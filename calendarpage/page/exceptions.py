"""Calendar page exceptions."""

from typing import Any, Optional

from ..exceptions import CalendarPageError


class PageConfigurationError(CalendarPageError):
    """Raised when page options or context values are invalid.

    Raised from pydantic validators, so it reaches the caller unwrapped rather
    than inside a ``ValidationError``.
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
    ) -> None:
        self.field_name = field_name
        self.field_value = field_value

        details: dict[str, Any] = {}
        if field_name:
            details["field_name"] = field_name
        if field_value is not None:
            details["field_value"] = str(field_value)
        super().__init__(message, details)


__all__ = ["CalendarPageError", "PageConfigurationError"]
