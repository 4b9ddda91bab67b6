"""Configuration-specific exceptions."""

from ..exceptions import CalendarPageError


class SettingsError(CalendarPageError):
    """Raised when the settings file cannot be used.

    Example:
        >>> raise SettingsError("Configured settings file does not exist", {"path": "/etc/page.yaml"})
    """
