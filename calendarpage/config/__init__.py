"""Configuration management for the calendar page controller."""

from .exceptions import SettingsError
from .settings import CalendarPageSettings, LoggingSettings, get_settings, reset_settings

__all__ = [
    "CalendarPageSettings",
    "LoggingSettings",
    "SettingsError",
    "get_settings",
    "reset_settings",
]
