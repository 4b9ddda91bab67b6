"""Package-wide defaults for calendar pages.

Settings come from keyword arguments, ``CALENDARPAGE_*`` environment variables
and an optional YAML file, in that order of priority.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, PrivateAttr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import SettingsError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "calendarpage" / "config.yaml"


def _read_yaml(path: Path) -> Optional[dict]:
    """Read a YAML mapping, or None when the file is unreadable or malformed.

    A broken file is logged and ignored so the defaults and environment still apply.
    """
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logging.warning(f"Could not load YAML config from {path}: {e}")
        return None

    if data is not None and not isinstance(data, dict):
        logging.warning(f"Ignoring YAML config {path}: expected a mapping")
        return None
    return data


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = Field(
        default="INFO",
        description="Log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    console_colors: bool = Field(
        default=True, description="Color console log levels when the terminal allows it"
    )
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_directory: Optional[str] = Field(default=None, description="Directory for log files")
    file_name: str = Field(default="calendarpage.log", description="Log file name")


class CalendarPageSettings(BaseSettings):
    """Defaults applied to every calendar page the controller renders.

    Values are resolved with the priority: explicit arguments > environment
    variables (``CALENDARPAGE_`` prefix) > YAML config file > field defaults.
    """

    # Locale and week layout
    locale: Optional[str] = Field(default=None, description="Locale code used for week start")
    calendar_start_day: Optional[int] = Field(
        default=None, ge=0, le=6, description="Week start override, 0 = Sunday"
    )

    # Week rows
    fixed_height: bool = Field(default=False, description="Always render six week rows")
    peek_next_month: bool = Field(default=False, description="Render one extra week row")

    # Accessible labels
    choose_day_aria_label_prefix: str = Field(
        default="Choose", description="Label prefix for selectable cells"
    )
    disabled_day_aria_label_prefix: str = Field(
        default="Not available", description="Label prefix for disabled cells"
    )
    month_aria_label_prefix: str = Field(
        default="Month ", description="Label prefix for the whole page"
    )
    week_aria_label_prefix: Optional[str] = Field(
        default="week ", description="Label prefix for week rows"
    )

    config_file: Optional[Path] = Field(default=None, description="YAML configuration file")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="CALENDARPAGE_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_assignment=True,
    )

    _explicit_args: set[str] = PrivateAttr(default_factory=set)
    _env_vars_set: set[str] = PrivateAttr(default_factory=set)

    def __init__(self, **kwargs: Any) -> None:
        env_vars_set = {
            key[len("CALENDARPAGE_") :].lower()
            for key in os.environ
            if key.upper().startswith("CALENDARPAGE_")
        }

        super().__init__(**kwargs)

        self._explicit_args = set(kwargs.keys())
        self._env_vars_set = env_vars_set

        self._load_yaml_config()

    def _find_config_file(self) -> Optional[Path]:
        """Locate the YAML configuration file.

        Raises:
            SettingsError: If an explicitly configured file does not exist
        """
        if self.config_file is not None:
            config_path = Path(self.config_file).expanduser()
            if not config_path.exists():
                raise SettingsError(
                    "Configured settings file does not exist", {"path": str(config_path)}
                )
            return config_path

        if DEFAULT_CONFIG_PATH.exists():
            return DEFAULT_CONFIG_PATH
        return None

    def _load_page_settings(self, config_data: dict) -> None:
        """Load top-level page defaults from YAML data."""
        page_settings = [
            "locale",
            "calendar_start_day",
            "fixed_height",
            "peek_next_month",
            "choose_day_aria_label_prefix",
            "disabled_day_aria_label_prefix",
            "month_aria_label_prefix",
            "week_aria_label_prefix",
        ]

        for setting in page_settings:
            if (
                setting in config_data
                and setting not in self._explicit_args
                and setting not in self._env_vars_set
            ):
                setattr(self, setting, config_data[setting])

    def _load_logging_config(self, config_data: dict) -> None:
        """Load logging configuration from YAML data."""
        if "logging" not in config_data or "logging" in self._explicit_args:
            return

        logging_config = config_data["logging"] or {}
        for setting in LoggingSettings.model_fields:
            if setting in logging_config:
                setattr(self.logging, setting, logging_config[setting])

    def _load_yaml_config(self) -> None:
        """Overlay values from the YAML file onto unset fields.

        Raises:
            SettingsError: If the file holds a value that fails validation
        """
        config_file = self._find_config_file()
        if config_file is None:
            return

        config_data = _read_yaml(config_file)
        if not config_data:
            return

        try:
            self._load_page_settings(config_data)
            self._load_logging_config(config_data)
        except ValidationError as e:
            raise SettingsError(
                "Invalid value in settings file",
                {"path": str(config_file), "errors": e.error_count()},
            ) from e


# Lazily created by get_settings()
_settings_instance: Optional[CalendarPageSettings] = None


def get_settings() -> CalendarPageSettings:
    """Return the shared settings instance, loading it on first use."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = CalendarPageSettings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached settings instance so the next access reloads it."""
    global _settings_instance
    _settings_instance = None
