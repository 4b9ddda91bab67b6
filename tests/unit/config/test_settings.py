"""Unit tests for the settings configuration module."""

import logging

import pytest
import yaml
from pydantic import ValidationError

from calendarpage.config.exceptions import SettingsError
from calendarpage.config.settings import (
    CalendarPageSettings,
    LoggingSettings,
    get_settings,
    reset_settings,
)
from calendarpage.exceptions import CalendarPageError
from calendarpage.page.models import PageOptions


@pytest.fixture
def yaml_config_file(tmp_path):
    """Write a YAML config file and return its path."""

    def _write(data: dict):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write


class TestLoggingSettings:
    """Tests for the LoggingSettings class."""

    def test_logging_settings_defaults(self):
        settings = LoggingSettings()

        assert settings.level == "INFO"
        assert settings.console_colors is True
        assert settings.file_enabled is False
        assert settings.file_name == "calendarpage.log"


class TestCalendarPageSettings:
    """Tests for defaults, environment variables and YAML loading."""

    def test_defaults(self, clean_settings):
        settings = CalendarPageSettings()

        assert settings.locale is None
        assert settings.calendar_start_day is None
        assert settings.fixed_height is False
        assert settings.peek_next_month is False
        assert settings.choose_day_aria_label_prefix == "Choose"
        assert settings.disabled_day_aria_label_prefix == "Not available"
        assert settings.month_aria_label_prefix == "Month "

    def test_environment_variables(self, clean_settings, monkeypatch):
        monkeypatch.setenv("CALENDARPAGE_LOCALE", "en-GB")
        monkeypatch.setenv("CALENDARPAGE_FIXED_HEIGHT", "true")
        monkeypatch.setenv("CALENDARPAGE_LOGGING__LEVEL", "DEBUG")

        settings = CalendarPageSettings()

        assert settings.locale == "en-GB"
        assert settings.fixed_height is True
        assert settings.logging.level == "DEBUG"

    def test_calendar_start_day_out_of_range_is_rejected(self, clean_settings):
        with pytest.raises(ValidationError):
            CalendarPageSettings(calendar_start_day=7)

    def test_yaml_config_file_is_loaded(self, clean_settings, yaml_config_file):
        path = yaml_config_file(
            {
                "locale": "de",
                "peek_next_month": True,
                "month_aria_label_prefix": "Monat",
                "logging": {"level": "WARNING", "file_enabled": True},
            }
        )

        settings = CalendarPageSettings(config_file=path)

        assert settings.locale == "de"
        assert settings.peek_next_month is True
        assert settings.month_aria_label_prefix == "Monat"
        assert settings.logging.level == "WARNING"
        assert settings.logging.file_enabled is True

    def test_explicit_arguments_override_yaml(self, clean_settings, yaml_config_file):
        path = yaml_config_file({"locale": "de", "fixed_height": True})

        settings = CalendarPageSettings(config_file=path, locale="fr")

        assert settings.locale == "fr"
        assert settings.fixed_height is True

    def test_environment_overrides_yaml(self, clean_settings, monkeypatch, yaml_config_file):
        path = yaml_config_file({"locale": "de"})
        monkeypatch.setenv("CALENDARPAGE_LOCALE", "nl")

        settings = CalendarPageSettings(config_file=path)

        assert settings.locale == "nl"

    def test_config_file_from_environment(self, clean_settings, monkeypatch, yaml_config_file):
        path = yaml_config_file({"calendar_start_day": 1})
        monkeypatch.setenv("CALENDARPAGE_CONFIG_FILE", str(path))

        assert CalendarPageSettings().calendar_start_day == 1

    def test_missing_explicit_config_file_raises(self, clean_settings, tmp_path):
        with pytest.raises(SettingsError) as exc_info:
            CalendarPageSettings(config_file=tmp_path / "nope.yaml")

        assert "does not exist" in str(exc_info.value)
        assert exc_info.value.details["path"].endswith("nope.yaml")

    def test_malformed_yaml_keeps_defaults(self, clean_settings, tmp_path, caplog):
        """A broken YAML file is reported and the defaults stay in place."""
        path = tmp_path / "broken.yaml"
        path.write_text("locale: [unclosed", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            settings = CalendarPageSettings(config_file=path)

        assert settings.locale is None
        assert "Could not load YAML config" in caplog.text

    def test_invalid_yaml_value_raises_settings_error(self, clean_settings, yaml_config_file):
        path = yaml_config_file({"calendar_start_day": 9})

        with pytest.raises(SettingsError) as exc_info:
            CalendarPageSettings(config_file=path)

        assert exc_info.value.details["path"] == str(path)

    def test_non_mapping_yaml_is_ignored(self, clean_settings, tmp_path, caplog):
        path = tmp_path / "list.yaml"
        path.write_text("- locale\n- de\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            settings = CalendarPageSettings(config_file=path)

        assert settings.locale is None
        assert "expected a mapping" in caplog.text


class TestGlobalSettings:
    """Tests for the settings singleton accessors."""

    def test_get_settings_returns_cached_instance(self, clean_settings):
        assert get_settings() is get_settings()

    def test_reset_settings_drops_instance(self, clean_settings):
        first = get_settings()
        reset_settings()
        assert get_settings() is not first


class TestPageOptionsFromSettings:
    """Tests for seeding per-render options from settings."""

    def test_from_settings_copies_defaults(self, clean_settings):
        settings = CalendarPageSettings(fixed_height=True, month_aria_label_prefix="Page")

        options = PageOptions.from_settings(settings)

        assert options.fixed_height is True
        assert options.month_aria_label_prefix == "Page"

    def test_from_settings_overrides_win(self, clean_settings):
        settings = CalendarPageSettings(fixed_height=True)

        options = PageOptions.from_settings(settings, fixed_height=False, show_week_picker=True)

        assert options.fixed_height is False
        assert options.show_week_picker is True


def test_settings_error_str_includes_details():
    error = SettingsError("Bad file", {"path": "/tmp/x.yaml", "line": 3})
    assert str(error) == "Bad file (path=/tmp/x.yaml, line=3)"
    assert str(SettingsError("Bad file")) == "Bad file"
    assert isinstance(error, CalendarPageError)
