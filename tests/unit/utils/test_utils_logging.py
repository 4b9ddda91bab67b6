"""Unit tests for calendarpage.utils.logging."""

import argparse
import io
import logging
import logging.handlers
from unittest.mock import Mock, patch

import pytest

from calendarpage.config.settings import CalendarPageSettings, LoggingSettings
from calendarpage.utils.logging import (
    VERBOSE,
    AutoColoredFormatter,
    apply_command_line_overrides,
    detect_color_mode,
    get_log_level,
    get_logger,
    setup_logging,
    setup_logging_from_settings,
)


class TestLogLevels:
    """Tests for level name resolution and the VERBOSE level."""

    def test_get_log_level_standard_names(self):
        assert get_log_level("debug") == logging.DEBUG
        assert get_log_level("WARNING") == logging.WARNING

    def test_get_log_level_verbose(self):
        assert get_log_level("verbose") == VERBOSE == 15

    def test_get_log_level_when_unknown_then_raises(self):
        with pytest.raises(AttributeError):
            get_log_level("chatty")

    def test_get_log_level_when_not_a_level_constant_then_raises(self):
        """Module attributes that are not numbers are not levels."""
        with pytest.raises(AttributeError):
            get_log_level("basic_format")

    def test_verbose_method_logs_at_verbose_level(self, caplog):
        """The verbose() method is available on every logger."""
        logger = logging.getLogger("calendarpage.tests.verbose")
        with caplog.at_level(VERBOSE, logger="calendarpage.tests.verbose"):
            logger.verbose("navigation detail")  # type: ignore[attr-defined]

        assert caplog.records[-1].levelname == "VERBOSE"
        assert caplog.records[-1].getMessage() == "navigation detail"


class TestSetupLogging:
    """Tests for handler configuration."""

    def test_setup_logging_console_only(self, restore_package_logger):
        logger = setup_logging("DEBUG", enable_colors=False)

        assert logger is restore_package_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, AutoColoredFormatter)

    def test_setup_logging_with_file(self, restore_package_logger, tmp_path):
        """A log file adds a rotating handler inside the requested directory."""
        logger = setup_logging("INFO", log_file="page.log", log_dir=tmp_path / "logs")

        file_handlers = [
            h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert (tmp_path / "logs" / "page.log").exists()

    def test_setup_logging_when_level_invalid_then_defaults_to_info(self, restore_package_logger):
        logger = setup_logging("chatty", enable_colors=False)
        assert logger.level == logging.INFO

    def test_setup_logging_from_settings(self, restore_package_logger, clean_settings, tmp_path):
        settings = CalendarPageSettings(
            logging=LoggingSettings(
                level="VERBOSE",
                file_enabled=True,
                file_directory=str(tmp_path),
                file_name="from-settings.log",
            )
        )

        logger = setup_logging_from_settings(settings)

        assert logger.level == VERBOSE
        assert (tmp_path / "from-settings.log").exists()


class TestAutoColoredFormatter:
    """Tests for terminal color detection."""

    def test_colors_disabled_when_not_a_tty(self):
        with patch("sys.stdout.isatty", return_value=False):
            formatter = AutoColoredFormatter("%(levelname)s %(message)s")
        assert formatter.color_mode == "none"

    def test_detect_color_mode_for_stream(self, monkeypatch):
        assert detect_color_mode(io.StringIO()) == "none"

        tty = Mock()
        tty.isatty.return_value = True
        monkeypatch.setenv("TERM", "xterm-256color")
        assert detect_color_mode(tty) == "truecolor"

        monkeypatch.setenv("TERM", "dumb")
        assert detect_color_mode(tty) == "none"

    def test_colors_disabled_explicitly(self):
        formatter = AutoColoredFormatter("%(levelname)s %(message)s", enable_colors=False)
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)

        assert formatter.format(record) == "ERROR boom"

    def test_basic_colors_wrap_level_name(self):
        formatter = AutoColoredFormatter("%(levelname)s %(message)s", enable_colors=False)
        formatter.color_mode = "basic"
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)

        assert formatter.format(record) == "\033[31mERROR\033[0m boom"


class TestCommandLineOverrides:
    """Tests for applying logging flags from argparse."""

    def test_verbose_wins_over_configured_level(self, clean_settings):
        settings = CalendarPageSettings()
        args = argparse.Namespace(log_level=None, verbose=True, quiet=False)

        result = apply_command_line_overrides(settings, args)

        assert result is settings
        assert settings.logging.level == "VERBOSE"

    def test_log_level_quiet_and_colors(self, clean_settings):
        settings = CalendarPageSettings()

        apply_command_line_overrides(
            settings, argparse.Namespace(log_level="DEBUG", no_log_colors=True)
        )
        assert settings.logging.level == "DEBUG"
        assert settings.logging.console_colors is False

        apply_command_line_overrides(settings, argparse.Namespace(quiet=True))
        assert settings.logging.level == "ERROR"

    def test_log_dir_enables_file_logging(self, clean_settings, tmp_path):
        settings = CalendarPageSettings()

        apply_command_line_overrides(settings, argparse.Namespace(log_dir=tmp_path))

        assert settings.logging.file_enabled is True
        assert settings.logging.file_directory == str(tmp_path)

    def test_missing_attributes_leave_settings_alone(self, clean_settings):
        settings = CalendarPageSettings()

        apply_command_line_overrides(settings, argparse.Namespace())

        assert settings.logging.level == "INFO"
        assert settings.logging.file_enabled is False


def test_get_logger_namespaces_under_package():
    assert get_logger("page.navigation").name == "calendarpage.page.navigation"
