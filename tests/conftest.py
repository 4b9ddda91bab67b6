"""Shared fixtures for calendar page tests."""

import logging
import os
from datetime import date
from typing import Any
from unittest.mock import Mock

import pytest

from calendarpage.config import settings as settings_module
from calendarpage.config.settings import CalendarPageSettings, reset_settings
from calendarpage.page.controller import CalendarPageController, PageCallbacks
from calendarpage.page.models import PageContext, PageOptions


@pytest.fixture
def clean_settings(monkeypatch, tmp_path):
    """Isolate settings from the environment and the user's config file."""
    for key in list(os.environ):
        if key.upper().startswith("CALENDARPAGE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(settings_module, "DEFAULT_CONFIG_PATH", tmp_path / "missing.yaml")
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def test_settings(clean_settings) -> CalendarPageSettings:
    """Settings built from defaults only."""
    return CalendarPageSettings()


@pytest.fixture
def callbacks() -> PageCallbacks:
    """Host callbacks backed by mocks."""
    return PageCallbacks(
        on_navigate=Mock(),
        on_commit=Mock(),
        on_hover=Mock(),
        on_mouse_leave=Mock(),
        on_raw_key=Mock(),
    )


@pytest.fixture
def january_2024() -> date:
    return date(2024, 1, 15)


@pytest.fixture
def make_controller(test_settings, callbacks):
    """Factory building a controller from context and option keyword arguments."""

    def _make(anchor_day: date, options: Any = None, **context_values: Any) -> CalendarPageController:
        context = PageContext(anchor_day=anchor_day, **context_values)
        page_options = options if isinstance(options, PageOptions) else PageOptions(**(options or {}))
        return CalendarPageController(context, page_options, callbacks, settings=test_settings)

    return _make


@pytest.fixture
def restore_package_logger():
    """Restore the package logger after a test reconfigures it."""
    package_logger = logging.getLogger("calendarpage")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield package_logger
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
