"""Calendar page logic: page modes, constraints, navigation and cell states."""

from .constraints import ConstraintEvaluator
from .controller import CalendarPageController, PageCallbacks, PageView
from .exceptions import CalendarPageError, PageConfigurationError
from .keyboard import KeyCode, KeyEvent, parse_key
from .layout import MONTH_LAYOUTS, QUARTER_LAYOUT, ColumnCount, GridLayout
from .mode import (
    DayGridMode,
    MonthGridMode,
    PageMode,
    QuarterGridMode,
    WeekListMode,
    select_page_mode,
)
from .models import (
    CellState,
    DateEntry,
    DateInterval,
    DayCell,
    HolidayInfo,
    MonthCell,
    NavigationInstruction,
    PageContext,
    PageOptions,
    QuarterCell,
    SelectionMode,
    WeekRow,
)
from .navigation import FocusRegistry, MonthNavigator, QuarterNavigator
from .weeks import iter_week_starts

__all__ = [
    "CalendarPageController",
    "CalendarPageError",
    "CellState",
    "ColumnCount",
    "ConstraintEvaluator",
    "DateEntry",
    "DateInterval",
    "DayCell",
    "DayGridMode",
    "FocusRegistry",
    "GridLayout",
    "HolidayInfo",
    "KeyCode",
    "KeyEvent",
    "MONTH_LAYOUTS",
    "MonthCell",
    "MonthGridMode",
    "MonthNavigator",
    "NavigationInstruction",
    "PageCallbacks",
    "PageConfigurationError",
    "PageContext",
    "PageMode",
    "PageOptions",
    "PageView",
    "QUARTER_LAYOUT",
    "QuarterCell",
    "QuarterGridMode",
    "QuarterNavigator",
    "SelectionMode",
    "WeekListMode",
    "WeekRow",
    "iter_week_starts",
    "parse_key",
    "select_page_mode",
]
