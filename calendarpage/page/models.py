"""
Data models for a calendar page.

Input models (``PageContext``, ``PageOptions`` and their parts) use Pydantic for
validation; derived view data (``CellState``, ``NavigationInstruction``) are plain
frozen dataclasses rebuilt on every evaluation pass.
"""

import datetime
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import PageConfigurationError

if TYPE_CHECKING:
    from ..config.settings import CalendarPageSettings

logger = logging.getLogger(__name__)


class DateEntry(BaseModel):
    """A single include/exclude date with optional explanatory message.

    Example:
        >>> DateEntry(date=datetime.date(2024, 12, 25), message="Office closed")
    """

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    message: Optional[str] = Field(default=None, description="Shown for excluded days")


class DateInterval(BaseModel):
    """Inclusive date interval."""

    model_config = ConfigDict(frozen=True)

    start: datetime.date
    end: datetime.date


class HolidayInfo(BaseModel):
    """Holiday metadata attached to one ISO date."""

    model_config = ConfigDict(frozen=True)

    class_name: str = Field(default="holiday", description="Display hint for the host")
    holiday_names: list[str] = Field(default_factory=list)


DateOrEntry = Union[datetime.date, DateEntry]


def entry_date(entry: DateOrEntry) -> datetime.date:
    """Return the date of a bare date or a ``DateEntry``."""
    if isinstance(entry, DateEntry):
        return entry.date
    return entry


def _validate_start_day(value: Optional[int]) -> Optional[int]:
    if value is not None and not 0 <= value <= 6:
        raise PageConfigurationError(
            "calendar_start_day must be between 0 (Sunday) and 6 (Saturday)",
            field_name="calendar_start_day",
            field_value=value,
        )
    return value


class SelectionMode(str, Enum):
    """Which kind of selection the page participates in."""

    SINGLE = "single"
    RANGE_START = "range_start"
    RANGE_END = "range_end"
    RANGE_FREE = "range_free"
    MULTIPLE = "multiple"

    @classmethod
    def from_flags(
        cls,
        selects_start: bool = False,
        selects_end: bool = False,
        selects_range: bool = False,
        selects_multiple: bool = False,
    ) -> "SelectionMode":
        """Collapse the host's independent selection flags into one mode.

        Precedence follows the order the range predicates consult the flags:
        start, end, free range, multiple, then single.
        """
        if selects_start:
            return cls.RANGE_START
        if selects_end:
            return cls.RANGE_END
        if selects_range:
            return cls.RANGE_FREE
        if selects_multiple:
            return cls.MULTIPLE
        return cls.SINGLE

    @property
    def is_range(self) -> bool:
        return self in (SelectionMode.RANGE_START, SelectionMode.RANGE_END, SelectionMode.RANGE_FREE)


class PageContext(BaseModel):
    """Everything the host knows about the page being rendered.

    Precondition: when both ``start_date`` and ``end_date`` are given the caller
    guarantees ``start_date <= end_date``. The controller neither reorders nor
    validates the pair; a reversed range yields unspecified cell states.

    Attributes:
        anchor_day: Day whose month/quarter/week defines the page
        selected: Committed single selection
        selected_dates: Committed dates in multi-select mode
        start_date: Committed range start
        end_date: Committed range end, unset while a range is open
        selecting_date: Provisional endpoint under the pointer
        pre_selection: Keyboard-preselected date
        min_date: Inclusive lower bound
        max_date: Inclusive upper bound
        exclude_dates: Dates that may not be chosen
        include_dates: When non-empty, the only dates that may be chosen
        exclude_date_intervals: Intervals that may not be chosen
        include_date_intervals: When non-empty, the only intervals that may be chosen
        filter_date: Predicate every selectable date must satisfy
        highlight_dates: Dates flagged for emphasis
        holidays: Holiday metadata keyed by ISO date string
        calendar_start_day: Week start override, 0 = Sunday
        locale: Locale code used for the week start when no override is set
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    anchor_day: datetime.date
    selected: Optional[datetime.date] = None
    selected_dates: tuple[datetime.date, ...] = ()
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None
    selecting_date: Optional[datetime.date] = None
    pre_selection: Optional[datetime.date] = None
    min_date: Optional[datetime.date] = None
    max_date: Optional[datetime.date] = None
    exclude_dates: tuple[DateOrEntry, ...] = ()
    include_dates: tuple[DateOrEntry, ...] = ()
    exclude_date_intervals: tuple[DateInterval, ...] = ()
    include_date_intervals: tuple[DateInterval, ...] = ()
    filter_date: Optional[Callable[[datetime.date], bool]] = None
    highlight_dates: tuple[datetime.date, ...] = ()
    holidays: dict[str, HolidayInfo] = Field(default_factory=dict)
    calendar_start_day: Optional[int] = None
    locale: Optional[str] = None

    @field_validator("calendar_start_day")
    @classmethod
    def validate_calendar_start_day(cls, v: Optional[int]) -> Optional[int]:
        """Reject week starts outside Sunday..Saturday.

        Raises:
            PageConfigurationError: If the value is outside 0-6
        """
        return _validate_start_day(v)

    @property
    def provisional_date(self) -> Optional[datetime.date]:
        """The live endpoint of an open range: ``selecting_date`` or else ``pre_selection``."""
        return self.selecting_date if self.selecting_date is not None else self.pre_selection


class PageOptions(BaseModel):
    """Per-render configuration flags supplied by the host widget."""

    model_config = ConfigDict(frozen=True)

    # Page mode
    show_month_year_picker: bool = False
    show_full_month_year_picker: bool = False
    show_two_column_month_year_picker: bool = False
    show_four_column_month_year_picker: bool = False
    show_quarter_year_picker: bool = False
    show_week_picker: bool = False

    # Week rows
    fixed_height: bool = False
    peek_next_month: bool = False
    show_week_numbers: bool = False

    # Selection flags, collapsed into ``selection_mode``
    selects_start: bool = False
    selects_end: bool = False
    selects_range: bool = False
    selects_multiple: bool = False
    selects_disabled_days_in_range: bool = False

    disabled_keyboard_navigation: bool = False

    # Accessible labels
    choose_day_aria_label_prefix: str = "Choose"
    disabled_day_aria_label_prefix: str = "Not available"
    month_aria_label_prefix: Optional[str] = "Month "
    week_aria_label_prefix: Optional[str] = "week "

    @property
    def selection_mode(self) -> SelectionMode:
        return SelectionMode.from_flags(
            selects_start=self.selects_start,
            selects_end=self.selects_end,
            selects_range=self.selects_range,
            selects_multiple=self.selects_multiple,
        )

    @classmethod
    def from_settings(cls, settings: "CalendarPageSettings", **overrides: Any) -> "PageOptions":
        """Build options seeded from global settings.

        Args:
            settings: Loaded package settings
            **overrides: Option values that take precedence over settings

        Returns:
            PageOptions instance
        """
        values: dict[str, Any] = {
            "fixed_height": settings.fixed_height,
            "peek_next_month": settings.peek_next_month,
            "choose_day_aria_label_prefix": settings.choose_day_aria_label_prefix,
            "disabled_day_aria_label_prefix": settings.disabled_day_aria_label_prefix,
            "month_aria_label_prefix": settings.month_aria_label_prefix,
            "week_aria_label_prefix": settings.week_aria_label_prefix,
        }
        values.update(overrides)
        return cls(**values)


@dataclass(frozen=True)
class CellState:
    """Logical display state of one day, month or quarter cell."""

    disabled: bool = False
    excluded: bool = False
    selected: bool = False
    today: bool = False
    range_start: bool = False
    range_end: bool = False
    in_range: bool = False
    in_selecting_range: bool = False
    selecting_range_start: bool = False
    selecting_range_end: bool = False
    keyboard_selected: bool = False
    tab_index: int = -1
    aria_label: str = ""


@dataclass(frozen=True)
class MonthCell:
    """One cell of the month grid."""

    month: int
    label_date: datetime.date
    content: str
    state: CellState


@dataclass(frozen=True)
class QuarterCell:
    """One cell of the quarter grid."""

    quarter: int
    label_date: datetime.date
    content: str
    state: CellState


@dataclass(frozen=True)
class DayCell:
    """One day inside a week row."""

    date: datetime.date
    state: CellState
    outside_month: bool = False
    highlighted: bool = False
    holiday_names: tuple[str, ...] = ()
    holiday_class_name: Optional[str] = None
    exclusion_message: Optional[str] = None


@dataclass(frozen=True)
class WeekRow:
    """One week of a day grid or week list."""

    week_start: datetime.date
    week_number: int
    days: tuple[DayCell, ...] = field(default_factory=tuple)
    selected: bool = False
    keyboard_selected: bool = False
    aria_label: str = ""


@dataclass(frozen=True)
class NavigationInstruction:
    """Where keyboard navigation moved the provisional selection."""

    index: int
    date: datetime.date
    cell_ref: Optional[Any] = None
