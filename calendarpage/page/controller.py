"""Calendar page controller.

Composes page mode selection, constraint evaluation, keyboard navigation and the
week-sequence generator into one object the host widget drives. The controller
never mutates the page context; every outcome is either a returned cell state or
a call to one of the host callbacks.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Optional

from ..config.settings import CalendarPageSettings, get_settings
from ..utils import date_utils
from .constraints import ConstraintEvaluator
from .keyboard import KeyCode, KeyEvent
from .layout import QUARTER_COUNT, GridLayout, resolve_month_layout
from .mode import MonthGridMode, PageMode, QuarterGridMode, WeekListMode, select_page_mode
from .models import (
    CellState,
    DayCell,
    MonthCell,
    PageContext,
    PageOptions,
    QuarterCell,
    SelectionMode,
    WeekRow,
)
from .navigation import MonthNavigator, QuarterNavigator
from .weeks import iter_week_starts

logger = logging.getLogger(__name__)


@dataclass
class PageCallbacks:
    """Host callbacks invoked by the controller; any of them may be omitted.

    Attributes:
        on_navigate: Called with the new provisional date and the focus target
        on_commit: Called with the committed date and the originating event
        on_hover: Called with the date under the pointer
        on_mouse_leave: Called when the pointer leaves the page
        on_raw_key: Called with every key event the page receives
    """

    on_navigate: Optional[Callable[[date, Optional[Any]], None]] = None
    on_commit: Optional[Callable[[date, Optional[Any]], None]] = None
    on_hover: Optional[Callable[[date], None]] = None
    on_mouse_leave: Optional[Callable[[], None]] = None
    on_raw_key: Optional[Callable[[KeyEvent], None]] = None


@dataclass(frozen=True)
class PageView:
    """Snapshot of everything needed to draw one page."""

    mode: PageMode
    aria_label: str
    selecting_range: bool
    month_rows: tuple[tuple[MonthCell, ...], ...] = ()
    quarter_cells: tuple[QuarterCell, ...] = ()
    week_rows: tuple[WeekRow, ...] = ()


class CalendarPageController:
    """Drives one page of a calendar picker."""

    def __init__(
        self,
        context: PageContext,
        options: Optional[PageOptions] = None,
        callbacks: Optional[PageCallbacks] = None,
        settings: Optional[CalendarPageSettings] = None,
        calculate_week_number: Optional[Callable[[date], int]] = None,
    ) -> None:
        """Initialize the controller.

        Args:
            context: Dates and constraints for this render
            options: Per-render flags; seeded from settings when omitted
            callbacks: Host callbacks
            settings: Package settings supplying locale and week-start defaults
            calculate_week_number: Custom week numbering, ISO weeks by default
        """
        if options is None:
            if settings is None:
                settings = get_settings()
            options = PageOptions.from_settings(settings)

        self.context = context
        self.options = options
        self.callbacks = callbacks or PageCallbacks()
        self.calculate_week_number = calculate_week_number or date_utils.get_week_number

        self.locale = context.locale or (settings.locale if settings else None)
        if context.calendar_start_day is not None:
            self.calendar_start_day: Optional[int] = context.calendar_start_day
        else:
            self.calendar_start_day = settings.calendar_start_day if settings else None

        self.mode: PageMode = select_page_mode(options)
        self.selection_mode = options.selection_mode
        self.evaluator = ConstraintEvaluator(
            context,
            selection_mode=self.selection_mode,
            selects_disabled_days_in_range=options.selects_disabled_days_in_range,
        )

        self.layout: Optional[GridLayout] = None
        self.month_navigator: Optional[MonthNavigator] = None
        self.quarter_navigator: Optional[QuarterNavigator] = None
        if isinstance(self.mode, MonthGridMode):
            self.layout = self.mode.layout
            self.month_navigator = MonthNavigator(self.evaluator, self.layout)
        elif isinstance(self.mode, QuarterGridMode):
            self.layout = self.mode.layout
            self.quarter_navigator = QuarterNavigator(self.evaluator, self.layout)

        self._debug_today: Optional[date] = None

        logger.debug(
            f"Calendar page controller initialized: mode={self.mode.name}, "
            f"selection={self.selection_mode.value}, anchor={context.anchor_day}"
        )

    @property
    def week_starts_on(self) -> int:
        """Weekday number (0 = Sunday) the page weeks start on."""
        if self.calendar_start_day is not None:
            return self.calendar_start_day
        return date_utils.get_locale_week_start(self.locale)

    # ------------------------------------------------------------------
    # Today
    # ------------------------------------------------------------------

    def set_debug_today(self, day: Optional[date]) -> None:
        """Pin "today" to a fixed date; None restores the real date."""
        self._debug_today = day
        logger.debug(f"Debug today set to {day}")

    def get_today(self) -> date:
        if self._debug_today is not None:
            return self._debug_today
        return date_utils.today()

    # ------------------------------------------------------------------
    # Callback dispatch
    # ------------------------------------------------------------------

    def _invoke(self, name: str, *args: Any) -> None:
        callback = getattr(self.callbacks, name)
        if callback is None:
            return
        try:
            callback(*args)
        except Exception:
            logger.exception(f"Error in {name} callback")
            raise

    # ------------------------------------------------------------------
    # Shared labels
    # ------------------------------------------------------------------

    def _is_unavailable(self, day: date) -> bool:
        return self.evaluator.is_disabled(day) or self.evaluator.is_excluded(day)

    def _label_prefix(self, day: date) -> str:
        if self._is_unavailable(day):
            return self.options.disabled_day_aria_label_prefix
        return self.options.choose_day_aria_label_prefix

    def page_aria_label(self) -> str:
        """Accessible label of the whole page, e.g. ``Month January, 2024``."""
        prefix = self.options.month_aria_label_prefix
        formatted_prefix = f"{prefix.strip()} " if prefix and prefix.strip() else ""
        return formatted_prefix + date_utils.format_date(
            self.context.anchor_day, "%B, %Y", self.locale
        )

    def is_selecting_range_page(self) -> bool:
        """Check whether the page is mid-way through picking one end of a range."""
        return self.context.provisional_date is not None and self.selection_mode in (
            SelectionMode.RANGE_START,
            SelectionMode.RANGE_END,
        )

    # ------------------------------------------------------------------
    # Month grid
    # ------------------------------------------------------------------

    def is_current_month(self, month: int) -> bool:
        today = self.get_today()
        return self.context.anchor_day.year == today.year and month == date_utils.get_month(today)

    def is_selected_month(self, month: int) -> bool:
        selected = self.context.selected
        if selected is None:
            return False
        return (
            date_utils.get_month(selected) == month
            and self.context.anchor_day.year == selected.year
        )

    def month_tab_index(self, month: int) -> int:
        pre_selection = self.context.pre_selection
        if self.options.disabled_keyboard_navigation or pre_selection is None:
            return -1
        return 0 if date_utils.get_month(pre_selection) == month else -1

    def month_content(self, month: int) -> str:
        if isinstance(self.mode, MonthGridMode) and self.mode.full_month_text:
            return date_utils.get_month_in_locale(month, self.locale)
        return date_utils.get_month_short_in_locale(month, self.locale)

    def month_aria_label(self, month: int) -> str:
        """Accessible label for a month cell, e.g. ``Choose January 2024``."""
        label_date = self.evaluator.month_label_date(month)
        return (
            f"{self._label_prefix(label_date)} "
            f"{date_utils.format_date(label_date, '%B %Y', self.locale)}"
        )

    def month_state(self, month: int) -> CellState:
        ev = self.evaluator
        label_date = ev.month_label_date(month)
        pre_selection = self.context.pre_selection
        return CellState(
            disabled=ev.is_month_disabled(month),
            excluded=ev.is_excluded(label_date),
            selected=self.is_selected_month(month),
            today=self.is_current_month(month),
            range_start=ev.is_range_start_month(month),
            range_end=ev.is_range_end_month(month),
            in_range=ev.is_month_in_range(month),
            in_selecting_range=ev.is_in_selecting_range_month(month),
            selecting_range_start=ev.is_selecting_range_start_month(month),
            selecting_range_end=ev.is_selecting_range_end_month(month),
            keyboard_selected=(
                not self.options.disabled_keyboard_navigation
                and pre_selection is not None
                and date_utils.get_month(pre_selection) == month
            ),
            tab_index=self.month_tab_index(month),
            aria_label=self.month_aria_label(month),
        )

    def month_cells(self) -> tuple[tuple[MonthCell, ...], ...]:
        """Build the month grid in display order, one tuple per row."""
        layout = self.layout if isinstance(self.mode, MonthGridMode) else None
        if layout is None:
            layout = resolve_month_layout(
                four_columns=self.options.show_four_column_month_year_picker,
                two_columns=self.options.show_two_column_month_year_picker,
            )
        return tuple(
            tuple(
                MonthCell(
                    month=month,
                    label_date=self.evaluator.month_label_date(month),
                    content=self.month_content(month),
                    state=self.month_state(month),
                )
                for month in row
            )
            for row in layout.rows
        )

    def register_month_ref(self, month: int, ref: Any) -> None:
        if self.month_navigator is None:
            raise ValueError("Month focus targets require the month picker")
        self.month_navigator.focus_registry.register(month, ref)

    def on_month_click(self, month: int, event: Optional[Any] = None) -> bool:
        """Commit the first day of a month unless the month is disabled.

        Returns:
            True if the click was committed
        """
        if self.evaluator.is_month_disabled(month):
            logger.debug(f"Ignoring click on disabled month {month}")
            return False
        label_date = self.evaluator.month_label_date(month)
        self._invoke("on_commit", date_utils.get_start_of_month(label_date), event)
        return True

    def on_month_mouse_enter(self, month: int) -> None:
        self._invoke("on_hover", date_utils.get_start_of_month(self.evaluator.month_label_date(month)))

    def on_month_key_down(self, event: KeyEvent, month: int) -> None:
        """Handle a key pressed while a month cell has focus.

        Space acts as Enter. Every key other than Tab has its default action
        prevented. With keyboard navigation disabled only the raw key handler
        runs.

        Args:
            event: Key event from the host
            month: Month cell (0-11) that received the key
        """
        if event.code is KeyCode.SPACE:
            event.key = "Enter"

        code = event.code
        if code is not KeyCode.TAB:
            event.prevent_default()

        if not self.options.disabled_keyboard_navigation:
            if code is KeyCode.ENTER:
                if self.on_month_click(month, event):
                    self._invoke("on_navigate", self.context.selected, None)
            elif self.month_navigator is not None:
                instruction = self.month_navigator.navigate(
                    month, code, self.context.pre_selection
                )
                if instruction is not None:
                    self._invoke("on_navigate", instruction.date, instruction.cell_ref)

        self._invoke("on_raw_key", event)

    # ------------------------------------------------------------------
    # Quarter grid
    # ------------------------------------------------------------------

    def is_current_quarter(self, quarter: int) -> bool:
        today = self.get_today()
        return (
            self.context.anchor_day.year == today.year
            and quarter == date_utils.get_quarter(today)
        )

    def is_selected_quarter(self, quarter: int) -> bool:
        selected = self.context.selected
        if selected is None:
            return False
        return (
            date_utils.get_quarter(selected) == quarter
            and self.context.anchor_day.year == selected.year
        )

    def quarter_tab_index(self, quarter: int) -> int:
        pre_selection = self.context.pre_selection
        if self.options.disabled_keyboard_navigation or pre_selection is None:
            return -1
        return 0 if date_utils.get_quarter(pre_selection) == quarter else -1

    def quarter_content(self, quarter: int) -> str:
        return date_utils.get_quarter_short_in_locale(quarter, self.locale)

    def quarter_aria_label(self, quarter: int) -> str:
        label_date = self.evaluator.quarter_label_date(quarter)
        return f"{self._label_prefix(label_date)} Q{quarter} {label_date.year}"

    def quarter_state(self, quarter: int) -> CellState:
        ev = self.evaluator
        label_date = ev.quarter_label_date(quarter)
        pre_selection = self.context.pre_selection
        return CellState(
            disabled=ev.is_quarter_disabled(quarter),
            excluded=ev.is_excluded(label_date),
            selected=self.is_selected_quarter(quarter),
            today=self.is_current_quarter(quarter),
            range_start=ev.is_range_start_quarter(quarter),
            range_end=ev.is_range_end_quarter(quarter),
            in_range=ev.is_quarter_in_range(quarter),
            in_selecting_range=ev.is_in_selecting_range_quarter(quarter),
            selecting_range_start=ev.is_selecting_range_start_quarter(quarter),
            selecting_range_end=ev.is_selecting_range_end_quarter(quarter),
            keyboard_selected=(
                not self.options.disabled_keyboard_navigation
                and pre_selection is not None
                and date_utils.get_quarter(pre_selection) == quarter
            ),
            tab_index=self.quarter_tab_index(quarter),
            aria_label=self.quarter_aria_label(quarter),
        )

    def quarter_cells(self) -> tuple[QuarterCell, ...]:
        return tuple(
            QuarterCell(
                quarter=quarter,
                label_date=self.evaluator.quarter_label_date(quarter),
                content=self.quarter_content(quarter),
                state=self.quarter_state(quarter),
            )
            for quarter in range(1, QUARTER_COUNT + 1)
        )

    def register_quarter_ref(self, quarter: int, ref: Any) -> None:
        if self.quarter_navigator is None:
            raise ValueError("Quarter focus targets require the quarter picker")
        self.quarter_navigator.focus_registry.register(quarter, ref)

    def on_quarter_click(self, quarter: int, event: Optional[Any] = None) -> bool:
        """Commit the first day of a quarter unless the quarter is disabled."""
        if self.evaluator.is_quarter_disabled(quarter):
            logger.debug(f"Ignoring click on disabled quarter {quarter}")
            return False
        label_date = self.evaluator.quarter_label_date(quarter)
        self._invoke("on_commit", date_utils.get_start_of_quarter(label_date), event)
        return True

    def on_quarter_mouse_enter(self, quarter: int) -> None:
        self._invoke(
            "on_hover", date_utils.get_start_of_quarter(self.evaluator.quarter_label_date(quarter))
        )

    def on_quarter_key_down(self, event: KeyEvent, quarter: int) -> None:
        """Handle a key pressed while a quarter cell has focus."""
        code = event.code
        if code is not KeyCode.TAB:
            event.prevent_default()

        if not self.options.disabled_keyboard_navigation:
            if code is KeyCode.ENTER:
                if self.on_quarter_click(quarter, event):
                    self._invoke("on_navigate", self.context.selected, None)
            elif self.quarter_navigator is not None:
                instruction = self.quarter_navigator.navigate(
                    quarter, code, self.context.pre_selection
                )
                if instruction is not None:
                    self._invoke("on_navigate", instruction.date, instruction.cell_ref)

        self._invoke("on_raw_key", event)

    # ------------------------------------------------------------------
    # Day grid and week list
    # ------------------------------------------------------------------

    def _week_start(self, day: Optional[date]) -> Optional[date]:
        if day is None:
            return None
        return date_utils.get_start_of_week(day, self.locale, self.calendar_start_day)

    def _normalized_selection(self) -> tuple[Optional[date], Optional[date]]:
        """Return (selected, pre_selection), snapped to week starts in week-list mode."""
        selected, pre_selection = self.context.selected, self.context.pre_selection
        if isinstance(self.mode, WeekListMode):
            return self._week_start(selected), self._week_start(pre_selection)
        return selected, pre_selection

    def day_aria_label(self, day: date) -> str:
        return f"{self._label_prefix(day)} {date_utils.format_long_date(day, self.locale)}"

    def day_state(self, day: date, month: Optional[date] = None) -> DayCell:
        """Evaluate one day of the page.

        Args:
            day: Day to evaluate
            month: Any date of the month the page shows; defaults to the anchor

        Returns:
            DayCell with the full logical state of the day
        """
        ev = self.evaluator
        month = month or self.context.anchor_day
        selected, pre_selection = self._normalized_selection()

        if self.selection_mode is SelectionMode.MULTIPLE:
            is_selected = ev.is_day_selected(day)
        else:
            is_selected = date_utils.is_same_day(day, selected)
        keyboard_selected = (
            not self.options.disabled_keyboard_navigation
            and not is_selected
            and date_utils.is_same_day(day, pre_selection)
        )
        focused_selection = is_selected and date_utils.is_same_day(pre_selection, selected)

        state = CellState(
            disabled=ev.is_disabled(day),
            excluded=ev.is_excluded(day),
            selected=is_selected,
            today=date_utils.is_same_day(day, self.get_today()),
            range_start=ev.is_day_range_start(day),
            range_end=ev.is_day_range_end(day),
            in_range=ev.is_day_in_range(day),
            in_selecting_range=ev.is_day_in_selecting_range(day),
            selecting_range_start=ev.is_day_selecting_range_start(day),
            selecting_range_end=ev.is_day_selecting_range_end(day),
            keyboard_selected=keyboard_selected,
            tab_index=0 if keyboard_selected or focused_selection else -1,
            aria_label=self.day_aria_label(day),
        )
        return DayCell(
            date=day,
            state=state,
            outside_month=not date_utils.is_same_month(day, month),
            highlighted=ev.is_highlighted(day),
            holiday_names=ev.holiday_names(day),
            holiday_class_name=ev.holiday_class_name(day),
            exclusion_message=ev.exclusion_message(day),
        )

    def build_week_row(self, week_start: date) -> WeekRow:
        selected, pre_selection = self._normalized_selection()
        is_week_list = isinstance(self.mode, WeekListMode)
        week_number = self.calculate_week_number(week_start)
        prefix = self.options.week_aria_label_prefix

        is_selected = is_week_list and date_utils.is_same_day(week_start, selected)
        return WeekRow(
            week_start=week_start,
            week_number=week_number,
            days=tuple(
                self.day_state(date_utils.add_days(week_start, offset))
                for offset in range(date_utils.DAYS_IN_WEEK)
            ),
            selected=is_selected,
            keyboard_selected=(
                is_week_list
                and not self.options.disabled_keyboard_navigation
                and date_utils.is_same_day(week_start, pre_selection)
            ),
            aria_label=f"{prefix.strip()} {week_number}" if prefix else str(week_number),
        )

    def build_week_rows(self) -> tuple[WeekRow, ...]:
        """Generate the week rows of the anchor month."""
        return tuple(
            self.build_week_row(week_start)
            for week_start in iter_week_starts(
                self.context.anchor_day,
                fixed_height=self.options.fixed_height,
                peek_next_month=self.options.peek_next_month,
                locale=self.locale,
                calendar_start_day=self.calendar_start_day,
            )
        )

    def week_rows(self) -> tuple[WeekRow, ...]:
        return self.build_week_rows()

    def on_day_click(self, day: date, event: Optional[Any] = None) -> bool:
        """Commit a day, or its week start in week-list mode, unless it is disabled."""
        if self.evaluator.is_disabled(day):
            logger.debug(f"Ignoring click on disabled day {day}")
            return False
        target = self._week_start(day) if isinstance(self.mode, WeekListMode) else day
        self._invoke("on_commit", target, event)
        return True

    def on_day_mouse_enter(self, day: date) -> None:
        self._invoke("on_hover", day)

    def on_mouse_leave(self) -> None:
        self._invoke("on_mouse_leave")

    # ------------------------------------------------------------------
    # Whole page
    # ------------------------------------------------------------------

    def render(self) -> PageView:
        """Evaluate every cell the current mode displays."""
        cells: dict[str, Any] = {}
        if isinstance(self.mode, MonthGridMode):
            cells["month_rows"] = self.month_cells()
        elif isinstance(self.mode, QuarterGridMode):
            cells["quarter_cells"] = self.quarter_cells()
        else:
            cells["week_rows"] = self.week_rows()

        return PageView(
            mode=self.mode,
            aria_label=self.page_aria_label(),
            selecting_range=self.is_selecting_range_page(),
            **cells,
        )
