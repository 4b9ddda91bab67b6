"""Constraint evaluation for calendar page cells.

Answers the questions every page mode asks about a candidate date, month or
quarter: is it disabled, is it excluded, is it inside the committed range, and is
it inside the range currently being selected. An absent optional context value
simply switches off the predicates that depend on it.
"""

import logging
from datetime import date
from typing import Optional

from ..utils import date_utils
from .models import DateEntry, PageContext, SelectionMode, entry_date

logger = logging.getLogger(__name__)


class ConstraintEvaluator:
    """Pure predicates over one page context and selection mode."""

    def __init__(
        self,
        context: PageContext,
        selection_mode: SelectionMode = SelectionMode.SINGLE,
        selects_disabled_days_in_range: bool = False,
    ) -> None:
        """Initialize the evaluator.

        Args:
            context: Page context supplying dates and constraints
            selection_mode: Active selection mode
            selects_disabled_days_in_range: Whether disabled days may be part of
                the range being selected
        """
        self.context = context
        self.selection_mode = selection_mode
        self.selects_disabled_days_in_range = selects_disabled_days_in_range

    # ------------------------------------------------------------------
    # Day level constraints
    # ------------------------------------------------------------------

    def is_excluded(self, day: date) -> bool:
        """Check only the exclude dates and exclude intervals."""
        ctx = self.context
        if any(date_utils.is_same_day(day, entry_date(entry)) for entry in ctx.exclude_dates):
            return True
        return any(
            date_utils.is_within_interval(day, interval.start, interval.end)
            for interval in ctx.exclude_date_intervals
        )

    def is_disabled(self, day: date) -> bool:
        """Check whether a day violates any configured constraint.

        A day is disabled when it lies outside ``min_date``/``max_date``, is
        excluded, is missing from a non-empty include list or include interval
        set, or is rejected by ``filter_date``.

        Args:
            day: Candidate day

        Returns:
            True if the day may not be chosen
        """
        ctx = self.context
        if date_utils.is_out_of_bounds(day, ctx.min_date, ctx.max_date):
            return True
        if self.is_excluded(day):
            return True
        if ctx.include_dates and not any(
            date_utils.is_same_day(day, entry_date(entry)) for entry in ctx.include_dates
        ):
            return True
        if ctx.include_date_intervals and not any(
            date_utils.is_within_interval(day, interval.start, interval.end)
            for interval in ctx.include_date_intervals
        ):
            return True
        if ctx.filter_date is not None and not ctx.filter_date(day):
            return True
        return False

    def exclusion_message(self, day: date) -> Optional[str]:
        """Message of the first exclude entry matching ``day``, if any."""
        for entry in self.context.exclude_dates:
            if isinstance(entry, DateEntry) and date_utils.is_same_day(day, entry.date):
                return entry.message
        return None

    # ------------------------------------------------------------------
    # Month and quarter level constraints
    # ------------------------------------------------------------------

    def month_label_date(self, month: int) -> date:
        return date_utils.set_month(self.context.anchor_day, month)

    def quarter_label_date(self, quarter: int) -> date:
        return date_utils.set_quarter(self.context.anchor_day, quarter)

    def is_month_disabled(self, month: int) -> bool:
        """Check a month cell against bounds widened to whole months, exclude/include
        dates compared by month, and ``filter_date`` applied to the label date.

        Month cells are only checked when a bound or an exclude/include list is set;
        ``filter_date`` alone never disables a month.
        """
        ctx = self.context
        if not (ctx.min_date or ctx.max_date or ctx.exclude_dates or ctx.include_dates):
            return False
        label_date = self.month_label_date(month)

        min_date = date_utils.get_start_of_month(ctx.min_date) if ctx.min_date else None
        max_date = date_utils.get_end_of_month(ctx.max_date) if ctx.max_date else None
        if date_utils.is_out_of_bounds(label_date, min_date, max_date):
            return True
        if any(date_utils.is_same_month(entry_date(e), label_date) for e in ctx.exclude_dates):
            return True
        if ctx.include_dates and not any(
            date_utils.is_same_month(label_date, entry_date(e)) for e in ctx.include_dates
        ):
            return True
        if ctx.filter_date is not None and not ctx.filter_date(label_date):
            return True
        return False

    def is_quarter_disabled(self, quarter: int) -> bool:
        """Quarter counterpart of :meth:`is_month_disabled`."""
        ctx = self.context
        label_date = self.quarter_label_date(quarter)

        min_date = date_utils.get_start_of_quarter(ctx.min_date) if ctx.min_date else None
        max_date = date_utils.get_end_of_quarter(ctx.max_date) if ctx.max_date else None
        if date_utils.is_out_of_bounds(label_date, min_date, max_date):
            return True
        if any(date_utils.is_same_quarter(entry_date(e), label_date) for e in ctx.exclude_dates):
            return True
        if ctx.include_dates and not any(
            date_utils.is_same_quarter(label_date, entry_date(e)) for e in ctx.include_dates
        ):
            return True
        if ctx.filter_date is not None and not ctx.filter_date(label_date):
            return True
        return False

    # ------------------------------------------------------------------
    # Month and quarter range membership
    # ------------------------------------------------------------------

    def _has_committed_range(self) -> bool:
        return self.context.start_date is not None and self.context.end_date is not None

    def _selecting_bounds(self) -> Optional[tuple[date, date]]:
        """Return the (start, end) of the range being selected, if any.

        The provisional date replaces whichever endpoint is not committed:
        the start while selecting a start against a committed end, otherwise the
        end against a committed start.
        """
        ctx = self.context
        provisional = ctx.provisional_date
        if not self.selection_mode.is_range or provisional is None:
            return None

        if self.selection_mode is SelectionMode.RANGE_START and ctx.end_date is not None:
            return provisional, ctx.end_date
        if self.selection_mode is SelectionMode.RANGE_END and ctx.start_date is not None:
            return ctx.start_date, provisional
        if (
            self.selection_mode is SelectionMode.RANGE_FREE
            and ctx.start_date is not None
            and ctx.end_date is None
        ):
            return ctx.start_date, provisional
        return None

    def is_month_in_range(self, month: int) -> bool:
        ctx = self.context
        if ctx.start_date is None or ctx.end_date is None:
            return False
        return date_utils.is_month_in_range(ctx.start_date, ctx.end_date, month, ctx.anchor_day)

    def is_quarter_in_range(self, quarter: int) -> bool:
        ctx = self.context
        if ctx.start_date is None or ctx.end_date is None:
            return False
        return date_utils.is_quarter_in_range(
            ctx.start_date, ctx.end_date, quarter, ctx.anchor_day
        )

    def is_range_start_month(self, month: int) -> bool:
        if not self._has_committed_range():
            return False
        return date_utils.is_same_month(self.month_label_date(month), self.context.start_date)

    def is_range_end_month(self, month: int) -> bool:
        if not self._has_committed_range():
            return False
        return date_utils.is_same_month(self.month_label_date(month), self.context.end_date)

    def is_range_start_quarter(self, quarter: int) -> bool:
        if not self._has_committed_range():
            return False
        return date_utils.is_same_quarter(self.quarter_label_date(quarter), self.context.start_date)

    def is_range_end_quarter(self, quarter: int) -> bool:
        if not self._has_committed_range():
            return False
        return date_utils.is_same_quarter(self.quarter_label_date(quarter), self.context.end_date)

    def is_in_selecting_range_month(self, month: int) -> bool:
        bounds = self._selecting_bounds()
        if bounds is None:
            return False
        return date_utils.is_month_in_range(bounds[0], bounds[1], month, self.context.anchor_day)

    def is_in_selecting_range_quarter(self, quarter: int) -> bool:
        bounds = self._selecting_bounds()
        if bounds is None:
            return False
        return date_utils.is_quarter_in_range(
            bounds[0], bounds[1], quarter, self.context.anchor_day
        )

    def is_selecting_range_start_month(self, month: int) -> bool:
        if not self.is_in_selecting_range_month(month):
            return False
        label_date = self.month_label_date(month)
        if self.selection_mode is SelectionMode.RANGE_START:
            return date_utils.is_same_month(label_date, self.context.provisional_date)
        return date_utils.is_same_month(label_date, self.context.start_date)

    def is_selecting_range_end_month(self, month: int) -> bool:
        if not self.is_in_selecting_range_month(month):
            return False
        label_date = self.month_label_date(month)
        if self.selection_mode in (SelectionMode.RANGE_END, SelectionMode.RANGE_FREE):
            return date_utils.is_same_month(label_date, self.context.provisional_date)
        return date_utils.is_same_month(label_date, self.context.end_date)

    def is_selecting_range_start_quarter(self, quarter: int) -> bool:
        if not self.is_in_selecting_range_quarter(quarter):
            return False
        label_date = self.quarter_label_date(quarter)
        if self.selection_mode is SelectionMode.RANGE_START:
            return date_utils.is_same_quarter(label_date, self.context.provisional_date)
        return date_utils.is_same_quarter(label_date, self.context.start_date)

    def is_selecting_range_end_quarter(self, quarter: int) -> bool:
        if not self.is_in_selecting_range_quarter(quarter):
            return False
        label_date = self.quarter_label_date(quarter)
        if self.selection_mode in (SelectionMode.RANGE_END, SelectionMode.RANGE_FREE):
            return date_utils.is_same_quarter(label_date, self.context.provisional_date)
        return date_utils.is_same_quarter(label_date, self.context.end_date)

    # ------------------------------------------------------------------
    # Day range membership
    # ------------------------------------------------------------------

    def is_day_in_range(self, day: date) -> bool:
        ctx = self.context
        if ctx.start_date is None or ctx.end_date is None:
            return False
        return ctx.start_date <= day <= ctx.end_date

    def is_day_range_start(self, day: date) -> bool:
        return self._has_committed_range() and date_utils.is_same_day(day, self.context.start_date)

    def is_day_range_end(self, day: date) -> bool:
        return self._has_committed_range() and date_utils.is_same_day(day, self.context.end_date)

    def is_day_in_selecting_range(self, day: date) -> bool:
        """Check whether a day lies in the range being selected.

        Unlike months, a day range is only drawn when the provisional date sits on
        the correct side of the committed endpoint, and disabled days are left out
        unless ``selects_disabled_days_in_range`` is set.
        """
        if not self.selects_disabled_days_in_range and self.is_disabled(day):
            return False

        bounds = self._selecting_bounds()
        if bounds is None:
            return False
        start, end = bounds
        if start > end:
            return False
        return start <= day <= end

    def is_day_selecting_range_start(self, day: date) -> bool:
        if not self.is_day_in_selecting_range(day):
            return False
        if self.selection_mode is SelectionMode.RANGE_START:
            return date_utils.is_same_day(day, self.context.provisional_date)
        return date_utils.is_same_day(day, self.context.start_date)

    def is_day_selecting_range_end(self, day: date) -> bool:
        if not self.is_day_in_selecting_range(day):
            return False
        if self.selection_mode in (SelectionMode.RANGE_END, SelectionMode.RANGE_FREE):
            return date_utils.is_same_day(day, self.context.provisional_date)
        return date_utils.is_same_day(day, self.context.end_date)

    def is_day_selected(self, day: date) -> bool:
        ctx = self.context
        if self.selection_mode is SelectionMode.MULTIPLE:
            return any(date_utils.is_same_day(day, d) for d in ctx.selected_dates)
        return date_utils.is_same_day(day, ctx.selected)

    def is_highlighted(self, day: date) -> bool:
        return day in self.context.highlight_dates

    def holiday_names(self, day: date) -> tuple[str, ...]:
        info = self.context.holidays.get(day.isoformat())
        if info is None:
            return ()
        return tuple(info.holiday_names)

    def holiday_class_name(self, day: date) -> Optional[str]:
        info = self.context.holidays.get(day.isoformat())
        return info.class_name if info is not None else None
