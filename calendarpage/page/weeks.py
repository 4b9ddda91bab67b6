"""Week-start sequence for day-grid and week-list pages."""

import logging
from collections.abc import Iterator
from datetime import date
from typing import Optional

from ..utils import date_utils

logger = logging.getLogger(__name__)

FIXED_HEIGHT_STANDARD_WEEK_COUNT = 6


def is_week_in_month(week_start: date, anchor_day: date) -> bool:
    """Check whether the first or last day of a week falls in the anchor's month."""
    week_end = date_utils.add_days(week_start, date_utils.DAYS_IN_WEEK - 1)
    return date_utils.is_same_month(week_start, anchor_day) or date_utils.is_same_month(
        week_end, anchor_day
    )


def iter_week_starts(
    anchor_day: date,
    fixed_height: bool = False,
    peek_next_month: bool = False,
    locale: Optional[str] = None,
    calendar_start_day: Optional[int] = None,
) -> Iterator[date]:
    """Yield the first day of every week row on the page.

    Iteration starts at the week containing the first of the anchor month.
    With ``fixed_height`` exactly six rows are produced; otherwise rows stop
    once the next week no longer touches the anchor month. ``peek_next_month``
    adds one more row past the normal stopping point in both policies.

    Args:
        anchor_day: Any day of the month the page shows
        fixed_height: Always produce six rows
        peek_next_month: Produce one extra lookahead row
        locale: Locale code for the week start
        calendar_start_day: Explicit week start, 0 = Sunday

    Yields:
        Week start dates in ascending order
    """
    week_start = date_utils.get_start_of_week(
        date_utils.get_start_of_month(anchor_day), locale, calendar_start_day
    )
    rows = 0
    break_after_next = False

    while True:
        yield week_start
        rows += 1

        if break_after_next:
            break

        week_start = date_utils.add_weeks(week_start, 1)

        is_fixed_and_final_week = fixed_height and rows >= FIXED_HEIGHT_STANDARD_WEEK_COUNT
        is_out_of_month = not fixed_height and not is_week_in_month(week_start, anchor_day)

        if is_fixed_and_final_week or is_out_of_month:
            if not peek_next_month:
                break
            break_after_next = True

    logger.debug(f"Generated {rows} week rows for {anchor_day:%Y-%m}")
