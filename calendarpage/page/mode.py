"""Page mode selection: which calendar granularity a page renders."""

import logging
from dataclasses import dataclass
from typing import Union

from .layout import QUARTER_LAYOUT, GridLayout, resolve_month_layout
from .models import PageOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayGridMode:
    """Weeks of days for the anchor month."""

    name = "day"


@dataclass(frozen=True)
class MonthGridMode:
    """Twelve month cells arranged in a fixed grid."""

    layout: GridLayout
    full_month_text: bool = False

    name = "month"


@dataclass(frozen=True)
class QuarterGridMode:
    """Four quarter cells in a single row."""

    layout: GridLayout = QUARTER_LAYOUT

    name = "quarter"


@dataclass(frozen=True)
class WeekListMode:
    """Weeks of the anchor month where a whole week is the selectable unit."""

    name = "week"


PageMode = Union[DayGridMode, MonthGridMode, QuarterGridMode, WeekListMode]


def select_page_mode(options: PageOptions) -> PageMode:
    """Choose the page mode from the host's option flags.

    The month picker wins over the quarter picker, which wins over the week
    picker; without any picker flag the page is a day grid.

    Args:
        options: Per-render option flags

    Returns:
        The page mode for this render
    """
    mode: PageMode
    if options.show_month_year_picker:
        mode = MonthGridMode(
            layout=resolve_month_layout(
                four_columns=options.show_four_column_month_year_picker,
                two_columns=options.show_two_column_month_year_picker,
            ),
            full_month_text=options.show_full_month_year_picker,
        )
    elif options.show_quarter_year_picker:
        mode = QuarterGridMode()
    elif options.show_week_picker:
        mode = WeekListMode()
    else:
        mode = DayGridMode()

    logger.debug(f"Selected page mode: {mode.name}")
    return mode
