"""CLI module for Calendar Page.

Provides the ``calendarpage`` command, which renders one calendar page to the
terminal so option and constraint combinations can be inspected by hand.
"""

import argparse
import logging
from typing import Optional

from ..config.exceptions import SettingsError
from ..config.settings import CalendarPageSettings, get_settings
from ..display.console_renderer import ConsoleRenderer
from ..page.controller import CalendarPageController
from ..page.exceptions import CalendarPageError
from ..page.models import PageContext, PageOptions
from ..utils import date_utils
from ..utils.logging import apply_command_line_overrides, setup_logging_from_settings
from .parser import create_parser, parse_date, parse_month

logger = logging.getLogger(__name__)


def build_page_options(args: argparse.Namespace, settings: CalendarPageSettings) -> PageOptions:
    """Translate parsed arguments into per-render page options.

    Args:
        args: Parsed command line arguments
        settings: Loaded settings providing defaults

    Returns:
        PageOptions for the requested page
    """
    overrides = {
        "show_month_year_picker": args.mode == "month",
        "show_quarter_year_picker": args.mode == "quarter",
        "show_week_picker": args.mode == "week",
        "show_two_column_month_year_picker": args.columns == 2,
        "show_four_column_month_year_picker": args.columns == 4,
        "show_week_numbers": args.week_numbers,
    }
    if args.fixed_height:
        overrides["fixed_height"] = True
    if args.peek_next_month:
        overrides["peek_next_month"] = True
    return PageOptions.from_settings(settings, **overrides)


def build_page_context(args: argparse.Namespace) -> PageContext:
    """Translate parsed arguments into the page context."""
    anchor_day = args.month or date_utils.get_start_of_month(date_utils.today())
    return PageContext(
        anchor_day=anchor_day,
        selected=args.selected,
        pre_selection=args.selected,
        min_date=args.min_date,
        max_date=args.max_date,
    )


def main_entry(argv: Optional[list[str]] = None) -> int:
    """Main entry point with argument parsing.

    Args:
        argv: Argument list, ``sys.argv[1:]`` when omitted

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except SettingsError as e:
        print(f"Configuration error: {e}")
        return 1

    apply_command_line_overrides(settings, args)
    setup_logging_from_settings(settings)

    try:
        controller = CalendarPageController(
            build_page_context(args),
            build_page_options(args, settings),
            settings=settings,
        )
        view = controller.render()
    except CalendarPageError as e:
        logger.error(f"Failed to build calendar page: {e}")
        return 1

    renderer = ConsoleRenderer(show_week_numbers=args.week_numbers)
    print(renderer.render_page(view, first_weekday=controller.week_starts_on))
    return 0


__all__ = [
    "build_page_context",
    "build_page_options",
    "create_parser",
    "main_entry",
    "parse_date",
    "parse_month",
]
