"""Command-line argument parsing for Calendar Page.

Builds the parser used by ``python -m calendarpage`` to preview a single page
in the terminal.
"""

import argparse
import logging
from datetime import date, datetime
from pathlib import Path

logger = logging.getLogger(__name__)

PAGE_MODES = ("day", "month", "quarter", "week")
COLUMN_CHOICES = (2, 3, 4)


def parse_date(date_str: str) -> date:
    """Parse a date string in YYYY-MM-DD format for command-line arguments.

    Args:
        date_str: Date string to parse

    Returns:
        Parsed date

    Raises:
        argparse.ArgumentTypeError: If the date format is invalid

    Example:
        >>> parse_date("2024-01-15")
        datetime.date(2024, 1, 15)
    """
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"Invalid date format: {date_str}. Use YYYY-MM-DD") from err


def parse_month(month_str: str) -> date:
    """Parse a YYYY-MM month into the first day of that month.

    Raises:
        argparse.ArgumentTypeError: If the month format is invalid
    """
    try:
        return datetime.strptime(month_str, "%Y-%m").date()
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"Invalid month format: {month_str}. Use YYYY-MM") from err


def create_parser() -> argparse.ArgumentParser:
    """Create the command line argument parser.

    Returns:
        Configured ArgumentParser instance

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["--month", "2024-02", "--mode", "month"])
    """
    parser = argparse.ArgumentParser(
        description="Calendar Page - preview one page of a date-picker calendar",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # Day grid for the current month
  %(prog)s --month 2018-02 --fixed-height    # Six week rows for February 2018
  %(prog)s --mode month --columns 4          # Month picker in a 4-column grid
  %(prog)s --mode quarter --min-date 2024-04-01
        """,
    )

    page_group = parser.add_argument_group("page options")
    page_group.add_argument(
        "--month",
        type=parse_month,
        default=None,
        help="Month to display as YYYY-MM (default: current month)",
    )
    page_group.add_argument(
        "--mode",
        choices=PAGE_MODES,
        default="day",
        help="Page granularity (default: day)",
    )
    page_group.add_argument(
        "--columns",
        type=int,
        choices=COLUMN_CHOICES,
        default=3,
        help="Columns in the month picker grid (default: 3)",
    )
    page_group.add_argument(
        "--fixed-height",
        action="store_true",
        help="Always show six week rows",
    )
    page_group.add_argument(
        "--peek-next-month",
        action="store_true",
        help="Show one extra week row from the following month",
    )
    page_group.add_argument(
        "--week-numbers",
        action="store_true",
        help="Prefix week rows with their week number",
    )

    constraint_group = parser.add_argument_group("constraints")
    constraint_group.add_argument(
        "--min-date", type=parse_date, default=None, help="Earliest selectable date (YYYY-MM-DD)"
    )
    constraint_group.add_argument(
        "--max-date", type=parse_date, default=None, help="Latest selectable date (YYYY-MM-DD)"
    )
    constraint_group.add_argument(
        "--selected", type=parse_date, default=None, help="Selected date (YYYY-MM-DD)"
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override the configured log level",
    )
    logging_group.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Also write a rotating log file to this directory",
    )
    logging_group.add_argument(
        "--no-log-colors",
        action="store_true",
        help="Disable colored console log output",
    )

    verbosity = logging_group.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Shortcut for --log-level VERBOSE",
    )
    verbosity.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only log errors",
    )

    return parser


__all__ = [
    "COLUMN_CHOICES",
    "PAGE_MODES",
    "create_parser",
    "parse_date",
    "parse_month",
]
