"""Date arithmetic helpers for calendar page calculations.

Month indices used across the package are zero-based (0 = January) to match the
month grid layouts; quarters are one-based (1-4). Weekday numbers for week-start
configuration follow the picker convention where 0 = Sunday and 6 = Saturday.
"""

import calendar
import logging
from datetime import date, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

DAYS_IN_WEEK = 7
MONTHS_IN_YEAR = 12
MONTHS_IN_QUARTER = 3

# Week start per locale, 0 = Sunday. Lookups fall back to the language prefix.
LOCALE_WEEK_START: dict[str, int] = {
    "en": 0,
    "en-US": 0,
    "en-CA": 0,
    "en-AU": 1,
    "en-GB": 1,
    "en-IE": 1,
    "en-NZ": 1,
    "de": 1,
    "fr": 1,
    "fr-CA": 0,
    "es": 1,
    "it": 1,
    "nl": 1,
    "pt": 1,
    "pt-BR": 0,
    "pl": 1,
    "ru": 1,
    "sv": 1,
    "fi": 1,
    "da": 1,
    "nb": 1,
    "cs": 1,
    "ja": 0,
    "ko": 0,
    "zh": 1,
    "zh-TW": 0,
    "he": 0,
    "ar": 6,
    "fa": 6,
}
DEFAULT_WEEK_START = 0


def today() -> date:
    """Return the current local date."""
    return date.today()


def get_locale_week_start(locale: Optional[str]) -> int:
    """Resolve the first day of the week for a locale code.

    Args:
        locale: Locale code such as ``"en-GB"`` or ``"de_DE"``; None for the default

    Returns:
        Weekday number where 0 = Sunday
    """
    if not locale:
        return DEFAULT_WEEK_START

    code = locale.replace("_", "-")
    if code in LOCALE_WEEK_START:
        return LOCALE_WEEK_START[code]

    language = code.split("-", 1)[0].lower()
    return LOCALE_WEEK_START.get(language, DEFAULT_WEEK_START)


def get_month(day: date) -> int:
    """Zero-based month index of a date."""
    return day.month - 1


def get_quarter(day: date) -> int:
    """One-based quarter of a date."""
    return (day.month - 1) // MONTHS_IN_QUARTER + 1


def set_month(day: date, month: int) -> date:
    """Move a date into another month of the same year, clamping the day of month."""
    last_day = calendar.monthrange(day.year, month + 1)[1]
    return day.replace(month=month + 1, day=min(day.day, last_day))


def set_quarter(day: date, quarter: int) -> date:
    """Move a date into another quarter, keeping its position within the quarter."""
    offset = (quarter - get_quarter(day)) * MONTHS_IN_QUARTER
    return set_month(day, get_month(day) + offset)


def add_days(day: date, amount: int) -> date:
    return day + timedelta(days=amount)


def add_weeks(day: date, amount: int) -> date:
    return day + timedelta(weeks=amount)


def add_months(day: date, amount: int) -> date:
    return day + relativedelta(months=amount)


def sub_months(day: date, amount: int) -> date:
    return day - relativedelta(months=amount)


def add_quarters(day: date, amount: int) -> date:
    return add_months(day, amount * MONTHS_IN_QUARTER)


def sub_quarters(day: date, amount: int) -> date:
    return sub_months(day, amount * MONTHS_IN_QUARTER)


def get_start_of_month(day: date) -> date:
    return day.replace(day=1)


def get_end_of_month(day: date) -> date:
    return day + relativedelta(day=31)


def get_start_of_quarter(day: date) -> date:
    first_month = (get_quarter(day) - 1) * MONTHS_IN_QUARTER + 1
    return date(day.year, first_month, 1)


def get_end_of_quarter(day: date) -> date:
    return get_start_of_quarter(day) + relativedelta(months=MONTHS_IN_QUARTER, days=-1)


def get_start_of_week(
    day: date, locale: Optional[str] = None, calendar_start_day: Optional[int] = None
) -> date:
    """Return the first day of the week containing ``day``.

    An explicit ``calendar_start_day`` overrides the locale's week start.

    Args:
        day: Any date within the week
        locale: Locale code used when no explicit start day is given
        calendar_start_day: Weekday number (0 = Sunday) the week starts on

    Returns:
        Date of the first day of that week
    """
    week_starts_on = (
        calendar_start_day if calendar_start_day is not None else get_locale_week_start(locale)
    )
    # date.weekday() is Monday based; shift to the Sunday based numbering
    day_number = (day.weekday() + 1) % DAYS_IN_WEEK
    return day - timedelta(days=(day_number - week_starts_on) % DAYS_IN_WEEK)


def get_week_number(day: date) -> int:
    """ISO-8601 week number of a date."""
    return day.isocalendar()[1]


def is_same_day(first: Optional[date], second: Optional[date]) -> bool:
    if first is None or second is None:
        return False
    return first == second


def is_same_month(first: Optional[date], second: Optional[date]) -> bool:
    if first is None or second is None:
        return False
    return first.year == second.year and first.month == second.month


def is_same_quarter(first: Optional[date], second: Optional[date]) -> bool:
    if first is None or second is None:
        return False
    return first.year == second.year and get_quarter(first) == get_quarter(second)


def is_within_interval(day: date, start: date, end: date) -> bool:
    """Inclusive interval membership; a reversed interval is read in date order."""
    low, high = (start, end) if start <= end else (end, start)
    return low <= day <= high


def difference_in_calendar_days(left: date, right: date) -> int:
    return (left - right).days


def is_out_of_bounds(
    day: date, min_date: Optional[date] = None, max_date: Optional[date] = None
) -> bool:
    """Check a date against optional inclusive bounds."""
    if min_date is not None and difference_in_calendar_days(day, min_date) < 0:
        return True
    if max_date is not None and difference_in_calendar_days(day, max_date) > 0:
        return True
    return False


def is_month_in_range(start_date: date, end_date: date, month: int, day: date) -> bool:
    """Check whether month ``month`` of ``day``'s year lies between two dates.

    Args:
        start_date: Range start
        end_date: Range end
        month: Zero-based month index on the page
        day: Anchor date supplying the page year

    Returns:
        True when the month falls inside the range (inclusive)
    """
    start_year, start_month = start_date.year, get_month(start_date)
    end_year, end_month = end_date.year, get_month(end_date)
    day_year = day.year

    if start_year == end_year and start_year == day_year:
        return start_month <= month <= end_month
    if start_year < end_year:
        return (
            (day_year == start_year and start_month <= month)
            or (day_year == end_year and end_month >= month)
            or start_year < day_year < end_year
        )
    return False


def is_quarter_in_range(start_date: date, end_date: date, quarter: int, day: date) -> bool:
    """Quarter counterpart of :func:`is_month_in_range`."""
    start_year, start_quarter = start_date.year, get_quarter(start_date)
    end_year, end_quarter = end_date.year, get_quarter(end_date)
    day_year = day.year

    if start_year == end_year and start_year == day_year:
        return start_quarter <= quarter <= end_quarter
    if start_year < end_year:
        return (
            (day_year == start_year and start_quarter <= quarter)
            or (day_year == end_year and end_quarter >= quarter)
            or start_year < day_year < end_year
        )
    return False


def get_month_in_locale(month: int, locale: Optional[str] = None) -> str:
    """Full month name for a zero-based month index.

    Month names are not localized; ``locale`` only keeps the call signature
    symmetric with the week-start helpers.
    """
    _ = locale
    return calendar.month_name[month + 1]


def get_month_short_in_locale(month: int, locale: Optional[str] = None) -> str:
    _ = locale
    return calendar.month_abbr[month + 1]


def get_quarter_short_in_locale(quarter: int, locale: Optional[str] = None) -> str:
    _ = locale
    return f"Q{quarter}"


def format_date(day: date, format_string: str = "%B %Y", locale: Optional[str] = None) -> str:
    """Format a date with an strftime pattern."""
    _ = locale
    return day.strftime(format_string)


def is_space_key(key: str) -> bool:
    return key in (" ", "Spacebar", "space")


def _ordinal(number: int) -> str:
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def format_long_date(day: date, locale: Optional[str] = None) -> str:
    """Long form used in accessible labels, e.g. ``Monday, January 15th, 2024``."""
    _ = locale
    return f"{day:%A}, {day:%B} {_ordinal(day.day)}, {day.year}"
