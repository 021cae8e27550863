"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from pocketbook.domain.errors import ValidationError

SUMMARY_DATE_FORMAT = "%d-%m-%Y"


def parse_summary_date(date_str: str) -> date:
    """Parse a dashboard date in the strict ``dd-MM-yyyy`` format.

    Args:
        date_str: Date string such as "05-03-2024"

    Returns:
        Date object

    Raises:
        ValidationError: If the string is not a valid ``dd-MM-yyyy`` date
    """
    try:
        return datetime.strptime(date_str.strip(), SUMMARY_DATE_FORMAT).date()
    except ValueError as e:
        raise ValidationError(
            f"Invalid date '{date_str}': expected format dd-MM-yyyy"
        ) from e


def format_summary_date(value: date) -> str:
    """Format a date as ``dd-MM-yyyy``."""
    return value.strftime(SUMMARY_DATE_FORMAT)


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a transaction date string into a date object.

    Supports:
    - Relative dates: "today", "yesterday", "tomorrow"
    - Dashboard dates: "15-01-2024" (day first)
    - Free-form dates: "2024-01-15", "January 15, 2024", etc.

    Args:
        date_str: Date string in various formats
        today: Reference day for relative dates (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValidationError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return parse_summary_date(date_str)
    except ValidationError:
        pass

    # ISO dates keep year-month-day order; everything else is read day first
    dayfirst = not (len(date_str) >= 5 and date_str[:4].isdigit() and date_str[4] == "-")
    try:
        return date_parser.parse(date_str, dayfirst=dayfirst).date()
    except (ValueError, OverflowError) as e:
        raise ValidationError(f"Could not parse date '{date_str}': {e}") from e


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Get start and end dates for a named period.

    Args:
        period: One of this-month, this-year, last-month, last-year, last-30-days
        today: Reference day (defaults to date.today())

    Returns:
        Tuple of (start_date, end_date), both inclusive

    Raises:
        ValidationError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()

    if period == "this-month":
        return (today.replace(day=1), today)

    elif period == "this-year":
        return (today.replace(month=1, day=1), today)

    elif period == "last-month":
        start_date = (today - relativedelta(months=1)).replace(day=1)
        end_date = today.replace(day=1) - timedelta(days=1)
        return (start_date, end_date)

    elif period == "last-year":
        start_date = today.replace(month=1, day=1) - relativedelta(years=1)
        end_date = today.replace(month=1, day=1) - timedelta(days=1)
        return (start_date, end_date)

    elif period == "last-30-days":
        return (today - timedelta(days=30), today)

    raise ValidationError(
        f"Unknown period: '{period}'. Supported periods: this-month, this-year, "
        "last-month, last-year, last-30-days"
    )
