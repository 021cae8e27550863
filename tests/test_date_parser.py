"""Tests for date parsing utilities."""

from datetime import date

import pytest
from pocketbook.domain.errors import ValidationError
from pocketbook.utils.date_parser import (
    format_summary_date,
    get_date_range,
    parse_date,
    parse_summary_date,
)

TODAY = date(2024, 3, 15)


def test_parse_summary_date():
    assert parse_summary_date("05-03-2024") == date(2024, 3, 5)
    assert parse_summary_date(" 29-02-2024 ") == date(2024, 2, 29)


@pytest.mark.parametrize("value", ["2024-03-05", "05/03/2024", "31-02-2024", "", "today"])
def test_parse_summary_date_is_strict(value):
    with pytest.raises(ValidationError):
        parse_summary_date(value)


def test_format_summary_date():
    assert format_summary_date(date(2024, 3, 5)) == "05-03-2024"


def test_parse_relative_dates():
    assert parse_date("today", today=TODAY) == TODAY
    assert parse_date("Yesterday", today=TODAY) == date(2024, 3, 14)
    assert parse_date("tomorrow", today=TODAY) == date(2024, 3, 16)


def test_parse_absolute_dates():
    assert parse_date("05-03-2024") == date(2024, 3, 5)
    assert parse_date("2024-03-05") == date(2024, 3, 5)
    assert parse_date("05/03/2024") == date(2024, 3, 5)
    assert parse_date("March 5, 2024") == date(2024, 3, 5)


def test_parse_invalid_date():
    with pytest.raises(ValidationError):
        parse_date("not a date")


def test_get_date_range():
    assert get_date_range("this-month", today=TODAY) == (date(2024, 3, 1), TODAY)
    assert get_date_range("this-year", today=TODAY) == (date(2024, 1, 1), TODAY)
    assert get_date_range("last-month", today=TODAY) == (date(2024, 2, 1), date(2024, 2, 29))
    assert get_date_range("last-year", today=TODAY) == (date(2023, 1, 1), date(2023, 12, 31))
    assert get_date_range("last-30-days", today=TODAY) == (date(2024, 2, 14), TODAY)


def test_get_date_range_last_month_in_january():
    assert get_date_range("last-month", today=date(2024, 1, 10)) == (
        date(2023, 12, 1),
        date(2023, 12, 31),
    )


def test_get_date_range_unknown_period():
    with pytest.raises(ValidationError):
        get_date_range("next-week", today=TODAY)
