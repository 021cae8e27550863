"""Tests for the pure reporting helpers."""

from datetime import date, timedelta

import pytest

from pocketbook.domain.entities import CategoryShare, DailyPoint, DateRange, PeriodAggregate
from pocketbook.domain.errors import ValidationError
from pocketbook.domain.reporting import (
    OTHER_CATEGORY_NAME,
    aggregate_period,
    calculate_percentage_change,
    fill_missing_days,
    group_daily_totals,
    group_expenses_by_category,
    resolve_date_range,
    rollup_categories,
)


class TestAggregatePeriod:
    def test_empty_input_is_all_zero(self):
        assert aggregate_period([]) == PeriodAggregate(income=0, expenses=0, remaining=0)

    def test_splits_income_and_expenses(self):
        result = aggregate_period([100, -40, -10])

        assert result.income == 100
        assert result.expenses == -50
        assert result.remaining == 50

    def test_zero_amount_counts_as_income(self):
        result = aggregate_period([0, -5])

        assert result == PeriodAggregate(income=0, expenses=-5, remaining=-5)


class TestPercentageChange:
    def test_both_zero(self):
        assert calculate_percentage_change(0, 0) == 0

    @pytest.mark.parametrize("current", [1, -1, 250, -3000])
    def test_previous_zero_is_full_swing(self, current):
        assert calculate_percentage_change(current, 0) == 100

    def test_standard_ratio(self):
        assert calculate_percentage_change(150, 100) == 50

    def test_decrease(self):
        assert calculate_percentage_change(50, 200) == -75

    def test_negative_previous_keeps_plain_ratio(self):
        # Expenses are negative: -150 vs -100 gives (-50 / -100) * 100
        assert calculate_percentage_change(-150, -100) == 50


class TestRollupCategories:
    def test_three_or_fewer_are_kept_sorted(self):
        shares = [
            CategoryShare("Food", 10),
            CategoryShare("Rent", 50),
            CategoryShare("Utilities", 30),
        ]

        result = rollup_categories(shares)

        assert [s.name for s in result] == ["Rent", "Utilities", "Food"]
        assert all(s.name != OTHER_CATEGORY_NAME for s in result)

    def test_long_tail_is_folded_into_other(self):
        shares = [
            CategoryShare("A", 50),
            CategoryShare("B", 40),
            CategoryShare("C", 30),
            CategoryShare("D", 20),
            CategoryShare("E", 10),
        ]

        result = rollup_categories(shares)

        assert result == [
            CategoryShare("A", 50),
            CategoryShare("B", 40),
            CategoryShare("C", 30),
            CategoryShare(OTHER_CATEGORY_NAME, 30),
        ]

    def test_other_is_last_even_when_larger(self):
        shares = [
            CategoryShare("A", 10),
            CategoryShare("B", 10),
            CategoryShare("C", 10),
            CategoryShare("D", 9),
            CategoryShare("E", 9),
        ]

        result = rollup_categories(shares)

        assert result[-1] == CategoryShare(OTHER_CATEGORY_NAME, 18)
        assert len(result) == 4

    def test_ties_keep_input_order(self):
        shares = [CategoryShare("Second", 5), CategoryShare("First", 5)]

        assert [s.name for s in rollup_categories(shares)] == ["Second", "First"]

    def test_empty(self):
        assert rollup_categories([]) == []

    def test_exactly_four_groups(self):
        shares = [CategoryShare(name, value) for name, value in zip("ABCD", [4, 3, 2, 1])]

        result = rollup_categories(shares)

        assert result[-1] == CategoryShare(OTHER_CATEGORY_NAME, 1)


class TestGroupExpensesByCategory:
    def test_sums_absolute_expenses_and_skips_uncategorized_and_income(self):
        rows = [
            ("Food", -100),
            ("Rent", -500),
            ("Food", -50),
            (None, -70),
            ("Food", 300),
        ]

        result = group_expenses_by_category(rows)

        assert result == [CategoryShare("Food", 150), CategoryShare("Rent", 500)]


class TestGroupDailyTotals:
    def test_groups_by_day_in_date_order(self):
        rows = [
            (date(2024, 3, 5), -30),
            (date(2024, 3, 2), 100),
            (date(2024, 3, 5), 20),
            (date(2024, 3, 2), -10),
        ]

        result = group_daily_totals(rows)

        assert result == [
            DailyPoint(date(2024, 3, 2), income=100, expenses=-10),
            DailyPoint(date(2024, 3, 5), income=20, expenses=-30),
        ]


class TestFillMissingDays:
    def test_fills_gaps_with_zero_points(self):
        date_range = DateRange(date(2024, 3, 1), date(2024, 3, 5))
        sparse = [
            DailyPoint(date(2024, 3, 2), income=100, expenses=-10),
            DailyPoint(date(2024, 3, 4), income=0, expenses=-40),
        ]

        result = fill_missing_days(sparse, date_range)

        assert result == [
            DailyPoint(date(2024, 3, 1)),
            DailyPoint(date(2024, 3, 2), income=100, expenses=-10),
            DailyPoint(date(2024, 3, 3)),
            DailyPoint(date(2024, 3, 4), income=0, expenses=-40),
            DailyPoint(date(2024, 3, 5)),
        ]

    @pytest.mark.parametrize(
        "start,end",
        [
            (date(2024, 1, 1), date(2024, 1, 1)),
            (date(2024, 2, 20), date(2024, 3, 10)),
            (date(2023, 12, 1), date(2024, 1, 31)),
        ],
    )
    def test_dense_and_strictly_increasing(self, start, end):
        result = fill_missing_days([], DateRange(start, end))

        assert len(result) == (end - start).days + 1
        assert result[0].date == start
        assert result[-1].date == end
        for previous, current in zip(result, result[1:]):
            assert current.date - previous.date == timedelta(days=1)

    def test_inverted_range_is_empty(self):
        sparse = [DailyPoint(date(2024, 3, 2), income=1)]

        assert fill_missing_days(sparse, DateRange(date(2024, 3, 5), date(2024, 3, 1))) == []

    def test_entries_outside_range_are_ignored(self):
        sparse = [DailyPoint(date(2024, 2, 28), income=1)]

        result = fill_missing_days(sparse, DateRange(date(2024, 3, 1), date(2024, 3, 2)))

        assert [p.income for p in result] == [0, 0]


class TestDateRange:
    def test_days_is_inclusive(self):
        assert DateRange(date(2024, 3, 1), date(2024, 3, 31)).days == 31

    def test_previous_has_same_length_and_ends_before_start(self):
        current = DateRange(date(2024, 3, 1), date(2024, 3, 31))

        previous = current.previous()

        assert previous == DateRange(date(2024, 1, 30), date(2024, 2, 29))
        assert previous.days == current.days

    def test_iterates_up_to_the_last_representable_day(self):
        last_days = DateRange(date.max - timedelta(days=2), date.max)

        assert list(last_days) == [
            date.max - timedelta(days=2),
            date.max - timedelta(days=1),
            date.max,
        ]

    def test_previous_before_year_one_overflows(self):
        with pytest.raises(OverflowError):
            DateRange(date(1, 1, 1), date(1, 12, 31)).previous()


class TestResolveDateRange:
    def test_defaults_to_rolling_window(self):
        today = date(2024, 3, 31)

        assert resolve_date_range(today=today) == DateRange(date(2024, 3, 1), today)

    def test_parses_dashboard_format(self):
        result = resolve_date_range("01-02-2024", "15-02-2024")

        assert result == DateRange(date(2024, 2, 1), date(2024, 2, 15))

    def test_accepts_date_objects(self):
        result = resolve_date_range(date(2024, 2, 1), date(2024, 2, 15))

        assert result == DateRange(date(2024, 2, 1), date(2024, 2, 15))

    def test_single_bound_uses_window_for_the_other(self):
        today = date(2024, 3, 31)

        assert resolve_date_range(date_from="10-03-2024", today=today) == DateRange(
            date(2024, 3, 10), today
        )
        assert resolve_date_range(date_to="20-03-2024", today=today) == DateRange(
            date(2024, 3, 1), date(2024, 3, 20)
        )

    def test_rejects_other_formats(self):
        with pytest.raises(ValidationError):
            resolve_date_range("2024-02-01", "2024-02-15")
