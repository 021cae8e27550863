"""Dashboard reporting: period totals, changes, category rollup and daily series."""

from collections import defaultdict
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from pocketbook.database.base import ReportingQueries
from pocketbook.domain.entities import (
    Account,
    Category,
    CategoryShare,
    DailyPoint,
    DateRange,
    PeriodAggregate,
    SummaryPayload,
    Transaction,
)
from pocketbook.domain.errors import UnauthorizedError, ValidationError, unauthorized
from pocketbook.logging_setup import get_logger
from pocketbook.utils.date_parser import format_summary_date, parse_summary_date

logger = get_logger(__name__)

DEFAULT_WINDOW_DAYS = 30
TOP_CATEGORY_COUNT = 3
OTHER_CATEGORY_NAME = "Other"


def aggregate_period(amounts: Iterable[int]) -> PeriodAggregate:
    """Sum income (amount >= 0), expenses (amount < 0) and the net amount."""
    income = 0
    expenses = 0
    for amount in amounts:
        if amount >= 0:
            income += amount
        else:
            expenses += amount
    return PeriodAggregate(income=income, expenses=expenses, remaining=income + expenses)


def calculate_percentage_change(current: float, previous: float) -> float:
    """Return the change from ``previous`` to ``current`` in percent.

    A zero previous value yields 0 when current is also zero and 100 otherwise.
    """
    if previous == 0:
        return 0.0 if current == 0 else 100.0
    return (current - previous) / previous * 100


def group_expenses_by_category(
    rows: Iterable[tuple[Optional[str], int]],
) -> list[CategoryShare]:
    """Build category shares from (category name, amount) pairs.

    Only expenses with a category count. Groups keep first-seen order.
    """
    totals: dict[str, int] = {}
    for name, amount in rows:
        if name is None or amount >= 0:
            continue
        totals[name] = totals.get(name, 0) + abs(amount)
    return [CategoryShare(name=name, value=value) for name, value in totals.items()]


def rollup_categories(
    shares: Sequence[CategoryShare], top_n: int = TOP_CATEGORY_COUNT
) -> list[CategoryShare]:
    """Keep the ``top_n`` largest categories and fold the rest into "Other".

    The sort is stable, so equal values keep their input order. The "Other"
    entry is always last, whatever its value.
    """
    ranked = sorted(shares, key=lambda share: share.value, reverse=True)
    top = list(ranked[:top_n])
    rest = ranked[top_n:]
    if rest:
        top.append(
            CategoryShare(
                name=OTHER_CATEGORY_NAME, value=sum(share.value for share in rest)
            )
        )
    return top


def group_daily_totals(rows: Iterable[tuple[date, int]]) -> list[DailyPoint]:
    """Build sparse daily points from (date, amount) pairs, ordered by date."""
    income: dict[date, int] = defaultdict(int)
    expenses: dict[date, int] = defaultdict(int)
    for day, amount in rows:
        if amount >= 0:
            income[day] += amount
        else:
            expenses[day] += amount
    days = sorted(set(income) | set(expenses))
    return [DailyPoint(date=day, income=income[day], expenses=expenses[day]) for day in days]


def fill_missing_days(
    points: Iterable[DailyPoint], date_range: DateRange
) -> list[DailyPoint]:
    """Expand sparse daily points into one point per day of the range.

    Days without an entry get zero income and expenses. An inverted range
    produces an empty list.
    """
    by_day = {point.date: point for point in points}
    return [by_day.get(day, DailyPoint(date=day)) for day in date_range]


def resolve_date_range(
    date_from: Optional[str | date] = None,
    date_to: Optional[str | date] = None,
    today: Optional[date] = None,
) -> DateRange:
    """Resolve optional ``dd-MM-yyyy`` bounds into an inclusive range.

    Missing bounds fall back to the rolling window ending today.
    """
    today = today or date.today()
    start = _coerce_date(date_from) if date_from else today - timedelta(days=DEFAULT_WINDOW_DAYS)
    end = _coerce_date(date_to) if date_to else today
    return DateRange(start=start, end=end)


def _coerce_date(value: str | date) -> date:
    if isinstance(value, date):
        return value
    return parse_summary_date(value)


class LedgerQueries(ReportingQueries):
    """Reporting queries over in-memory accounts, categories and transactions.

    Applies the same scoping and ordering as the SQL queries, built from the
    pure grouping helpers above.
    """

    def __init__(
        self,
        accounts: Iterable[Account],
        categories: Iterable[Category],
        transactions: Iterable[Transaction],
    ):
        self.accounts = list(accounts)
        self.category_names = {cat.id: cat.name for cat in categories}
        self.transactions = list(transactions)

    def _scoped(
        self, user_id: str, date_range: DateRange, account_id: Optional[int]
    ) -> list[Transaction]:
        owned = {acc.id for acc in self.accounts if acc.user_id == user_id}
        return [
            txn
            for txn in self.transactions
            if txn.account_id in owned
            and (account_id is None or txn.account_id == account_id)
            and date_range.start <= txn.date <= date_range.end
        ]

    def get_period_totals(
        self, user_id: str, date_range: DateRange, account_id: Optional[int] = None
    ) -> PeriodAggregate:
        return aggregate_period(
            txn.amount for txn in self._scoped(user_id, date_range, account_id)
        )

    def get_expense_category_totals(
        self, user_id: str, date_range: DateRange, account_id: Optional[int] = None
    ) -> list[CategoryShare]:
        shares = group_expenses_by_category(
            (self.category_names.get(txn.category_id), txn.amount)
            for txn in self._scoped(user_id, date_range, account_id)
        )
        return sorted(shares, key=lambda share: (-share.value, share.name))

    def get_daily_totals(
        self, user_id: str, date_range: DateRange, account_id: Optional[int] = None
    ) -> list[DailyPoint]:
        return group_daily_totals(
            (txn.date, txn.amount) for txn in self._scoped(user_id, date_range, account_id)
        )


class ReportingEngine:
    """Builds the dashboard summary from the reporting queries."""

    def __init__(self, queries: ReportingQueries):
        """Initialize reporting engine.

        Args:
            queries: Read-only aggregate queries (usually a Database instance)
        """
        self.queries = queries

    def compute_summary(
        self,
        user_id: str,
        account_id: Optional[int] = None,
        date_from: Optional[str | date] = None,
        date_to: Optional[str | date] = None,
        today: Optional[date] = None,
    ) -> SummaryPayload:
        """Compute the dashboard summary for one user.

        Args:
            user_id: Authenticated user whose accounts are reported on
            account_id: Optional account to narrow the report to
            date_from: Optional start, ``dd-MM-yyyy`` string or date
            date_to: Optional end, ``dd-MM-yyyy`` string or date
            today: Reference day for the default window (defaults to date.today())

        Returns:
            SummaryPayload for the current period, with changes measured
            against the preceding period of equal length

        Raises:
            UnauthorizedError: If user_id is empty
            ValidationError: If a date string is malformed
        """
        if not user_id:
            raise UnauthorizedError(unauthorized())

        current_range = resolve_date_range(date_from, date_to, today=today)
        try:
            previous_range = current_range.previous()
        except OverflowError as e:
            raise ValidationError(
                f"Date range {format_summary_date(current_range.start)} to "
                f"{format_summary_date(current_range.end)} is out of bounds"
            ) from e
        logger.debug(
            "summary user=%s account=%s range=%s..%s previous=%s..%s",
            user_id,
            account_id,
            current_range.start,
            current_range.end,
            previous_range.start,
            previous_range.end,
        )

        current = self.queries.get_period_totals(user_id, current_range, account_id)
        previous = self.queries.get_period_totals(user_id, previous_range, account_id)

        categories = rollup_categories(
            self.queries.get_expense_category_totals(user_id, current_range, account_id)
        )

        active_days = self.queries.get_daily_totals(user_id, current_range, account_id)
        days = fill_missing_days(active_days, current_range) if active_days else []

        logger.debug(
            "summary categories=%d active_days=%d days=%d",
            len(categories),
            len(active_days),
            len(days),
        )

        return SummaryPayload(
            remaining_amount=current.remaining,
            remaining_change=calculate_percentage_change(current.remaining, previous.remaining),
            income_amount=current.income,
            income_change=calculate_percentage_change(current.income, previous.income),
            expenses_amount=current.expenses,
            expenses_change=calculate_percentage_change(current.expenses, previous.expenses),
            categories=tuple(categories),
            days=tuple(days),
            period=current_range,
        )
