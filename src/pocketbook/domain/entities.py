"""Domain model entities for pocketbook.

These are pure data classes representing business concepts, independent of
database schema. Amounts are signed integers in miliunits (1/1000 of the
currency unit); a non-negative amount is income and a negative one an expense.
"""

from dataclasses import dataclass, field
from datetime import datetime, date, timedelta
from typing import Any, Optional


@dataclass(frozen=True)
class Account:
    """Account domain entity owned by a single user."""

    id: int
    name: str
    user_id: str
    created_at: datetime
    plaid_id: Optional[str] = None


@dataclass(frozen=True)
class Category:
    """Category domain entity owned by a single user."""

    id: int
    name: str
    user_id: str
    created_at: datetime
    plaid_id: Optional[str] = None


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    account_id: int
    category_id: Optional[int]
    date: date
    amount: int
    payee: str
    notes: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days."""

    start: date
    end: date

    @property
    def days(self) -> int:
        """Number of calendar days covered, both ends included."""
        return (self.end - self.start).days + 1

    def previous(self) -> "DateRange":
        """Return the range of equal length immediately preceding this one.

        Raises OverflowError when the preceding range falls before year 1.
        """
        shift = timedelta(days=self.days)
        return DateRange(start=self.start - shift, end=self.end - shift)

    def __iter__(self):
        for offset in range(max(self.days, 0)):
            yield self.start + timedelta(days=offset)


@dataclass(frozen=True)
class PeriodAggregate:
    """Income, expense and net totals for a period."""

    income: int = 0
    expenses: int = 0
    remaining: int = 0


@dataclass(frozen=True)
class CategoryShare:
    """Absolute expense total for one category."""

    name: str
    value: int


@dataclass(frozen=True)
class DailyPoint:
    """Income and expense totals for one calendar day."""

    date: date
    income: int = 0
    expenses: int = 0


@dataclass(frozen=True)
class SummaryPayload:
    """Dashboard summary for one user and date range."""

    remaining_amount: int
    remaining_change: float
    income_amount: int
    income_change: float
    expenses_amount: int
    expenses_change: float
    categories: tuple[CategoryShare, ...] = field(default_factory=tuple)
    days: tuple[DailyPoint, ...] = field(default_factory=tuple)
    # Resolved reporting range; not part of the wire format
    period: Optional[DateRange] = None

    def to_dict(self) -> dict[str, Any]:
        """Render the payload with the dashboard's wire keys."""
        return {
            "remainingAmount": self.remaining_amount,
            "remainingChange": self.remaining_change,
            "incomeAmount": self.income_amount,
            "incomeChange": self.income_change,
            "expensesAmount": self.expenses_amount,
            # Key spelling is part of the dashboard contract.
            "expansesChange": self.expenses_change,
            "categories": [
                {"name": share.name, "value": share.value}
                for share in self.categories
            ],
            "days": [
                {
                    "date": point.date.isoformat(),
                    "income": point.income,
                    "expenses": point.expenses,
                }
                for point in self.days
            ],
        }
