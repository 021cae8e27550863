"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from pocketbook.domain.entities import (
    Account,
    Category,
    CategoryShare,
    DailyPoint,
    DateRange,
    PeriodAggregate,
    Transaction,
)


class ReportingQueries(ABC):
    """Read-only aggregate queries consumed by the reporting engine.

    Every query is scoped to the accounts owned by ``user_id``; ``account_id``
    narrows the scope to one of those accounts.
    """

    @abstractmethod
    def get_period_totals(
        self, user_id: str, date_range: DateRange, account_id: Optional[int] = None
    ) -> PeriodAggregate:
        """Sum income, expenses and net amount over the range."""
        pass

    @abstractmethod
    def get_expense_category_totals(
        self, user_id: str, date_range: DateRange, account_id: Optional[int] = None
    ) -> list[CategoryShare]:
        """Sum absolute expense amounts per category name, largest first.

        Transactions without a category are not included.
        """
        pass

    @abstractmethod
    def get_daily_totals(
        self, user_id: str, date_range: DateRange, account_id: Optional[int] = None
    ) -> list[DailyPoint]:
        """Sum income and expenses per day, for days with transactions only."""
        pass


class Database(ReportingQueries):
    """Abstract database interface for pocketbook."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(self, user_id: str, name: str, plaid_id: Optional[str] = None) -> int:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, user_id: str, account_id: int) -> Optional[Account]:
        """Get one of the user's accounts by ID."""
        pass

    @abstractmethod
    def get_account_by_name(self, user_id: str, name: str) -> Optional[Account]:
        """Get one of the user's accounts by name."""
        pass

    @abstractmethod
    def list_accounts(self, user_id: str) -> list[Account]:
        """List the user's accounts."""
        pass

    @abstractmethod
    def update_account(self, user_id: str, account_id: int, name: str) -> None:
        """Rename one of the user's accounts."""
        pass

    @abstractmethod
    def delete_accounts(self, user_id: str, account_ids: list[int]) -> list[int]:
        """Delete the user's accounts (and their transactions). Returns deleted IDs."""
        pass

    # Category operations
    @abstractmethod
    def create_category(self, user_id: str, name: str, plaid_id: Optional[str] = None) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, user_id: str, category_id: int) -> Optional[Category]:
        """Get one of the user's categories by ID."""
        pass

    @abstractmethod
    def get_category_by_name(self, user_id: str, name: str) -> Optional[Category]:
        """Get one of the user's categories by name."""
        pass

    @abstractmethod
    def list_categories(self, user_id: str) -> list[Category]:
        """List the user's categories."""
        pass

    @abstractmethod
    def update_category(self, user_id: str, category_id: int, name: str) -> None:
        """Rename one of the user's categories."""
        pass

    @abstractmethod
    def delete_categories(self, user_id: str, category_ids: list[int]) -> list[int]:
        """Delete the user's categories, leaving their transactions uncategorized.

        Returns deleted IDs.
        """
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        account_id: int,
        date: date,
        amount: int,
        payee: str,
        category_id: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def bulk_create_transactions(self, rows: list[dict]) -> list[int]:
        """Create several transactions in one database transaction.

        Each row holds the keyword arguments of ``create_transaction``. Either
        every row is written or none is. Returns IDs in row order.
        """
        pass

    @abstractmethod
    def get_transaction(self, user_id: str, transaction_id: int) -> Optional[Transaction]:
        """Get a transaction by ID if it belongs to one of the user's accounts."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        user_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        account_id: Optional[int] = None,
    ) -> list[Transaction]:
        """List the user's transactions, newest first.

        Args:
            user_id: Owner of the accounts to include
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive)
            account_id: Optional account ID filter
        """
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        account_id: Optional[int] = None,
        date: Optional[date] = None,
        amount: Optional[int] = None,
        payee: Optional[str] = None,
        category_id: Optional[int] = None,
        notes: Optional[str] = None,
        update_category: bool = False,
    ) -> None:
        """Update transaction fields.

        Args:
            update_category: If True, update category_id even if it's None (to clear it)
        """
        pass

    @abstractmethod
    def delete_transactions(self, user_id: str, transaction_ids: list[int]) -> list[int]:
        """Delete the user's transactions. Returns deleted IDs."""
        pass
