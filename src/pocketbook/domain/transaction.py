"""Transaction domain service."""

from typing import Optional
from datetime import date, datetime
from pocketbook.database.base import Database
from pocketbook.domain.entities import Transaction as TransactionEntity
from pocketbook.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    category_not_found,
    transaction_not_found,
)
from pocketbook.logging_setup import get_logger

logger = get_logger(__name__)

# SQLite INTEGER is a signed 64-bit value
MAX_AMOUNT = 2**63 - 1


class TransactionService:
    """Service for managing a user's transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        user_id: str,
        account_id: int,
        date: date,
        amount: int,
        payee: str,
        category_id: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Create a transaction.

        Args:
            user_id: Owner of the account
            account_id: Account ID
            date: Transaction date
            amount: Signed amount in miliunits (negative for expenses)
            payee: Who was paid or who paid
            category_id: Optional category ID
            notes: Optional notes

        Returns:
            Transaction ID

        Raises:
            ValidationError: If date is not a date, amount is not an integer
                or payee is blank
            NotFoundError: If account or category is not the user's
        """
        self._validate_date(date)
        self._validate_amount(amount)
        payee = self._validate_payee(payee)
        self._check_account(user_id, account_id)
        if category_id is not None:
            self._check_category(user_id, category_id)

        transaction_id = self.db.create_transaction(
            account_id=account_id,
            date=date,
            amount=amount,
            payee=payee,
            category_id=category_id,
            notes=notes,
        )
        logger.info(
            "created transaction id=%s account=%s user=%s", transaction_id, account_id, user_id
        )
        return transaction_id

    def bulk_create_transactions(self, user_id: str, rows: list[dict]) -> list[int]:
        """Create several transactions, validating all of them first.

        Each row holds the keyword arguments of ``create_transaction`` except
        ``user_id``. Nothing is written if any row is invalid.

        Returns:
            Transaction IDs in row order
        """
        prepared = []
        for row in rows:
            self._validate_date(row.get("date"))
            self._validate_amount(row.get("amount"))
            payee = self._validate_payee(row.get("payee"))
            self._check_account(user_id, row.get("account_id"))
            if row.get("category_id") is not None:
                self._check_category(user_id, row["category_id"])
            prepared.append(
                {
                    "account_id": row["account_id"],
                    "date": row["date"],
                    "amount": row["amount"],
                    "payee": payee,
                    "category_id": row.get("category_id"),
                    "notes": row.get("notes"),
                }
            )

        transaction_ids = self.db.bulk_create_transactions(prepared)
        logger.info("created transactions ids=%s user=%s", transaction_ids, user_id)
        return transaction_ids

    def get_transaction(self, user_id: str, transaction_id: int) -> Optional[TransactionEntity]:
        """Get one of the user's transactions, or None."""
        return self.db.get_transaction(user_id, transaction_id)

    def list_transactions(
        self,
        user_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        account_id: Optional[int] = None,
    ) -> list[TransactionEntity]:
        """List the user's transactions, newest first.

        Args:
            user_id: Owner of the accounts
            start_date: Optional start date filter
            end_date: Optional end date filter
            account_id: Optional account ID filter

        Returns:
            List of transaction entities
        """
        return self.db.list_transactions(
            user_id=user_id,
            start_date=start_date,
            end_date=end_date,
            account_id=account_id,
        )

    def update_transaction(
        self,
        user_id: str,
        transaction_id: int,
        account_id: Optional[int] = None,
        date: Optional[date] = None,
        amount: Optional[int] = None,
        payee: Optional[str] = None,
        category_id: Optional[int] = None,
        notes: Optional[str] = None,
        clear_category: bool = False,
    ) -> None:
        """Update transaction fields.

        Args:
            user_id: Owner of the transaction
            transaction_id: Transaction ID to update
            account_id: Optional new account ID
            date: Optional new date
            amount: Optional new amount in miliunits
            payee: Optional new payee
            category_id: Optional new category ID
            notes: Optional new notes
            clear_category: If True, clear the category (category_id must be None)

        Raises:
            NotFoundError: If transaction, account or category is not the user's
            ValidationError: If the new values are invalid
        """
        if self.db.get_transaction(user_id, transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        if account_id is not None:
            self._check_account(user_id, account_id)
        if date is not None:
            self._validate_date(date)
        if amount is not None:
            self._validate_amount(amount)
        if payee is not None:
            payee = self._validate_payee(payee)

        if clear_category:
            if category_id is not None:
                raise ValidationError("Cannot set both category_id and clear_category")
        elif category_id is not None:
            self._check_category(user_id, category_id)

        self.db.update_transaction(
            transaction_id=transaction_id,
            account_id=account_id,
            date=date,
            amount=amount,
            payee=payee,
            category_id=category_id,
            notes=notes,
            update_category=clear_category,
        )

    def delete_transaction(self, user_id: str, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the user has no such transaction
        """
        if not self.delete_transactions(user_id, [transaction_id]):
            raise NotFoundError(transaction_not_found(transaction_id))

    def delete_transactions(self, user_id: str, transaction_ids: list[int]) -> list[int]:
        """Delete several transactions, ignoring IDs the user does not own."""
        deleted = self.db.delete_transactions(user_id, list(transaction_ids))
        logger.info("deleted transactions ids=%s user=%s", deleted, user_id)
        return deleted

    def _check_account(self, user_id: str, account_id: int) -> None:
        if self.db.get_account(user_id, account_id) is None:
            raise NotFoundError(account_not_found(account_id))

    def _check_category(self, user_id: str, category_id: int) -> None:
        if self.db.get_category(user_id, category_id) is None:
            raise NotFoundError(category_not_found(category_id))

    @staticmethod
    def _validate_date(value) -> None:
        if isinstance(value, datetime) or not isinstance(value, date):
            raise ValidationError(f"Date must be a calendar date, got {value!r}")

    @staticmethod
    def _validate_amount(amount: int) -> None:
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise ValidationError(f"Amount must be an integer number of miliunits, got {amount!r}")
        if abs(amount) > MAX_AMOUNT:
            raise ValidationError(f"Amount out of range: {amount}")

    @staticmethod
    def _validate_payee(payee: str) -> str:
        payee = (payee or "").strip()
        if not payee:
            raise ValidationError("Payee is required")
        return payee
