"""Account domain service."""

from typing import Optional
from pocketbook.database.base import Database
from pocketbook.domain.entities import Account as AccountEntity
from pocketbook.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    account_not_found,
    duplicate_account_name,
)
from pocketbook.logging_setup import get_logger

logger = get_logger(__name__)


class AccountService:
    """Service for managing a user's accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(self, user_id: str, name: str, plaid_id: Optional[str] = None) -> int:
        """Create a new account.

        Args:
            user_id: Owner of the account
            name: Account name
            plaid_id: Optional external bank-link identifier

        Returns:
            Account ID

        Raises:
            ValidationError: If name is blank
            ConflictError: If the user already has an account with this name
        """
        name = name.strip()
        if not name:
            raise ValidationError("Account name is required")
        if self.db.get_account_by_name(user_id, name) is not None:
            raise ConflictError(duplicate_account_name(name))

        account_id = self.db.create_account(user_id=user_id, name=name, plaid_id=plaid_id)
        logger.info("created account id=%s user=%s", account_id, user_id)
        return account_id

    def get_account(self, user_id: str, account_id: int) -> Optional[AccountEntity]:
        """Get one of the user's accounts, or None."""
        return self.db.get_account(user_id, account_id)

    def get_account_by_name(self, user_id: str, name: str) -> Optional[AccountEntity]:
        """Get one of the user's accounts by name, or None."""
        return self.db.get_account_by_name(user_id, name)

    def list_accounts(self, user_id: str) -> list[AccountEntity]:
        """List the user's accounts, ordered by name."""
        return self.db.list_accounts(user_id)

    def rename_account(self, user_id: str, account_id: int, name: str) -> None:
        """Rename an account.

        Raises:
            ValidationError: If name is blank
            NotFoundError: If the user has no such account
            ConflictError: If another of the user's accounts has this name
        """
        name = name.strip()
        if not name:
            raise ValidationError("Account name is required")
        if self.db.get_account(user_id, account_id) is None:
            raise NotFoundError(account_not_found(account_id))

        self.db.update_account(user_id=user_id, account_id=account_id, name=name)

    def delete_account(self, user_id: str, account_id: int) -> None:
        """Delete an account together with its transactions.

        Raises:
            NotFoundError: If the user has no such account
        """
        if not self.delete_accounts(user_id, [account_id]):
            raise NotFoundError(account_not_found(account_id))

    def delete_accounts(self, user_id: str, account_ids: list[int]) -> list[int]:
        """Delete several accounts at once.

        IDs that do not belong to the user are ignored.

        Returns:
            IDs of the deleted accounts
        """
        deleted = self.db.delete_accounts(user_id, list(account_ids))
        logger.info("deleted accounts ids=%s user=%s", deleted, user_id)
        return deleted
