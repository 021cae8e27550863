"""Utility for resolving account names to IDs."""

from pocketbook.domain.account import AccountService
from pocketbook.domain.errors import NotFoundError, account_not_found


def resolve_account(account_service: AccountService, user_id: str, account: str | int) -> int:
    """Resolve one of the user's accounts by name or ID.

    Args:
        account_service: AccountService instance
        user_id: Owner of the account
        account: Account name (str) or ID (int or string representation of int)

    Returns:
        Account ID

    Raises:
        NotFoundError: If the user has no such account
    """
    if isinstance(account, int):
        if account_service.get_account(user_id, account) is None:
            raise NotFoundError(account_not_found(account))
        return account

    # Numeric strings are treated as IDs first, then as names
    try:
        account_id = int(account)
    except (ValueError, TypeError):
        account_id = None

    if account_id is not None and account_service.get_account(user_id, account_id) is not None:
        return account_id

    acc = account_service.get_account_by_name(user_id, account)
    if acc is not None:
        return acc.id

    raise NotFoundError(f"Account '{account}' not found")
