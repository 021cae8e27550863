"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist for the current user."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class UnauthorizedError(DomainError):
    """No authenticated user was supplied."""


def unauthorized() -> str:
    """Return message for a request without a user identity."""
    return "Unauthorized"


def account_not_found(account_id: int | str) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def category_not_found(category_id: int | str) -> str:
    """Return message for missing category."""
    return f"Category {category_id} not found"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def duplicate_account_name(name: str) -> str:
    """Return message for duplicate account name."""
    return f"Account with name '{name}' already exists"


def duplicate_category_name(name: str) -> str:
    """Return message for duplicate category name."""
    return f"Category with name '{name}' already exists"
