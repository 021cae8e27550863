"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the reporting and service code
never sees ORM objects.
"""

from pocketbook.domain import entities as domain
from pocketbook.database.models import (
    Account as ORMAccount,
    Category as ORMCategory,
    Transaction as ORMTransaction,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        user_id=orm_account.user_id,
        created_at=orm_account.created_at,
        plaid_id=orm_account.plaid_id,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        user_id=orm_category.user_id,
        created_at=orm_category.created_at,
        plaid_id=orm_category.plaid_id,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        account_id=orm_transaction.account_id,
        category_id=orm_transaction.category_id,
        date=orm_transaction.date,
        amount=orm_transaction.amount,
        payee=orm_transaction.payee,
        notes=orm_transaction.notes,
        created_at=orm_transaction.created_at,
    )
