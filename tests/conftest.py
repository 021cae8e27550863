"""Shared pytest fixtures for pocketbook tests."""

import tempfile
import os
from datetime import date
import pytest

from pocketbook.database.factories import create_sqlite_database
from pocketbook.domain.account import AccountService
from pocketbook.domain.category import CategoryService
from pocketbook.domain.transaction import TransactionService

USER_ID = "user_alice"
OTHER_USER_ID = "user_bob"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def sample_account(account_service):
    """Create a sample account for the main test user."""
    account_id = account_service.create_account(user_id=USER_ID, name="Wallet")
    return account_service.get_account(USER_ID, account_id)


@pytest.fixture
def sample_categories(category_service):
    """Create sample categories for the main test user, keyed by name."""
    names = ["Food", "Rent", "Utilities", "Clothing", "Health"]
    return {
        name: category_service.create_category(user_id=USER_ID, name=name)
        for name in names
    }


@pytest.fixture
def add_transaction(transaction_service, sample_account):
    """Return a helper that adds a transaction for the main test user."""

    def _add(amount, day, category_id=None, account_id=None, payee="Merchant"):
        return transaction_service.create_transaction(
            user_id=USER_ID,
            account_id=account_id if account_id is not None else sample_account.id,
            date=day,
            amount=amount,
            payee=payee,
            category_id=category_id,
        )

    return _add


@pytest.fixture
def other_user_account(account_service, category_service, transaction_service):
    """Create an account with activity for a second user."""
    account_id = account_service.create_account(user_id=OTHER_USER_ID, name="Wallet")
    category_id = category_service.create_category(user_id=OTHER_USER_ID, name="Food")
    transaction_service.create_transaction(
        user_id=OTHER_USER_ID,
        account_id=account_id,
        date=date(2024, 3, 10),
        amount=-999_000,
        payee="Elsewhere",
        category_id=category_id,
    )
    transaction_service.create_transaction(
        user_id=OTHER_USER_ID,
        account_id=account_id,
        date=date(2024, 3, 10),
        amount=888_000,
        payee="Employer",
    )
    return account_service.get_account(OTHER_USER_ID, account_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_args(temp_db):
    """Global CLI arguments pointing at the temporary database and test user."""
    return ["--db-path", temp_db.database_path, "--user", USER_ID]
