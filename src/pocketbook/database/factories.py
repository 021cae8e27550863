"""Database factory functions for creating database instances."""

from pathlib import Path
from typing import Optional

from pocketbook.config import get_settings
from pocketbook.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, uses the configured
            POCKETBOOK_DB_PATH, then defaults to ~/.pocketbook/pocketbook.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = get_settings().database_path

    if database_path is None:
        # Default to ~/.pocketbook/pocketbook.db
        db_dir = Path.home() / ".pocketbook"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "pocketbook.db")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)
