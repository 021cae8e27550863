"""Database layer for pocketbook application."""

from pocketbook.database.base import Database, ReportingQueries
from pocketbook.database.factories import create_sqlite_database

__all__ = ["Database", "ReportingQueries", "create_sqlite_database"]
