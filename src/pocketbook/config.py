"""Environment-driven settings for pocketbook."""

import os
from functools import lru_cache
from typing import Optional


class Settings:
    def __init__(
        self,
        database_path: Optional[str],
        user_id: Optional[str],
        log_level: str,
    ) -> None:
        self.database_path = database_path
        self.user_id = user_id
        self.log_level = log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Read settings from the environment once per process.

    Environment variables:
        POCKETBOOK_DB_PATH: SQLite database file
        POCKETBOOK_USER_ID: identity of the authenticated user
        POCKETBOOK_LOG_LEVEL: logging level name (default WARNING)
    """
    return Settings(
        database_path=os.getenv("POCKETBOOK_DB_PATH") or None,
        user_id=os.getenv("POCKETBOOK_USER_ID") or None,
        log_level=os.getenv("POCKETBOOK_LOG_LEVEL", "WARNING"),
    )
