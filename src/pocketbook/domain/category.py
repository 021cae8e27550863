"""Category domain service."""

from typing import Optional
from pocketbook.database.base import Database
from pocketbook.domain.entities import Category as CategoryEntity
from pocketbook.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    category_not_found,
    duplicate_category_name,
)
from pocketbook.logging_setup import get_logger

logger = get_logger(__name__)


class CategoryService:
    """Service for managing a user's categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_category(self, user_id: str, name: str, plaid_id: Optional[str] = None) -> int:
        """Create a category.

        Returns:
            Category ID

        Raises:
            ValidationError: If name is blank
            ConflictError: If the user already has a category with this name
        """
        name = name.strip()
        if not name:
            raise ValidationError("Category name is required")
        if self.db.get_category_by_name(user_id, name) is not None:
            raise ConflictError(duplicate_category_name(name))

        category_id = self.db.create_category(user_id=user_id, name=name, plaid_id=plaid_id)
        logger.info("created category id=%s user=%s", category_id, user_id)
        return category_id

    def get_category(self, user_id: str, category_id: int) -> Optional[CategoryEntity]:
        return self.db.get_category(user_id, category_id)

    def get_category_by_name(self, user_id: str, name: str) -> Optional[CategoryEntity]:
        return self.db.get_category_by_name(user_id, name)

    def list_categories(self, user_id: str) -> list[CategoryEntity]:
        return self.db.list_categories(user_id)

    def resolve_category(self, user_id: str, category: str | int) -> int:
        """Resolve one of the user's categories by name or ID.

        Raises:
            NotFoundError: If the user has no such category
        """
        try:
            category_id = int(category)
        except (ValueError, TypeError):
            category_id = None

        if category_id is not None and self.db.get_category(user_id, category_id) is not None:
            return category_id

        cat = self.db.get_category_by_name(user_id, str(category))
        if cat is None:
            raise NotFoundError(f"Category '{category}' not found")
        return cat.id

    def rename_category(self, user_id: str, category_id: int, name: str) -> None:
        """Rename a category.

        Raises:
            ValidationError: If name is blank
            NotFoundError: If the user has no such category
            ConflictError: If another of the user's categories has this name
        """
        name = name.strip()
        if not name:
            raise ValidationError("Category name is required")
        if self.db.get_category(user_id, category_id) is None:
            raise NotFoundError(category_not_found(category_id))

        self.db.update_category(user_id=user_id, category_id=category_id, name=name)

    def delete_category(self, user_id: str, category_id: int) -> None:
        """Delete a category; its transactions become uncategorized.

        Raises:
            NotFoundError: If the user has no such category
        """
        if not self.delete_categories(user_id, [category_id]):
            raise NotFoundError(category_not_found(category_id))

    def delete_categories(self, user_id: str, category_ids: list[int]) -> list[int]:
        """Delete several categories at once, ignoring IDs the user does not own."""
        deleted = self.db.delete_categories(user_id, list(category_ids))
        logger.info("deleted categories ids=%s user=%s", deleted, user_id)
        return deleted
