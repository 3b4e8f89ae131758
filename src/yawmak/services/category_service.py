"""Category service - Business logic for category operations."""

from __future__ import annotations

from yawmak.repositories import NameRepository


class CategoryService:
    """Service for category operations."""

    def __init__(self, category_repository: NameRepository):
        self.repository = category_repository

    def list_categories(self) -> list[str]:
        return self.repository.list_all()

    def add_category(self, name: str) -> int:
        """Create a category.

        Raises:
            AlreadyExistsError: If a category with this name exists
        """
        return self.repository.create(name)

    def delete_category(self, name: str) -> None:
        """Delete a category that no task uses.

        Raises:
            NotFoundError: If there is no such category
            InUseError: If a task still has this category
        """
        self.repository.delete(name)
