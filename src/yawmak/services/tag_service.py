"""Tag service - Business logic for tag operations."""

from __future__ import annotations

from yawmak.repositories import NameRepository


class TagService:
    """Service for tag operations."""

    def __init__(self, tag_repository: NameRepository):
        self.repository = tag_repository

    def list_tags(self) -> list[str]:
        return self.repository.list_all()

    def add_tag(self, name: str) -> int:
        return self.repository.create(name)

    def delete_tag(self, name: str) -> None:
        self.repository.delete(name)
