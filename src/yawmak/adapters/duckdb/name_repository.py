"""DuckDB implementation of NameRepository for categories and tags."""

from __future__ import annotations

import logging
from pathlib import Path

import duckdb

from yawmak.adapters.duckdb.connection import get_connection
from yawmak.errors import (
    AlreadyExistsError,
    InUseError,
    InvalidInputError,
    NotFoundError,
    translate_errors,
)
from yawmak.repositories import NameRepository

logger = logging.getLogger(__name__)


class DuckDBNameRepository(NameRepository):
    """Uniquely named rows plus the junction table that links them to tasks.

    Subclasses fix the table names; they are never taken from user input.
    """

    table: str
    link_table: str
    link_column: str
    label: str

    def __init__(
        self,
        db_path: str | Path | None = None,
        connection: duckdb.DuckDBPyConnection | None = None,
    ):
        """Initialize the repository.

        Args:
            db_path: Optional database file path. If None, uses default location.
            connection: Already open connection (takes precedence over db_path)
        """
        self.db_path = db_path
        self._connection = connection

    @property
    def connection(self) -> duckdb.DuckDBPyConnection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    def get_id(self, name: str) -> int | None:
        row = self.connection.execute(
            f"SELECT id FROM {self.table} WHERE name = ?", [name]
        ).fetchone()
        return row[0] if row else None

    def list_all(self) -> list[str]:
        with translate_errors(f"Failed to list {self.table}"):
            rows = self.connection.execute(
                f"SELECT name FROM {self.table} ORDER BY name"
            ).fetchall()
        return [row[0] for row in rows]

    def create(self, name: str) -> int:
        name = name.strip()
        if not name:
            raise InvalidInputError(f"{self.label} name must not be empty")
        with translate_errors(f"Failed to add {self.label}"):
            if self.get_id(name) is not None:
                raise AlreadyExistsError(f"A {self.label} named '{name}' already exists")
            try:
                row = self.connection.execute(
                    f"""INSERT INTO {self.table} (id, name)
                        SELECT COALESCE(MAX(id), 0) + 1, ? FROM {self.table}
                        RETURNING id""",
                    [name],
                ).fetchone()
            except duckdb.ConstraintException as e:
                raise AlreadyExistsError(
                    f"A {self.label} named '{name}' already exists"
                ) from e
        logger.info("created %s %r (id=%s)", self.label, name, row[0])
        return row[0]

    def ensure(self, name: str) -> int:
        name = name.strip()
        existing = self.get_id(name)
        if existing is not None:
            return existing
        return self.create(name)

    def delete(self, name: str) -> None:
        with translate_errors(f"Failed to delete {self.label}"):
            entry_id = self.get_id(name)
            if entry_id is None:
                raise NotFoundError(f"No {self.label} named '{name}'")

            (usage,) = self.connection.execute(
                f"SELECT count(*) FROM {self.link_table} WHERE {self.link_column} = ?",
                [entry_id],
            ).fetchone()
            if usage:
                raise InUseError(
                    f"Cannot delete {self.label} '{name}': "
                    f"it is still used by {usage} task(s)"
                )

            self.connection.execute(f"DELETE FROM {self.table} WHERE id = ?", [entry_id])
        logger.info("deleted %s %r", self.label, name)

    def attach(self, todo_id: int, names: list[str]) -> None:
        """Replace the entries linked to a task (creating missing ones)."""
        self.connection.execute(
            f"DELETE FROM {self.link_table} WHERE todo_id = ?", [todo_id]
        )
        for name in names:
            entry_id = self.ensure(name)
            self.connection.execute(
                f"INSERT INTO {self.link_table} (todo_id, {self.link_column}) VALUES (?, ?)",
                [todo_id, entry_id],
            )


class DuckDBCategoryRepository(DuckDBNameRepository):
    """Categories; the application attaches at most one per task."""

    table = "categories"
    link_table = "todo_categories"
    link_column = "category_id"
    label = "category"


class DuckDBTagRepository(DuckDBNameRepository):
    """Tags; any number per task."""

    table = "tags"
    link_table = "todo_tags"
    link_column = "tag_id"
    label = "tag"
