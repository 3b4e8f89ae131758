"""DuckDB implementation of TaskRepository."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any

import duckdb

from yawmak.adapters.duckdb.connection import get_connection
from yawmak.adapters.duckdb.name_repository import (
    DuckDBCategoryRepository,
    DuckDBTagRepository,
)
from yawmak.adapters.duckdb.utils import build_update_clause, fetch_dicts
from yawmak.errors import NotFoundError, translate_errors
from yawmak.models import Task, TaskCreate, TaskFilters, TaskUpdate
from yawmak.repositories import TaskRepository

logger = logging.getLogger(__name__)

SELECT_TASKS = """
    SELECT id, task, done, due_date, completion_date, priority, category, tags
    FROM task_details
"""


def _row_to_task(row: dict[str, Any]) -> Task:
    return Task(
        id=row["id"],
        name=row["task"],
        category=row["category"],
        tags=row["tags"] or [],
        done=row["done"],
        due_date=row["due_date"],
        completion_date=row["completion_date"],
        priority=row["priority"],
    )


class DuckDBTaskRepository(TaskRepository):
    """DuckDB implementation of task repository."""

    def __init__(
        self,
        db_path: str | Path | None = None,
        connection: duckdb.DuckDBPyConnection | None = None,
    ):
        """Initialize DuckDB task repository.

        Args:
            db_path: Optional database file path. If None, uses default location.
            connection: Already open connection (takes precedence over db_path)
        """
        self.db_path = db_path
        self._connection = connection
        self._categories: DuckDBCategoryRepository | None = None
        self._tags: DuckDBTagRepository | None = None

    @property
    def connection(self) -> duckdb.DuckDBPyConnection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    @property
    def categories(self) -> DuckDBCategoryRepository:
        if self._categories is None:
            self._categories = DuckDBCategoryRepository(connection=self.connection)
        return self._categories

    @property
    def tags(self) -> DuckDBTagRepository:
        if self._tags is None:
            self._tags = DuckDBTagRepository(connection=self.connection)
        return self._tags

    def list_all(self, filters: TaskFilters) -> list[Task]:
        """List tasks, optionally filtered by done status."""
        query = SELECT_TASKS
        params: list[Any] = []

        if filters.done is not None:
            query += " WHERE done = ?"
            params.append(filters.done)

        query += " ORDER BY id"

        with translate_errors("Failed to list tasks"):
            cursor = self.connection.execute(query, params)
            rows = fetch_dicts(cursor)

        return [_row_to_task(row) for row in rows]

    def get(self, task_id: int) -> Task:
        """Get a task by id."""
        with translate_errors("Failed to load task"):
            cursor = self.connection.execute(SELECT_TASKS + " WHERE id = ?", [task_id])
            rows = fetch_dicts(cursor)

        if not rows:
            raise NotFoundError(f"Task not found: {task_id}")

        return _row_to_task(rows[0])

    def _require(self, task_id: int) -> None:
        row = self.connection.execute(
            "SELECT 1 FROM todos WHERE id = ?", [task_id]
        ).fetchone()
        if row is None:
            raise NotFoundError(f"Task not found: {task_id}")

    def add(self, task_data: TaskCreate) -> Task:
        """Create a new task with its category and tags."""
        with translate_errors("Failed to add task"):
            (task_id,) = self.connection.execute(
                """INSERT INTO todos (id, task, due_date, priority)
                   SELECT COALESCE(MAX(id), 0) + 1, ?, ?, ? FROM todos
                   RETURNING id""",
                [task_data.name, task_data.due_date, task_data.priority],
            ).fetchone()

            if task_data.category and task_data.category.strip():
                self.categories.attach(task_id, [task_data.category])

            if task_data.tags:
                self.tags.attach(task_id, task_data.tags)

        logger.info("added task %s", task_id)
        return self.get(task_id)

    def update(self, task_id: int, updates: TaskUpdate) -> Task:
        """Replace the provided fields of a task."""
        columns: dict[str, Any] = {}
        if updates.name is not None:
            columns["task"] = updates.name
        if updates.due_date is not None:
            columns["due_date"] = updates.due_date
        if updates.priority is not None:
            columns["priority"] = updates.priority

        with translate_errors("Failed to update task"):
            self._require(task_id)

            if columns:
                set_clause, params = build_update_clause(columns)
                self.connection.execute(
                    f"UPDATE todos SET {set_clause} WHERE id = ?", [*params, task_id]
                )

            if updates.undone:
                self._set_done(task_id, False)

            if updates.category is not None and updates.category.strip():
                self.categories.attach(task_id, [updates.category])

            if updates.tags:
                self.tags.attach(task_id, updates.tags)

        logger.info("updated task %s", task_id)
        return self.get(task_id)

    def complete(self, task_id: int) -> Task:
        """Mark a task as done, completed today."""
        with translate_errors("Failed to complete task"):
            self._require(task_id)
            self._set_done(task_id, True)
        logger.info("completed task %s", task_id)
        return self.get(task_id)

    def reopen(self, task_id: int) -> Task:
        """Mark a task as not done."""
        with translate_errors("Failed to reopen task"):
            self._require(task_id)
            self._set_done(task_id, False)
        logger.info("reopened task %s", task_id)
        return self.get(task_id)

    def _set_done(self, task_id: int, done: bool) -> None:
        # completion_date is set iff done
        completion_date = date.today() if done else None
        set_clause, params = build_update_clause(
            {"done": done, "completion_date": completion_date}
        )
        self.connection.execute(
            f"UPDATE todos SET {set_clause} WHERE id = ?", [*params, task_id]
        )
