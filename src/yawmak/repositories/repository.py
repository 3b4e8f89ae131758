"""Repository abstraction layer for yawmak.

This module defines the abstract base classes (interfaces) for the stores the
services talk to. The only adapter is DuckDB, but services and commands depend
on these interfaces so tests can substitute fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from yawmak.models import (
    DataFormat,
    ImportResult,
    ImportStrategy,
    Task,
    TaskCreate,
    TaskFilters,
    TaskUpdate,
)


class TaskRepository(ABC):
    """Abstract base class for task persistence operations."""

    @abstractmethod
    def list_all(self, filters: TaskFilters) -> list[Task]:
        """List tasks, optionally filtered by done status.

        Args:
            filters: TaskFilters object specifying filter criteria

        Returns:
            Tasks in storage (id) order
        """
        raise NotImplementedError(
            "TaskRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    def get(self, task_id: int) -> Task:
        """Get a task by id.

        Raises:
            NotFoundError: If no task has this id
        """
        raise NotImplementedError("TaskRepository.get() must be implemented by adapter")

    @abstractmethod
    def add(self, task_data: TaskCreate) -> Task:
        """Create a task, attaching its category and tags."""
        raise NotImplementedError("TaskRepository.add() must be implemented by adapter")

    @abstractmethod
    def update(self, task_id: int, updates: TaskUpdate) -> Task:
        """Replace the provided fields of a task."""
        raise NotImplementedError(
            "TaskRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    def complete(self, task_id: int) -> Task:
        """Mark a task done with today's completion date."""
        raise NotImplementedError(
            "TaskRepository.complete() must be implemented by adapter"
        )

    @abstractmethod
    def reopen(self, task_id: int) -> Task:
        """Mark a task not done and clear its completion date."""
        raise NotImplementedError(
            "TaskRepository.reopen() must be implemented by adapter"
        )


class NameRepository(ABC):
    """Abstract base class for uniquely named entities (categories, tags)."""

    @abstractmethod
    def list_all(self) -> list[str]:
        """List all names, sorted."""
        raise NotImplementedError

    @abstractmethod
    def create(self, name: str) -> int:
        """Create an entry and return its id.

        Raises:
            AlreadyExistsError: If the name is taken
        """
        raise NotImplementedError

    @abstractmethod
    def ensure(self, name: str) -> int:
        """Return the id for ``name``, creating the entry when missing."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, name: str) -> None:
        """Delete an entry.

        Raises:
            NotFoundError: If the name does not exist
            InUseError: If a task still references it
        """
        raise NotImplementedError


class DataRepository(ABC):
    """Abstract base class for bulk import and export."""

    @abstractmethod
    def import_file(
        self, fmt: DataFormat, path: str | Path, strategy: ImportStrategy
    ) -> ImportResult:
        """Load tasks from a file using the given conflict strategy."""
        raise NotImplementedError

    @abstractmethod
    def export_file(self, fmt: DataFormat, path: str | Path) -> int:
        """Write all tasks to a file and return the number of rows written."""
        raise NotImplementedError
