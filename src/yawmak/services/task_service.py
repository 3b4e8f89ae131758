"""Task service - Business logic for task operations."""

from __future__ import annotations

from datetime import date

from pydantic import ValidationError

from yawmak.errors import InvalidInputError
from yawmak.models import Task, TaskCreate, TaskFilters, TaskUpdate
from yawmak.repositories import TaskRepository
from yawmak.services.search import find_tasks


def _first_error(error: ValidationError) -> str:
    return error.errors()[0]["msg"].removeprefix("Value error, ")


class TaskService:
    """Service for task business logic.

    This service encapsulates business rules and orchestrates task operations
    using the task repository.
    """

    def __init__(self, task_repository: TaskRepository):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
        """
        self.repository = task_repository

    def list_tasks(self, *, done: bool | None = None) -> list[Task]:
        """List tasks.

        Args:
            done: Only completed (True) or only open (False) tasks; None for all

        Returns:
            Tasks in id order
        """
        return self.repository.list_all(TaskFilters(done=done))

    def get_task(self, task_id: int) -> Task:
        return self.repository.get(task_id)

    def add_task(
        self,
        name: str,
        *,
        category: str | None = None,
        tags: list[str] | None = None,
        due_date: date | None = None,
        priority: int = 0,
    ) -> Task:
        """Create a new task.

        Args:
            name: Task description
            category: Category name, created if missing
            tags: Tag names; comma-separated values are split
            due_date: Optional due date
            priority: Priority

        Returns:
            Created Task
        """
        try:
            task_data = TaskCreate(
                name=name,
                category=category,
                tags=tags or [],
                due_date=due_date,
                priority=priority,
            )
        except ValidationError as e:
            raise InvalidInputError(_first_error(e)) from e
        return self.repository.add(task_data)

    def update_task(
        self,
        task_id: int,
        *,
        name: str | None = None,
        category: str | None = None,
        tags: list[str] | None = None,
        due_date: date | None = None,
        priority: int | None = None,
        undone: bool = False,
    ) -> Task:
        """Update the provided fields of a task; other fields stay unchanged."""
        try:
            updates = TaskUpdate(
                name=name,
                category=category,
                tags=tags,
                due_date=due_date,
                priority=priority,
                undone=undone,
            )
        except ValidationError as e:
            raise InvalidInputError(_first_error(e)) from e
        if updates.is_empty():
            return self.repository.get(task_id)
        return self.repository.update(task_id, updates)

    def complete_task(self, task_id: int) -> Task:
        return self.repository.complete(task_id)

    def reopen_task(self, task_id: int) -> Task:
        return self.repository.reopen(task_id)

    def search_tasks(self, query: str) -> list[Task]:
        """Find tasks whose name, category or tags contain ``query``.

        All tasks are loaded and filtered in memory; matching is case-sensitive.
        """
        return find_tasks(self.repository.list_all(TaskFilters()), query)
