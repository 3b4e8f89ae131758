"""In-memory task search."""

from __future__ import annotations

from collections.abc import Iterable

from yawmak.models import Task


def matches(task: Task, query: str) -> bool:
    """Case-sensitive substring test against name, category and tags."""
    if query in task.name:
        return True
    if task.category is not None and query in task.category:
        return True
    return any(query in tag for tag in task.tags)


def find_tasks(tasks: Iterable[Task], query: str) -> list[Task]:
    """Return the tasks matching ``query``, keeping their order."""
    return [task for task in tasks if matches(task, query)]
