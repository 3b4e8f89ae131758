"""Repository interfaces (ports) for yawmak storage backends."""

from .repository import DataRepository, NameRepository, TaskRepository

__all__ = [
    "TaskRepository",
    "NameRepository",
    "DataRepository",
]
