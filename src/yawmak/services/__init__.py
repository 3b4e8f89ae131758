"""Services layer - business logic between commands and repositories."""

from .category_service import CategoryService
from .data_service import DataService
from .tag_service import TagService
from .task_service import TaskService

__all__ = [
    "TaskService",
    "CategoryService",
    "TagService",
    "DataService",
]
