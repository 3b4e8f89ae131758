"""yawmak domain models.

Pydantic models for tasks, import/export options and the
application configuration.
"""

from .config_models import AppConfig
from .core import (
    DataFormat,
    ImportResult,
    ImportStrategy,
    Task,
    TaskCreate,
    TaskFilters,
    TaskUpdate,
    split_tags,
)

__all__ = [
    # Task models
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "TaskFilters",
    "split_tags",
    # Import / export
    "DataFormat",
    "ImportStrategy",
    "ImportResult",
    # Config models
    "AppConfig",
]
