"""Task and import/export data models."""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator


def split_tags(values: list[str] | str | None) -> list[str]:
    """Split comma-separated tag values into a sorted, de-duplicated list.

    ``["a,b", " c "]`` and ``"a, b, c"`` both become ``["a", "b", "c"]``.
    """
    if values is None:
        return []
    if isinstance(values, str):
        values = [values]
    tags = {part.strip() for value in values for part in value.split(",")}
    tags.discard("")
    return sorted(tags)


class Task(BaseModel):
    """Task model representing a stored todo item.

    Attributes:
        id: Identifier assigned by the store
        name: Task description
        category: Optional category name
        tags: Tag names, sorted
        done: Completion status
        due_date: Optional due date
        completion_date: Date the task was marked done; set iff ``done``
        priority: Priority, higher means more important
    """

    id: int
    name: str
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    done: bool = False
    due_date: date | None = None
    completion_date: date | None = None
    priority: int = 0


class TaskCreate(BaseModel):
    """Model for creating a new task.

    Attributes:
        name: Task description (required, non-empty)
        category: Optional category name, created if missing
        tags: Tag names, created if missing; comma-separated values are split
        due_date: Optional due date
        priority: Priority
    """

    name: str
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    due_date: date | None = None
    priority: int = 0

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("task name must not be empty")
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value):
        return split_tags(value)


class TaskUpdate(BaseModel):
    """Model for updating an existing task.

    All fields are optional - only provided fields will be updated.
    ``tags`` replaces the whole tag set when given and non-empty.

    Attributes:
        name: New task description
        category: New category (replaces the current one)
        tags: New tag set
        due_date: New due date
        priority: New priority
        undone: Clear the done flag and the completion date
    """

    name: str | None = None
    category: str | None = None
    tags: list[str] | None = None
    due_date: date | None = None
    priority: int | None = None
    undone: bool = False

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("task name must not be empty")
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value):
        if value is None:
            return None
        return split_tags(value) or None

    def is_empty(self) -> bool:
        return not self.undone and not self.model_dump(
            exclude_none=True, exclude={"undone"}
        )


class TaskFilters(BaseModel):
    """Filters for querying tasks.

    Attributes:
        done: ``True`` for completed tasks only, ``False`` for open tasks only,
            ``None`` for all tasks
    """

    done: bool | None = None


class DataFormat(str, Enum):
    """File formats supported by import and export."""

    JSON = "json"
    CSV = "csv"
    PARQUET = "parquet"
    XLSX = "xlsx"


class ImportStrategy(str, Enum):
    """Conflict resolution policy for bulk import."""

    SKIP = "skip"
    REMOVE = "remove"
    UPSERT = "upsert"


class ImportResult(BaseModel):
    """Counts reported after an import.

    Attributes:
        rows_read: Rows found in the source file
        tasks_written: Tasks inserted or replaced
    """

    rows_read: int = 0
    tasks_written: int = 0
