"""Configuration models.

These models describe ``config.json``. Every section has defaults so a missing
or partial file still yields a complete configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    """Database configuration."""

    path: str | None = Field(
        default=None, description="DuckDB file path (None = per-user data dir)"
    )


class TasksConfig(BaseModel):
    """Defaults applied when adding tasks."""

    default_category: str | None = Field(default="General")
    default_priority: int = Field(default=0)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["table", "json", "yaml"] = Field(default="table")


class AppConfig(BaseModel):
    """Main configuration."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    tasks: TasksConfig = Field(default_factory=TasksConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
