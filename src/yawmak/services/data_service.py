"""Data service - bulk import and export of tasks."""

from __future__ import annotations

from pathlib import Path

from yawmak.errors import InvalidInputError
from yawmak.models import DataFormat, ImportResult, ImportStrategy
from yawmak.repositories import DataRepository


def parse_format(value: str) -> DataFormat:
    """Parse a format token (json, csv, parquet, xlsx)."""
    try:
        return DataFormat(value.lower())
    except ValueError as e:
        supported = ", ".join(f.value for f in DataFormat)
        raise InvalidInputError(
            f"Unsupported format '{value}'. Please use {supported}."
        ) from e


def parse_strategy(value: str) -> ImportStrategy:
    """Parse an import strategy token (skip, remove, upsert)."""
    try:
        return ImportStrategy(value.lower())
    except ValueError as e:
        supported = ", ".join(s.value for s in ImportStrategy)
        raise InvalidInputError(
            f"Unsupported strategy '{value}'. Please use {supported}."
        ) from e


class DataService:
    """Service for import/export operations."""

    def __init__(self, data_repository: DataRepository):
        self.repository = data_repository

    def import_data(
        self, fmt: str | DataFormat, path: str | Path, strategy: str | ImportStrategy
    ) -> ImportResult:
        """Import tasks from a file.

        Args:
            fmt: File format token
            path: Input file
            strategy: skip (keep existing ids), remove (load under new ids) or
                upsert (replace existing ids)
        """
        return self.repository.import_file(
            parse_format(fmt),
            path,
            parse_strategy(strategy),
        )

    def export_data(self, fmt: str | DataFormat, path: str | Path) -> int:
        """Export all tasks to a file and return the number of rows written."""
        return self.repository.export_file(
            parse_format(fmt), path
        )
