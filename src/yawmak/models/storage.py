"""Storage context: the set of repositories a command works with.

Created once per invocation from the resolved database path and handed to
the services. Repositories share the process-wide connection.
"""

from __future__ import annotations

from pathlib import Path

from yawmak.repositories import DataRepository, NameRepository, TaskRepository


class StorageContext:
    """Lazily built repositories for one database file."""

    def __init__(self, db_path: str | Path):
        """
        Args:
            db_path: Path to the DuckDB database file (or ``":memory:"``)
        """
        self.db_path = str(db_path)
        self._task_repository: TaskRepository | None = None
        self._category_repository: NameRepository | None = None
        self._tag_repository: NameRepository | None = None
        self._data_repository: DataRepository | None = None

    @property
    def task_repository(self) -> TaskRepository:
        if self._task_repository is None:
            from yawmak.adapters.duckdb import DuckDBTaskRepository

            self._task_repository = DuckDBTaskRepository(self.db_path)
        return self._task_repository

    @property
    def category_repository(self) -> NameRepository:
        if self._category_repository is None:
            from yawmak.adapters.duckdb import DuckDBCategoryRepository

            self._category_repository = DuckDBCategoryRepository(self.db_path)
        return self._category_repository

    @property
    def tag_repository(self) -> NameRepository:
        if self._tag_repository is None:
            from yawmak.adapters.duckdb import DuckDBTagRepository

            self._tag_repository = DuckDBTagRepository(self.db_path)
        return self._tag_repository

    @property
    def data_repository(self) -> DataRepository:
        if self._data_repository is None:
            from yawmak.adapters.duckdb import DuckDBDataRepository

            self._data_repository = DuckDBDataRepository(self.db_path)
        return self._data_repository
