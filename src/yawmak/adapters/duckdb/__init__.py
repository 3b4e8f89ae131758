"""DuckDB adapter module - local embedded database storage."""

from yawmak.adapters.duckdb.connection import (
    DatabaseConnection,
    default_db_path,
    get_connection,
)
from yawmak.adapters.duckdb.data_repository import DuckDBDataRepository
from yawmak.adapters.duckdb.name_repository import (
    DuckDBCategoryRepository,
    DuckDBTagRepository,
)
from yawmak.adapters.duckdb.task_repository import DuckDBTaskRepository

__all__ = [
    "DatabaseConnection",
    "default_db_path",
    "get_connection",
    "DuckDBTaskRepository",
    "DuckDBCategoryRepository",
    "DuckDBTagRepository",
    "DuckDBDataRepository",
]
