"""Adapters module - repository implementations for storage backends.

- duckdb: local embedded DuckDB database
"""

from .duckdb import (
    DuckDBCategoryRepository,
    DuckDBDataRepository,
    DuckDBTagRepository,
    DuckDBTaskRepository,
)

__all__ = [
    "DuckDBTaskRepository",
    "DuckDBCategoryRepository",
    "DuckDBTagRepository",
    "DuckDBDataRepository",
]
