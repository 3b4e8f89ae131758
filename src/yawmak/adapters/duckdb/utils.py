"""Utility functions for the DuckDB adapter."""

from __future__ import annotations

from pathlib import Path
from typing import Any


def sql_literal(value: str | Path) -> str:
    """Quote a value as a SQL string literal.

    Only used for file paths, which ``COPY`` and the table readers take as
    literals. Task data always goes through bound parameters.

    Args:
        value: Text to quote

    Returns:
        Literal with embedded single quotes doubled, e.g. ``'it''s.csv'``
    """
    text = str(value)
    if "\x00" in text:
        raise ValueError("NUL character in SQL literal")
    return "'" + text.replace("'", "''") + "'"


def row_to_dict(columns: list[str], row: tuple | None) -> dict[str, Any]:
    """Convert a DuckDB result row to a dictionary.

    Args:
        columns: Column names from ``cursor.description``
        row: Row tuple

    Returns:
        Dictionary with column names as keys
    """
    if row is None:
        return {}
    return dict(zip(columns, row, strict=True))


def fetch_dicts(cursor) -> list[dict[str, Any]]:
    """Fetch all rows of an executed statement as dictionaries."""
    columns = [col[0] for col in cursor.description]
    return [row_to_dict(columns, row) for row in cursor.fetchall()]


def build_update_clause(updates: dict[str, Any]) -> tuple[str, list[Any]]:
    """Build SQL UPDATE SET clause from updates dictionary.

    Column names come from the caller's fixed mapping; values become
    parameters. ``None`` values are written as ``NULL``.

    Args:
        updates: Dictionary of column names to new values

    Returns:
        Tuple of (SET clause string, parameters list)
    """
    set_parts = []
    params = []

    for key, value in updates.items():
        if value is None:
            set_parts.append(f"{key} = NULL")
        else:
            set_parts.append(f"{key} = ?")
            params.append(value)

    set_clause = ", ".join(set_parts)
    return set_clause, params
