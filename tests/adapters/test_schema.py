"""Tests for the DuckDB schema."""

from __future__ import annotations

import duckdb
import pytest

from yawmak.adapters.duckdb.schema import TABLE_NAMES, create_schema


def _tables(conn) -> set[str]:
    return {
        row[0]
        for row in conn.execute(
            "SELECT table_name FROM information_schema.tables WHERE table_type = 'BASE TABLE'"
        ).fetchall()
    }


def test_creates_all_tables(conn):
    assert set(TABLE_NAMES) <= _tables(conn)


def test_is_idempotent(conn):
    conn.execute("INSERT INTO todos (id, task) VALUES (1, 'keep me')")
    create_schema(conn)
    assert conn.execute("SELECT task FROM todos").fetchall() == [("keep me",)]


def test_todo_defaults(conn):
    conn.execute("INSERT INTO todos (id, task) VALUES (1, 'x')")
    row = conn.execute(
        "SELECT done, due_date, completion_date, priority FROM todos"
    ).fetchone()
    assert row == (False, None, None, 0)


def test_category_names_are_unique(conn):
    conn.execute("INSERT INTO categories VALUES (1, 'Work')")
    with pytest.raises(duckdb.ConstraintException):
        conn.execute("INSERT INTO categories VALUES (2, 'Work')")


def test_task_details_view_joins_names(conn):
    conn.execute("INSERT INTO todos (id, task) VALUES (1, 'x'), (2, 'y')")
    conn.execute("INSERT INTO categories VALUES (1, 'Work')")
    conn.execute("INSERT INTO tags VALUES (1, 'zeta'), (2, 'alpha')")
    conn.execute("INSERT INTO todo_categories VALUES (1, 1)")
    conn.execute("INSERT INTO todo_tags VALUES (1, 1), (1, 2)")

    rows = conn.execute(
        "SELECT id, category, tags FROM task_details ORDER BY id"
    ).fetchall()
    assert rows == [(1, "Work", ["alpha", "zeta"]), (2, None, None)]
