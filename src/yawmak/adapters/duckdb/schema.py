"""Database schema definitions for the local DuckDB store.

Ids are assigned by the repositories (``max(id) + 1``) rather than by a
sequence, so rows imported with explicit ids never collide with later inserts.
"""

from __future__ import annotations

import duckdb

# Tasks table - main task entity
CREATE_TODOS_TABLE = """
CREATE TABLE IF NOT EXISTS todos (
    id INTEGER PRIMARY KEY,
    task VARCHAR NOT NULL,
    done BOOLEAN NOT NULL DEFAULT false,
    due_date DATE,
    completion_date DATE,
    priority INTEGER NOT NULL DEFAULT 0
)
"""

CREATE_CATEGORIES_TABLE = """
CREATE TABLE IF NOT EXISTS categories (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL UNIQUE
)
"""

CREATE_TAGS_TABLE = """
CREATE TABLE IF NOT EXISTS tags (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL UNIQUE
)
"""

# Junction tables. References are checked by the repositories.
CREATE_TODO_CATEGORIES_TABLE = """
CREATE TABLE IF NOT EXISTS todo_categories (
    todo_id INTEGER NOT NULL,
    category_id INTEGER NOT NULL
)
"""

CREATE_TODO_TAGS_TABLE = """
CREATE TABLE IF NOT EXISTS todo_tags (
    todo_id INTEGER NOT NULL,
    tag_id INTEGER NOT NULL
)
"""

# Tasks joined with their category and sorted tag names
CREATE_TASK_DETAILS_VIEW = """
CREATE OR REPLACE VIEW task_details AS
SELECT
    t.id,
    t.task,
    t.done,
    t.due_date,
    t.completion_date,
    t.priority,
    (
        SELECT min(c.name)
        FROM todo_categories tc
        JOIN categories c ON c.id = tc.category_id
        WHERE tc.todo_id = t.id
    ) AS category,
    (
        SELECT list(g.name ORDER BY g.name)
        FROM todo_tags tt
        JOIN tags g ON g.id = tt.tag_id
        WHERE tt.todo_id = t.id
    ) AS tags
FROM todos t
"""

SCHEMA_STATEMENTS = [
    CREATE_TODOS_TABLE,
    CREATE_CATEGORIES_TABLE,
    CREATE_TAGS_TABLE,
    CREATE_TODO_CATEGORIES_TABLE,
    CREATE_TODO_TAGS_TABLE,
    CREATE_TASK_DETAILS_VIEW,
]

TABLE_NAMES = ["todos", "categories", "tags", "todo_categories", "todo_tags"]


def create_schema(connection: duckdb.DuckDBPyConnection) -> None:
    """Create missing tables and (re)create the task_details view."""
    connection.execute("BEGIN TRANSACTION")
    try:
        for statement in SCHEMA_STATEMENTS:
            connection.execute(statement)
        connection.execute("COMMIT")
    except duckdb.Error:
        connection.execute("ROLLBACK")
        raise
