"""DuckDB implementation of DataRepository (bulk import and export).

File parsing and writing is done by DuckDB's readers (``read_json_auto``,
``read_csv_auto``, ``read_parquet``, ``read_xlsx``) and ``COPY ... TO``.
Imports go through two temporary tables:

- ``import_rows``: the file as read, plus a row number
- ``import_batch``: rows normalised to the ``todos`` columns, with the id each
  row will be stored under and its category/tags

Tasks are then written according to the strategy and the category/tag
links of the written rows are replaced.
"""

from __future__ import annotations

import logging
from pathlib import Path

import duckdb

from yawmak.adapters.duckdb.connection import get_connection, load_extension
from yawmak.adapters.duckdb.name_repository import (
    DuckDBCategoryRepository,
    DuckDBTagRepository,
)
from yawmak.adapters.duckdb.utils import sql_literal
from yawmak.errors import ErrorKind, InvalidInputError, YawmakError, translate_errors
from yawmak.models import DataFormat, ImportResult, ImportStrategy, split_tags
from yawmak.repositories import DataRepository

logger = logging.getLogger(__name__)

READERS = {
    DataFormat.JSON: "read_json_auto",
    DataFormat.CSV: "read_csv_auto",
    DataFormat.PARQUET: "read_parquet",
    DataFormat.XLSX: "read_xlsx",
}

COPY_OPTIONS = {
    DataFormat.JSON: "FORMAT json",
    DataFormat.CSV: "FORMAT csv, HEADER true",
    DataFormat.PARQUET: "FORMAT parquet",
    DataFormat.XLSX: "FORMAT xlsx, HEADER true",
}

# Extensions that are not bundled with DuckDB
EXTENSIONS = {DataFormat.XLSX: "excel"}

EXPORT_QUERY = """
    SELECT
        id,
        task,
        done,
        {due_date} AS due_date,
        {completion_date} AS completion_date,
        priority,
        category,
        list_aggregate(tags, 'string_agg', ',') AS tags
    FROM task_details
    ORDER BY id
"""

TODO_COLUMNS = "id, task, done, due_date, completion_date, priority"

INSERT_VERBS = {
    ImportStrategy.SKIP: "INSERT OR IGNORE INTO",
    ImportStrategy.UPSERT: "INSERT OR REPLACE INTO",
    ImportStrategy.REMOVE: "INSERT INTO",
}


def _quote_ident(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


class DuckDBDataRepository(DataRepository):
    """Import and export of the todos table through DuckDB's file readers."""

    def __init__(
        self,
        db_path: str | Path | None = None,
        connection: duckdb.DuckDBPyConnection | None = None,
    ):
        self.db_path = db_path
        self._connection = connection

    @property
    def connection(self) -> duckdb.DuckDBPyConnection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    def _prepare_format(self, fmt: DataFormat) -> None:
        extension = EXTENSIONS.get(fmt)
        if extension:
            load_extension(self.connection, extension)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export_file(self, fmt: DataFormat, path: str | Path) -> int:
        """Write all tasks, with category and comma-joined tags, to ``path``."""
        fmt = DataFormat(fmt)
        self._prepare_format(fmt)

        # Spreadsheet cells carry dates as ISO text so they read back as dates
        if fmt is DataFormat.XLSX:
            query = EXPORT_QUERY.format(
                due_date="CAST(due_date AS VARCHAR)",
                completion_date="CAST(completion_date AS VARCHAR)",
            )
        else:
            query = EXPORT_QUERY.format(
                due_date="due_date", completion_date="completion_date"
            )

        with translate_errors(f"Failed to export {fmt.value}"):
            self.connection.execute(
                f"COPY ({query}) TO {sql_literal(path)} ({COPY_OPTIONS[fmt]})"
            )
            (count,) = self.connection.execute("SELECT count(*) FROM todos").fetchone()

        logger.info("exported %s task(s) to %s (%s)", count, path, fmt.value)
        return count

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    def import_file(
        self, fmt: DataFormat, path: str | Path, strategy: ImportStrategy
    ) -> ImportResult:
        """Load tasks from ``path`` using the given conflict strategy.

        Raises:
            YawmakError: IO kind when the file is missing, INVALID_INPUT when
                required columns are absent
        """
        fmt = DataFormat(fmt)
        strategy = ImportStrategy(strategy)

        if not Path(path).exists():
            raise YawmakError(f"File not found: {path}", ErrorKind.IO)

        self._prepare_format(fmt)

        try:
            with translate_errors(f"Failed to import {fmt.value}"):
                return self._import(fmt, path, strategy)
        finally:
            self.connection.execute("DROP TABLE IF EXISTS import_batch")
            self.connection.execute("DROP TABLE IF EXISTS import_rows")

    def _import(
        self, fmt: DataFormat, path: str | Path, strategy: ImportStrategy
    ) -> ImportResult:
        conn = self.connection
        conn.execute(
            f"""CREATE OR REPLACE TEMP TABLE import_rows AS
                SELECT *, row_number() OVER () AS import_row
                FROM {READERS[fmt]}({sql_literal(path)})"""
        )
        (rows_read,) = conn.execute("SELECT count(*) FROM import_rows").fetchone()
        # An empty JSON export has no columns to inspect
        if not rows_read:
            logger.info("nothing to import from %s", path)
            return ImportResult()

        column_types = {
            row[0]: row[1] for row in conn.execute("DESCRIBE import_rows").fetchall()
        }

        select_list, where, qualify = self._batch_projection(column_types, strategy)
        (base_id,) = conn.execute("SELECT COALESCE(MAX(id), 0) FROM todos").fetchone()
        conn.execute(
            f"""CREATE OR REPLACE TEMP TABLE import_batch AS
                SELECT {select_list} FROM import_rows WHERE {where} {qualify}""",
            [base_id] if strategy is ImportStrategy.REMOVE else [],
        )

        (to_write,) = conn.execute("SELECT count(*) FROM import_batch").fetchone()

        conn.execute(
            f"""{INSERT_VERBS[strategy]} todos ({TODO_COLUMNS})
                SELECT target_id, task, done, due_date, completion_date, priority
                FROM import_batch"""
        )

        self._link_names(
            has_category="category" in column_types,
            has_tags="tags" in column_types,
        )

        logger.info(
            "imported %s of %s row(s) from %s (%s, %s)",
            to_write,
            rows_read,
            path,
            fmt.value,
            strategy.value,
        )
        return ImportResult(rows_read=rows_read, tasks_written=to_write)

    @staticmethod
    def _batch_projection(
        column_types: dict[str, str], strategy: ImportStrategy
    ) -> tuple[str, str, str]:
        """Build the SELECT list, WHERE and QUALIFY clauses that normalise import rows.

        Rows sharing an id collapse to the last one in the file. Completion
        dates are kept only for done rows; done rows without one complete today.

        Column names are checked against the file's own columns and quoted;
        no user-supplied text is placed in the statement.
        """

        def cast(name: str, sql_type: str, default: str) -> str:
            if name in column_types:
                return f"COALESCE(CAST({_quote_ident(name)} AS {sql_type}), {default})"
            return default

        if "task" in column_types:
            name_column = "task"
        elif "name" in column_types:
            name_column = "name"
        else:
            raise InvalidInputError("Import file has no 'task' column")

        where = [f"{_quote_ident(name_column)} IS NOT NULL"]
        qualify = ""
        if strategy is ImportStrategy.REMOVE:
            target_id = "CAST(? + import_row AS INTEGER)"
        else:
            if "id" not in column_types:
                raise InvalidInputError(
                    f"The '{strategy.value}' strategy needs an 'id' column; "
                    "use 'remove' to load rows under new ids"
                )
            target_id = 'CAST("id" AS INTEGER)'
            where.append('"id" IS NOT NULL')
            if strategy is ImportStrategy.SKIP:
                where.append(f"{target_id} NOT IN (SELECT id FROM todos)")
            qualify = (
                f"QUALIFY row_number() OVER (PARTITION BY {target_id} "
                "ORDER BY import_row DESC) = 1"
            )

        if "category" in column_types:
            category = 'CAST("category" AS VARCHAR)'
        else:
            category = "NULL"

        done = cast("done", "BOOLEAN", "false")
        if "completion_date" in column_types:
            completed_on = 'COALESCE(CAST("completion_date" AS DATE), CURRENT_DATE)'
        else:
            completed_on = "CURRENT_DATE"

        if "tags" not in column_types:
            tags = "NULL"
        elif column_types["tags"].endswith("[]"):
            tags = "list_aggregate(\"tags\", 'string_agg', ',')"
        else:
            tags = 'CAST("tags" AS VARCHAR)'

        select_list = ", ".join(
            [
                f"{target_id} AS target_id",
                f"CAST({_quote_ident(name_column)} AS VARCHAR) AS task",
                f"{done} AS done",
                f"{cast('due_date', 'DATE', 'NULL')} AS due_date",
                f"CASE WHEN {done} THEN {completed_on} END AS completion_date",
                f"{cast('priority', 'INTEGER', '0')} AS priority",
                f"{category} AS category",
                f"{tags} AS tags",
            ]
        )
        return select_list, " AND ".join(where), qualify

    def _link_names(self, has_category: bool, has_tags: bool) -> None:
        """Replace category and tag links of the imported rows."""
        if not (has_category or has_tags):
            return

        categories = DuckDBCategoryRepository(connection=self.connection)
        tags = DuckDBTagRepository(connection=self.connection)

        rows = self.connection.execute(
            "SELECT target_id, category, tags FROM import_batch"
        ).fetchall()
        for target_id, category, tag_text in rows:
            if has_category:
                category = (category or "").strip()
                categories.attach(target_id, [category] if category else [])
            if has_tags:
                tags.attach(target_id, split_tags(tag_text))
