"""Database connection management for the local DuckDB store.

This module provides a singleton connection manager: one connection per
process, opened on first use, schema created if absent, closed at exit.
"""

from __future__ import annotations

import atexit
import logging
from pathlib import Path

import duckdb
from platformdirs import user_data_dir

from yawmak.adapters.duckdb.schema import create_schema
from yawmak.errors import ErrorKind, YawmakError

logger = logging.getLogger(__name__)

MEMORY = ":memory:"
DB_FILE_NAME = "yawmak.duckdb"


def default_db_path() -> Path:
    """Per-user location of the database file."""
    return Path(user_data_dir("yawmak")) / DB_FILE_NAME


def load_extension(connection: duckdb.DuckDBPyConnection, name: str) -> None:
    """Load a DuckDB extension, installing it first if needed.

    Raises:
        YawmakError: If the extension can neither be loaded nor installed
    """
    try:
        connection.load_extension(name)
        return
    except duckdb.Error:
        logger.debug("extension %s not installed, installing", name)
    try:
        connection.install_extension(name)
        connection.load_extension(name)
    except duckdb.Error as e:
        raise YawmakError(
            f"DuckDB extension '{name}' is not available: {e}", ErrorKind.DATABASE
        ) from e


class DatabaseConnection:
    """Singleton connection manager for the DuckDB store.

    Provides:
    - Single connection per process (connection reuse)
    - Automatic directory creation
    - Schema creation on open
    - Graceful cleanup on exit
    """

    _instance: DatabaseConnection | None = None
    _connection: duckdb.DuckDBPyConnection | None = None
    _db_path: str | None = None
    _atexit_registered = False

    def __new__(cls) -> DatabaseConnection:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_connection(
        cls, db_path: str | Path | None = None
    ) -> duckdb.DuckDBPyConnection:
        """Get or create the database connection.

        Args:
            db_path: Path to database file or ``":memory:"``. If None, uses
                the default per-user location.

        Returns:
            Open connection with the schema in place
        """
        instance = cls()
        path = str(db_path) if db_path is not None else str(default_db_path())

        if instance._connection is not None and instance._db_path == path:
            return instance._connection

        # Close existing connection if path changed
        if instance._connection is not None:
            instance._connection.close()
            instance._connection = None

        if path != MEMORY:
            try:
                Path(path).parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise YawmakError(
                    f"Cannot create database directory: {e}", ErrorKind.IO
                ) from e

        logger.debug("opening database %s", path)
        try:
            connection = duckdb.connect(path)
            connection.execute("SET enable_progress_bar = false")
            create_schema(connection)
        except duckdb.IOException as e:
            raise YawmakError(f"Cannot open database {path}: {e}", ErrorKind.IO) from e
        except duckdb.Error as e:
            raise YawmakError(f"Cannot initialize database: {e}") from e

        instance._connection = connection
        instance._db_path = path

        if not cls._atexit_registered:
            atexit.register(cls.close_connection)
            cls._atexit_registered = True

        return connection

    @classmethod
    def close_connection(cls) -> None:
        """Close the database connection, if any."""
        instance = cls()
        if instance._connection is not None:
            try:
                instance._connection.close()
            except duckdb.Error:
                logger.warning("error while closing database", exc_info=True)
            finally:
                instance._connection = None
                instance._db_path = None

    @classmethod
    def get_db_path(cls) -> str | None:
        """Get current database path."""
        instance = cls()
        return instance._db_path


def get_connection(db_path: str | Path | None = None) -> duckdb.DuckDBPyConnection:
    """Helper function to get the database connection.

    Args:
        db_path: Optional path to database file

    Returns:
        Configured DuckDB connection
    """
    return DatabaseConnection.get_connection(db_path)
