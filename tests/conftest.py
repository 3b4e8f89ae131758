"""Shared test fixtures and configuration.

Keeps tests away from the real per-user config, data and log directories.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import duckdb
import pytest

from yawmak.adapters.duckdb.connection import DatabaseConnection
from yawmak.adapters.duckdb.schema import create_schema
from yawmak.adapters.duckdb.task_repository import DuckDBTaskRepository


def _reset_connection_singleton() -> None:
    DatabaseConnection.close_connection()
    DatabaseConnection._instance = None
    DatabaseConnection._connection = None
    DatabaseConnection._db_path = None


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point logging and config at *tmp_path* and reset process-wide state."""
    import yawmak.utils.logger as logger_module
    from yawmak.services.config_service import get_config_service

    monkeypatch.delenv("YAWMAK_DB", raising=False)
    logger_module._logger = None
    get_config_service.cache_clear()
    _reset_connection_singleton()

    with (
        patch("yawmak.utils.logger.user_log_dir", return_value=str(tmp_path / "log")),
        patch(
            "yawmak.services.config_service.user_config_dir",
            return_value=str(tmp_path / "config"),
        ),
        patch(
            "yawmak.services.config_service.user_data_dir",
            return_value=str(tmp_path / "data"),
        ),
    ):
        yield

    _reset_connection_singleton()
    get_config_service.cache_clear()
    app_logger = logging.getLogger("yawmak")
    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)
    logger_module._logger = None


# ---------------------------------------------------------------------------
# Databases
# ---------------------------------------------------------------------------


@pytest.fixture
def db_path(tmp_path):
    """Path of a not yet created database file."""
    return str(tmp_path / "todos.duckdb")


@pytest.fixture
def conn():
    """Fresh in-memory DuckDB connection with the schema in place."""
    connection = duckdb.connect(":memory:")
    create_schema(connection)
    yield connection
    connection.close()


@pytest.fixture
def task_repo(conn) -> DuckDBTaskRepository:
    return DuckDBTaskRepository(connection=conn)
