"""Configuration service for yawmak.

Single source of truth for configuration. It handles:

- Loading and saving config.json from the per-user config directory
- Resolving the database path (``--db`` / ``YAWMAK_DB`` override, config
  file, per-user data directory)
- Building the StorageContext used by the commands
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir
from pydantic import ValidationError

from yawmak.adapters.duckdb.connection import DB_FILE_NAME
from yawmak.errors import ErrorKind, YawmakError
from yawmak.models.config_models import AppConfig
from yawmak.models.storage import StorageContext

logger = logging.getLogger(__name__)

APP_NAME = "yawmak"


class ConfigService:
    """Service for loading and saving the application configuration."""

    def __init__(self):
        """Initialize the config service."""
        self.config_dir = Path(user_config_dir(APP_NAME))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir(APP_NAME))

        self._config: AppConfig | None = None
        self._db_override: str | None = None
        self._storage_context: StorageContext | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from config.json, falling back to defaults.

        Raises:
            YawmakError: If the file exists but is not a valid configuration
        """
        try:
            with open(self.config_path, encoding="utf-8") as f:
                config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            logger.debug("no config file at %s, using defaults", self.config_path)
            return AppConfig()
        except ValidationError as e:
            raise YawmakError(
                f"Invalid configuration in {self.config_path}: {e}",
                ErrorKind.INVALID_INPUT,
            ) from e
        except OSError as e:
            raise YawmakError(
                f"Cannot read configuration {self.config_path}: {e}", ErrorKind.IO
            ) from e
        return config

    def save_config(self) -> None:
        """Save the current configuration to config.json."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except OSError as e:
            raise YawmakError(f"Failed to save config: {e}", ErrorKind.IO) from e

    def set_db_override(self, db_path: str | None) -> None:
        """Use ``db_path`` instead of the configured database for this process."""
        self._db_override = db_path
        self._storage_context = None

    def get_db_path(self) -> str:
        """Resolve the database path.

        Order: explicit override, ``database.path`` from config, default
        file in the per-user data directory.
        """
        if self._db_override:
            return self._db_override
        if self.config.database.path:
            return str(Path(self.config.database.path).expanduser())
        return str(self.data_dir / DB_FILE_NAME)

    def get_storage_context(self) -> StorageContext:
        """Get the StorageContext for the resolved database path."""
        if self._storage_context is None:
            db_path = self.get_db_path()
            logger.debug("using database %s", db_path)
            self._storage_context = StorageContext(db_path)
        return self._storage_context


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get the process-wide ConfigService."""
    return ConfigService()


def get_storage_context() -> StorageContext:
    """Shortcut used by the commands."""
    return get_config_service().get_storage_context()
