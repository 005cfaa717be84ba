"""Locations of the SQLite database and the HTTP cache."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import env_str

DATA_DIR_ENV: Final = "CAMPUSCOFFEE_DATA_DIR"
DATABASE_URI_ENV: Final = "DATABASE_URI"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    database_filename: str = "campuscoffee.db"
    http_cache_filename: str = "osm_http_cache.db"

    def _file(self, filename: str, *, ensure: bool) -> Path:
        directory = self.data_dir.expanduser().resolve()
        if ensure:
            directory.mkdir(parents=True, exist_ok=True)
        return directory / filename

    def database_path(self, *, ensure: bool = True) -> Path:
        return self._file(self.database_filename, ensure=ensure)

    def http_cache_path(self, *, ensure: bool = True) -> Path:
        return self._file(self.http_cache_filename, ensure=ensure)

    def database_uri(self) -> str:
        return f"sqlite+pysqlite:///{self.database_path()}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def _platform_data_home() -> Path:
    if os.name == "nt":
        return Path(env_str("LOCALAPPDATA", str(Path.home() / "AppData" / "Local")))
    return Path(env_str("XDG_DATA_HOME", str(Path.home() / ".local" / "share")))


def get_storage_config() -> StorageConfig:
    """Data directory from ``CAMPUSCOFFEE_DATA_DIR``, else ``<data home>/campuscoffee``."""

    data_dir = env_str(DATA_DIR_ENV, "")
    return StorageConfig(
        data_dir=Path(data_dir) if data_dir else _platform_data_home() / "campuscoffee"
    )


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    uri = env_str(DATABASE_URI_ENV, "")
    if uri:
        return DatabaseConfig(uri=uri)
    return DatabaseConfig(uri=(storage or get_storage_config()).database_uri())
