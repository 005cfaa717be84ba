from __future__ import annotations

from typing import TYPE_CHECKING

from campuscoffee.config import StorageConfig, get_database_config, get_storage_config

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


def test_storage_respects_data_dir_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CAMPUSCOFFEE_DATA_DIR", str(tmp_path))

    config = get_storage_config()

    assert config.database_path(ensure=False).parent == tmp_path.resolve()


def test_storage_defaults_to_xdg_data_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("CAMPUSCOFFEE_DATA_DIR", raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    config = get_storage_config()

    assert config.database_path(ensure=False).parent == (tmp_path / "campuscoffee").resolve()


def test_database_path_creates_directory(tmp_path: Path) -> None:
    config = StorageConfig(data_dir=tmp_path / "nested")

    path = config.database_path()

    assert path.parent.exists()
    assert path.name == "campuscoffee.db"


def test_database_uri_prefers_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite+pysqlite:///:memory:")

    assert get_database_config().uri == "sqlite+pysqlite:///:memory:"


def test_database_uri_falls_back_to_data_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)

    config = get_database_config(storage=StorageConfig(data_dir=tmp_path))

    assert config.uri == f"sqlite+pysqlite:///{tmp_path.resolve() / 'campuscoffee.db'}"
