from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from campuscoffee.config import ConfigurationError, StorageConfig, get_osm_config
from campuscoffee.config.osm import DEFAULT_OSM_API_BASE_URL, OSM_XML_MEDIA_TYPE

if TYPE_CHECKING:
    from pathlib import Path

_OSM_ENV = (
    "OSM_API_BASE_URL",
    "OSM_TIMEOUT_SECONDS",
    "OSM_USER_AGENT",
    "OSM_HTTP_CACHE",
    "OSM_HTTP_CACHE_TTL_SECONDS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _OSM_ENV:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = get_osm_config()

    assert config.base_url == DEFAULT_OSM_API_BASE_URL
    assert config.resilience.timeout_seconds == 10.0
    assert config.resilience.cache is None
    assert config.resilience.ratelimit is not None
    assert config.resilience.retry.total == 3
    headers = config.resilience.default_headers
    assert headers is not None
    assert headers["Accept"] == OSM_XML_MEDIA_TYPE
    assert headers["User-Agent"].startswith("campuscoffee/")


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OSM_API_BASE_URL", "https://osm.example/api/0.6/node/")
    monkeypatch.setenv("OSM_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("OSM_USER_AGENT", "campus-tests")

    config = get_osm_config()

    assert config.base_url == "https://osm.example/api/0.6/node"
    assert config.resilience.timeout_seconds == 2.5
    assert config.resilience.default_headers is not None
    assert config.resilience.default_headers["User-Agent"] == "campus-tests"


def test_blank_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OSM_API_BASE_URL", "   ")
    monkeypatch.setenv("OSM_TIMEOUT_SECONDS", "")

    config = get_osm_config()

    assert config.base_url == DEFAULT_OSM_API_BASE_URL
    assert config.resilience.timeout_seconds == 10.0


@pytest.mark.parametrize("raw", ["soon", "0", "-1", "inf", "nan"])
def test_invalid_timeout_is_rejected(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("OSM_TIMEOUT_SECONDS", raw)

    with pytest.raises(ConfigurationError, match="OSM_TIMEOUT_SECONDS"):
        get_osm_config()


def test_memory_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OSM_HTTP_CACHE", "Memory")

    cache = get_osm_config().resilience.cache

    assert cache is not None
    assert cache.backend == "memory"
    assert cache.ttl_seconds == 3600.0


def test_cache_ttl_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OSM_HTTP_CACHE", "memory")
    monkeypatch.setenv("OSM_HTTP_CACHE_TTL_SECONDS", "60")

    cache = get_osm_config().resilience.cache

    assert cache is not None
    assert cache.ttl_seconds == 60.0


def test_sqlite_cache_lives_in_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("OSM_HTTP_CACHE", "sqlite")

    cache = get_osm_config(storage=StorageConfig(data_dir=tmp_path)).resilience.cache

    assert cache is not None
    assert cache.backend == "sqlite"
    assert cache.sqlite_path == str(tmp_path.resolve() / "osm_http_cache.db")


def test_unknown_cache_mode_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OSM_HTTP_CACHE", "redis")

    with pytest.raises(ConfigurationError, match="OSM_HTTP_CACHE"):
        get_osm_config()
