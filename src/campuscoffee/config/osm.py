"""OpenStreetMap API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from campuscoffee import __version__

from .env import env_float, env_str
from .errors import ConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .storage import StorageConfig, get_storage_config

DEFAULT_OSM_API_BASE_URL = "https://www.openstreetmap.org/api/0.6/node"
DEFAULT_OSM_TIMEOUT_SECONDS = 10.0
DEFAULT_OSM_CACHE_TTL_SECONDS = 3600.0
OSM_XML_MEDIA_TYPE = "application/xml"


@dataclass(frozen=True, slots=True)
class OsmConfig:
    resilience: ResilienceConfig

    @property
    def base_url(self) -> str:
        return self.resilience.base_url or DEFAULT_OSM_API_BASE_URL


def _cache_config(mode: str, storage: StorageConfig | None) -> CacheConfig | None:
    normalized = mode.lower()
    if normalized == "off":
        return None
    ttl = env_float("OSM_HTTP_CACHE_TTL_SECONDS", DEFAULT_OSM_CACHE_TTL_SECONDS)
    if normalized == "memory":
        return CacheConfig(backend="memory", ttl_seconds=ttl)
    if normalized == "sqlite":
        cache_path = (storage or get_storage_config()).http_cache_path()
        return CacheConfig(backend="sqlite", sqlite_path=str(cache_path), ttl_seconds=ttl)
    raise ConfigurationError(f"OSM_HTTP_CACHE must be one of off, memory, sqlite; got {mode!r}")


def get_osm_config(*, storage: StorageConfig | None = None) -> OsmConfig:
    base_url = env_str("OSM_API_BASE_URL", DEFAULT_OSM_API_BASE_URL).rstrip("/")
    user_agent = env_str("OSM_USER_AGENT", f"campuscoffee/{__version__}")

    resilience = ResilienceConfig(
        name="osm",
        base_url=base_url,
        timeout_seconds=env_float("OSM_TIMEOUT_SECONDS", DEFAULT_OSM_TIMEOUT_SECONDS),
        ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
        retry=RetryPolicy(total=3),
        cache=_cache_config(env_str("OSM_HTTP_CACHE", "off"), storage),
        default_headers={"User-Agent": user_agent, "Accept": OSM_XML_MEDIA_TYPE},
    )

    return OsmConfig(resilience=resilience)
