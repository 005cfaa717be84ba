"""Settings for the outbound HTTP client: retries, throttling and response caching."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final, Literal

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping

CacheBackend = Literal["sqlite", "memory"]

RETRYABLE_STATUS_CODES: Final = frozenset({429, 500, 502, 503, 504})
RETRYABLE_EXCEPTIONS: Final[tuple[type[httpx.HTTPError], ...]] = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    """Retry budget for idempotent reads; ``total=0`` sends each request once."""

    total: int = 3
    backoff_factor: float = 0.5
    max_backoff_wait: float = 10.0
    status_forcelist: frozenset[int] = RETRYABLE_STATUS_CODES
    retry_on_exceptions: tuple[type[httpx.HTTPError], ...] = RETRYABLE_EXCEPTIONS


@dataclass(slots=True, frozen=True)
class RateLimit:
    max_calls: int
    per_seconds: float


@dataclass(slots=True, frozen=True)
class CacheConfig:
    backend: CacheBackend = "memory"
    sqlite_path: str | None = None
    ttl_seconds: float | None = None


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    """Everything needed to build one ``ResilientClient``; ``cache=None`` disables caching."""

    name: str
    base_url: str | None = None
    timeout_seconds: float = 30.0
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    ratelimit: RateLimit | None = None
    cache: CacheConfig | None = None
    default_headers: Mapping[str, str] | None = None
