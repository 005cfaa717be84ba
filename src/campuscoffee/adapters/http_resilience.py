"""Async HTTP client wrapping httpx with retries, throttling and an optional cache."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any, Final

import httpx
from aiolimiter import AsyncLimiter
from hishel import AsyncSqliteStorage
from hishel.httpx import AsyncCacheClient
from httpx_retries import Retry, RetryTransport

from campuscoffee.config.http_resilience import (
    CacheConfig,
    RateLimit,
    ResilienceConfig,
    RetryPolicy,
)
from campuscoffee.config.storage import get_storage_config

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._types import HeaderTypes, URLTypes

__all__ = [
    "CacheConfig",
    "RateLimit",
    "ResilienceConfig",
    "ResilientClient",
    "RetryPolicy",
    "build_cache_storage",
    "build_retry",
]

log = getLogger(__name__)

READ_METHODS: Final = ("GET", "HEAD")


def build_retry(policy: RetryPolicy) -> Retry:
    return Retry(
        total=policy.total,
        backoff_factor=policy.backoff_factor,
        max_backoff_wait=policy.max_backoff_wait,
        allowed_methods=READ_METHODS,
        status_forcelist=tuple(sorted(policy.status_forcelist)),
        retry_on_exceptions=policy.retry_on_exceptions,
    )


def build_cache_storage(config: CacheConfig | None) -> AsyncSqliteStorage | None:
    """Return hishel storage for ``config``; ``None`` means responses are not cached."""

    if config is None:
        return None
    if config.backend == "memory":
        database_path = ":memory:"
    elif config.backend == "sqlite":
        database_path = config.sqlite_path or str(get_storage_config().http_cache_path())
    else:
        raise ValueError(f"Unsupported cache backend: {config.backend}")
    return AsyncSqliteStorage(database_path=database_path, default_ttl=config.ttl_seconds)


def _build_limiter(ratelimit: RateLimit | None) -> AsyncLimiter | None:
    if ratelimit is None:
        return None
    return AsyncLimiter(ratelimit.max_calls, ratelimit.per_seconds)


class ResilientClient:
    """Read-only async client. Requests wait for the rate limiter, then retry transiently.

    Use as an async context manager so the underlying connection pool is closed.
    ``transport`` replaces the network transport underneath the retry layer.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._limiter = _build_limiter(config.ratelimit)

        options: dict[str, Any] = {
            "timeout": config.timeout_seconds,
            "transport": RetryTransport(transport=transport, retry=build_retry(config.retry)),
            "headers": dict(config.default_headers or {}),
        }
        if config.base_url is not None:
            options["base_url"] = config.base_url

        storage = build_cache_storage(config.cache)
        if storage is None:
            self._client: httpx.AsyncClient = httpx.AsyncClient(**options)
        else:
            log.debug("HTTP cache enabled for client %s", config.name)
            self._client = AsyncCacheClient(storage=storage, **options)

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(
        self,
        url: URLTypes,
        *,
        headers: HeaderTypes | None = None,
        follow_redirects: bool = False,
    ) -> httpx.Response:
        if self._limiter is None:
            return await self._client.get(url, headers=headers, follow_redirects=follow_redirects)
        async with self._limiter:
            return await self._client.get(url, headers=headers, follow_redirects=follow_redirects)
