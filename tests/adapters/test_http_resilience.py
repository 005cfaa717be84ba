"""Resilient HTTP client wiring."""

from __future__ import annotations

import asyncio
from pathlib import Path  # noqa: TC003

import httpx
import pytest
from hishel.httpx import AsyncCacheClient

from campuscoffee.adapters.http_resilience import (
    CacheConfig,
    RateLimit,
    ResilienceConfig,
    ResilientClient,
    RetryPolicy,
    build_cache_storage,
    build_retry,
)


def test_build_retry_carries_policy_values() -> None:
    retry = build_retry(RetryPolicy(total=2, backoff_factor=0.1))

    assert retry.total == 2
    assert retry.backoff_factor == 0.1


def test_no_cache_config_means_no_storage() -> None:
    assert build_cache_storage(None) is None


def test_client_without_cache_uses_plain_httpx_client() -> None:
    client = ResilientClient(ResilienceConfig(name="plain"))

    assert type(client._client) is httpx.AsyncClient  # noqa: SLF001
    asyncio.run(client.aclose())


def test_client_with_memory_cache_uses_cache_client() -> None:
    client = ResilientClient(ResilienceConfig(name="cached", cache=CacheConfig(backend="memory")))

    assert isinstance(client._client, AsyncCacheClient)  # noqa: SLF001
    asyncio.run(client.aclose())


def test_client_with_sqlite_cache_uses_cache_client(tmp_path: Path) -> None:
    cache = CacheConfig(backend="sqlite", sqlite_path=str(tmp_path / "cache.db"), ttl_seconds=60)
    client = ResilientClient(ResilienceConfig(name="cached", cache=cache))

    assert isinstance(client._client, AsyncCacheClient)  # noqa: SLF001
    asyncio.run(client.aclose())


def test_unsupported_cache_backend_is_rejected() -> None:
    cache = CacheConfig(backend="redis")  # type: ignore[arg-type]

    with pytest.raises(ValueError, match="Unsupported cache backend"):
        ResilientClient(ResilienceConfig(name="broken", cache=cache))


def test_rate_limited_get_passes_headers_through() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="ok")

    config = ResilienceConfig(name="limited", ratelimit=RateLimit(max_calls=5, per_seconds=1.0))

    async def scenario() -> httpx.Response:
        async with ResilientClient(config, transport=httpx.MockTransport(handler)) as client:
            return await client.get(
                "https://example.test/resource", headers={"User-Agent": "campuscoffee-tests"}
            )

    response = asyncio.run(scenario())

    assert response.status_code == 200
    assert seen[0].headers["User-Agent"] == "campuscoffee-tests"


def test_retry_layer_wraps_given_transport() -> None:
    statuses = [503, 429, 200]
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(statuses.pop(0))

    retry = RetryPolicy(total=3, backoff_factor=0.0, max_backoff_wait=0.01)
    config = ResilienceConfig(name="retrying", retry=retry, timeout_seconds=7.0)

    async def scenario() -> httpx.Response:
        async with ResilientClient(config, transport=httpx.MockTransport(handler)) as client:
            return await client.get("https://example.test/resource")

    response = asyncio.run(scenario())

    assert response.status_code == 200
    assert len(seen) == 3
    assert seen[0].extensions["timeout"] == httpx.Timeout(7.0).as_dict()
