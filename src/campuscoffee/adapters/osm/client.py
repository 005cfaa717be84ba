"""HTTP client for the OpenStreetMap API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from campuscoffee.adapters.http_resilience import ResilientClient
from campuscoffee.config.osm import OSM_XML_MEDIA_TYPE, OsmConfig, get_osm_config
from campuscoffee.domain.errors import OsmApiError, OsmNodeNotFoundError
from campuscoffee.domain.model import OsmNode

from .schema import OsmNodePayload, OsmPayloadError, parse_node_xml

if TYPE_CHECKING:
    from collections.abc import Callable

    from campuscoffee.config.http_resilience import ResilienceConfig
    from campuscoffee.domain.ports.fetching import OsmNodeFetcher

log = getLogger(__name__)

_PREVIEW_CHARS = 500


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class OsmApiFetcher:
    """Fetch single nodes from the OSM API and classify every failure.

    404 and other 4xx answers, empty bodies, payloads without a ``node`` and
    unparsable XML raise ``OsmNodeNotFoundError``. 5xx answers and transport
    failures (timeouts, refused connections, DNS) raise ``OsmApiError``.
    """

    config: OsmConfig = field(default_factory=get_osm_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def __call__(self, node_id: int) -> OsmNode:
        return asyncio.run(self.fetch_node_async(node_id))

    async def fetch_node_async(self, node_id: int) -> OsmNode:
        log.info("Fetching OSM node %s from OpenStreetMap API", node_id)
        response = await self._request_node(node_id)
        content = self._check_response(node_id, response)
        payload = self._parse_payload(node_id, content)

        if payload.id != node_id:
            log.warning("Node ID mismatch: expected %s, got %s", node_id, payload.id)

        log.debug("Parsed OSM node %s with %s tags", node_id, len(payload.tags))
        return _to_domain(node_id, payload)

    async def _request_node(self, node_id: int) -> httpx.Response:
        url = f"{self.config.base_url}/{node_id}"
        try:
            async with self.client_factory(self.config.resilience) as client:
                return await client.get(
                    url,
                    headers={"Accept": OSM_XML_MEDIA_TYPE},
                    follow_redirects=True,
                )
        except httpx.TimeoutException as exc:
            log.error("Timeout fetching OSM node %s: %s", node_id, exc)  # noqa: TRY400
            raise OsmApiError(node_id, f"Timeout: {exc}") from exc
        except httpx.HTTPError as exc:
            log.error("Network error fetching OSM node %s: %s", node_id, exc)  # noqa: TRY400
            raise OsmApiError(node_id, f"Network error: {exc}") from exc
        except Exception as exc:
            log.exception("Unexpected error fetching OSM node %s", node_id)
            raise OsmApiError(node_id, f"Unexpected error: {exc}") from exc

    def _check_response(self, node_id: int, response: httpx.Response) -> bytes:
        status = response.status_code
        if response.is_server_error:
            log.error("HTTP server error fetching OSM node %s: status=%s", node_id, status)
            raise OsmApiError(node_id, f"OSM API returned {status}")
        if status == httpx.codes.NOT_FOUND:
            log.warning("OSM node %s not found (404)", node_id)
            raise OsmNodeNotFoundError(node_id)
        if status != httpx.codes.OK or not response.content.strip():
            log.error("Unexpected response from OSM API for node %s: status=%s", node_id, status)
            raise OsmNodeNotFoundError(node_id)

        content = response.content
        log.info(
            "Successfully fetched OSM XML for node %s (length: %s bytes)", node_id, len(content)
        )
        log.debug(
            "OSM XML content (first %s chars): %s",
            _PREVIEW_CHARS,
            response.text[:_PREVIEW_CHARS],
        )
        return content

    def _parse_payload(self, node_id: int, content: bytes) -> OsmNodePayload:
        try:
            payload = parse_node_xml(content)
        except OsmPayloadError as exc:
            log.error("Error parsing OSM XML for node %s: %s", node_id, exc)  # noqa: TRY400
            raise OsmNodeNotFoundError(node_id) from exc
        if payload is None:
            log.error("No node element found in OSM XML for node %s", node_id)
            raise OsmNodeNotFoundError(node_id)
        return payload


def _to_domain(node_id: int, payload: OsmNodePayload) -> OsmNode:
    return OsmNode(
        node_id=node_id,
        tags=payload.tags,
        latitude=payload.lat,
        longitude=payload.lon,
    )


if TYPE_CHECKING:
    _fetcher_check: OsmNodeFetcher = OsmApiFetcher()
