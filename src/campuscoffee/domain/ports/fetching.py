"""Ports for fetching external domain data."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from campuscoffee.domain.model import OsmNode


@runtime_checkable
class OsmNodeFetcher(Protocol):
    """Callable port for retrieving a single OpenStreetMap node by id.

    Implementations raise ``OsmNodeNotFoundError`` when the id does not resolve to a
    usable record and ``OsmApiError`` when the upstream service is unavailable.
    """

    def __call__(self, node_id: int) -> OsmNode: ...


__all__ = ["OsmNodeFetcher"]
