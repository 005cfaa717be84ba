"""Public interface for the OpenStreetMap adapter."""

from __future__ import annotations

from .client import OsmApiFetcher
from .schema import OsmNodePayload, OsmPayloadError, parse_node_xml

__all__ = [
    "OsmApiFetcher",
    "OsmNodePayload",
    "OsmPayloadError",
    "parse_node_xml",
]
