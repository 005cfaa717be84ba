"""Parse OpenStreetMap API 0.6 XML payloads into pydantic models.

Only the parts of the format the importer needs are modelled: one ``node`` element
with ``id``, optional ``lat``/``lon`` and child ``tag`` elements carrying ``k``/``v``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from logging import getLogger
from typing import cast

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, fromstring
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

log = getLogger(__name__)


class OsmPayloadError(ValueError):
    """Raised when an OSM payload cannot be turned into a node."""


class OsmBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


def _parse_coordinate(value: object) -> float | None:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


class OsmNodePayload(OsmBaseModel):
    id: int = Field(gt=0)
    lat: float | None = None
    lon: float | None = None
    tags: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _normalize_coordinates(cls, value: object) -> object:
        if not isinstance(value, Mapping):
            return value
        data = dict(cast(Mapping[str, object], value))
        raw_lat, raw_lon = data.get("lat"), data.get("lon")
        if raw_lat is None or raw_lon is None:
            data["lat"] = data["lon"] = None
            return data
        lat, lon = _parse_coordinate(raw_lat), _parse_coordinate(raw_lon)
        if lat is None or lon is None:
            log.warning(
                "Invalid lat/lon values for node %s: lat=%s, lon=%s",
                data.get("id"),
                raw_lat,
                raw_lon,
            )
            lat = lon = None
        data["lat"], data["lon"] = lat, lon
        return data


def parse_node_xml(content: str | bytes) -> OsmNodePayload | None:
    """Return the first ``node`` in ``content``, or ``None`` when there is none.

    DOCTYPE declarations, entity declarations and external references are rejected.
    Raises ``OsmPayloadError`` for malformed or unsafe XML and for a node without a
    usable id.
    """

    try:
        root = fromstring(content, forbid_dtd=True, forbid_entities=True, forbid_external=True)
    except (ParseError, DefusedXmlException) as exc:
        raise OsmPayloadError(f"Unparsable OSM XML: {exc}") from exc

    node = root if root.tag == "node" else root.find(".//node")
    if node is None:
        log.debug("No node element found, root element: %s", root.tag)
        return None

    tags: dict[str, str] = {}
    for tag in node.iter("tag"):
        key, value = tag.get("k", ""), tag.get("v", "")
        if key and value:
            tags[key] = value

    try:
        return OsmNodePayload.model_validate(
            {"id": node.get("id"), "lat": node.get("lat"), "lon": node.get("lon"), "tags": tags}
        )
    except ValidationError as exc:
        raise OsmPayloadError(f"Invalid OSM node element: {exc}") from exc
