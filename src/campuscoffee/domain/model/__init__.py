"""Public domain model surface."""

from __future__ import annotations

from campuscoffee.domain.model.enums import CampusType, PosType
from campuscoffee.domain.model.osm import (
    AMENITY_TAG,
    CITY_TAG,
    HOUSE_NUMBER_TAG,
    NAME_TAG,
    POSTCODE_TAG,
    STREET_TAG,
    OsmNode,
)
from campuscoffee.domain.model.pos import Pos

__all__ = [  # noqa: RUF022
    # entities
    "Pos",
    "OsmNode",
    # enums
    "CampusType",
    "PosType",
    # osm tag keys
    "AMENITY_TAG",
    "CITY_TAG",
    "HOUSE_NUMBER_TAG",
    "NAME_TAG",
    "POSTCODE_TAG",
    "STREET_TAG",
]
