"""OpenStreetMap node as seen by the domain, before translation into a POS."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

NAME_TAG: Final = "name"
STREET_TAG: Final = "addr:street"
HOUSE_NUMBER_TAG: Final = "addr:housenumber"
POSTCODE_TAG: Final = "addr:postcode"
CITY_TAG: Final = "addr:city"
AMENITY_TAG: Final = "amenity"
DESCRIPTION_TAG: Final = "description"
NOTE_TAG: Final = "note"


def _freeze_tags(tags: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(tags))


@dataclass(frozen=True, slots=True)
class OsmNode:
    """An OpenStreetMap node: id, tag dictionary and optional coordinates.

    Coordinates are either both present or both absent.
    """

    node_id: int
    tags: Mapping[str, str] = field(default_factory=dict)
    latitude: float | None = None
    longitude: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", _freeze_tags(self.tags))
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be given together")

    def _tag(self, key: str) -> str | None:
        return self.tags.get(key)

    @property
    def name(self) -> str | None:
        return self._tag(NAME_TAG)

    @property
    def street(self) -> str | None:
        return self._tag(STREET_TAG)

    @property
    def house_number(self) -> str | None:
        return self._tag(HOUSE_NUMBER_TAG)

    @property
    def postal_code(self) -> str | None:
        return self._tag(POSTCODE_TAG)

    @property
    def city(self) -> str | None:
        return self._tag(CITY_TAG)

    @property
    def amenity(self) -> str | None:
        return self._tag(AMENITY_TAG)

    @property
    def description(self) -> str | None:
        """``description`` tag if non-blank, otherwise the ``note`` tag."""
        description = self._tag(DESCRIPTION_TAG)
        if description is not None and description.strip():
            return description
        return self._tag(NOTE_TAG)

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None
