"""Translate OpenStreetMap nodes into points of sale.

Pure functions, no I/O. Required tags are validated as one batch so the raised
``OsmNodeMissingFieldsError`` names every missing field at once.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from campuscoffee.domain.errors import OsmNodeMissingFieldsError
from campuscoffee.domain.model import (
    CITY_TAG,
    HOUSE_NUMBER_TAG,
    NAME_TAG,
    POSTCODE_TAG,
    STREET_TAG,
    CampusType,
    Pos,
    PosType,
)

if TYPE_CHECKING:
    from campuscoffee.domain.model import OsmNode

log = getLogger(__name__)

DEFAULT_POS_TYPE: Final = PosType.CAFE
DEFAULT_CAMPUS: Final = CampusType.ALTSTADT

POS_TYPE_BY_AMENITY: Final[dict[str, PosType]] = {
    "cafe": PosType.CAFE,
    "coffee_shop": PosType.CAFE,
    "bakery": PosType.BAKERY,
    "cafeteria": PosType.CAFETERIA,
    "canteen": PosType.CAFETERIA,
    "vending_machine": PosType.VENDING_MACHINE,
}

# Heidelberg postal codes covering the university campuses.
HEIDELBERG_POSTCODES: Final = range(69115, 69127)
BERGHEIM_POSTCODES: Final = range(69115, 69117)
INF_POSTCODES: Final = range(69120, 69127)
MAX_POSTAL_CODE: Final = 2**31 - 1


def convert_osm_node_to_pos(node: OsmNode) -> Pos:
    """Return an unsaved ``Pos`` built from the node's tags.

    Raises ``OsmNodeMissingFieldsError`` when a required tag is absent or blank, or when
    the postal code is not numeric.
    """

    log.debug("Converting OSM node %s to POS", node.node_id)

    required = {
        NAME_TAG: node.name,
        STREET_TAG: node.street,
        HOUSE_NUMBER_TAG: node.house_number,
        POSTCODE_TAG: node.postal_code,
        CITY_TAG: node.city,
    }
    validate_required_fields(node.node_id, required)

    postal_code = parse_postal_code(node.node_id, _text(node.postal_code))

    return Pos(
        name=node.name or "",
        description=extract_description(node),
        type=determine_pos_type(node.amenity),
        campus=determine_campus(postal_code),
        street=_text(node.street),
        house_number=_text(node.house_number),
        postal_code=postal_code,
        city=_text(node.city),
    )


def validate_required_fields(node_id: int, values: dict[str, str | None]) -> None:
    missing = [key for key, value in values.items() if _is_blank(value)]
    if missing:
        log.error("OSM node %s missing required fields: %s", node_id, missing)
        raise OsmNodeMissingFieldsError(node_id, missing)


def parse_postal_code(node_id: int, postcode: str) -> int:
    # int() would also accept "+69117" or "69_117"
    valid = postcode.isascii() and postcode.isdigit()
    value = int(postcode) if valid and len(postcode) <= len(str(MAX_POSTAL_CODE)) else None
    if value is None or value > MAX_POSTAL_CODE:
        log.error("Invalid postal code '%s' for OSM node %s", postcode, node_id)
        raise OsmNodeMissingFieldsError(node_id, (POSTCODE_TAG,))
    return value


def extract_description(node: OsmNode) -> str:
    description = node.description
    if _is_blank(description):
        log.debug("OSM node %s has no description, using empty string", node.node_id)
        return ""
    return _text(description)


def determine_pos_type(amenity: str | None) -> PosType:
    """Map an ``amenity`` tag onto a ``PosType``; total, defaults to ``CAFE``."""

    if _is_blank(amenity):
        log.debug("No amenity tag found, defaulting to %s", DEFAULT_POS_TYPE)
        return DEFAULT_POS_TYPE
    pos_type = POS_TYPE_BY_AMENITY.get(_text(amenity).lower())
    if pos_type is None:
        log.warning("Unknown amenity type: '%s', defaulting to %s", amenity, DEFAULT_POS_TYPE)
        return DEFAULT_POS_TYPE
    return pos_type


def determine_campus(postal_code: int) -> CampusType:
    """Coarse campus guess from a Heidelberg postal code.

    69115-69116 is Bergheim, 69120-69126 is Neuenheimer Feld, everything else
    (including codes outside Heidelberg) falls back to Altstadt.
    """

    if postal_code not in HEIDELBERG_POSTCODES:
        log.debug(
            "Postal code %s outside Heidelberg range, defaulting to %s",
            postal_code,
            DEFAULT_CAMPUS,
        )
        return DEFAULT_CAMPUS
    if postal_code in BERGHEIM_POSTCODES:
        return CampusType.BERGHEIM
    if postal_code in INF_POSTCODES:
        return CampusType.INF
    return CampusType.ALTSTADT


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _text(value: str | None) -> str:
    return (value or "").strip()
