from __future__ import annotations

from dataclasses import FrozenInstanceError, replace

import pytest

from campuscoffee.domain.model import CampusType, OsmNode, Pos, PosType


def test_pos_is_immutable(sample_pos: Pos) -> None:
    with pytest.raises(FrozenInstanceError):
        sample_pos.name = "Other"  # type: ignore[misc]


def test_replace_returns_new_pos(sample_pos: Pos) -> None:
    renamed = replace(sample_pos, name="Schmelzpunkt II")

    assert renamed is not sample_pos
    assert sample_pos.name == "Schmelzpunkt"
    assert renamed.name == "Schmelzpunkt II"


def test_unsaved_pos_has_no_identity(sample_pos: Pos) -> None:
    assert sample_pos.id is None
    assert sample_pos.created_at is None
    assert sample_pos.updated_at is None
    assert not sample_pos.is_persisted


@pytest.mark.parametrize("field", ["name", "street", "house_number", "city"])
def test_blank_required_text_is_rejected(sample_pos: Pos, field: str) -> None:
    with pytest.raises(ValueError, match=field):
        replace(sample_pos, **{field: "  "})


@pytest.mark.parametrize("postal_code", ["69117", 69117.0, True])
def test_postal_code_must_be_integer(postal_code: object) -> None:
    with pytest.raises(ValueError, match="postal code"):
        Pos(
            name="Kiosk",
            type=PosType.VENDING_MACHINE,
            campus=CampusType.BERGHEIM,
            street="Bergheimer Straße",
            house_number="58",
            postal_code=postal_code,  # type: ignore[arg-type]
            city="Heidelberg",
        )


def test_enum_values_are_their_names() -> None:
    assert [member.value for member in PosType] == [member.name for member in PosType]
    assert [member.value for member in CampusType] == [member.name for member in CampusType]


def test_osm_node_tags_are_read_only() -> None:
    tags = {"name": "Rada Coffee"}
    node = OsmNode(node_id=1, tags=tags)

    tags["name"] = "Changed"

    assert node.name == "Rada Coffee"
    with pytest.raises(TypeError):
        node.tags["name"] = "Changed"  # type: ignore[index]


def test_osm_node_coordinates_come_in_pairs() -> None:
    with pytest.raises(ValueError, match="together"):
        OsmNode(node_id=1, latitude=49.41)


def test_osm_node_accessors() -> None:
    node = OsmNode(
        node_id=5,
        tags={"amenity": "cafe", "addr:postcode": "69117", "note": "Cash only"},
        latitude=49.41,
        longitude=8.70,
    )

    assert node.amenity == "cafe"
    assert node.postal_code == "69117"
    assert node.street is None
    assert node.description == "Cash only"
    assert node.has_coordinates
    assert not OsmNode(node_id=6).has_coordinates
