"""Import points of sale from OpenStreetMap nodes.

The import is an optimistic reconciliation: an existing POS is looked up by name to
decide between update and create, but the write itself is the authority. A
concurrent import that created the same name in between surfaces as
``DuplicatePosNameError`` from the repository and rolls the unit of work back.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from logging import getLogger
from typing import TYPE_CHECKING

from campuscoffee.domain.osm_translation import convert_osm_node_to_pos
from campuscoffee.domain.pos_management import find_pos_by_name, perform_upsert

if TYPE_CHECKING:
    from campuscoffee.domain.model import Pos
    from campuscoffee.domain.ports.fetching import OsmNodeFetcher
    from campuscoffee.domain.pos_management import UnitOfWorkFactory

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OsmImportResult:
    """Outcome of importing one OpenStreetMap node."""

    pos: Pos
    created: bool


def import_pos_from_osm_node(
    node_id: int,
    *,
    fetcher: OsmNodeFetcher,
    unit_of_work_factory: UnitOfWorkFactory,
) -> OsmImportResult:
    """Fetch, translate and persist an OpenStreetMap node as a POS.

    Fetch and translation failures propagate unchanged and leave persistence untouched.
    """

    log.info("Importing POS from OpenStreetMap node %s...", node_id)

    node = fetcher(node_id)
    pos_to_import = convert_osm_node_to_pos(node)

    with unit_of_work_factory() as uow:
        repository = uow.repositories.pos
        existing = find_pos_by_name(repository, pos_to_import.name)
        if existing is not None:
            log.info(
                "POS with name '%s' already exists (ID: %s), updating from OSM node %s",
                pos_to_import.name,
                existing.id,
                node_id,
            )
            candidate = replace(pos_to_import, id=existing.id, created_at=existing.created_at)
        else:
            log.info("Creating new POS '%s' from OSM node %s", pos_to_import.name, node_id)
            candidate = pos_to_import
        saved = perform_upsert(repository, candidate)
        uow.commit()

    log.info("Successfully imported POS '%s' from OSM node %s", saved.name, node_id)
    return OsmImportResult(pos=saved, created=existing is None)
