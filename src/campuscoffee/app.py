"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from campuscoffee.adapters.osm import OsmApiFetcher
from campuscoffee.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyPosUnitOfWork,
    is_started,
    startup,
)
from campuscoffee.domain.osm_import import OsmImportResult, import_pos_from_osm_node
from campuscoffee.domain.pos_management import clear_pos, get_pos, list_pos, upsert_pos

if TYPE_CHECKING:
    from campuscoffee.domain.model import Pos
    from campuscoffee.domain.ports.fetching import OsmNodeFetcher
    from campuscoffee.domain.pos_management import UnitOfWorkFactory


log = getLogger(__name__)


def _resolve_unit_of_work(unit_of_work_factory: UnitOfWorkFactory | None) -> UnitOfWorkFactory:
    if unit_of_work_factory is not None:
        return unit_of_work_factory
    if not is_started():
        startup()
    return SqlAlchemyPosUnitOfWork


def import_pos_from_osm(
    node_id: int,
    *,
    fetcher: OsmNodeFetcher | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> OsmImportResult:
    """Import one OpenStreetMap node using the configured adapters."""

    result = import_pos_from_osm_node(
        node_id,
        fetcher=fetcher or OsmApiFetcher(),
        unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory),
    )
    log.info(
        "Finished OSM import: node=%s, pos_id=%s, created=%s",
        node_id,
        result.pos.id,
        result.created,
    )
    return result


def get_all_pos(*, unit_of_work_factory: UnitOfWorkFactory | None = None) -> list[Pos]:
    return list_pos(unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory))


def get_pos_by_id(pos_id: int, *, unit_of_work_factory: UnitOfWorkFactory | None = None) -> Pos:
    return get_pos(pos_id, unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory))


def save_pos(pos: Pos, *, unit_of_work_factory: UnitOfWorkFactory | None = None) -> Pos:
    return upsert_pos(pos, unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory))


def clear_all_pos(*, unit_of_work_factory: UnitOfWorkFactory | None = None) -> None:
    clear_pos(unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory))
