"""Application services for managing points of sale."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from campuscoffee.domain.errors import DuplicatePosNameError

if TYPE_CHECKING:
    from collections.abc import Callable

    from campuscoffee.domain.model import Pos
    from campuscoffee.domain.ports.persistence import PosRepository
    from campuscoffee.domain.ports.unit_of_work import PosUnitOfWork

    UnitOfWorkFactory = Callable[[], PosUnitOfWork]

log = getLogger(__name__)


def list_pos(*, unit_of_work_factory: UnitOfWorkFactory) -> list[Pos]:
    log.debug("Retrieving all POS")
    with unit_of_work_factory() as uow:
        return uow.repositories.pos.get_all()


def get_pos(pos_id: int, *, unit_of_work_factory: UnitOfWorkFactory) -> Pos:
    log.debug("Retrieving POS with ID: %s", pos_id)
    with unit_of_work_factory() as uow:
        return uow.repositories.pos.get_by_id(pos_id)


def upsert_pos(pos: Pos, *, unit_of_work_factory: UnitOfWorkFactory) -> Pos:
    """Create ``pos`` when it has no id, otherwise update the existing POS.

    Raises ``PosNotFoundError`` when updating an id that does not exist and
    ``DuplicatePosNameError`` when the name is already taken by another POS.
    """

    with unit_of_work_factory() as uow:
        repository = uow.repositories.pos
        if pos.id is None:
            log.info("Creating new POS: %s", pos.name)
        else:
            log.info("Updating POS with ID: %s", pos.id)
            repository.get_by_id(pos.id)
        saved = perform_upsert(repository, pos)
        uow.commit()
    return saved


def clear_pos(*, unit_of_work_factory: UnitOfWorkFactory) -> None:
    log.warning("Clearing all POS data")
    with unit_of_work_factory() as uow:
        uow.repositories.pos.clear()
        uow.commit()


def find_pos_by_name(repository: PosRepository, name: str) -> Pos | None:
    """Return the POS whose name equals ``name`` exactly, if any."""

    return next((pos for pos in repository.get_all() if pos.name == name), None)


def perform_upsert(repository: PosRepository, pos: Pos) -> Pos:
    """Upsert through the repository; its unique constraint has the final word on names."""

    try:
        saved = repository.upsert(pos)
    except DuplicatePosNameError as exc:
        log.error("Error upserting POS '%s': %s", pos.name, exc)  # noqa: TRY400
        raise
    log.info("Successfully upserted POS with ID: %s", saved.id)
    return saved
