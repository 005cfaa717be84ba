"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError

from campuscoffee.adapters.sqlalchemy.mappings import pos_table
from campuscoffee.domain.errors import DuplicatePosNameError, PosNotFoundError
from campuscoffee.domain.model import CampusType, Pos, PosType

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from sqlalchemy import CursorResult
    from sqlalchemy.orm import Session

    from campuscoffee.domain.ports.persistence import PosRepository

log = getLogger(__name__)

# SQLite reports the column, other backends the constraint name from the metadata convention.
_NAME_CONFLICT_MARKERS = ("UNIQUE constraint failed: pos.name", "uq_pos_name")


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


class SqlAlchemyPosRepository:
    """Persist points of sale in the ``pos`` table.

    Timestamps are owned here: ``created_at`` is set once on insert, ``updated_at`` on
    every write. The unique constraint on ``name`` is reported as
    ``DuplicatePosNameError``.
    """

    def __init__(self, session: Session, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self.session = session
        self._clock = clock

    def get_all(self) -> list[Pos]:
        stmt = select(pos_table).order_by(pos_table.c.id)
        return [_to_domain(row) for row in self.session.execute(stmt).mappings()]

    def get_by_id(self, pos_id: int) -> Pos:
        stmt = select(pos_table).where(pos_table.c.id == pos_id)
        row = self.session.execute(stmt).mappings().one_or_none()
        if row is None:
            raise PosNotFoundError(pos_id)
        return _to_domain(row)

    def upsert(self, pos: Pos) -> Pos:
        now = self._clock()
        values = _to_row(pos)
        try:
            if pos.id is None:
                result = self.session.execute(
                    insert(pos_table).values(**values, created_at=now, updated_at=now)
                )
                pos_id = cast("int", result.inserted_primary_key[0])
            else:
                result = cast(
                    "CursorResult[Any]",
                    self.session.execute(
                        update(pos_table)
                        .where(pos_table.c.id == pos.id)
                        .values(**values, updated_at=now)
                    ),
                )
                if result.rowcount == 0:
                    raise PosNotFoundError(pos.id)
                pos_id = pos.id
        except IntegrityError as exc:
            if not _is_name_conflict(exc):
                raise
            log.warning("Unique constraint violated for POS name '%s'", pos.name)
            raise DuplicatePosNameError(pos.name) from exc
        return self.get_by_id(pos_id)

    def clear(self) -> None:
        self.session.execute(delete(pos_table))


def _is_name_conflict(exc: IntegrityError) -> bool:
    message = str(exc.orig)
    return any(marker in message for marker in _NAME_CONFLICT_MARKERS)


def _to_row(pos: Pos) -> dict[str, object]:
    return {
        "name": pos.name,
        "description": pos.description,
        "type": pos.type,
        "campus": pos.campus,
        "street": pos.street,
        "house_number": pos.house_number,
        "postal_code": pos.postal_code,
        "city": pos.city,
    }


def _to_domain(row: Mapping[str, Any]) -> Pos:
    return Pos(
        id=row["id"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        name=row["name"],
        description=row["description"],
        type=PosType(row["type"]),
        campus=CampusType(row["campus"]),
        street=row["street"],
        house_number=row["house_number"],
        postal_code=row["postal_code"],
        city=row["city"],
    )


if TYPE_CHECKING:
    _repository_check: PosRepository = SqlAlchemyPosRepository(cast("Session", None))
