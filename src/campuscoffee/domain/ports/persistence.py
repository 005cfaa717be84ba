"""Ports for persisting domain aggregates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from campuscoffee.domain.model import Pos


@runtime_checkable
class PosRepository(Protocol):
    """Persistence contract for points of sale.

    ``upsert`` creates when ``pos.id`` is ``None`` and updates otherwise; it assigns id
    and timestamps, raises ``DuplicatePosNameError`` on a name clash and
    ``PosNotFoundError`` when updating an unknown id.
    """

    def get_all(self) -> list[Pos]: ...

    def get_by_id(self, pos_id: int) -> Pos: ...

    def upsert(self, pos: Pos) -> Pos: ...

    def clear(self) -> None: ...
