"""Transaction boundary around the POS repository."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from types import TracebackType

    from campuscoffee.domain.ports.persistence import PosRepository


@dataclass(slots=True)
class PosRepositories:
    """Repositories reachable inside one POS unit of work."""

    pos: PosRepository


class PosUnitOfWork(Protocol):
    """Context manager owning one transaction.

    Writes become durable only through ``commit``; leaving the block through an
    exception rolls back.
    """

    @property
    def repositories(self) -> PosRepositories: ...

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
