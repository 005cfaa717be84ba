"""Domain errors surfaced to callers of the POS services.

Every error carries a ``status_code`` a transport layer can map to its own
status signal. The four import failure kinds are deliberately distinct: only
``OsmApiError`` is worth retrying.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Iterable


class CampusCoffeeError(RuntimeError):
    """Base class for all domain errors."""

    status_code: ClassVar[int] = 500


class PosNotFoundError(CampusCoffeeError):
    """Raised when no POS exists for a given id."""

    status_code = 404

    def __init__(self, pos_id: int) -> None:
        super().__init__(f"POS with ID {pos_id} does not exist.")
        self.pos_id = pos_id


class DuplicatePosNameError(CampusCoffeeError):
    """Raised when a write would create a second POS with the same name."""

    status_code = 409

    def __init__(self, name: str) -> None:
        super().__init__(f"POS with name '{name}' already exists.")
        self.name = name


class OsmNodeNotFoundError(CampusCoffeeError):
    """Raised when a node id does not resolve to a usable OpenStreetMap record."""

    status_code = 404

    def __init__(self, node_id: int) -> None:
        super().__init__(f"The OpenStreetMap node with ID {node_id} does not exist.")
        self.node_id = node_id


class OsmApiError(CampusCoffeeError):
    """Raised when the OpenStreetMap API fails or cannot be reached."""

    status_code = 502

    def __init__(self, node_id: int, message: str) -> None:
        super().__init__(f"Error accessing OpenStreetMap API for node {node_id}: {message}")
        self.node_id = node_id


class OsmNodeMissingFieldsError(CampusCoffeeError):
    """Raised when an OpenStreetMap node lacks the data required to build a POS."""

    status_code = 422

    def __init__(self, node_id: int, missing_fields: Iterable[str]) -> None:
        self.node_id = node_id
        self.missing_fields = tuple(missing_fields)
        super().__init__(
            f"The OpenStreetMap node with ID {node_id} does not have the required fields: "
            f"{', '.join(self.missing_fields)}"
        )
