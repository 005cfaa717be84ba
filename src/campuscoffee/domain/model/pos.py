"""Point-of-sale entity.

A ``Pos`` is immutable. Persistence assigns ``id``, ``created_at`` and ``updated_at``;
every other transformation goes through ``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from .enums import CampusType, PosType

REQUIRED_TEXT_FIELDS = ("name", "street", "house_number", "city")


@dataclass(frozen=True, slots=True, kw_only=True)
class Pos:
    """A campus point of sale (café, bakery, cafeteria, vending machine)."""

    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    name: str
    description: str = ""
    type: PosType
    campus: CampusType
    street: str
    house_number: str
    postal_code: int
    city: str

    def __post_init__(self) -> None:
        blank = [field for field in REQUIRED_TEXT_FIELDS if not getattr(self, field).strip()]
        if blank:
            raise ValueError(f"POS fields must not be blank: {', '.join(blank)}")
        if isinstance(self.postal_code, bool) or not isinstance(self.postal_code, int):
            raise ValueError(f"POS postal code must be an integer, got {self.postal_code!r}")

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
