"""Pydantic DTOs for exchanging points of sale as JSON."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, ConfigDict

from campuscoffee.domain.model import CampusType, Pos, PosType


class PosDto(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

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

    @classmethod
    def from_domain(cls, pos: Pos) -> PosDto:
        return cls(
            id=pos.id,
            created_at=pos.created_at,
            updated_at=pos.updated_at,
            name=pos.name,
            description=pos.description,
            type=pos.type,
            campus=pos.campus,
            street=pos.street,
            house_number=pos.house_number,
            postal_code=pos.postal_code,
            city=pos.city,
        )

    def to_domain(self) -> Pos:
        """Return the domain entity; raises ``ValueError`` for blank required fields."""
        return Pos(
            id=self.id,
            created_at=self.created_at,
            updated_at=self.updated_at,
            name=self.name,
            description=self.description,
            type=self.type,
            campus=self.campus,
            street=self.street,
            house_number=self.house_number,
            postal_code=self.postal_code,
            city=self.city,
        )
