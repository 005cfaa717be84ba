"""SQLAlchemy table metadata for the campuscoffee domain model."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    Column,
    DateTime,
    Dialect,
    Enum,
    Integer,
    MetaData,
    String,
    Table,
    TypeDecorator,
)

from campuscoffee.domain.model import CampusType, PosType

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


class UTCDateTime(TypeDecorator[datetime]):
    """Timezone-aware datetimes stored as UTC; naive values are taken to be UTC already."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        del dialect
        return None if value is None else _as_utc(value)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        del dialect
        return None if value is None else _as_utc(value)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


metadata = MetaData(
    naming_convention={
        "pk": "pk_%(table_name)s",
        "uq": "uq_%(table_name)s_%(column_0_name)s",
    }
)

pos_table = Table(
    "pos",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("created_at", UTCDateTime, nullable=False),
    Column("updated_at", UTCDateTime, nullable=False),
    Column("name", String(255), nullable=False, unique=True),
    Column("description", String, nullable=False, default=""),
    Column("type", Enum(PosType, native_enum=False, length=32), nullable=False),
    Column("campus", Enum(CampusType, native_enum=False, length=32), nullable=False),
    Column("street", String(255), nullable=False),
    Column("house_number", String(32), nullable=False),
    Column("postal_code", Integer, nullable=False),
    Column("city", String(255), nullable=False),
)


def create_all_tables(engine: Engine) -> None:
    metadata.create_all(engine)
