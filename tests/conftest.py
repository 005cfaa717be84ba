from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from campuscoffee.adapters.sqlalchemy import create_all_tables
from campuscoffee.adapters.sqlalchemy.unit_of_work import SqlAlchemyPosUnitOfWork, shutdown, startup
from campuscoffee.domain.model import CampusType, OsmNode, Pos, PosType
from tests.helpers.pos import RADA_COFFEE_TAGS

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

OSM_FIXTURES = Path(__file__).resolve().parent / "data" / "osm"


@pytest.fixture(scope="session")
def osm_xml() -> Callable[[str], bytes]:
    def load(name: str) -> bytes:
        return (OSM_FIXTURES / name).read_bytes()

    return load


@pytest.fixture
def rada_coffee_node() -> OsmNode:
    return OsmNode(node_id=5589879349, tags=RADA_COFFEE_TAGS, latitude=49.41, longitude=8.70)


@pytest.fixture
def sample_pos() -> Pos:
    return Pos(
        name="Schmelzpunkt",
        description="Great waffles",
        type=PosType.CAFE,
        campus=CampusType.ALTSTADT,
        street="Hauptstraße",
        house_number="90",
        postal_code=69117,
        city="Heidelberg",
    )


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyPosUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemyPosUnitOfWork:
        return SqlAlchemyPosUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()
