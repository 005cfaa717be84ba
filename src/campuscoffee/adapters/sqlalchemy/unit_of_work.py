"""SQLAlchemy unit of work for points of sale, and the engine it runs on."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from campuscoffee.adapters.sqlalchemy.mappings import create_all_tables
from campuscoffee.adapters.sqlalchemy.repositories import SqlAlchemyPosRepository
from campuscoffee.config.storage import get_database_config
from campuscoffee.domain.ports.unit_of_work import PosRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the database is used before ``startup`` or started twice."""


@dataclass(slots=True)
class _Database:
    engine: Engine | None = None
    sessions: sessionmaker[Session] | None = None


_DATABASE = _Database()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> Engine:
    """Bind the adapter to an engine and create the schema if it is missing.

    Without ``engine`` one is created from ``database_uri`` or, failing that, from
    ``DATABASE_URI`` / the default SQLite file. ``force=True`` replaces a running engine
    without disposing it.
    """

    if _DATABASE.engine is not None and not force:
        raise StartupError("Database already started; pass force=True to replace the engine")

    if engine is None:
        uri = database_uri or get_database_config().uri
        log.info("Opening database %s", make_url(uri).render_as_string(hide_password=True))
        engine = create_engine(uri)
    create_all_tables(engine)

    _DATABASE.engine = engine
    _DATABASE.sessions = sessionmaker(bind=engine, expire_on_commit=False)
    return engine


def is_started() -> bool:
    return _DATABASE.engine is not None


def shutdown() -> None:
    """Dispose the engine and forget it; a later ``startup`` starts afresh."""

    if _DATABASE.engine is not None:
        _DATABASE.engine.dispose()
    _DATABASE.engine = None
    _DATABASE.sessions = None


class SqlAlchemyPosUnitOfWork:
    """One session per ``with`` block. Leaving the block without ``commit`` discards writes."""

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        if session_factory is None:
            if _DATABASE.sessions is None:
                raise StartupError(
                    "Database not started; call campuscoffee.adapters.sqlalchemy.startup() "
                    "before opening a unit of work"
                )
            session_factory = _DATABASE.sessions
        self._session_factory = session_factory
        self._session: Session | None = None
        self._repositories: PosRepositories | None = None

    def __enter__(self) -> SqlAlchemyPosUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work is already active")
        self._session = self._session_factory()
        self._repositories = PosRepositories(pos=SqlAlchemyPosRepository(self._session))
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self._active_session()
        try:
            if exc_type is not None:
                session.rollback()
        finally:
            session.close()
            self._session = None
            self._repositories = None
        return False

    @property
    def repositories(self) -> PosRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work is not active")
        return self._repositories

    def commit(self) -> None:
        self._active_session().commit()

    def rollback(self) -> None:
        self._active_session().rollback()

    def _active_session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work is not active")
        return self._session


if TYPE_CHECKING:
    from campuscoffee.domain.ports.unit_of_work import PosUnitOfWork

    _uow_check: PosUnitOfWork = SqlAlchemyPosUnitOfWork()
