"""SQLAlchemy adapter package for campuscoffee."""

from __future__ import annotations

from .mappings import create_all_tables, metadata, pos_table
from .repositories import SqlAlchemyPosRepository
from .unit_of_work import SqlAlchemyPosUnitOfWork, is_started, shutdown, startup

__all__ = [
    "SqlAlchemyPosRepository",
    "SqlAlchemyPosUnitOfWork",
    "create_all_tables",
    "is_started",
    "metadata",
    "pos_table",
    "shutdown",
    "startup",
]
