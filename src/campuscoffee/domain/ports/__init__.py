"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import OsmNodeFetcher
from .persistence import PosRepository
from .unit_of_work import PosRepositories, PosUnitOfWork

__all__ = [
    "OsmNodeFetcher",
    "PosRepositories",
    "PosRepository",
    "PosUnitOfWork",
]
