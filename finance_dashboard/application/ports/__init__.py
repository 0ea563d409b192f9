"""Application ports package."""

from .database import DatabaseEnginePort
from .snapshot_repository import FinanceSnapshotRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "FinanceSnapshotRepositoryPort",
]
