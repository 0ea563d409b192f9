"""Factory helpers to select the finance snapshot backend."""

import os
from pathlib import Path

from finance_dashboard.application.ports.database import DatabaseEnginePort
from finance_dashboard.application.ports.snapshot_repository import (
    FinanceSnapshotRepositoryPort,
)
from finance_dashboard.infrastructure.json_snapshot_repository import (
    JsonSnapshotRepository,
)
from finance_dashboard.infrastructure.logging.logger import get_app_logger
from finance_dashboard.infrastructure.settings import SUPPORTED_BACKENDS
from finance_dashboard.infrastructure.sqlalchemy_finance_repository import (
    SqlAlchemyFinanceRepository,
)


def _normalize_snapshot_path(
    raw_path: str | Path | None,
    logger,
) -> Path | None:
    """Normalize and validate the snapshot file path.

    Args:
        raw_path: Raw file path string or Path instance.
        logger: Logger used for warnings.

    Returns:
        Path | None: Normalized path when provided.
    """
    if not raw_path:
        logger.warning(
            "Missing snapshot file path; set FINANCE_SNAPSHOT_FILE to enable "
            "the json backend"
        )
        return None
    path = Path(raw_path).expanduser().resolve()
    if not path.exists():
        logger.warning(f"Snapshot file does not exist at {path}")
    return path


def create_finance_repository(
    db_port: DatabaseEnginePort,
    logger=None,
    backend: str | None = None,
    snapshot_path: str | Path | None = None,
) -> FinanceSnapshotRepositoryPort:
    """Return a snapshot repository implementation based on configuration.

    Args:
        db_port: Port providing access to the finance engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.
        backend: Optional backend override (sqlalchemy or json).
        snapshot_path: Optional path override for the json backend.

    Returns:
        FinanceSnapshotRepositoryPort: Concrete repository implementation.

    Raises:
        RuntimeError: If the json backend is selected without a file path.
        ValueError: If the backend is not supported.
    """
    resolved_logger = logger or get_app_logger()
    selected_backend = (
        backend or os.getenv("FINANCE_BACKEND", "sqlalchemy")
    ).strip().lower()

    if selected_backend == "sqlalchemy":
        return SqlAlchemyFinanceRepository(db_port, logger=resolved_logger)

    if selected_backend == "json":
        path = _normalize_snapshot_path(
            snapshot_path or os.getenv("FINANCE_SNAPSHOT_FILE"),
            resolved_logger,
        )
        if path is None:
            raise RuntimeError(
                "JSON backend requires a FINANCE_SNAPSHOT_FILE path."
            )
        return JsonSnapshotRepository(path, logger=resolved_logger)

    raise ValueError(
        f"Unsupported finance backend: {selected_backend}. "
        f"Expected one of: {', '.join(SUPPORTED_BACKENDS)}."
    )


__all__ = ["create_finance_repository"]
