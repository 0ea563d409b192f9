"""Composition root for wiring infrastructure adapters."""

from finance_dashboard.application.ports.database import DatabaseEnginePort
from finance_dashboard.application.ports.snapshot_repository import (
    FinanceSnapshotRepositoryPort,
)
from finance_dashboard.application.use_cases.get_dashboard import (
    GetDashboardUseCase,
)
from finance_dashboard.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finance_dashboard.infrastructure.finance_repository_factory import (
    create_finance_repository,
)
from finance_dashboard.infrastructure.logging.logger import get_app_logger
from finance_dashboard.infrastructure.settings import AppSettings
from finance_dashboard.infrastructure.sqlalchemy_finance_repository import (
    SqlAlchemyFinanceRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_snapshot_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: AppSettings | None = None,
) -> FinanceSnapshotRepositoryPort:
    """Return the configured snapshot repository."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or AppSettings.from_env()
    return create_finance_repository(
        resolved_db,
        logger=get_app_logger(),
        backend=resolved_settings.backend,
        snapshot_path=resolved_settings.snapshot_file,
    )


def build_sql_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SqlAlchemyFinanceRepository:
    """Return the SQL repository, used for schema management."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyFinanceRepository(resolved_db, logger=get_app_logger())


def build_dashboard_use_case(
    repository: FinanceSnapshotRepositoryPort | None = None,
    settings: AppSettings | None = None,
) -> GetDashboardUseCase:
    """Return the dashboard use case wired to the configured backend."""
    resolved_settings = settings or AppSettings.from_env()
    resolved_repository = repository or build_snapshot_repository(
        settings=resolved_settings,
    )
    return GetDashboardUseCase(
        resolved_repository,
        logger=get_app_logger(),
        default_fx_rate=resolved_settings.default_fx_rate,
    )


__all__ = [
    "build_dashboard_use_case",
    "build_database_adapter",
    "build_snapshot_repository",
    "build_sql_repository",
]
