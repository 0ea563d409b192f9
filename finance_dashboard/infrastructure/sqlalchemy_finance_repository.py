"""SQL-backed repository for the finance data snapshot."""

from sqlalchemy import text

from finance_dashboard.application.ports.database import DatabaseEnginePort
from finance_dashboard.application.ports.snapshot_repository import (
    FinanceSnapshotRepositoryPort,
)
from finance_dashboard.domain.models import (
    AssetAccount,
    Budget,
    CashflowRecord,
    Goal,
    UserSettings,
)
from finance_dashboard.domain.services.normalization import (
    build_asset,
    build_budget,
    build_cashflow_record,
    build_goal,
    build_user_settings,
)
from finance_dashboard.infrastructure.logging.logger import get_app_logger

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS asset_accounts (
        id VARCHAR(64) PRIMARY KEY,
        name VARCHAR(255) NOT NULL,
        position INTEGER NOT NULL DEFAULT 0
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS assets (
        id VARCHAR(64) PRIMARY KEY,
        account_id VARCHAR(64) NOT NULL REFERENCES asset_accounts (id),
        position INTEGER NOT NULL DEFAULT 0,
        code VARCHAR(255),
        account_type VARCHAR(64),
        units NUMERIC,
        cost NUMERIC,
        current_value NUMERIC,
        currency VARCHAR(8)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS cashflow_records (
        id VARCHAR(64) PRIMARY KEY,
        date VARCHAR(10) NOT NULL,
        type VARCHAR(16) NOT NULL,
        category VARCHAR(255),
        amount NUMERIC,
        currency VARCHAR(8),
        description TEXT,
        account_id VARCHAR(64),
        account_name VARCHAR(255),
        is_recurring BOOLEAN NOT NULL DEFAULT FALSE,
        recurrence_day INTEGER
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS budgets (
        id VARCHAR(64) PRIMARY KEY,
        month VARCHAR(7) NOT NULL,
        category VARCHAR(255) NOT NULL,
        amount NUMERIC
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS goals (
        id VARCHAR(64) PRIMARY KEY,
        name VARCHAR(255) NOT NULL,
        target_amount NUMERIC,
        target_date VARCHAR(10),
        current_amount NUMERIC,
        position INTEGER NOT NULL DEFAULT 0
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS goal_account_links (
        goal_id VARCHAR(64) NOT NULL REFERENCES goals (id),
        account_id VARCHAR(64) NOT NULL,
        position INTEGER NOT NULL DEFAULT 0,
        PRIMARY KEY (goal_id, account_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS user_settings (
        id INTEGER PRIMARY KEY,
        manual_rate NUMERIC,
        custom_income_categories TEXT,
        custom_expense_categories TEXT
    )
    """,
)


def _split_categories(value: str | None) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


class SqlAlchemyFinanceRepository(FinanceSnapshotRepositoryPort):
    """Repository reading the snapshot from the finance database."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def ensure_schema(self) -> None:
        """Create the snapshot tables when they do not exist."""
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            for statement in SCHEMA_STATEMENTS:
                conn.execute(text(statement))
        self._logger.info("Finance schema is ready")

    def fetch_asset_accounts(self) -> list[AssetAccount]:
        accounts_query = text(
            """
            SELECT id, name
            FROM asset_accounts
            ORDER BY position, id
            """
        )
        assets_query = text(
            """
            SELECT id, account_id, code, account_type, units, cost,
                   current_value, currency
            FROM assets
            ORDER BY account_id, position, id
            """
        )
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            account_rows = conn.execute(accounts_query).all()
            asset_rows = conn.execute(assets_query).all()

        assets_by_account: dict[str, list] = {}
        for row in asset_rows:
            assets_by_account.setdefault(row.account_id, []).append(
                build_asset(dict(row._mapping), self._logger)
            )
        return [
            AssetAccount(
                id=row.id,
                name=row.name or "",
                assets=tuple(assets_by_account.get(row.id, ())),
            )
            for row in account_rows
        ]

    def fetch_cashflow_records(self) -> list[CashflowRecord]:
        query = text(
            """
            SELECT id, date, type, category, amount, currency, description,
                   account_id, account_name, is_recurring, recurrence_day
            FROM cashflow_records
            ORDER BY date, id
            """
        )
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            build_cashflow_record(dict(row._mapping), self._logger)
            for row in rows
        ]

    def fetch_budgets(self) -> list[Budget]:
        query = text(
            """
            SELECT id, month, category, amount
            FROM budgets
            ORDER BY month, category
            """
        )
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [build_budget(dict(row._mapping)) for row in rows]

    def fetch_goals(self) -> list[Goal]:
        goals_query = text(
            """
            SELECT id, name, target_amount, target_date, current_amount
            FROM goals
            ORDER BY position, id
            """
        )
        links_query = text(
            """
            SELECT goal_id, account_id
            FROM goal_account_links
            ORDER BY goal_id, position, account_id
            """
        )
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            goal_rows = conn.execute(goals_query).all()
            link_rows = conn.execute(links_query).all()

        links: dict[str, list[str]] = {}
        for row in link_rows:
            links.setdefault(row.goal_id, []).append(row.account_id)
        goals = []
        for row in goal_rows:
            raw = dict(row._mapping)
            raw["linked_account_ids"] = links.get(row.id, [])
            goals.append(build_goal(raw))
        return goals

    def fetch_settings(self) -> UserSettings:
        query = text(
            """
            SELECT manual_rate, custom_income_categories,
                   custom_expense_categories
            FROM user_settings
            ORDER BY id
            LIMIT 1
            """
        )
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            row = conn.execute(query).first()
        if row is None:
            return UserSettings()
        return build_user_settings(
            {
                "manual_rate": row.manual_rate,
                "custom_income_categories": _split_categories(
                    row.custom_income_categories
                ),
                "custom_expense_categories": _split_categories(
                    row.custom_expense_categories
                ),
            }
        )


__all__ = ["SCHEMA_STATEMENTS", "SqlAlchemyFinanceRepository"]
