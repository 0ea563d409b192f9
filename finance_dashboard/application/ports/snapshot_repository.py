"""Port for reading the current finance data snapshot."""

from typing import Protocol

from finance_dashboard.domain.models import (
    AssetAccount,
    Budget,
    CashflowRecord,
    Goal,
    UserSettings,
)


class FinanceSnapshotRepositoryPort(Protocol):
    """Port exposing the stored entities the dashboard projects."""

    def fetch_asset_accounts(self) -> list[AssetAccount]:
        """Return every asset account with its holdings."""

    def fetch_cashflow_records(self) -> list[CashflowRecord]:
        """Return every cashflow record."""

    def fetch_budgets(self) -> list[Budget]:
        """Return every monthly category budget."""

    def fetch_goals(self) -> list[Goal]:
        """Return every savings goal."""

    def fetch_settings(self) -> UserSettings:
        """Return the user settings."""


__all__ = ["FinanceSnapshotRepositoryPort"]
