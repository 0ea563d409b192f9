"""Repository reading the finance snapshot from a JSON backup file."""

import json
from pathlib import Path

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
    build_asset_account,
    build_budget,
    build_cashflow_record,
    build_goal,
    build_user_settings,
)
from finance_dashboard.infrastructure.logging.logger import get_app_logger


class JsonSnapshotRepository(FinanceSnapshotRepositoryPort):
    """Snapshot repository backed by an exported JSON backup.

    The backup holds the top-level keys ``assetAccounts``,
    ``cashflowRecords``, ``budgets``, ``goals`` and ``settings``. The file is
    read on every fetch so edits show up without restarting.
    """

    def __init__(self, snapshot_path: Path, logger=None) -> None:
        """Initialize the repository.

        Args:
            snapshot_path: Path to the JSON backup file.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._snapshot_path = Path(snapshot_path)
        self._logger = logger or get_app_logger()

    def _load(self) -> dict:
        """Read and parse the backup file.

        Returns:
            dict: Parsed backup content.

        Raises:
            RuntimeError: If the file is missing or is not a JSON object.
        """
        if not self._snapshot_path.exists():
            raise RuntimeError(
                f"Snapshot file not found: {self._snapshot_path}"
            )
        try:
            with self._snapshot_path.open(encoding="utf-8") as handle:
                payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise RuntimeError(
                f"Snapshot file is not valid JSON: {self._snapshot_path}"
            ) from exc
        if not isinstance(payload, dict):
            raise RuntimeError(
                f"Snapshot file must contain a JSON object: "
                f"{self._snapshot_path}"
            )
        return payload

    def _items(self, key: str) -> list[dict]:
        items = self._load().get(key) or []
        if not isinstance(items, list):
            self._logger.warning(f"Ignoring non-list '{key}' in snapshot")
            return []
        return [item for item in items if isinstance(item, dict)]

    def fetch_asset_accounts(self) -> list[AssetAccount]:
        return [
            build_asset_account(item, self._logger)
            for item in self._items("assetAccounts")
        ]

    def fetch_cashflow_records(self) -> list[CashflowRecord]:
        return [
            build_cashflow_record(item, self._logger)
            for item in self._items("cashflowRecords")
        ]

    def fetch_budgets(self) -> list[Budget]:
        return [build_budget(item) for item in self._items("budgets")]

    def fetch_goals(self) -> list[Goal]:
        return [build_goal(item) for item in self._items("goals")]

    def fetch_settings(self) -> UserSettings:
        raw = self._load().get("settings")
        if not isinstance(raw, dict):
            return UserSettings()
        return build_user_settings(raw)


__all__ = ["JsonSnapshotRepository"]
