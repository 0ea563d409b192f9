"""Use case to compute portfolio totals and the asset type breakdown."""

from decimal import Decimal

from finance_dashboard.application.ports.snapshot_repository import (
    FinanceSnapshotRepositoryPort,
)
from finance_dashboard.application.use_cases.snapshot_utils import (
    load_valued_accounts,
)
from finance_dashboard.domain.constants import DEFAULT_USD_TO_TWD_RATE
from finance_dashboard.domain.models import AssetSummary, ValuedAccount
from finance_dashboard.domain.services import summarize
from finance_dashboard.infrastructure.logging.logger import get_app_logger


class GetAssetSummaryUseCase:
    """Compute asset totals in TWD from the stored accounts."""

    def __init__(
        self,
        repository: FinanceSnapshotRepositoryPort,
        logger=None,
        default_fx_rate: Decimal = DEFAULT_USD_TO_TWD_RATE,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing the finance snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
            default_fx_rate: USD to TWD rate used without a manual override.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._default_fx_rate = default_fx_rate

    def execute(self) -> AssetSummary:
        """Return the asset summary.

        Returns:
            AssetSummary: Total, breakdown and USD holdings in TWD.
        """
        summary, _ = self.execute_with_accounts()
        return summary

    def execute_with_accounts(
        self,
    ) -> tuple[AssetSummary, list[ValuedAccount]]:
        """Return the asset summary along with the valued accounts.

        Returns:
            tuple[AssetSummary, list[ValuedAccount]]: Summary and the
            accounts it was computed from.
        """
        _, accounts = load_valued_accounts(
            self._repository,
            self._default_fx_rate,
            self._logger,
        )
        summary = summarize(accounts)
        self._logger.info(
            f"Asset summary computed: total={summary.total}, "
            f"types={len(summary.breakdown)}, "
            f"foreign={summary.total_foreign_in_local}"
        )
        return summary, accounts


__all__ = ["GetAssetSummaryUseCase", "AssetSummary"]
