"""Use case to build the investment profit and loss statement."""

from dataclasses import replace
from decimal import Decimal

from finance_dashboard.application.ports.snapshot_repository import (
    FinanceSnapshotRepositoryPort,
)
from finance_dashboard.application.use_cases.snapshot_utils import (
    load_valued_accounts,
)
from finance_dashboard.domain.constants import DEFAULT_USD_TO_TWD_RATE
from finance_dashboard.domain.models import PnlStatement
from finance_dashboard.domain.services import compute_pnl, sort_pnl_rows
from finance_dashboard.infrastructure.logging.logger import get_app_logger


class GetPnlStatementUseCase:
    """Compute P&L rows and totals for stock, ETF and USD holdings."""

    def __init__(
        self,
        repository: FinanceSnapshotRepositoryPort,
        logger=None,
        default_fx_rate: Decimal = DEFAULT_USD_TO_TWD_RATE,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._default_fx_rate = default_fx_rate

    def execute(
        self,
        sort_key: str = "profit_loss_twd",
        descending: bool = True,
    ) -> PnlStatement:
        """Return the P&L statement with rows sorted by a column.

        Args:
            sort_key: Column to sort rows by.
            descending: Sort from largest to smallest.

        Returns:
            PnlStatement: Sorted rows and totals.

        Raises:
            ValueError: If sort_key is not a sortable column.
        """
        _, accounts = load_valued_accounts(
            self._repository,
            self._default_fx_rate,
            self._logger,
        )
        statement = compute_pnl(accounts)
        self._logger.info(
            f"P&L computed: rows={len(statement.rows)}, "
            f"total_pnl={statement.total_pnl}, roi={statement.overall_roi:.2f}"
        )
        return replace(
            statement,
            rows=sort_pnl_rows(statement.rows, sort_key, descending),
        )


__all__ = ["GetPnlStatementUseCase", "PnlStatement"]
