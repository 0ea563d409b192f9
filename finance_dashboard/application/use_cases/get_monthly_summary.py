"""Use case to summarize one month of cashflow."""

from datetime import date

from finance_dashboard.application.ports.snapshot_repository import (
    FinanceSnapshotRepositoryPort,
)
from finance_dashboard.domain.models import MonthlySummary
from finance_dashboard.domain.services import (
    compute_monthly_summary,
    unrecognized_categories,
)
from finance_dashboard.domain.services.periods import month_key_of
from finance_dashboard.infrastructure.logging.logger import get_app_logger


class GetMonthlySummaryUseCase:
    """Compute income, expense and savings rate for a month."""

    def __init__(
        self,
        repository: FinanceSnapshotRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, month_key: str | None = None) -> MonthlySummary:
        """Return the summary of a month.

        Args:
            month_key: Month to summarize (YYYY-MM); defaults to the
                current month.

        Returns:
            MonthlySummary: Income, expense, net and savings rate.
        """
        month = month_key or month_key_of(date.today())
        records = self._repository.fetch_cashflow_records()
        self._logger.info(f"Fetched {len(records)} cashflow records")
        summary = compute_monthly_summary(records, month)
        unknown = unrecognized_categories(
            records,
            self._repository.fetch_settings(),
            month,
        )
        if unknown:
            self._logger.warning(
                f"Unrecognized categories in {month}: {', '.join(unknown)}"
            )
        self._logger.info(
            f"Monthly summary computed for {month}: income={summary.income}, "
            f"expense={summary.expense}"
        )
        return summary


__all__ = ["GetMonthlySummaryUseCase", "MonthlySummary"]
