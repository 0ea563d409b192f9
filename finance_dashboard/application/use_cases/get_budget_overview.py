"""Use case to compare monthly spending with category budgets."""

from datetime import date

from finance_dashboard.application.ports.snapshot_repository import (
    FinanceSnapshotRepositoryPort,
)
from finance_dashboard.domain.models import Budget, BudgetOverview
from finance_dashboard.domain.services import (
    compute_budget_usage,
    copy_budgets_to_month,
    expense_categories,
    previous_month,
)
from finance_dashboard.domain.services.periods import month_key_of
from finance_dashboard.infrastructure.logging.logger import get_app_logger


class GetBudgetOverviewUseCase:
    """Compute budget usage for a month."""

    def __init__(
        self,
        repository: FinanceSnapshotRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, month_key: str | None = None) -> BudgetOverview:
        """Return budget usage per category.

        Args:
            month_key: Month to report (YYYY-MM); defaults to the current
                month.

        Returns:
            BudgetOverview: Usage per category and totals.
        """
        month = month_key or month_key_of(date.today())
        budgets = self._repository.fetch_budgets()
        records = self._repository.fetch_cashflow_records()
        overview = compute_budget_usage(
            budgets,
            records,
            month,
            known_categories=expense_categories(
                self._repository.fetch_settings()
            ),
        )
        over_budget = [
            item.category for item in overview.items if item.is_over_budget
        ]
        if over_budget:
            self._logger.warning(
                f"Over budget in {month}: {', '.join(over_budget)}"
            )
        self._logger.info(
            f"Budget overview computed for {month}: "
            f"budget={overview.total_budget}, spent={overview.total_spent}"
        )
        return overview

    def copy_previous_month(self, month_key: str) -> list[Budget]:
        """Return the previous month's budgets re-keyed to month_key.

        Args:
            month_key: Month receiving the copies (YYYY-MM).

        Returns:
            list[Budget]: Unsaved copies; empty when nothing was budgeted.
        """
        source = previous_month(month_key)
        copies = copy_budgets_to_month(
            self._repository.fetch_budgets(),
            source,
            month_key,
        )
        if not copies:
            self._logger.info(f"No budgets found in {source} to copy")
        return copies


__all__ = ["GetBudgetOverviewUseCase", "BudgetOverview"]
