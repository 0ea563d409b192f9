"""Use case assembling every dashboard metric from one snapshot read."""

from datetime import date
from decimal import Decimal

from finance_dashboard.application.ports.snapshot_repository import (
    FinanceSnapshotRepositoryPort,
)
from finance_dashboard.application.use_cases.snapshot_utils import (
    resolve_snapshot_fx_rate,
)
from finance_dashboard.domain.constants import DEFAULT_USD_TO_TWD_RATE
from finance_dashboard.domain.models import DashboardView
from finance_dashboard.domain.policies import (
    DEFAULT_HEALTH_POLICY,
    HealthScorePolicy,
)
from finance_dashboard.domain.services import (
    compute_budget_usage,
    compute_goal_progress,
    compute_monthly_summary,
    compute_pnl,
    expense_categories,
    normalize,
    score_health,
    summarize,
)
from finance_dashboard.domain.services.periods import month_key_of
from finance_dashboard.infrastructure.logging.logger import get_app_logger


class GetDashboardUseCase:
    """Recompute the whole dashboard from the current snapshot.

    Nothing is cached between calls; every call reads the repository again.
    """

    def __init__(
        self,
        repository: FinanceSnapshotRepositoryPort,
        logger=None,
        default_fx_rate: Decimal = DEFAULT_USD_TO_TWD_RATE,
        policy: HealthScorePolicy = DEFAULT_HEALTH_POLICY,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing the finance snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
            default_fx_rate: USD to TWD rate used without a manual override.
            policy: Weights and thresholds of the health score.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._default_fx_rate = default_fx_rate
        self._policy = policy

    def execute(
        self,
        month_key: str | None = None,
        today: date | None = None,
    ) -> DashboardView:
        """Return every derived metric.

        Args:
            month_key: Month for the cashflow and budget views; defaults to
                the month of ``today``.
            today: Reference date for goal projections; defaults to today.

        Returns:
            DashboardView: Valued accounts and all aggregates.
        """
        reference = today or date.today()
        month = month_key or month_key_of(reference)

        settings = self._repository.fetch_settings()
        fx_rate = resolve_snapshot_fx_rate(
            settings,
            self._default_fx_rate,
            self._logger,
        )
        accounts = normalize(self._repository.fetch_asset_accounts(), fx_rate)
        records = self._repository.fetch_cashflow_records()
        budgets = self._repository.fetch_budgets()
        goals = self._repository.fetch_goals()
        self._logger.info(
            f"Snapshot loaded: accounts={len(accounts)}, "
            f"records={len(records)}, budgets={len(budgets)}, "
            f"goals={len(goals)}"
        )

        summary = summarize(accounts)
        if not summary.has_data:
            self._logger.info("No asset data available for the dashboard")
        view = DashboardView(
            fx_rate=fx_rate,
            accounts=accounts,
            summary=summary,
            health=score_health(accounts, records, policy=self._policy),
            monthly=compute_monthly_summary(records, month),
            pnl=compute_pnl(accounts),
            budgets=compute_budget_usage(
                budgets,
                records,
                month,
                known_categories=expense_categories(settings),
            ),
            goals=compute_goal_progress(goals, accounts, records, reference),
        )
        self._logger.info(
            f"Dashboard computed for {month}: total={summary.total}, "
            f"score={view.health.score}"
        )
        return view


__all__ = ["GetDashboardUseCase", "DashboardView"]
