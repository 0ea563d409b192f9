"""Use case to compute savings goal progress."""

from datetime import date
from decimal import Decimal

from finance_dashboard.application.ports.snapshot_repository import (
    FinanceSnapshotRepositoryPort,
)
from finance_dashboard.application.use_cases.snapshot_utils import (
    load_valued_accounts,
)
from finance_dashboard.domain.constants import DEFAULT_USD_TO_TWD_RATE
from finance_dashboard.domain.models import GoalProgress
from finance_dashboard.domain.services import compute_goal_progress
from finance_dashboard.infrastructure.logging.logger import get_app_logger


class GetGoalProgressUseCase:
    """Compute progress and projections for every goal."""

    def __init__(
        self,
        repository: FinanceSnapshotRepositoryPort,
        logger=None,
        default_fx_rate: Decimal = DEFAULT_USD_TO_TWD_RATE,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._default_fx_rate = default_fx_rate

    def execute(self, today: date | None = None) -> list[GoalProgress]:
        """Return goal progress entries.

        Args:
            today: Reference date for projections; defaults to today.

        Returns:
            list[GoalProgress]: One entry per goal, in stored order.
        """
        reference = today or date.today()
        _, accounts = load_valued_accounts(
            self._repository,
            self._default_fx_rate,
            self._logger,
        )
        goals = self._repository.fetch_goals()
        records = self._repository.fetch_cashflow_records()
        progress = compute_goal_progress(goals, accounts, records, reference)
        completed = sum(1 for item in progress if item.is_completed)
        self._logger.info(
            f"Goal progress computed: goals={len(progress)}, "
            f"completed={completed}"
        )
        return progress


__all__ = ["GetGoalProgressUseCase", "GoalProgress"]
