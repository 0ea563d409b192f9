"""Use case to compute the financial health score."""

from decimal import Decimal

from finance_dashboard.application.ports.snapshot_repository import (
    FinanceSnapshotRepositoryPort,
)
from finance_dashboard.application.use_cases.snapshot_utils import (
    load_valued_accounts,
)
from finance_dashboard.domain.constants import DEFAULT_USD_TO_TWD_RATE
from finance_dashboard.domain.models import HealthScore
from finance_dashboard.domain.policies import (
    DEFAULT_HEALTH_POLICY,
    HealthScorePolicy,
)
from finance_dashboard.domain.services import score_health
from finance_dashboard.infrastructure.logging.logger import get_app_logger


class GetHealthScoreUseCase:
    """Score the emergency fund, concentration and stock exposure."""

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
            policy: Weights and thresholds of the score.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._default_fx_rate = default_fx_rate
        self._policy = policy

    def execute(self) -> HealthScore:
        """Return the health score for the current snapshot."""
        _, accounts = load_valued_accounts(
            self._repository,
            self._default_fx_rate,
            self._logger,
        )
        records = self._repository.fetch_cashflow_records()
        result = score_health(accounts, records, policy=self._policy)
        self._logger.info(
            f"Health score computed: score={result.score}, level={result.level}"
        )
        return result


__all__ = ["GetHealthScoreUseCase", "HealthScore"]
