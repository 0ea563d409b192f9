"""Domain package for business rules and core models."""

from .constants import DEFAULT_USD_TO_TWD_RATE, LOCAL_CURRENCY
from .models import (
    AssetAccount,
    AssetSummary,
    CashflowRecord,
    HealthScore,
    MonthlySummary,
    PnlStatement,
    ValuedAccount,
)
from .policies import DEFAULT_HEALTH_POLICY, HealthScorePolicy
from .services import (
    compute_monthly_summary,
    compute_pnl,
    normalize,
    score_health,
    summarize,
)

__all__ = [
    "AssetAccount",
    "AssetSummary",
    "CashflowRecord",
    "HealthScore",
    "MonthlySummary",
    "PnlStatement",
    "ValuedAccount",
    "DEFAULT_HEALTH_POLICY",
    "DEFAULT_USD_TO_TWD_RATE",
    "HealthScorePolicy",
    "LOCAL_CURRENCY",
    "compute_monthly_summary",
    "compute_pnl",
    "normalize",
    "score_health",
    "summarize",
]
