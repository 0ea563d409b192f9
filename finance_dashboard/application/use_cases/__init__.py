"""Application use cases package."""

from .get_asset_summary import AssetSummary, GetAssetSummaryUseCase
from .get_budget_overview import BudgetOverview, GetBudgetOverviewUseCase
from .get_dashboard import DashboardView, GetDashboardUseCase
from .get_goal_progress import GetGoalProgressUseCase, GoalProgress
from .get_health_score import GetHealthScoreUseCase, HealthScore
from .get_monthly_summary import GetMonthlySummaryUseCase, MonthlySummary
from .get_pnl_statement import GetPnlStatementUseCase, PnlStatement

__all__ = [
    "AssetSummary",
    "BudgetOverview",
    "DashboardView",
    "GetAssetSummaryUseCase",
    "GetBudgetOverviewUseCase",
    "GetDashboardUseCase",
    "GetGoalProgressUseCase",
    "GetHealthScoreUseCase",
    "GetMonthlySummaryUseCase",
    "GetPnlStatementUseCase",
    "GoalProgress",
    "HealthScore",
    "MonthlySummary",
    "PnlStatement",
]
