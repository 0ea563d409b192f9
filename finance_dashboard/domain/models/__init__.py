"""Domain models package."""

from .assets import (
    Asset,
    AssetAccount,
    CashAsset,
    EtfAsset,
    RealEstateAsset,
    StockAsset,
    UnclassifiedAsset,
    UsdOtherAsset,
    ValuedAccount,
    ValuedAsset,
)
from .cashflow import CashflowRecord
from .finance import (
    AssetSummary,
    BreakdownEntry,
    BudgetOverview,
    BudgetUsage,
    DashboardView,
    GoalProgress,
    HealthScore,
    MonthlySummary,
    PnlRow,
    PnlStatement,
)
from .planning import Budget, Goal
from .settings import UserSettings

__all__ = [
    "Asset",
    "AssetAccount",
    "CashAsset",
    "EtfAsset",
    "RealEstateAsset",
    "StockAsset",
    "UnclassifiedAsset",
    "UsdOtherAsset",
    "ValuedAccount",
    "ValuedAsset",
    "CashflowRecord",
    "Budget",
    "Goal",
    "UserSettings",
    "AssetSummary",
    "BreakdownEntry",
    "BudgetOverview",
    "BudgetUsage",
    "DashboardView",
    "GoalProgress",
    "HealthScore",
    "MonthlySummary",
    "PnlRow",
    "PnlStatement",
]
