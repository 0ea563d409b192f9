"""Domain services package."""

from .budgets import (
    average_category_spending,
    compute_budget_usage,
    copy_budgets_to_month,
)
from .categories import (
    expense_categories,
    income_categories,
    unrecognized_categories,
)
from .finance import compute_monthly_summary, summarize
from .fx import convert_to_local, rate_for_currency, resolve_fx_rate
from .goals import (
    average_monthly_savings,
    compute_goal_progress,
    effective_current_amount,
)
from .health import (
    average_monthly_expense,
    monthly_expense_totals,
    score_health,
)
from .normalization import (
    build_asset,
    build_asset_account,
    build_budget,
    build_cashflow_record,
    build_goal,
    build_user_settings,
    normalize_asset_type,
    normalize_currency,
)
from .periods import previous_month, shift_month
from .pnl import PNL_SORT_KEYS, compute_pnl, sort_pnl_rows
from .valuation import normalize, value_asset

__all__ = [
    "PNL_SORT_KEYS",
    "average_category_spending",
    "average_monthly_expense",
    "average_monthly_savings",
    "build_asset",
    "build_asset_account",
    "build_budget",
    "build_cashflow_record",
    "build_goal",
    "build_user_settings",
    "compute_budget_usage",
    "compute_goal_progress",
    "compute_monthly_summary",
    "compute_pnl",
    "convert_to_local",
    "copy_budgets_to_month",
    "effective_current_amount",
    "expense_categories",
    "income_categories",
    "monthly_expense_totals",
    "normalize",
    "normalize_asset_type",
    "normalize_currency",
    "previous_month",
    "rate_for_currency",
    "resolve_fx_rate",
    "score_health",
    "shift_month",
    "sort_pnl_rows",
    "summarize",
    "unrecognized_categories",
    "value_asset",
]
