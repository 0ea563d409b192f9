"""Domain models for financial aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from finance_dashboard.domain.models.assets import ValuedAccount, ValuedAsset
from finance_dashboard.domain.models.planning import Goal


@dataclass(frozen=True)
class BreakdownEntry:
    """Value aggregated for one asset type."""

    asset_type: str
    label: str
    value: Decimal
    color: str


@dataclass(frozen=True)
class AssetSummary:
    """Portfolio totals in the local reference currency.

    Attributes:
        total: Sum of every holding's current value.
        breakdown: Non-zero totals per asset type, in display order.
        total_foreign_in_local: Value of USD holdings converted to TWD.
    """

    total: Decimal
    breakdown: list[BreakdownEntry]
    total_foreign_in_local: Decimal

    @property
    def has_data(self) -> bool:
        """Return False when there is nothing to chart."""
        return self.total != 0

    def value_for(self, asset_type: str) -> Decimal:
        """Return the breakdown value of an asset type (zero if absent)."""
        for entry in self.breakdown:
            if entry.asset_type == asset_type:
                return entry.value
        return Decimal("0")


@dataclass(frozen=True)
class HealthScore:
    """Composite 0-100 financial health score."""

    score: int
    level: str
    level_color: str
    feedback: tuple[str, ...]


@dataclass(frozen=True)
class MonthlySummary:
    """Income and expense totals for one month."""

    month: str
    income: Decimal
    expense: Decimal
    net: Decimal
    savings_rate: Decimal


@dataclass(frozen=True)
class PnlRow:
    """Profit and loss line for one investment holding."""

    account_name: str
    asset: ValuedAsset
    pnl_percentage: Decimal

    @property
    def code(self) -> str:
        return self.asset.code

    @property
    def account_type(self) -> str:
        return self.asset.account_type

    @property
    def cost_twd(self) -> Decimal:
        return self.asset.cost_twd

    @property
    def current_value_twd(self) -> Decimal:
        return self.asset.current_value_twd

    @property
    def profit_loss_twd(self) -> Decimal:
        return self.asset.profit_loss_twd


@dataclass(frozen=True)
class PnlStatement:
    """Profit and loss statement across investment holdings."""

    rows: list[PnlRow]
    total_value: Decimal
    total_cost: Decimal
    total_pnl: Decimal
    overall_roi: Decimal
    best_absolute: PnlRow | None
    best_percentage: PnlRow | None


@dataclass(frozen=True)
class BudgetUsage:
    """Spending against the budget of one category."""

    category: str
    budget: Decimal
    spent: Decimal
    remaining: Decimal
    usage_percentage: Decimal
    average_spending: Decimal | None = None

    @property
    def is_over_budget(self) -> bool:
        return self.budget > 0 and self.spent > self.budget


@dataclass(frozen=True)
class BudgetOverview:
    """Budget usage for every category of one month."""

    month: str
    items: list[BudgetUsage]
    total_budget: Decimal
    total_spent: Decimal

    @property
    def total_remaining(self) -> Decimal:
        """Return total_budget minus total_spent."""
        return self.total_budget - self.total_spent


@dataclass(frozen=True)
class GoalProgress:
    """Progress of a goal toward its target amount."""

    goal: Goal
    current_amount: Decimal
    progress_percentage: Decimal
    remaining_amount: Decimal
    is_completed: bool
    linked_account_names: tuple[str, ...] = ()
    months_to_goal: int | None = None
    projected_completion: date | None = None


@dataclass(frozen=True)
class DashboardView:
    """Every derived metric computed from a single snapshot."""

    fx_rate: Decimal
    accounts: list[ValuedAccount]
    summary: AssetSummary
    health: HealthScore
    monthly: MonthlySummary
    pnl: PnlStatement
    budgets: BudgetOverview
    goals: list[GoalProgress]


__all__ = [
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
