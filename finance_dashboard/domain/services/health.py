"""Heuristic financial health score."""

from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal

from finance_dashboard.domain.constants import (
    ASSET_TYPE_CASH,
    ASSET_TYPE_STOCK,
    INVESTMENT_TYPES,
)
from finance_dashboard.domain.models import (
    AssetSummary,
    CashflowRecord,
    HealthScore,
    ValuedAccount,
)
from finance_dashboard.domain.policies import (
    DEFAULT_HEALTH_POLICY,
    HealthScorePolicy,
    LEVEL_COLORS,
    LEVEL_NEEDS_IMPROVEMENT,
)
from finance_dashboard.domain.services.finance import summarize
from finance_dashboard.domain.services.valuation import iter_valued_assets
from finance_dashboard.utils.decimal_utils import percentage


def monthly_expense_totals(
    records: Iterable[CashflowRecord],
) -> tuple[Decimal, int]:
    """Return the total expense and the number of months with any expense."""
    months: dict[str, Decimal] = {}
    for record in records:
        if not record.is_expense:
            continue
        months[record.month] = months.get(record.month, Decimal("0")) + (
            record.amount
        )
    return sum(months.values(), Decimal("0")), len(months)


def average_monthly_expense(records: Iterable[CashflowRecord]) -> Decimal:
    """Average the monthly expense totals over months with any expense.

    Args:
        records: Cashflow records; only expenses are considered.

    Returns:
        Decimal: Average monthly expense, or zero without expenses.
    """
    total, month_count = monthly_expense_totals(records)
    if month_count == 0:
        return Decimal("0")
    return total / month_count


def _exceeds_pct(part: Decimal, whole: Decimal, threshold: Decimal) -> bool:
    """Return True when part is strictly above threshold percent of whole."""
    return part * Decimal("100") > threshold * whole


def _score_emergency_fund(
    summary: AssetSummary,
    records: Sequence[CashflowRecord],
    policy: HealthScorePolicy,
) -> tuple[int, str]:
    total_expense, month_count = monthly_expense_totals(records)
    if total_expense == 0:
        return (
            policy.emergency_no_data_points,
            "No expense data yet; the emergency fund cannot be assessed.",
        )

    # Bands compare cash * months with threshold * total expense.
    scaled_cash = summary.value_for(ASSET_TYPE_CASH) * month_count
    cash_months = scaled_cash / total_expense
    if (
        policy.emergency_min_months * total_expense
        <= scaled_cash
        <= policy.emergency_max_months * total_expense
    ):
        return (
            policy.emergency_adequate_points,
            f"Emergency fund is adequate ({cash_months:.1f} months); "
            "your financial base is solid.",
        )
    if scaled_cash > policy.emergency_max_months * total_expense:
        return (
            policy.emergency_excess_points,
            f"Cash holdings are high ({cash_months:.1f} months); "
            "consider investing part of them.",
        )
    if scaled_cash >= policy.emergency_floor_months * total_expense:
        return (
            policy.emergency_low_points,
            f"Emergency fund ({cash_months:.1f} months) is insufficient; "
            f"build it up to {policy.emergency_min_months}-"
            f"{policy.emergency_max_months} months.",
        )
    return (
        policy.emergency_critical_points,
        f"Emergency fund is critically low ({cash_months:.1f} months); "
        "prioritise saving.",
    )


def _score_concentration(
    accounts: Sequence[ValuedAccount],
    policy: HealthScorePolicy,
) -> tuple[int, str]:
    investments = [
        asset
        for asset in iter_valued_assets(accounts)
        if asset.account_type in INVESTMENT_TYPES
    ]
    total_investment = sum(
        (asset.current_value_twd for asset in investments),
        Decimal("0"),
    )
    top_asset = None
    top_value = Decimal("0")
    if total_investment > 0:
        top_asset = max(investments, key=lambda asset: asset.current_value_twd)
        top_value = top_asset.current_value_twd
    concentration = percentage(top_value, total_investment)

    if _exceeds_pct(
        top_value,
        total_investment,
        policy.concentration_high_pct,
    ):
        return (
            policy.concentration_high_points,
            f'Investments are heavily concentrated in "{top_asset.code}" '
            f"({concentration:.1f}%); risk is very high.",
        )
    if _exceeds_pct(
        top_value,
        total_investment,
        policy.concentration_moderate_pct,
    ):
        return (
            policy.concentration_moderate_points,
            f"A single holding is a large share ({concentration:.1f}%); "
            "consider diversifying.",
        )
    return (
        policy.concentration_diversified_points,
        "Portfolio is well diversified; the largest holding is "
        f"{concentration:.1f}%.",
    )


def _score_stock_exposure(
    summary: AssetSummary,
    policy: HealthScorePolicy,
) -> tuple[int, str]:
    stock_value = summary.value_for(ASSET_TYPE_STOCK)
    stock_percentage = percentage(stock_value, summary.total)
    if _exceeds_pct(stock_value, summary.total, policy.stock_high_pct):
        return (
            policy.stock_high_points,
            f"Individual stocks are {stock_percentage:.1f}% of total assets; "
            "the allocation is too aggressive.",
        )
    if _exceeds_pct(stock_value, summary.total, policy.stock_moderate_pct):
        return (
            policy.stock_moderate_points,
            f"Individual stocks at {stock_percentage:.1f}% of total assets "
            "are on the high side; watch your risk.",
        )
    return (
        policy.stock_controlled_points,
        f"Stock risk is under control at {stock_percentage:.1f}% "
        "of total assets.",
    )


def score_health(
    accounts: Iterable[ValuedAccount],
    records: Iterable[CashflowRecord],
    policy: HealthScorePolicy = DEFAULT_HEALTH_POLICY,
) -> HealthScore:
    """Score emergency fund, concentration and stock exposure.

    Args:
        accounts: Valued asset accounts.
        records: Every cashflow record on file.
        policy: Weights and thresholds of the score.

    Returns:
        HealthScore: Integer score in [0, 100], its level and one feedback
        line per criterion (emergency fund, concentration, exposure).
    """
    accounts = list(accounts)
    records = list(records)
    summary = summarize(accounts)
    if summary.total == 0:
        return HealthScore(
            score=0,
            level=LEVEL_NEEDS_IMPROVEMENT,
            level_color=LEVEL_COLORS[LEVEL_NEEDS_IMPROVEMENT],
            feedback=("Add your assets to calculate a health score.",),
        )

    steps = (
        _score_emergency_fund(summary, records, policy),
        _score_concentration(accounts, policy),
        _score_stock_exposure(summary, policy),
    )
    raw_score = Decimal(sum(points for points, _ in steps))
    score = int(raw_score.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    score = max(0, min(100, score))
    level = policy.level_for(score)
    return HealthScore(
        score=score,
        level=level,
        level_color=LEVEL_COLORS[level],
        feedback=tuple(message for _, message in steps),
    )


__all__ = [
    "average_monthly_expense",
    "monthly_expense_totals",
    "score_health",
]
