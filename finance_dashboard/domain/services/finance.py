"""Domain services for portfolio and cashflow aggregates."""

from collections.abc import Iterable
from decimal import Decimal

from finance_dashboard.domain.constants import (
    ASSET_TYPE_COLORS,
    ASSET_TYPE_LABELS,
    BREAKDOWN_ORDER,
    FOREIGN_CURRENCY,
)
from finance_dashboard.domain.models import (
    AssetSummary,
    BreakdownEntry,
    CashflowRecord,
    MonthlySummary,
    ValuedAccount,
)
from finance_dashboard.domain.services.valuation import iter_valued_assets
from finance_dashboard.utils.decimal_utils import percentage


def summarize(accounts: Iterable[ValuedAccount]) -> AssetSummary:
    """Compute portfolio totals and the breakdown by asset type.

    Args:
        accounts: Valued asset accounts.

    Returns:
        AssetSummary: Total value, non-zero per-type totals in display
        order, and the TWD value of USD holdings.
    """
    total = Decimal("0")
    total_foreign = Decimal("0")
    totals = {asset_type: Decimal("0") for asset_type in BREAKDOWN_ORDER}

    for asset in iter_valued_assets(accounts):
        value = asset.current_value_twd
        total += value
        if asset.account_type in totals:
            totals[asset.account_type] += value
        if asset.currency == FOREIGN_CURRENCY:
            total_foreign += value

    breakdown = [
        BreakdownEntry(
            asset_type=asset_type,
            label=ASSET_TYPE_LABELS[asset_type],
            value=totals[asset_type],
            color=ASSET_TYPE_COLORS[asset_type],
        )
        for asset_type in BREAKDOWN_ORDER
        if totals[asset_type] > 0
    ]
    return AssetSummary(
        total=total,
        breakdown=breakdown,
        total_foreign_in_local=total_foreign,
    )


def compute_monthly_summary(
    records: Iterable[CashflowRecord],
    month_key: str,
) -> MonthlySummary:
    """Compute income, expense and savings rate for one month.

    Args:
        records: Cashflow records.
        month_key: Month prefix (YYYY-MM) matched against record dates.

    Returns:
        MonthlySummary: Totals for the month.
    """
    income = Decimal("0")
    expense = Decimal("0")
    for record in records:
        if not record.date.startswith(month_key):
            continue
        if record.is_income:
            income += record.amount
        elif record.is_expense:
            expense += record.amount

    net = income - expense
    savings_rate = percentage(net, income) if income > 0 else Decimal("0")
    return MonthlySummary(
        month=month_key,
        income=income,
        expense=expense,
        net=net,
        savings_rate=savings_rate,
    )


__all__ = ["compute_monthly_summary", "summarize"]
