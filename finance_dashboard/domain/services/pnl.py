"""Profit and loss statement for investment holdings."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from finance_dashboard.domain.constants import PNL_TYPES
from finance_dashboard.domain.models import PnlRow, PnlStatement, ValuedAccount
from finance_dashboard.utils.decimal_utils import percentage

PNL_SORT_KEYS = (
    "code",
    "account_type",
    "account_name",
    "cost_twd",
    "current_value_twd",
    "profit_loss_twd",
    "pnl_percentage",
)


def _first_max(rows: Sequence[PnlRow], attribute: str) -> PnlRow | None:
    best = None
    for row in rows:
        if best is None or getattr(row, attribute) > getattr(best, attribute):
            best = row
    return best


def compute_pnl(accounts: Iterable[ValuedAccount]) -> PnlStatement:
    """Build the P&L statement across stock, ETF and USD holdings.

    Args:
        accounts: Valued asset accounts.

    Returns:
        PnlStatement: Rows in account then asset order, totals, overall ROI
        and the best rows by amount and by percentage.
    """
    rows = [
        PnlRow(
            account_name=account.name,
            asset=asset,
            pnl_percentage=(
                percentage(asset.profit_loss_twd, asset.cost_twd)
                if asset.cost_twd > 0
                else Decimal("0")
            ),
        )
        for account in accounts
        for asset in account.assets
        if asset.account_type in PNL_TYPES
    ]

    total_value = sum((row.current_value_twd for row in rows), Decimal("0"))
    total_cost = sum((row.cost_twd for row in rows), Decimal("0"))
    total_pnl = total_value - total_cost
    overall_roi = (
        percentage(total_pnl, total_cost) if total_cost > 0 else Decimal("0")
    )
    return PnlStatement(
        rows=rows,
        total_value=total_value,
        total_cost=total_cost,
        total_pnl=total_pnl,
        overall_roi=overall_roi,
        best_absolute=_first_max(rows, "profit_loss_twd"),
        best_percentage=_first_max(rows, "pnl_percentage"),
    )


def sort_pnl_rows(
    rows: Iterable[PnlRow],
    key: str,
    descending: bool = False,
) -> list[PnlRow]:
    """Sort P&L rows by a column; ties keep their original order.

    Args:
        rows: Rows to sort.
        key: Column name, one of PNL_SORT_KEYS.
        descending: Sort from largest to smallest.

    Returns:
        list[PnlRow]: New sorted list.

    Raises:
        ValueError: If the key is not a sortable column.
    """
    if key not in PNL_SORT_KEYS:
        raise ValueError(
            f"Unsupported P&L sort key: {key}. "
            f"Expected one of {', '.join(PNL_SORT_KEYS)}."
        )
    return sorted(rows, key=lambda row: getattr(row, key), reverse=descending)


__all__ = ["PNL_SORT_KEYS", "compute_pnl", "sort_pnl_rows"]
