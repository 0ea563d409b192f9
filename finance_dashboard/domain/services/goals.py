"""Savings goal progress and completion projections."""

import math
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from finance_dashboard.domain.models import (
    CashflowRecord,
    Goal,
    GoalProgress,
    ValuedAccount,
)
from finance_dashboard.domain.services.periods import (
    add_months,
    month_key_of,
    shift_month,
)
from finance_dashboard.utils.decimal_utils import percentage

SAVINGS_WINDOW_MONTHS = 6
_HUNDRED = Decimal("100")


def average_monthly_savings(
    records: Iterable[CashflowRecord],
    today: date,
    months: int = SAVINGS_WINDOW_MONTHS,
) -> Decimal:
    """Average the monthly net cashflow over the recent window.

    Args:
        records: Cashflow records.
        today: Reference date; the window starts ``months`` months before it.
        months: Window length in months.

    Returns:
        Decimal: Average of income minus expense per month with records,
        or zero when the window is empty.
    """
    cutoff = shift_month(month_key_of(today), -months)
    monthly_net: dict[str, Decimal] = {}
    for record in records:
        if record.date < cutoff:
            continue
        if record.is_income:
            delta = record.amount
        elif record.is_expense:
            delta = -record.amount
        else:
            continue
        monthly_net[record.month] = (
            monthly_net.get(record.month, Decimal("0")) + delta
        )
    if not monthly_net:
        return Decimal("0")
    return sum(monthly_net.values(), Decimal("0")) / len(monthly_net)


def effective_current_amount(
    goal: Goal,
    accounts_by_id: dict[str, ValuedAccount],
) -> Decimal:
    """Return the linked accounts' value, or the manual amount when unlinked.

    Unknown linked account ids contribute nothing.
    """
    if not goal.is_linked:
        return goal.current_amount
    return sum(
        (
            accounts_by_id[account_id].total_value_twd
            for account_id in goal.linked_account_ids
            if account_id in accounts_by_id
        ),
        Decimal("0"),
    )


def compute_goal_progress(
    goals: Iterable[Goal],
    accounts: Sequence[ValuedAccount],
    records: Sequence[CashflowRecord],
    today: date,
) -> list[GoalProgress]:
    """Compute progress and projected completion for every goal.

    Args:
        goals: Savings goals.
        accounts: Valued asset accounts used for linked goals.
        records: Cashflow records used for the savings projection.
        today: Reference date for the savings window and projection.

    Returns:
        list[GoalProgress]: Progress entries in goal order.
    """
    accounts_by_id = {account.id: account for account in accounts}
    savings = average_monthly_savings(records, today)
    progress_items: list[GoalProgress] = []
    for goal in goals:
        current = effective_current_amount(goal, accounts_by_id)
        if goal.target_amount > 0:
            progress = min(percentage(current, goal.target_amount), _HUNDRED)
        else:
            progress = _HUNDRED
        remaining = max(Decimal("0"), goal.target_amount - current)
        is_completed = progress >= _HUNDRED

        months_to_goal = None
        projected = None
        if not is_completed and savings > 0 and remaining > 0:
            months_to_goal = math.ceil(remaining / savings)
            projected = add_months(today, months_to_goal)

        progress_items.append(
            GoalProgress(
                goal=goal,
                current_amount=current,
                progress_percentage=progress,
                remaining_amount=remaining,
                is_completed=is_completed,
                linked_account_names=tuple(
                    accounts_by_id[account_id].name
                    for account_id in goal.linked_account_ids
                    if account_id in accounts_by_id
                ),
                months_to_goal=months_to_goal,
                projected_completion=projected,
            )
        )
    return progress_items


__all__ = [
    "SAVINGS_WINDOW_MONTHS",
    "average_monthly_savings",
    "compute_goal_progress",
    "effective_current_amount",
]
