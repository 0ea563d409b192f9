"""Monthly budget usage per expense category."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from finance_dashboard.domain.models import (
    Budget,
    BudgetOverview,
    BudgetUsage,
    CashflowRecord,
)
from finance_dashboard.domain.services.periods import parse_month, shift_month
from finance_dashboard.utils.decimal_utils import percentage

AVERAGE_WINDOW_MONTHS = 3


def _category_spending(
    records: Iterable[CashflowRecord],
    month_key: str,
) -> dict[str, Decimal]:
    spending: dict[str, Decimal] = {}
    for record in records:
        if record.is_expense and record.date.startswith(month_key):
            spending[record.category] = (
                spending.get(record.category, Decimal("0")) + record.amount
            )
    return spending


def average_category_spending(
    records: Iterable[CashflowRecord],
    month_key: str,
    window: int = AVERAGE_WINDOW_MONTHS,
) -> dict[str, Decimal]:
    """Average each category's spending over the months before month_key.

    Only months in which the category had spending count toward its average.

    Args:
        records: Cashflow records.
        month_key: Month being budgeted (excluded from the window).
        window: Number of preceding months to consider.

    Returns:
        dict[str, Decimal]: Average monthly spending per category.
    """
    parse_month(month_key)
    cutoff = shift_month(month_key, -window)
    monthly: dict[str, dict[str, Decimal]] = {}
    for record in records:
        if not record.is_expense:
            continue
        if not (cutoff <= record.date < month_key):
            continue
        by_category = monthly.setdefault(record.month, {})
        by_category[record.category] = (
            by_category.get(record.category, Decimal("0")) + record.amount
        )

    totals: dict[str, Decimal] = {}
    counts: dict[str, int] = {}
    for by_category in monthly.values():
        for category, amount in by_category.items():
            totals[category] = totals.get(category, Decimal("0")) + amount
            counts[category] = counts.get(category, 0) + 1
    return {
        category: totals[category] / counts[category] for category in totals
    }


def compute_budget_usage(
    budgets: Iterable[Budget],
    records: Sequence[CashflowRecord],
    month_key: str,
    categories: Sequence[str] | None = None,
    known_categories: Sequence[str] = (),
) -> BudgetOverview:
    """Compare a month's expenses with its category budgets.

    Args:
        budgets: Every stored budget; only those of month_key are used.
        records: Cashflow records.
        month_key: Month to report (YYYY-MM).
        categories: Optional category list; defaults to budgeted categories
            followed by any other category with spending.
        known_categories: Expense categories in display order; unbudgeted
            categories with spending follow this order, unknown ones last.

    Returns:
        BudgetOverview: Usage per category with at least a budget or
        spending, plus totals.

    Raises:
        ValueError: If month_key is not a valid YYYY-MM month.
    """
    parse_month(month_key)
    month_budgets: dict[str, Decimal] = {}
    for budget in budgets:
        if budget.month == month_key:
            month_budgets[budget.category] = budget.amount
    spending = _category_spending(records, month_key)
    averages = average_category_spending(records, month_key)

    if categories is None:
        spent_order = [cat for cat in known_categories if cat in spending]
        spent_order.extend(spending)
        ordered = list(dict.fromkeys([*month_budgets, *spent_order]))
    else:
        ordered = list(dict.fromkeys(categories))

    items: list[BudgetUsage] = []
    for category in ordered:
        budget_amount = month_budgets.get(category, Decimal("0"))
        spent = spending.get(category, Decimal("0"))
        if budget_amount <= 0 and spent == 0:
            continue
        items.append(
            BudgetUsage(
                category=category,
                budget=budget_amount,
                spent=spent,
                remaining=budget_amount - spent,
                usage_percentage=percentage(spent, budget_amount),
                average_spending=averages.get(category),
            )
        )

    return BudgetOverview(
        month=month_key,
        items=items,
        total_budget=sum((item.budget for item in items), Decimal("0")),
        total_spent=sum((item.spent for item in items), Decimal("0")),
    )


def copy_budgets_to_month(
    budgets: Iterable[Budget],
    source_month: str,
    target_month: str,
) -> list[Budget]:
    """Return copies of the source month's budgets keyed to target_month.

    Copies get an empty id; the persistence layer assigns one on save.

    Raises:
        ValueError: If either month key is malformed.
    """
    parse_month(source_month)
    parse_month(target_month)
    return [
        Budget(
            id="",
            month=target_month,
            category=budget.category,
            amount=budget.amount,
        )
        for budget in budgets
        if budget.month == source_month and budget.amount > 0
    ]


__all__ = [
    "AVERAGE_WINDOW_MONTHS",
    "average_category_spending",
    "compute_budget_usage",
    "copy_budgets_to_month",
]
