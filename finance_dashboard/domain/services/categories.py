"""Cashflow category lists built from defaults and user settings."""

from collections.abc import Iterable

from finance_dashboard.domain.constants import (
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_CATEGORIES,
)
from finance_dashboard.domain.models import CashflowRecord, UserSettings


def _merge(defaults: tuple[str, ...], custom: tuple[str, ...]) -> list[str]:
    names = [name.strip() for name in (*defaults, *custom)]
    return list(dict.fromkeys(name for name in names if name))


def expense_categories(settings: UserSettings | None) -> list[str]:
    """Return default expense categories followed by the user's own."""
    custom = settings.custom_expense_categories if settings else ()
    return _merge(DEFAULT_EXPENSE_CATEGORIES, tuple(custom))


def income_categories(settings: UserSettings | None) -> list[str]:
    """Return default income categories followed by the user's own."""
    custom = settings.custom_income_categories if settings else ()
    return _merge(DEFAULT_INCOME_CATEGORIES, tuple(custom))


def unrecognized_categories(
    records: Iterable[CashflowRecord],
    settings: UserSettings | None,
    month_key: str,
) -> list[str]:
    """Return categories of the month's records not in their type's list."""
    income = set(income_categories(settings))
    expense = set(expense_categories(settings))
    unknown = {
        record.category
        for record in records
        if record.month == month_key
        and (
            (record.is_income and record.category not in income)
            or (record.is_expense and record.category not in expense)
        )
    }
    return sorted(unknown)


__all__ = [
    "expense_categories",
    "income_categories",
    "unrecognized_categories",
]
