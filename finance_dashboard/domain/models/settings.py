"""Domain model for user preferences stored alongside the data."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class UserSettings:
    """User-level settings.

    Attributes:
        manual_rate: Optional USD to TWD override rate.
        custom_income_categories: Extra income categories.
        custom_expense_categories: Extra expense categories.
    """

    manual_rate: Decimal | None = None
    custom_income_categories: tuple[str, ...] = ()
    custom_expense_categories: tuple[str, ...] = ()


__all__ = ["UserSettings"]
