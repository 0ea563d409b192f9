"""Domain models for budgets and savings goals."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Budget:
    """Spending cap for one expense category in one month."""

    id: str
    month: str
    category: str
    amount: Decimal


@dataclass(frozen=True)
class Goal:
    """Savings goal.

    When ``linked_account_ids`` is non-empty the linked accounts' value
    replaces ``current_amount``; the manual amount only applies to goals
    without links.
    """

    id: str
    name: str
    target_amount: Decimal
    target_date: str = ""
    current_amount: Decimal = Decimal("0")
    linked_account_ids: tuple[str, ...] = ()

    @property
    def is_linked(self) -> bool:
        return bool(self.linked_account_ids)


__all__ = ["Budget", "Goal"]
