"""Domain models for cashflow records."""

from dataclasses import dataclass
from decimal import Decimal

from finance_dashboard.domain.constants import (
    LOCAL_CURRENCY,
    RECORD_TYPE_EXPENSE,
    RECORD_TYPE_INCOME,
)


@dataclass(frozen=True)
class CashflowRecord:
    """Single income or expense entry.

    Attributes:
        id: Record identifier.
        date: ISO date string (YYYY-MM-DD).
        type: Either "income" or "expense".
        category: Free-form category name.
        amount: Positive amount in the record currency.
        currency: Currency code of the amount.
        description: Optional note.
        account_id: Optional identifier of the linked asset account.
        account_name: Optional name of the linked asset account.
        is_recurring: Whether the entry repeats every month.
        recurrence_day: Day of month (1-31) for recurring entries.
    """

    id: str
    date: str
    type: str
    category: str
    amount: Decimal
    currency: str = LOCAL_CURRENCY
    description: str = ""
    account_id: str | None = None
    account_name: str | None = None
    is_recurring: bool = False
    recurrence_day: int | None = None

    @property
    def month(self) -> str:
        """Return the YYYY-MM month key of the record."""
        return self.date[:7]

    @property
    def is_income(self) -> bool:
        return self.type == RECORD_TYPE_INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == RECORD_TYPE_EXPENSE


__all__ = ["CashflowRecord"]
