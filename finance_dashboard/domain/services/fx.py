"""Domain helpers for USD to TWD conversion."""

from decimal import Decimal

from finance_dashboard.domain.constants import (
    DEFAULT_USD_TO_TWD_RATE,
    FOREIGN_CURRENCY,
)
from finance_dashboard.domain.models import UserSettings
from finance_dashboard.utils.decimal_utils import coerce_decimal

_ONE = Decimal("1")


def rate_for_currency(currency: str, fx_rate: Decimal) -> Decimal:
    """Return the multiplier converting an amount into TWD.

    Args:
        currency: Currency code of the amount.
        fx_rate: USD to TWD rate applied to every foreign amount.

    Returns:
        Decimal: fx_rate for USD amounts, otherwise 1.
    """
    return fx_rate if currency == FOREIGN_CURRENCY else _ONE


def convert_to_local(
    amount: Decimal,
    currency: str,
    fx_rate: Decimal,
) -> Decimal:
    """Convert an amount into TWD with the single scalar rate."""
    return amount * rate_for_currency(currency, fx_rate)


def resolve_fx_rate(
    settings: UserSettings | None,
    default: Decimal = DEFAULT_USD_TO_TWD_RATE,
) -> Decimal:
    """Return the manual override rate when set, else the default.

    Args:
        settings: User settings holding an optional manual rate.
        default: Rate used when no valid override exists.

    Returns:
        Decimal: Effective USD to TWD rate.
    """
    if settings is not None and settings.manual_rate is not None:
        rate = coerce_decimal(settings.manual_rate)
        if rate > 0:
            return rate
    return coerce_decimal(default)


__all__ = ["convert_to_local", "rate_for_currency", "resolve_fx_rate"]
