"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Form input is trusted but loosely typed, so anything that does not parse
    as a finite number becomes zero instead of raising.

    Args:
        value: Raw numeric value from storage or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return Decimal("0")
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("0")
    return result if result.is_finite() else Decimal("0")


def percentage(part: Decimal, whole: Decimal) -> Decimal:
    """Return part / whole * 100, or zero when whole is zero."""
    if whole == 0:
        return Decimal("0")
    return part / whole * Decimal("100")


__all__ = ["coerce_decimal", "percentage"]
