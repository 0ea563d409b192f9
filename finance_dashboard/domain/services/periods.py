"""Month key helpers (YYYY-MM)."""

from datetime import date, datetime


def parse_month(month_key: str) -> date:
    """Return the first day of a YYYY-MM month.

    Raises:
        ValueError: If the key is not a valid YYYY-MM month.
    """
    return datetime.strptime(month_key, "%Y-%m").date()


def month_key_of(day: date) -> str:
    """Return the YYYY-MM key of a date."""
    return f"{day.year:04d}-{day.month:02d}"


def add_months(day: date, months: int) -> date:
    """Return the first day of the month ``months`` away from ``day``."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def shift_month(month_key: str, months: int) -> str:
    """Shift a YYYY-MM key by a number of months."""
    return month_key_of(add_months(parse_month(month_key), months))


def previous_month(month_key: str) -> str:
    """Return the month before a YYYY-MM key."""
    return shift_month(month_key, -1)


__all__ = [
    "add_months",
    "month_key_of",
    "parse_month",
    "previous_month",
    "shift_month",
]
