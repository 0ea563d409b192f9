"""Tests for currency conversion and month key helpers."""

from datetime import date
from decimal import Decimal

import pytest

from finance_dashboard.domain.models import UserSettings
from finance_dashboard.domain.services import (
    convert_to_local,
    rate_for_currency,
    resolve_fx_rate,
)
from finance_dashboard.domain.services.periods import (
    add_months,
    month_key_of,
    parse_month,
    previous_month,
    shift_month,
)


def test_rate_applies_to_usd_only() -> None:
    assert rate_for_currency("USD", Decimal("32")) == Decimal("32")
    assert rate_for_currency("TWD", Decimal("32")) == Decimal("1")
    assert rate_for_currency("JPY", Decimal("32")) == Decimal("1")


def test_convert_to_local() -> None:
    assert convert_to_local(Decimal("10"), "USD", Decimal("31")) == Decimal(
        "310"
    )
    assert convert_to_local(Decimal("10"), "TWD", Decimal("31")) == Decimal(
        "10"
    )


def test_manual_rate_overrides_default() -> None:
    settings = UserSettings(manual_rate=Decimal("30.5"))

    assert resolve_fx_rate(settings, Decimal("32")) == Decimal("30.5")
    assert resolve_fx_rate(UserSettings(), Decimal("32")) == Decimal("32")
    assert resolve_fx_rate(None) == Decimal("32")


def test_month_helpers() -> None:
    assert parse_month("2024-02") == date(2024, 2, 1)
    assert month_key_of(date(2024, 3, 31)) == "2024-03"
    assert shift_month("2024-01", -1) == "2023-12"
    assert shift_month("2024-11", 3) == "2025-02"
    assert previous_month("2024-03") == "2024-02"
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 1)


def test_parse_month_rejects_malformed_keys() -> None:
    with pytest.raises(ValueError):
        parse_month("2024-13")
