"""Tests for the builders turning stored records into domain models."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_dashboard.domain.models import (
    CashAsset,
    EtfAsset,
    RealEstateAsset,
    StockAsset,
    UnclassifiedAsset,
    UsdOtherAsset,
    UserSettings,
)
from finance_dashboard.domain.services import (
    build_asset,
    build_asset_account,
    build_cashflow_record,
    build_goal,
    build_user_settings,
    normalize_asset_type,
    normalize_currency,
)


def test_asset_type_aliases() -> None:
    assert normalize_asset_type("Cash") == "cash"
    assert normalize_asset_type(" 股票 ") == "stock"
    assert normalize_asset_type("real-estate") == "real_estate"
    assert normalize_asset_type("美元資產") == "usd_other"
    assert normalize_asset_type("crypto") is None
    assert normalize_asset_type(None) is None


def test_currency_defaults_to_twd() -> None:
    assert normalize_currency(None) == "TWD"
    assert normalize_currency(" usd ") == "USD"


def test_build_asset_returns_matching_variant() -> None:
    assert isinstance(
        build_asset({"accountType": "cash", "currentValue": 10}),
        CashAsset,
    )
    assert isinstance(
        build_asset({"accountType": "etf", "units": 1}),
        EtfAsset,
    )
    assert isinstance(
        build_asset({"account_type": "real_estate", "cost": 1}),
        RealEstateAsset,
    )
    usd = build_asset({"accountType": "usd_other", "currency": "TWD"})
    assert isinstance(usd, UsdOtherAsset)
    assert usd.currency == "USD"


def test_build_asset_coerces_malformed_numbers_to_zero() -> None:
    asset = build_asset(
        {
            "id": "s1",
            "accountType": "stock",
            "code": "2330",
            "units": "abc",
            "cost": "1,234.5",
            "currentValue": None,
        }
    )

    assert isinstance(asset, StockAsset)
    assert asset.units == Decimal("0")
    assert asset.cost == Decimal("1234.5")
    assert asset.current_value == Decimal("0")


def test_unknown_asset_type_is_kept_and_logged() -> None:
    logger = MagicMock()

    asset = build_asset(
        {"id": "x", "accountType": "crypto", "currentValue": "5"},
        logger,
    )

    assert isinstance(asset, UnclassifiedAsset)
    assert asset.account_type == "crypto"
    assert asset.current_value == Decimal("5")
    logger.warning.assert_called_once()


def test_build_asset_account_keeps_asset_order() -> None:
    account = build_asset_account(
        {
            "id": "a1",
            "name": "Broker",
            "assets": [
                {"accountType": "stock", "code": "B"},
                {"accountType": "stock", "code": "A"},
            ],
        }
    )

    assert [asset.code for asset in account.assets] == ["B", "A"]


def test_negative_cashflow_amount_is_made_positive() -> None:
    logger = MagicMock()

    record = build_cashflow_record(
        {
            "id": "r1",
            "date": "2024-05-01",
            "type": "Expense",
            "category": "Food",
            "amount": "-250",
        },
        logger,
    )

    assert record.amount == Decimal("250")
    assert record.type == "expense"
    assert record.month == "2024-05"
    logger.warning.assert_called_once()


def test_recurrence_day_requires_recurring_flag() -> None:
    recurring = build_cashflow_record(
        {
            "date": "2024-05-01",
            "type": "income",
            "amount": 1,
            "isRecurring": True,
            "recurrenceDay": "5",
        }
    )
    one_off = build_cashflow_record(
        {
            "date": "2024-05-01",
            "type": "income",
            "amount": 1,
            "recurrenceDay": 5,
        }
    )
    out_of_range = build_cashflow_record(
        {
            "date": "2024-05-01",
            "type": "income",
            "amount": 1,
            "isRecurring": True,
            "recurrenceDay": 40,
        }
    )

    assert recurring.recurrence_day == 5
    assert one_off.recurrence_day is None
    assert out_of_range.recurrence_day is None


@pytest.mark.parametrize(
    ("raw_flag", "expected"),
    [
        ("false", False),
        ("False", False),
        ("0", False),
        ("", False),
        ("no", False),
        ("true", True),
        (" TRUE ", True),
        ("1", True),
        (1, True),
        (0, False),
        (True, True),
        (None, False),
    ],
)
def test_recurring_flag_parses_text_and_numbers(raw_flag, expected) -> None:
    record = build_cashflow_record(
        {
            "date": "2024-05-01",
            "type": "expense",
            "amount": 1,
            "is_recurring": raw_flag,
            "recurrence_day": 5,
        }
    )

    assert record.is_recurring is expected
    assert record.recurrence_day == (5 if expected else None)


def test_goal_linked_accounts_accept_comma_separated_text() -> None:
    goal = build_goal(
        {
            "id": "g1",
            "name": "House",
            "targetAmount": "2000000",
            "linkedAccountIds": "a1, a2,,",
        }
    )

    assert goal.linked_account_ids == ("a1", "a2")
    assert goal.target_amount == Decimal("2000000")
    assert goal.is_linked is True


def test_non_positive_manual_rate_counts_as_unset() -> None:
    assert build_user_settings({"manualRate": 0}).manual_rate is None
    assert build_user_settings({"manualRate": "-3"}).manual_rate is None
    assert build_user_settings(None) == UserSettings()

    settings = build_user_settings(
        {
            "manualRate": "31.5",
            "customIncome": ["Dividends"],
            "customExpense": ["Pets", ""],
        }
    )

    assert settings.manual_rate == Decimal("31.5")
    assert settings.custom_income_categories == ("Dividends",)
    assert settings.custom_expense_categories == ("Pets",)
