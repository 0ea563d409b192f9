"""Tests for per-asset valuation and account normalization."""

from decimal import Decimal

from finance_dashboard.domain.models import (
    AssetAccount,
    CashAsset,
    EtfAsset,
    RealEstateAsset,
    StockAsset,
    UsdOtherAsset,
    ValuedAccount,
)
from finance_dashboard.domain.services import normalize, value_asset

RATE = Decimal("32")


def _accounts() -> list[AssetAccount]:
    return [
        AssetAccount(
            id="a1",
            name="Broker",
            assets=(
                StockAsset(
                    id="s1",
                    code="2330",
                    units=Decimal("10"),
                    cost=Decimal("100"),
                    current_value=Decimal("120"),
                ),
                EtfAsset(
                    id="e1",
                    code="VT",
                    units=Decimal("2"),
                    cost=Decimal("90"),
                    current_value=Decimal("100"),
                    currency="USD",
                ),
            ),
        ),
        AssetAccount(
            id="a2",
            name="Bank",
            assets=(
                CashAsset(id="c1", code="TWD", current_value=Decimal("5000")),
            ),
        ),
    ]


def test_stock_position_values_cost_and_pnl() -> None:
    """Per-share cost and value are multiplied by the unit count."""
    stock = StockAsset(
        id="s1",
        code="2330",
        units=Decimal("10"),
        cost=Decimal("100"),
        current_value=Decimal("120"),
    )

    valued = value_asset(stock, RATE)

    assert valued.cost_twd == Decimal("1000")
    assert valued.current_value_twd == Decimal("1200")
    assert valued.profit_loss_twd == Decimal("200")


def test_usd_cash_is_converted_with_rate() -> None:
    cash = CashAsset(id="c1", code="USD", current_value=Decimal("1000"),
                     currency="USD")

    valued = value_asset(cash, RATE)

    assert valued.current_value_twd == Decimal("32000")
    assert valued.cost_twd == Decimal("32000")
    assert valued.profit_loss_twd == Decimal("0")


def test_usd_other_asset_is_always_converted() -> None:
    asset = UsdOtherAsset(
        id="u1",
        code="Bond",
        cost=Decimal("100"),
        current_value=Decimal("110"),
    )

    valued = value_asset(asset, Decimal("30"))

    assert valued.currency == "USD"
    assert valued.current_value_twd == Decimal("3300")
    assert valued.cost_twd == Decimal("3000")


def test_real_estate_is_a_single_unit() -> None:
    house = RealEstateAsset(
        id="r1",
        code="Flat",
        cost=Decimal("8000000"),
        current_value=Decimal("9500000"),
    )

    valued = value_asset(house, RATE)

    assert valued.units == Decimal("1")
    assert valued.current_value_twd == Decimal("9500000")
    assert valued.profit_loss_twd == Decimal("1500000")


def test_normalize_preserves_account_and_asset_order() -> None:
    valued = normalize(_accounts(), RATE)

    assert [account.id for account in valued] == ["a1", "a2"]
    assert [asset.code for asset in valued[0].assets] == ["2330", "VT"]
    assert all(isinstance(account, ValuedAccount) for account in valued)
    assert valued[0].assets[1].current_value_twd == Decimal("6400")


def test_normalize_is_idempotent() -> None:
    """Normalizing already valued accounts yields the same values."""
    once = normalize(_accounts(), RATE)
    twice = normalize(once, RATE)

    assert twice == once


def test_account_total_sums_holdings() -> None:
    valued = normalize(_accounts(), RATE)

    assert valued[0].total_value_twd == Decimal("7600")
    assert valued[1].total_value_twd == Decimal("5000")
