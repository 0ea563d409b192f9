"""Tests for the investment P&L statement."""

from decimal import Decimal

import pytest

from finance_dashboard.domain.models import (
    AssetAccount,
    CashAsset,
    EtfAsset,
    RealEstateAsset,
    StockAsset,
    UsdOtherAsset,
)
from finance_dashboard.domain.services import (
    compute_pnl,
    normalize,
    sort_pnl_rows,
)


def _stock(code: str, units: str, cost: str, value: str) -> StockAsset:
    return StockAsset(
        id=code,
        code=code,
        units=Decimal(units),
        cost=Decimal(cost),
        current_value=Decimal(value),
    )


def _statement(*accounts: AssetAccount):
    return compute_pnl(normalize(list(accounts), Decimal("32")))


def test_single_stock_profit_and_percentage() -> None:
    statement = _statement(
        AssetAccount(
            id="a1",
            name="Broker",
            assets=(_stock("2330", "10", "100", "120"),),
        )
    )

    row = statement.rows[0]
    assert row.cost_twd == Decimal("1000")
    assert row.current_value_twd == Decimal("1200")
    assert row.profit_loss_twd == Decimal("200")
    assert row.pnl_percentage == Decimal("20")
    assert statement.overall_roi == Decimal("20")


def test_only_investment_types_are_reported() -> None:
    statement = _statement(
        AssetAccount(
            id="a1",
            name="Everything",
            assets=(
                CashAsset(id="c1", code="TWD", current_value=Decimal("100")),
                RealEstateAsset(
                    id="r1",
                    code="Flat",
                    cost=Decimal("1"),
                    current_value=Decimal("2"),
                ),
                _stock("2330", "1", "10", "12"),
                EtfAsset(
                    id="e1",
                    code="0050",
                    units=Decimal("1"),
                    cost=Decimal("10"),
                    current_value=Decimal("9"),
                ),
                UsdOtherAsset(
                    id="u1",
                    code="Bond",
                    cost=Decimal("1"),
                    current_value=Decimal("2"),
                ),
            ),
        )
    )

    assert [row.code for row in statement.rows] == ["2330", "0050", "Bond"]
    assert statement.rows[0].account_name == "Everything"
    assert statement.rows[2].current_value_twd == Decimal("64")


def test_totals_are_consistent() -> None:
    statement = _statement(
        AssetAccount(
            id="a1",
            name="Broker",
            assets=(
                _stock("A", "10", "100", "150"),
                _stock("B", "5", "200", "180"),
            ),
        )
    )

    assert statement.total_value == Decimal("2400")
    assert statement.total_cost == Decimal("2000")
    assert statement.total_pnl == statement.total_value - statement.total_cost
    assert statement.overall_roi == Decimal("20")


def test_zero_cost_holdings_do_not_divide_by_zero() -> None:
    statement = _statement(
        AssetAccount(
            id="a1",
            name="Gifted",
            assets=(_stock("FREE", "10", "0", "5"),),
        )
    )

    assert statement.rows[0].pnl_percentage == Decimal("0")
    assert statement.overall_roi == Decimal("0")
    assert statement.total_pnl == Decimal("50")


def test_empty_statement_has_no_best_rows() -> None:
    statement = _statement()

    assert statement.rows == []
    assert statement.best_absolute is None
    assert statement.best_percentage is None
    assert statement.overall_roi == Decimal("0")


def test_best_rows_keep_the_first_of_ties() -> None:
    statement = _statement(
        AssetAccount(
            id="a1",
            name="Broker",
            assets=(
                _stock("A", "1", "100", "150"),
                _stock("B", "1", "100", "150"),
                _stock("C", "1", "10", "30"),
            ),
        )
    )

    assert statement.best_absolute.code == "A"
    assert statement.best_percentage.code == "C"


def test_sort_is_stable_for_equal_keys() -> None:
    statement = _statement(
        AssetAccount(
            id="a1",
            name="Broker",
            assets=(
                _stock("A", "1", "100", "110"),
                _stock("B", "1", "100", "150"),
                _stock("C", "1", "100", "110"),
            ),
        )
    )

    ascending = sort_pnl_rows(statement.rows, "profit_loss_twd")
    descending = sort_pnl_rows(
        statement.rows,
        "profit_loss_twd",
        descending=True,
    )

    assert [row.code for row in ascending] == ["A", "C", "B"]
    assert [row.code for row in descending] == ["B", "A", "C"]
    assert [row.code for row in statement.rows] == ["A", "B", "C"]


def test_sort_by_text_column() -> None:
    statement = _statement(
        AssetAccount(
            id="a1",
            name="Broker",
            assets=(
                _stock("MSFT", "1", "1", "1"),
                _stock("AAPL", "1", "1", "1"),
            ),
        )
    )

    rows = sort_pnl_rows(statement.rows, "code")

    assert [row.code for row in rows] == ["AAPL", "MSFT"]


def test_sort_rejects_unknown_column() -> None:
    with pytest.raises(ValueError):
        sort_pnl_rows([], "units")
