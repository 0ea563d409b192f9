"""Tests for the snapshot-based use cases."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_dashboard.application.use_cases import (
    GetAssetSummaryUseCase,
    GetBudgetOverviewUseCase,
    GetGoalProgressUseCase,
    GetHealthScoreUseCase,
    GetMonthlySummaryUseCase,
    GetPnlStatementUseCase,
)
from finance_dashboard.application.use_cases.snapshot_utils import (
    load_valued_accounts,
    resolve_snapshot_fx_rate,
)
from finance_dashboard.domain.models import (
    AssetAccount,
    Budget,
    CashAsset,
    CashflowRecord,
    Goal,
    StockAsset,
    UserSettings,
)


def _record(date_: str, type_: str, category: str, amount: str):
    return CashflowRecord(
        id=f"{date_}-{category}",
        date=date_,
        type=type_,
        category=category,
        amount=Decimal(amount),
    )


def _repository(manual_rate: Decimal | None = None) -> MagicMock:
    repository = MagicMock()
    repository.fetch_settings.return_value = UserSettings(
        manual_rate=manual_rate
    )
    repository.fetch_asset_accounts.return_value = [
        AssetAccount(
            id="bank",
            name="Bank",
            assets=(
                CashAsset(
                    id="c1",
                    code="USD",
                    current_value=Decimal("1000"),
                    currency="USD",
                ),
            ),
        ),
        AssetAccount(
            id="broker",
            name="Broker",
            assets=(
                StockAsset(
                    id="s1",
                    code="2330",
                    units=Decimal("10"),
                    cost=Decimal("100"),
                    current_value=Decimal("120"),
                ),
                StockAsset(
                    id="s2",
                    code="2317",
                    units=Decimal("10"),
                    cost=Decimal("100"),
                    current_value=Decimal("90"),
                ),
            ),
        ),
    ]
    repository.fetch_cashflow_records.return_value = [
        _record("2024-04-01", "income", "Salary", "50000"),
        _record("2024-04-03", "expense", "Food", "10000"),
        _record("2024-05-01", "income", "Salary", "50000"),
        _record("2024-05-03", "expense", "Food", "12000"),
    ]
    repository.fetch_budgets.return_value = [
        Budget(id="b1", month="2024-05", category="Food",
               amount=Decimal("10000")),
        Budget(id="b2", month="2024-04", category="Food",
               amount=Decimal("9000")),
    ]
    repository.fetch_goals.return_value = [
        Goal(id="g1", name="Trip", target_amount=Decimal("100000"),
             current_amount=Decimal("24000")),
    ]
    return repository


def test_resolve_snapshot_fx_rate_prefers_manual_rate() -> None:
    logger = MagicMock()

    rate = resolve_snapshot_fx_rate(
        UserSettings(manual_rate=Decimal("30")),
        Decimal("32"),
        logger,
    )

    assert rate == Decimal("30")
    assert "manual" in logger.info.call_args[0][0]


def test_load_valued_accounts_uses_default_rate() -> None:
    repository = _repository()

    rate, accounts = load_valued_accounts(
        repository,
        Decimal("31"),
        MagicMock(),
    )

    assert rate == Decimal("31")
    assert accounts[0].assets[0].current_value_twd == Decimal("31000")


def test_asset_summary_use_case() -> None:
    use_case = GetAssetSummaryUseCase(
        _repository(manual_rate=Decimal("30")),
        logger=MagicMock(),
    )

    summary, accounts = use_case.execute_with_accounts()

    assert summary.total == Decimal("30000") + Decimal("2100")
    assert summary.total_foreign_in_local == Decimal("30000")
    assert [account.id for account in accounts] == ["bank", "broker"]
    assert use_case.execute() == summary


def test_health_score_use_case_logs_result() -> None:
    logger = MagicMock()
    use_case = GetHealthScoreUseCase(_repository(), logger=logger)

    result = use_case.execute()

    assert 0 <= result.score <= 100
    assert len(result.feedback) == 3
    assert "Health score computed" in logger.info.call_args[0][0]


def test_monthly_summary_use_case() -> None:
    repository = _repository()
    use_case = GetMonthlySummaryUseCase(repository, logger=MagicMock())

    summary = use_case.execute("2024-05")

    assert summary.income == Decimal("50000")
    assert summary.expense == Decimal("12000")
    assert summary.savings_rate == Decimal("76")
    repository.fetch_asset_accounts.assert_not_called()


def test_pnl_use_case_sorts_rows() -> None:
    use_case = GetPnlStatementUseCase(_repository(), logger=MagicMock())

    descending = use_case.execute()
    ascending = use_case.execute(sort_key="code", descending=False)

    assert [row.code for row in descending.rows] == ["2330", "2317"]
    assert [row.code for row in ascending.rows] == ["2317", "2330"]
    assert descending.total_pnl == Decimal("100")


def test_pnl_use_case_rejects_unknown_sort_key() -> None:
    use_case = GetPnlStatementUseCase(_repository(), logger=MagicMock())

    with pytest.raises(ValueError):
        use_case.execute(sort_key="units")


def test_budget_overview_warns_when_over_budget() -> None:
    logger = MagicMock()
    use_case = GetBudgetOverviewUseCase(_repository(), logger=logger)

    overview = use_case.execute("2024-05")

    assert overview.items[0].category == "Food"
    assert overview.items[0].is_over_budget is True
    assert overview.items[0].average_spending == Decimal("10000")
    logger.warning.assert_called_once()
    assert "Food" in logger.warning.call_args[0][0]


def test_copy_previous_month_budgets() -> None:
    use_case = GetBudgetOverviewUseCase(_repository(), logger=MagicMock())

    copies = use_case.copy_previous_month("2024-05")

    assert copies == [
        Budget(id="", month="2024-05", category="Food",
               amount=Decimal("9000")),
    ]


def test_copy_previous_month_logs_when_nothing_to_copy() -> None:
    logger = MagicMock()
    use_case = GetBudgetOverviewUseCase(_repository(), logger=logger)

    assert use_case.copy_previous_month("2024-01") == []
    assert "2023-12" in logger.info.call_args[0][0]


def test_goal_progress_use_case() -> None:
    use_case = GetGoalProgressUseCase(_repository(), logger=MagicMock())

    [progress] = use_case.execute(today=date(2024, 5, 20))

    assert progress.progress_percentage == Decimal("24")
    assert progress.months_to_goal == 2
    assert progress.projected_completion == date(2024, 7, 1)


def test_budget_overview_orders_spending_by_user_categories() -> None:
    repository = _repository()
    repository.fetch_settings.return_value = UserSettings(
        custom_expense_categories=("Pets",)
    )
    repository.fetch_cashflow_records.return_value = [
        _record("2024-05-03", "expense", "Gadgets", "500"),
        _record("2024-05-04", "expense", "Pets", "700"),
    ]
    use_case = GetBudgetOverviewUseCase(repository, logger=MagicMock())

    overview = use_case.execute("2024-05")

    assert [item.category for item in overview.items] == [
        "Food",
        "Pets",
        "Gadgets",
    ]


def test_monthly_summary_warns_about_unrecognized_categories() -> None:
    repository = _repository()
    repository.fetch_cashflow_records.return_value = [
        _record("2024-05-01", "income", "Lottery", "1000"),
        _record("2024-05-02", "expense", "Food", "200"),
    ]
    logger = MagicMock()
    use_case = GetMonthlySummaryUseCase(repository, logger=logger)

    use_case.execute("2024-05")

    logger.warning.assert_called_once()
    assert "Lottery" in logger.warning.call_args[0][0]
