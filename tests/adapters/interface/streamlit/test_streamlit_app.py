"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from finance_dashboard.adapters.interface.streamlit import app
from finance_dashboard.application.use_cases import GetDashboardUseCase
from finance_dashboard.domain.models import (
    AssetAccount,
    Budget,
    CashAsset,
    CashflowRecord,
    Goal,
    StockAsset,
    UserSettings,
)
from finance_dashboard.domain.services import summarize


def _view(with_assets: bool = True):
    repository = MagicMock()
    repository.fetch_settings.return_value = UserSettings()
    repository.fetch_asset_accounts.return_value = (
        [
            AssetAccount(
                id="a1",
                name="Main",
                assets=(
                    CashAsset(
                        id="c1",
                        code="TWD",
                        current_value=Decimal("75000"),
                    ),
                    StockAsset(
                        id="s1",
                        code="2330",
                        units=Decimal("10"),
                        cost=Decimal("2000"),
                        current_value=Decimal("2500"),
                    ),
                ),
            )
        ]
        if with_assets
        else []
    )
    repository.fetch_cashflow_records.return_value = [
        CashflowRecord(
            id="r1",
            date="2024-05-02",
            type="expense",
            category="Food",
            amount=Decimal("12000"),
        )
    ]
    repository.fetch_budgets.return_value = [
        Budget(id="b1", month="2024-05", category="Food",
               amount=Decimal("10000")),
    ]
    repository.fetch_goals.return_value = [
        Goal(id="g1", name="Trip", target_amount=Decimal("50000"),
             current_amount=Decimal("10000")),
    ]
    use_case = GetDashboardUseCase(repository, logger=MagicMock())
    return use_case.execute(month_key="2024-05", today=date(2024, 5, 31))


def _fake_streamlit() -> MagicMock:
    fake_st = MagicMock()
    fake_st.sidebar.text_input.return_value = " 2024-05 "
    fake_st.columns.side_effect = lambda count: [
        MagicMock() for _ in range(count)
    ]
    return fake_st


def _quiet_loggers(monkeypatch) -> None:
    monkeypatch.setattr(app, "get_app_logger", lambda: MagicMock())
    monkeypatch.setattr(app, "get_usage_logger", lambda: MagicMock())


def test_fetch_dashboard_invokes_use_case(monkeypatch):
    """_fetch_dashboard should build the use case and run it."""
    use_case = MagicMock()
    use_case.execute.return_value = "view"
    monkeypatch.setattr(app, "build_dashboard_use_case", lambda: use_case)

    assert app._fetch_dashboard("2024-05") == "view"
    use_case.execute.assert_called_once_with(month_key="2024-05")


def test_each_rerun_recomputes_the_dashboard(monkeypatch):
    """Every page run should execute the use case again."""
    use_case = MagicMock()
    use_case.execute.return_value = _view()
    monkeypatch.setattr(app, "st", _fake_streamlit())
    _quiet_loggers(monkeypatch)
    monkeypatch.setattr(app, "build_dashboard_use_case", lambda: use_case)
    monkeypatch.setattr(
        app,
        "_check_altair_dependencies",
        lambda: (False, "charts unavailable"),
    )

    app.main()
    app.main()

    assert use_case.execute.call_count == 2


def test_prepare_donut_chart_data_keeps_breakdown_order():
    data, total = app._prepare_donut_chart_data(_view().summary)

    assert total == Decimal("100000")
    assert [row["category"] for row in data] == ["Cash", "Stock"]
    assert data[0]["amount"] == 75000.0
    assert data[0]["share_label"] == "75.0%"
    assert data[1]["amount_label"] == "NT$ 25,000"
    assert data[1]["color"] == "#ef4444"


def test_prepare_donut_chart_data_for_empty_summary():
    data, total = app._prepare_donut_chart_data(summarize([]))

    assert data == []
    assert total == Decimal("0")


def test_table_rows_format_money_and_percentages():
    view = _view()

    [pnl_row] = app._pnl_table_rows(view.pnl.rows)
    [budget_row] = app._budget_table_rows(view.budgets)

    assert pnl_row["Code"] == "2330"
    assert pnl_row["P&L"] == "+NT$ 5,000"
    assert pnl_row["P&L %"] == "25.0%"
    assert budget_row["Remaining"] == "-NT$ 2,000"
    assert budget_row["3-month avg"] == "-"


def test_main_renders_dashboard(monkeypatch):
    fake_st = _fake_streamlit()
    view = _view()
    requested = []
    monkeypatch.setattr(app, "st", fake_st)
    _quiet_loggers(monkeypatch)
    monkeypatch.setattr(
        app,
        "_check_altair_dependencies",
        lambda: (False, "charts unavailable"),
    )

    def _fake_load(month_key):
        requested.append(month_key)
        return view

    monkeypatch.setattr(app, "_fetch_dashboard", _fake_load)

    app.main()

    assert requested == ["2024-05"]
    fake_st.set_page_config.assert_called_once()
    fake_st.title.assert_called_once_with("Finance Dashboard")
    fake_st.warning.assert_called_once_with("charts unavailable")
    assert fake_st.dataframe.call_count == 2
    fake_st.progress.assert_called_once_with(0.2)
    fake_st.error.assert_not_called()


def test_main_shows_empty_state_without_assets(monkeypatch):
    fake_st = _fake_streamlit()
    monkeypatch.setattr(app, "st", fake_st)
    _quiet_loggers(monkeypatch)
    empty_view = _view(with_assets=False)
    monkeypatch.setattr(
        app,
        "_fetch_dashboard",
        lambda month_key: empty_view,
    )

    app.main()

    info_messages = [call.args[0] for call in fake_st.info.call_args_list]
    assert any("No assets yet" in message for message in info_messages)
    fake_st.altair_chart.assert_not_called()


def test_main_reports_load_errors(monkeypatch):
    fake_st = _fake_streamlit()
    monkeypatch.setattr(app, "st", fake_st)
    _quiet_loggers(monkeypatch)

    def _broken(month_key):
        raise RuntimeError("Missing environment variable: FINANCE_DB_URL")

    monkeypatch.setattr(app, "_fetch_dashboard", _broken)

    app.main()

    fake_st.error.assert_called_once()
    fake_st.dataframe.assert_not_called()
