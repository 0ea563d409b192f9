"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal
import importlib

import streamlit as st
import altair as alt

from finance_dashboard.application.use_cases.get_dashboard import (
    DashboardView,
)
from finance_dashboard.domain.models import (
    AssetSummary,
    BudgetOverview,
    GoalProgress,
    HealthScore,
    PnlRow,
)
from finance_dashboard.domain.services.periods import month_key_of
from finance_dashboard.infrastructure.container import (
    build_dashboard_use_case,
)
from finance_dashboard.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def _fetch_dashboard(month_key: str) -> DashboardView:
    """Recompute the dashboard from the configured snapshot backend."""
    use_case = build_dashboard_use_case()
    return use_case.execute(month_key=month_key)


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the array libraries Altair needs import cleanly.

    Returns:
        tuple[bool, str | None]: Whether charts can render and an error
        message when they cannot.
    """
    try:
        numpy = importlib.import_module("numpy")
        pandas = importlib.import_module("pandas")
    except ImportError as exc:
        return False, f"Charts need numpy and pandas: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, (
            "numpy is installed but incomplete; reinstall numpy to render "
            "charts."
        )
    if not hasattr(pandas, "Timestamp"):
        return False, (
            "pandas is installed but incomplete; reinstall pandas to render "
            "charts."
        )
    return True, None


def _format_currency(value: Decimal) -> str:
    """Format TWD amounts for display."""
    return f"NT$ {value:,.0f}"


def _format_percent(value: Decimal) -> str:
    return f"{value:.1f}%"


def _format_signed_currency(value: Decimal) -> str:
    sign = "+" if value >= 0 else "-"
    return f"{sign}NT$ {abs(value):,.0f}"


def _prepare_donut_chart_data(
    summary: AssetSummary,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare Altair-ready rows for the asset type donut.

    Args:
        summary: Asset summary with its ordered breakdown.

    Returns:
        Tuple with chart rows and the total of the charted values.
    """
    charted_total = sum(
        (entry.value for entry in summary.breakdown),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for entry in summary.breakdown:
        share = (
            (entry.value / charted_total) * Decimal("100")
            if charted_total
            else Decimal("0")
        )
        data.append(
            {
                "category": entry.label,
                "amount": float(entry.value),
                "color": entry.color,
                "amount_label": _format_currency(entry.value),
                "share_label": _format_percent(share),
            }
        )
    return data, charted_total


def _pnl_table_rows(rows: Sequence[PnlRow]) -> list[dict[str, str]]:
    """Convert P&L rows into display rows."""
    return [
        {
            "Code": row.code,
            "Type": row.account_type,
            "Account": row.account_name,
            "Cost": _format_currency(row.cost_twd),
            "Value": _format_currency(row.current_value_twd),
            "P&L": _format_signed_currency(row.profit_loss_twd),
            "P&L %": _format_percent(row.pnl_percentage),
        }
        for row in rows
    ]


def _budget_table_rows(overview: BudgetOverview) -> list[dict[str, str]]:
    """Convert budget usage into display rows."""
    return [
        {
            "Category": item.category,
            "Budget": _format_currency(item.budget),
            "Spent": _format_currency(item.spent),
            "Remaining": _format_signed_currency(item.remaining),
            "Used": _format_percent(item.usage_percentage),
            "3-month avg": (
                _format_currency(item.average_spending)
                if item.average_spending is not None
                else "-"
            ),
        }
        for item in overview.items
    ]


def _render_breakdown_chart(summary: AssetSummary, chart_size: int = 320):
    """Render a donut chart of asset values by type."""
    st.subheader("Asset allocation")
    if not summary.has_data:
        st.info("No assets yet. Add asset accounts to see the allocation.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    data, _ = _prepare_donut_chart_data(summary)
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                domain=[row["category"] for row in data],
                range=[row["color"] for row in data],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.35)),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(
        text="amount_label:N"
    )
    chart = alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(stroke=None)
    st.altair_chart(chart, use_container_width=True)


def _render_health(health: HealthScore) -> None:
    st.subheader("Financial health")
    st.metric("Score", f"{health.score} / 100", health.level)
    for message in health.feedback:
        st.write(f"- {message}")


def _render_pnl(view: DashboardView) -> None:
    st.subheader("Investment P&L")
    pnl = view.pnl
    if not pnl.rows:
        st.info("No stock, ETF or USD holdings to report.")
        return
    value_col, cost_col, pnl_col = st.columns(3)
    value_col.metric("Market value", _format_currency(pnl.total_value))
    cost_col.metric("Cost", _format_currency(pnl.total_cost))
    pnl_col.metric(
        "Unrealized P&L",
        _format_signed_currency(pnl.total_pnl),
        _format_percent(pnl.overall_roi),
    )
    st.dataframe(_pnl_table_rows(pnl.rows), hide_index=True)
    if pnl.best_absolute is not None and pnl.best_percentage is not None:
        st.caption(
            f"Best by amount: {pnl.best_absolute.code}; "
            f"best by return: {pnl.best_percentage.code}"
        )


def _render_budgets(overview: BudgetOverview) -> None:
    st.subheader(f"Budgets for {overview.month}")
    if not overview.items:
        st.info("No budgets or spending recorded for this month.")
        return
    st.dataframe(_budget_table_rows(overview), hide_index=True)
    st.caption(
        f"Total budget {_format_currency(overview.total_budget)}, "
        f"spent {_format_currency(overview.total_spent)}"
    )


def _render_goals(goals: Sequence[GoalProgress]) -> None:
    st.subheader("Goals")
    if not goals:
        st.info("No savings goals defined.")
        return
    for progress in goals:
        st.write(
            f"**{progress.goal.name}**: "
            f"{_format_currency(progress.current_amount)} of "
            f"{_format_currency(progress.goal.target_amount)}"
        )
        st.progress(min(float(progress.progress_percentage) / 100, 1.0))
        if progress.is_completed:
            st.caption("Completed")
        elif progress.projected_completion is not None:
            st.caption(
                f"About {progress.months_to_goal} months to go "
                f"(around {progress.projected_completion:%Y-%m})"
            )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Dashboard", layout="wide")
    st.title("Finance Dashboard")

    month_key = st.sidebar.text_input(
        "Month (YYYY-MM)",
        value=month_key_of(date.today()),
    ).strip()
    try:
        view = _fetch_dashboard(month_key)
    except (RuntimeError, ValueError) as exc:
        get_app_logger().error(f"Dashboard failed to load: {exc}")
        st.error(str(exc))
        return
    get_usage_logger().info(f"Dashboard viewed for {month_key}")

    summary = view.summary
    total_col, foreign_col, rate_col = st.columns(3)
    total_col.metric("Total assets", _format_currency(summary.total))
    foreign_col.metric(
        "USD holdings",
        _format_currency(summary.total_foreign_in_local),
    )
    rate_col.metric("USD/TWD", f"{view.fx_rate}")

    monthly = view.monthly
    income_col, expense_col, net_col = st.columns(3)
    income_col.metric("Income", _format_currency(monthly.income))
    expense_col.metric("Expenses", _format_currency(monthly.expense))
    net_col.metric(
        "Net",
        _format_signed_currency(monthly.net),
        f"savings rate {_format_percent(monthly.savings_rate)}",
    )

    chart_col, health_col = st.columns(2)
    with chart_col:
        _render_breakdown_chart(summary)
    with health_col:
        _render_health(view.health)

    _render_pnl(view)
    _render_budgets(view.budgets)
    _render_goals(view.goals)


if __name__ == "__main__":  # pragma: no cover
    main()
