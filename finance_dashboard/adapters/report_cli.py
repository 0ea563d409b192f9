"""CLI adapter printing the dashboard for one month.

The month is read from ``REPORT_MONTH`` (YYYY-MM) and defaults to the current
month. The snapshot backend follows the usual ``FINANCE_*`` settings.
"""

import os

from finance_dashboard.domain.models import DashboardView
from finance_dashboard.infrastructure.container import (
    build_dashboard_use_case,
)
from finance_dashboard.infrastructure.logging.logger import get_app_logger


def _format_amount(value) -> str:
    return f"{value:,.0f}"


def format_report(view: DashboardView) -> list[str]:
    """Render the dashboard as printable lines.

    Args:
        view: Dashboard view to render.

    Returns:
        list[str]: Report lines in display order.
    """
    summary = view.summary
    lines = [
        f"USD/TWD rate: {view.fx_rate}",
        f"Total assets: {_format_amount(summary.total)} TWD",
        f"USD holdings: {_format_amount(summary.total_foreign_in_local)} TWD",
    ]
    for entry in summary.breakdown:
        lines.append(f"  {entry.label}: {_format_amount(entry.value)} TWD")

    health = view.health
    lines.append(f"Health score: {health.score} ({health.level})")
    lines.extend(f"  - {message}" for message in health.feedback)

    monthly = view.monthly
    lines.append(
        f"{monthly.month}: income {_format_amount(monthly.income)}, "
        f"expense {_format_amount(monthly.expense)}, "
        f"net {_format_amount(monthly.net)}, "
        f"savings rate {monthly.savings_rate:.1f}%"
    )

    pnl = view.pnl
    lines.append(
        f"P&L: value {_format_amount(pnl.total_value)}, "
        f"cost {_format_amount(pnl.total_cost)}, "
        f"pnl {_format_amount(pnl.total_pnl)} "
        f"({pnl.overall_roi:.2f}%)"
    )
    return lines


def main() -> None:
    """Compute the dashboard and print it."""
    logger = get_app_logger()
    month_key = os.getenv("REPORT_MONTH") or None
    try:
        use_case = build_dashboard_use_case()
        view = use_case.execute(month_key=month_key)
    except (RuntimeError, ValueError) as exc:
        logger.error(f"Report failed: {exc}")
        return

    for line in format_report(view):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
