"""Personal finance dashboard: asset valuation, cashflow and health metrics."""
