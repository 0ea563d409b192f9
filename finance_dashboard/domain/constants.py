"""Domain constants for asset valuation and cashflow analytics."""

from decimal import Decimal

ASSET_TYPE_CASH = "cash"
ASSET_TYPE_REAL_ESTATE = "real_estate"
ASSET_TYPE_STOCK = "stock"
ASSET_TYPE_ETF = "etf"
ASSET_TYPE_USD_OTHER = "usd_other"

BREAKDOWN_ORDER = (
    ASSET_TYPE_CASH,
    ASSET_TYPE_ETF,
    ASSET_TYPE_STOCK,
    ASSET_TYPE_REAL_ESTATE,
    ASSET_TYPE_USD_OTHER,
)

ASSET_TYPE_LABELS = {
    ASSET_TYPE_CASH: "Cash",
    ASSET_TYPE_ETF: "ETF",
    ASSET_TYPE_STOCK: "Stock",
    ASSET_TYPE_REAL_ESTATE: "Real estate",
    ASSET_TYPE_USD_OTHER: "USD assets",
}

ASSET_TYPE_COLORS = {
    ASSET_TYPE_CASH: "#10b981",
    ASSET_TYPE_ETF: "#3b82f6",
    ASSET_TYPE_STOCK: "#ef4444",
    ASSET_TYPE_REAL_ESTATE: "#f59e0b",
    ASSET_TYPE_USD_OTHER: "#8b5cf6",
}

# Keys are compared after strip().lower().
ASSET_TYPE_ALIASES = {
    "cash": ASSET_TYPE_CASH,
    "現金": ASSET_TYPE_CASH,
    "real_estate": ASSET_TYPE_REAL_ESTATE,
    "real-estate": ASSET_TYPE_REAL_ESTATE,
    "real estate": ASSET_TYPE_REAL_ESTATE,
    "realestate": ASSET_TYPE_REAL_ESTATE,
    "不動產": ASSET_TYPE_REAL_ESTATE,
    "stock": ASSET_TYPE_STOCK,
    "stocks": ASSET_TYPE_STOCK,
    "股票": ASSET_TYPE_STOCK,
    "etf": ASSET_TYPE_ETF,
    "usd_other": ASSET_TYPE_USD_OTHER,
    "usd-other": ASSET_TYPE_USD_OTHER,
    "usd": ASSET_TYPE_USD_OTHER,
    "美元資產": ASSET_TYPE_USD_OTHER,
}

INVESTMENT_TYPES = (ASSET_TYPE_STOCK, ASSET_TYPE_ETF)
PNL_TYPES = (ASSET_TYPE_STOCK, ASSET_TYPE_ETF, ASSET_TYPE_USD_OTHER)

LOCAL_CURRENCY = "TWD"
FOREIGN_CURRENCY = "USD"
DEFAULT_USD_TO_TWD_RATE = Decimal("32")

RECORD_TYPE_INCOME = "income"
RECORD_TYPE_EXPENSE = "expense"

DEFAULT_EXPENSE_CATEGORIES = (
    "Food",
    "Transport",
    "Housing",
    "Utilities",
    "Entertainment",
    "Medical",
    "Education",
    "Other",
)
DEFAULT_INCOME_CATEGORIES = (
    "Salary",
    "Bonus",
    "Investment",
    "Side income",
    "Other",
)


__all__ = [
    "ASSET_TYPE_CASH",
    "ASSET_TYPE_REAL_ESTATE",
    "ASSET_TYPE_STOCK",
    "ASSET_TYPE_ETF",
    "ASSET_TYPE_USD_OTHER",
    "BREAKDOWN_ORDER",
    "ASSET_TYPE_LABELS",
    "ASSET_TYPE_COLORS",
    "ASSET_TYPE_ALIASES",
    "INVESTMENT_TYPES",
    "PNL_TYPES",
    "LOCAL_CURRENCY",
    "FOREIGN_CURRENCY",
    "DEFAULT_USD_TO_TWD_RATE",
    "RECORD_TYPE_INCOME",
    "RECORD_TYPE_EXPENSE",
    "DEFAULT_EXPENSE_CATEGORIES",
    "DEFAULT_INCOME_CATEGORIES",
]
