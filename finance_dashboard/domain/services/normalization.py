"""Builders turning loosely-typed stored records into domain models.

Stored records come from form input and may use either the camelCase keys of
the JSON backups or snake_case column names. Missing text becomes an empty
string and missing or malformed numbers become zero.
"""

from collections.abc import Iterable, Mapping
from logging import Logger

from finance_dashboard.domain.constants import (
    ASSET_TYPE_ALIASES,
    ASSET_TYPE_CASH,
    ASSET_TYPE_ETF,
    ASSET_TYPE_REAL_ESTATE,
    ASSET_TYPE_STOCK,
    ASSET_TYPE_USD_OTHER,
    LOCAL_CURRENCY,
    RECORD_TYPE_EXPENSE,
    RECORD_TYPE_INCOME,
)
from finance_dashboard.domain.models import (
    Asset,
    AssetAccount,
    Budget,
    CashAsset,
    CashflowRecord,
    EtfAsset,
    Goal,
    RealEstateAsset,
    StockAsset,
    UnclassifiedAsset,
    UsdOtherAsset,
    UserSettings,
)
from finance_dashboard.utils.decimal_utils import coerce_decimal


def _pick(raw: Mapping, *keys: str, default=None):
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return default


def _text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _optional_text(value) -> str | None:
    cleaned = _text(value)
    return cleaned or None


_TRUE_STRINGS = ("true", "1", "yes", "y", "on")


def _flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def normalize_asset_type(raw_type: str | None) -> str | None:
    """Map a stored asset type label to its canonical name.

    Args:
        raw_type: Raw type label (English or the legacy Chinese labels).

    Returns:
        str | None: Canonical asset type, or None when unknown.
    """
    if not raw_type:
        return None
    return ASSET_TYPE_ALIASES.get(str(raw_type).strip().lower())


def normalize_currency(raw_currency: str | None) -> str:
    """Normalize a currency code, defaulting to the local currency.

    Args:
        raw_currency: Raw currency value.

    Returns:
        str: Upper-cased currency code.
    """
    cleaned = _text(raw_currency).upper()
    return cleaned or LOCAL_CURRENCY


def build_asset(raw: Mapping, logger: Logger | None = None) -> Asset:
    """Build the asset variant matching the stored type.

    Args:
        raw: Stored asset record.
        logger: Optional logger used to report unknown types.

    Returns:
        Asset: Asset variant with coerced numeric fields.
    """
    raw_type = _pick(raw, "accountType", "account_type", "type")
    asset_type = normalize_asset_type(raw_type)
    asset_id = _text(_pick(raw, "id"))
    code = _text(_pick(raw, "code", "name"))
    currency = normalize_currency(_pick(raw, "currency"))
    current_value = coerce_decimal(
        _pick(raw, "currentValue", "current_value")
    )
    cost = coerce_decimal(_pick(raw, "cost"))
    units = coerce_decimal(_pick(raw, "units"))

    if asset_type == ASSET_TYPE_CASH:
        return CashAsset(
            id=asset_id,
            code=code,
            current_value=current_value,
            currency=currency,
        )
    if asset_type == ASSET_TYPE_REAL_ESTATE:
        return RealEstateAsset(
            id=asset_id,
            code=code,
            cost=cost,
            current_value=current_value,
            currency=currency,
        )
    if asset_type == ASSET_TYPE_USD_OTHER:
        return UsdOtherAsset(
            id=asset_id,
            code=code,
            cost=cost,
            current_value=current_value,
        )
    if asset_type == ASSET_TYPE_STOCK:
        return StockAsset(
            id=asset_id,
            code=code,
            units=units,
            cost=cost,
            current_value=current_value,
            currency=currency,
        )
    if asset_type == ASSET_TYPE_ETF:
        return EtfAsset(
            id=asset_id,
            code=code,
            units=units,
            cost=cost,
            current_value=current_value,
            currency=currency,
        )

    if logger is not None:
        logger.warning(
            f"Unknown asset type {raw_type!r} for asset {code or asset_id!r}; "
            "it is excluded from the breakdown"
        )
    return UnclassifiedAsset(
        id=asset_id,
        code=code,
        account_type=_text(raw_type),
        units=units,
        cost=cost,
        current_value=current_value,
        currency=currency,
    )


def build_asset_account(
    raw: Mapping,
    logger: Logger | None = None,
) -> AssetAccount:
    """Build an asset account and its holdings from a stored record."""
    assets = tuple(
        build_asset(item, logger) for item in (_pick(raw, "assets") or ())
    )
    return AssetAccount(
        id=_text(_pick(raw, "id")),
        name=_text(_pick(raw, "name")),
        assets=assets,
    )


def _parse_recurrence_day(value) -> int | None:
    try:
        day = int(value)
    except (TypeError, ValueError):
        return None
    return day if 1 <= day <= 31 else None


def build_cashflow_record(
    raw: Mapping,
    logger: Logger | None = None,
) -> CashflowRecord:
    """Build a cashflow record from a stored record.

    Negative amounts are kept as their absolute value since the record type
    already carries the direction.
    """
    amount = coerce_decimal(_pick(raw, "amount"))
    record_id = _text(_pick(raw, "id"))
    if amount < 0:
        if logger is not None:
            logger.warning(
                f"Negative amount on cashflow record {record_id!r}: {amount}"
            )
        amount = abs(amount)
    record_type = _text(_pick(raw, "type")).lower()
    if record_type not in (RECORD_TYPE_INCOME, RECORD_TYPE_EXPENSE) and (
        logger is not None
    ):
        logger.warning(
            f"Unknown cashflow type {record_type!r} on record {record_id!r}"
        )
    is_recurring = _flag(_pick(raw, "isRecurring", "is_recurring"))
    recurrence_day = None
    if is_recurring:
        recurrence_day = _parse_recurrence_day(
            _pick(raw, "recurrenceDay", "recurrence_day")
        )
    return CashflowRecord(
        id=record_id,
        date=_text(_pick(raw, "date")),
        type=record_type,
        category=_text(_pick(raw, "category")),
        amount=amount,
        currency=normalize_currency(_pick(raw, "currency")),
        description=_text(_pick(raw, "description", "note")),
        account_id=_optional_text(_pick(raw, "accountId", "account_id")),
        account_name=_optional_text(_pick(raw, "accountName", "account_name")),
        is_recurring=is_recurring,
        recurrence_day=recurrence_day,
    )


def build_budget(raw: Mapping) -> Budget:
    """Build a monthly category budget from a stored record."""
    return Budget(
        id=_text(_pick(raw, "id")),
        month=_text(_pick(raw, "month")),
        category=_text(_pick(raw, "category")),
        amount=coerce_decimal(_pick(raw, "amount")),
    )


def build_goal(raw: Mapping) -> Goal:
    """Build a savings goal from a stored record."""
    linked = _pick(raw, "linkedAccountIds", "linked_account_ids") or ()
    if isinstance(linked, str):
        linked = linked.split(",")
    return Goal(
        id=_text(_pick(raw, "id")),
        name=_text(_pick(raw, "name")),
        target_amount=coerce_decimal(
            _pick(raw, "targetAmount", "target_amount")
        ),
        target_date=_text(_pick(raw, "targetDate", "target_date")),
        current_amount=coerce_decimal(
            _pick(raw, "currentAmount", "current_amount")
        ),
        linked_account_ids=tuple(
            cleaned for cleaned in (_text(item) for item in linked) if cleaned
        ),
    )


def _text_tuple(values: Iterable | None) -> tuple[str, ...]:
    return tuple(
        cleaned for cleaned in (_text(item) for item in values or ()) if cleaned
    )


def build_user_settings(raw: Mapping | None) -> UserSettings:
    """Build user settings; a non-positive manual rate counts as unset."""
    if not raw:
        return UserSettings()
    manual_rate = None
    raw_rate = _pick(raw, "manualRate", "manual_rate")
    if raw_rate not in (None, ""):
        parsed = coerce_decimal(raw_rate)
        manual_rate = parsed if parsed > 0 else None
    return UserSettings(
        manual_rate=manual_rate,
        custom_income_categories=_text_tuple(
            _pick(raw, "customIncome", "custom_income_categories")
        ),
        custom_expense_categories=_text_tuple(
            _pick(raw, "customExpense", "custom_expense_categories")
        ),
    )


__all__ = [
    "build_asset",
    "build_asset_account",
    "build_budget",
    "build_cashflow_record",
    "build_goal",
    "build_user_settings",
    "normalize_asset_type",
    "normalize_currency",
]
