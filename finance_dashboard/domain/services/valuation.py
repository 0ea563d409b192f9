"""Per-asset valuation in the local reference currency."""

from collections.abc import Iterable
from decimal import Decimal

from finance_dashboard.domain.models import (
    Asset,
    AssetAccount,
    ValuedAccount,
    ValuedAsset,
)
from finance_dashboard.domain.services.fx import rate_for_currency
from finance_dashboard.utils.decimal_utils import coerce_decimal


def value_asset(asset: Asset, fx_rate: Decimal) -> ValuedAsset:
    """Derive TWD value, cost and profit/loss for one asset.

    Args:
        asset: Raw asset variant.
        fx_rate: USD to TWD rate.

    Returns:
        ValuedAsset: Asset with derived TWD figures.
    """
    rate = rate_for_currency(asset.currency, coerce_decimal(fx_rate))
    units = coerce_decimal(asset.units)
    current_value_twd = coerce_decimal(asset.current_value) * units * rate
    cost_twd = coerce_decimal(asset.cost) * units * rate
    return ValuedAsset(
        asset=asset,
        current_value_twd=current_value_twd,
        cost_twd=cost_twd,
        profit_loss_twd=current_value_twd - cost_twd,
    )


def normalize(
    accounts: Iterable[AssetAccount | ValuedAccount],
    fx_rate: Decimal,
) -> list[ValuedAccount]:
    """Value every asset of every account.

    Already valued accounts are re-derived from their raw assets, so the
    operation is idempotent. Account and asset order is preserved.

    Args:
        accounts: Raw or previously valued asset accounts.
        fx_rate: USD to TWD rate applied to USD assets.

    Returns:
        list[ValuedAccount]: Accounts with derived TWD figures.
    """
    valued: list[ValuedAccount] = []
    for account in accounts:
        assets = []
        for item in account.assets:
            raw = item.asset if isinstance(item, ValuedAsset) else item
            assets.append(value_asset(raw, fx_rate))
        valued.append(
            ValuedAccount(id=account.id, name=account.name, assets=tuple(assets))
        )
    return valued


def iter_valued_assets(
    accounts: Iterable[ValuedAccount],
) -> Iterable[ValuedAsset]:
    """Yield every valued asset across accounts, in order."""
    for account in accounts:
        yield from account.assets


__all__ = ["iter_valued_assets", "normalize", "value_asset"]
