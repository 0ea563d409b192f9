"""Domain models for asset accounts and their holdings.

Holdings are modeled as a tagged union keyed by ``account_type``. Each variant
exposes ``units``, ``cost`` and ``current_value`` so the valuation formula is
the same for every variant while the stored fields differ:

* cash is a single unit whose cost equals its current value,
* real estate and other USD assets are a single unit with a stored cost,
* stocks and ETFs store a unit count with per-unit cost and value.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from finance_dashboard.domain.constants import (
    ASSET_TYPE_CASH,
    ASSET_TYPE_ETF,
    ASSET_TYPE_REAL_ESTATE,
    ASSET_TYPE_STOCK,
    ASSET_TYPE_USD_OTHER,
    FOREIGN_CURRENCY,
    LOCAL_CURRENCY,
)

_ONE = Decimal("1")


@dataclass(frozen=True)
class CashAsset:
    """Cash balance held in a local or foreign currency."""

    id: str
    code: str
    current_value: Decimal
    currency: str = LOCAL_CURRENCY

    account_type: ClassVar[str] = ASSET_TYPE_CASH

    @property
    def units(self) -> Decimal:
        return _ONE

    @property
    def cost(self) -> Decimal:
        return self.current_value


@dataclass(frozen=True)
class RealEstateAsset:
    """Property valued as a single unit."""

    id: str
    code: str
    cost: Decimal
    current_value: Decimal
    currency: str = LOCAL_CURRENCY

    account_type: ClassVar[str] = ASSET_TYPE_REAL_ESTATE

    @property
    def units(self) -> Decimal:
        return _ONE


@dataclass(frozen=True)
class UsdOtherAsset:
    """Any other USD-denominated holding, valued as a single unit."""

    id: str
    code: str
    cost: Decimal
    current_value: Decimal

    account_type: ClassVar[str] = ASSET_TYPE_USD_OTHER

    @property
    def units(self) -> Decimal:
        return _ONE

    @property
    def currency(self) -> str:
        return FOREIGN_CURRENCY


@dataclass(frozen=True)
class _UnitAsset:
    id: str
    code: str
    units: Decimal
    cost: Decimal
    current_value: Decimal
    currency: str = LOCAL_CURRENCY


@dataclass(frozen=True)
class StockAsset(_UnitAsset):
    """Individual stock position; cost and value are per share."""

    account_type: ClassVar[str] = ASSET_TYPE_STOCK


@dataclass(frozen=True)
class EtfAsset(_UnitAsset):
    """ETF position; cost and value are per unit."""

    account_type: ClassVar[str] = ASSET_TYPE_ETF


@dataclass(frozen=True)
class UnclassifiedAsset:
    """Holding whose type is not one of the known asset types.

    It counts toward portfolio totals but belongs to no breakdown bucket.
    """

    id: str
    code: str
    account_type: str
    units: Decimal
    cost: Decimal
    current_value: Decimal
    currency: str = LOCAL_CURRENCY


Asset = (
    CashAsset
    | RealEstateAsset
    | UsdOtherAsset
    | StockAsset
    | EtfAsset
    | UnclassifiedAsset
)


@dataclass(frozen=True)
class AssetAccount:
    """Named account owning an ordered collection of assets."""

    id: str
    name: str
    assets: tuple[Asset, ...] = ()


@dataclass(frozen=True)
class ValuedAsset:
    """Asset paired with its values in the local reference currency.

    Attributes:
        asset: The raw asset the values were derived from.
        current_value_twd: current_value * units * fx rate.
        cost_twd: cost * units * fx rate.
        profit_loss_twd: current_value_twd - cost_twd.
    """

    asset: Asset
    current_value_twd: Decimal
    cost_twd: Decimal
    profit_loss_twd: Decimal

    @property
    def id(self) -> str:
        return self.asset.id

    @property
    def code(self) -> str:
        return self.asset.code

    @property
    def account_type(self) -> str:
        return self.asset.account_type

    @property
    def currency(self) -> str:
        return self.asset.currency

    @property
    def units(self) -> Decimal:
        return self.asset.units

    @property
    def cost(self) -> Decimal:
        return self.asset.cost

    @property
    def current_value(self) -> Decimal:
        return self.asset.current_value


@dataclass(frozen=True)
class ValuedAccount:
    """Asset account whose holdings carry derived local-currency values."""

    id: str
    name: str
    assets: tuple[ValuedAsset, ...] = ()

    @property
    def total_value_twd(self) -> Decimal:
        """Return the summed current value of every holding."""
        return sum(
            (asset.current_value_twd for asset in self.assets),
            Decimal("0"),
        )


__all__ = [
    "Asset",
    "AssetAccount",
    "CashAsset",
    "EtfAsset",
    "RealEstateAsset",
    "StockAsset",
    "UnclassifiedAsset",
    "UsdOtherAsset",
    "ValuedAccount",
    "ValuedAsset",
]
