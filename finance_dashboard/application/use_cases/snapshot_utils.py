"""Shared helpers for loading and valuing the snapshot in use cases."""

from decimal import Decimal
from logging import Logger

from finance_dashboard.application.ports.snapshot_repository import (
    FinanceSnapshotRepositoryPort,
)
from finance_dashboard.domain.models import UserSettings, ValuedAccount
from finance_dashboard.domain.services import normalize, resolve_fx_rate


def resolve_snapshot_fx_rate(
    settings: UserSettings,
    default_rate: Decimal,
    logger: Logger,
) -> Decimal:
    """Return the effective USD to TWD rate and log where it came from.

    Args:
        settings: Stored user settings.
        default_rate: Rate used when no manual override is stored.
        logger: Logger used for informational messages.

    Returns:
        Decimal: Effective USD to TWD rate.
    """
    rate = resolve_fx_rate(settings, default=default_rate)
    if settings.manual_rate is not None and rate == settings.manual_rate:
        logger.info(f"Using manual USD/TWD rate {rate}")
    else:
        logger.info(f"Using default USD/TWD rate {rate}")
    return rate


def load_valued_accounts(
    repository: FinanceSnapshotRepositoryPort,
    default_rate: Decimal,
    logger: Logger,
) -> tuple[Decimal, list[ValuedAccount]]:
    """Fetch accounts and settings, then value every holding in TWD.

    Args:
        repository: Snapshot repository.
        default_rate: Rate used when no manual override is stored.
        logger: Logger used for informational messages.

    Returns:
        tuple[Decimal, list[ValuedAccount]]: Effective rate and valued
        accounts.
    """
    settings = repository.fetch_settings()
    fx_rate = resolve_snapshot_fx_rate(settings, default_rate, logger)
    accounts = repository.fetch_asset_accounts()
    logger.info(f"Fetched {len(accounts)} asset accounts")
    return fx_rate, normalize(accounts, fx_rate)


__all__ = ["load_valued_accounts", "resolve_snapshot_fx_rate"]
