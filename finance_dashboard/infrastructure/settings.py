"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal
import os
from pathlib import Path
from typing import Optional

from finance_dashboard.domain.constants import DEFAULT_USD_TO_TWD_RATE
from finance_dashboard.infrastructure.logging.logger import get_app_logger
from finance_dashboard.utils.decimal_utils import coerce_decimal
from finance_dashboard.utils.utils import get_project_root

SUPPORTED_BACKENDS = ("sqlalchemy", "json")


@dataclass(frozen=True)
class AppSettings:
    """Settings for selecting the snapshot backend.

    Attributes:
        backend: Backend identifier (sqlalchemy or json).
        snapshot_file: Optional path to a JSON backup file.
        default_fx_rate: USD to TWD rate used without a manual override.
    """

    backend: str = "sqlalchemy"
    snapshot_file: Optional[Path] = None
    default_fx_rate: Decimal = DEFAULT_USD_TO_TWD_RATE

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables.

        Returns:
            AppSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If FINANCE_BACKEND names an unsupported backend.
        """
        logger = get_app_logger()
        backend = os.getenv("FINANCE_BACKEND", "sqlalchemy").strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"Unsupported FINANCE_BACKEND '{backend}'. "
                f"Expected one of: {', '.join(SUPPORTED_BACKENDS)}."
            )
        raw_snapshot = os.getenv("FINANCE_SNAPSHOT_FILE")
        if raw_snapshot:
            snapshot_file = cls._normalize_path(raw_snapshot, logger=logger)
        else:
            snapshot_file = cls._default_snapshot_file(logger=logger)
        default_fx_rate = cls._parse_rate(
            os.getenv("FINANCE_DEFAULT_FX_RATE"),
            logger=logger,
        )
        return cls(
            backend=backend,
            snapshot_file=snapshot_file,
            default_fx_rate=default_fx_rate,
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Expand and resolve the snapshot file path.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Resolved filesystem path.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Snapshot file does not exist at {path}")
        return path

    @staticmethod
    def _default_snapshot_file(logger) -> Path | None:
        """Return a default snapshot path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single backup is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json files found in data/. "
                "Set FINANCE_SNAPSHOT_FILE to choose one."
            )
        return None

    @staticmethod
    def _parse_rate(raw_rate: str | None, logger) -> Decimal:
        """Parse the default FX rate, falling back to the built-in rate.

        Args:
            raw_rate: Raw rate from the environment.
            logger: Logger used for warnings.

        Returns:
            Decimal: Positive USD to TWD rate.
        """
        if not raw_rate:
            return DEFAULT_USD_TO_TWD_RATE
        rate = coerce_decimal(raw_rate)
        if rate <= 0:
            logger.warning(
                f"Invalid FINANCE_DEFAULT_FX_RATE '{raw_rate}'; "
                f"using {DEFAULT_USD_TO_TWD_RATE}"
            )
            return DEFAULT_USD_TO_TWD_RATE
        return rate


__all__ = ["AppSettings", "SUPPORTED_BACKENDS"]
