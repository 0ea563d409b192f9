"""CLI adapter creating the finance tables in FINANCE_DB_URL."""

from finance_dashboard.infrastructure.container import build_sql_repository
from finance_dashboard.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Create the snapshot schema if it does not exist yet."""
    logger = get_app_logger()
    try:
        repository = build_sql_repository()
        repository.ensure_schema()
    except RuntimeError as exc:
        logger.error(f"Schema creation failed: {exc}")
        return

    print("Finance schema is ready.")


if __name__ == "__main__":  # pragma: no cover
    main()
