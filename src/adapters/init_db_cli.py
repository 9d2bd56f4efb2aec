"""CLI adapter to create the ledger entries table."""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.entries_repository import SqlAlchemyEntriesRepository
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Ensure the entries table exists in the configured database."""
    logger = get_app_logger()
    repository = SqlAlchemyEntriesRepository(
        build_database_adapter(),
        logger=logger,
    )
    repository.prepare_storage()
    logger.info("Ledger storage is ready.")
    print("Ledger storage is ready.")


if __name__ == "__main__":  # pragma: no cover
    main()
