"""Use case to delete an entry by id."""

from src.application.ports.entries_repository import EntriesRepositoryPort
from src.infrastructure.logging.logger import get_app_logger


class DeleteEntryUseCase:
    """Delete a stored entry."""

    def __init__(
        self,
        entries_repository: EntriesRepositoryPort,
        logger=None,
    ) -> None:
        self._entries_repository = entries_repository
        self._logger = logger or get_app_logger()

    def execute(self, entry_id: str) -> None:
        """Delete the entry, propagating EntryNotFoundError."""
        self._entries_repository.delete_entry(entry_id)
        self._logger.info(f"Deleted entry {entry_id}")


__all__ = ["DeleteEntryUseCase"]
