"""Use case to validate and store a new entry."""

from src.application.ports.entries_repository import EntriesRepositoryPort
from src.domain.models import Entry, EntryDraft
from src.domain.services.validation import validate_entry_draft
from src.infrastructure.logging.logger import get_app_logger


class AddEntryUseCase:
    """Validate a submitted entry and persist it."""

    def __init__(
        self,
        entries_repository: EntriesRepositoryPort,
        logger=None,
    ) -> None:
        self._entries_repository = entries_repository
        self._logger = logger or get_app_logger()

    def execute(self, draft: EntryDraft) -> Entry:
        """Store the entry described by ``draft``.

        Raises:
            InvalidEntryError: If the draft fails validation.
        """
        new_entry = validate_entry_draft(draft)
        entry = self._entries_repository.add_entry(new_entry)
        self._logger.info(
            f"Added {entry.kind} entry {entry.id} "
            f"({entry.category}, {entry.amount}) by {entry.created_by}"
        )
        return entry


__all__ = ["AddEntryUseCase"]
