"""Port for ledger entry storage."""

from typing import Protocol

from src.domain.models import Entry, NewEntry


class EntriesRepositoryPort(Protocol):
    """Port exposing the entry operations the ledger needs.

    Storage performs no filtering; every read returns the full collection.
    """

    def fetch_entries(self) -> list[Entry]:
        """Return every stored entry, newest first."""

    def add_entry(self, entry: NewEntry) -> Entry:
        """Persist a validated entry and return it with its id."""

    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry by id."""


__all__ = ["EntriesRepositoryPort"]
