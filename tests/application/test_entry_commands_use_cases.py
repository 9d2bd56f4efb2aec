"""Tests for the add and delete entry use cases."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.add_entry import AddEntryUseCase
from src.application.use_cases.delete_entry import DeleteEntryUseCase
from src.domain.constants import EXPENSE
from src.domain.errors import EntryNotFoundError, InvalidAmountError
from src.domain.models import Entry, EntryDraft, NewEntry


def _draft(amount: str = "12.50") -> EntryDraft:
    return EntryDraft(
        date=date(2024, 2, 1),
        description="Bus pass",
        kind=EXPENSE,
        category="Transport",
        amount=amount,
        created_by="owner@example.com",
    )


def test_add_entry_validates_and_persists() -> None:
    """Valid drafts should reach the repository as NewEntry values."""
    repository = MagicMock()
    repository.add_entry.side_effect = lambda new: Entry(
        id="generated",
        date=new.date,
        description=new.description,
        kind=new.kind,
        category=new.category,
        amount=new.amount,
        created_by=new.created_by,
    )

    entry = AddEntryUseCase(repository, logger=MagicMock()).execute(_draft())

    assert entry.id == "generated"
    repository.add_entry.assert_called_once_with(
        NewEntry(
            date=date(2024, 2, 1),
            description="Bus pass",
            kind=EXPENSE,
            category="Transport",
            amount=Decimal("12.50"),
            created_by="owner@example.com",
        )
    )


def test_add_entry_rejects_invalid_amount_without_storage() -> None:
    """Invalid amounts never reach the repository."""
    repository = MagicMock()

    with pytest.raises(InvalidAmountError):
        AddEntryUseCase(repository, logger=MagicMock()).execute(_draft("0"))

    repository.add_entry.assert_not_called()


def test_delete_entry_delegates_and_propagates_missing() -> None:
    repository = MagicMock()
    use_case = DeleteEntryUseCase(repository, logger=MagicMock())

    use_case.execute("abc")
    repository.delete_entry.assert_called_once_with("abc")

    repository.delete_entry.side_effect = EntryNotFoundError("gone")
    with pytest.raises(EntryNotFoundError):
        use_case.execute("gone")
