"""Tests for the SQLAlchemy entries repository against in-memory SQLite."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from src.domain.constants import EXPENSE, INCOME
from src.domain.errors import EntryNotFoundError
from src.domain.models import NewEntry
from src.infrastructure.entries_repository import SqlAlchemyEntriesRepository

pytestmark = pytest.mark.filterwarnings("ignore::sqlalchemy.exc.SAWarning")


class _SqliteDbPort:
    def __init__(self) -> None:
        self._engine = create_engine(
            "sqlite://",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    def get_ledger_engine(self):
        return self._engine


@pytest.fixture
def repository() -> SqlAlchemyEntriesRepository:
    repo = SqlAlchemyEntriesRepository(_SqliteDbPort(), logger=MagicMock())
    repo.prepare_storage()
    return repo


def _new_entry(**overrides) -> NewEntry:
    values = {
        "date": date(2024, 1, 15),
        "description": "Salary",
        "kind": INCOME,
        "category": "Salary",
        "amount": Decimal("1000.00"),
        "created_by": "owner@example.com",
    }
    values.update(overrides)
    return NewEntry(**values)


def test_prepare_storage_is_idempotent(repository) -> None:
    repository.prepare_storage()

    assert repository.fetch_entries() == []


def test_add_then_fetch_returns_newest_first(repository) -> None:
    """Stored entries come back as domain values ordered by date."""
    first = repository.add_entry(_new_entry())
    second = repository.add_entry(
        _new_entry(
            date=date(2024, 2, 3),
            description="Groceries",
            kind=EXPENSE,
            category="Food",
            amount=Decimal("45.50"),
        )
    )

    entries = repository.fetch_entries()

    assert first.id != second.id
    assert [entry.id for entry in entries] == [second.id, first.id]
    assert entries[0].date == date(2024, 2, 3)
    assert entries[0].kind == EXPENSE
    assert entries[0].amount == Decimal("45.50")
    assert isinstance(entries[0].amount, Decimal)
    assert entries[1].created_by == "owner@example.com"


def test_delete_removes_entry(repository) -> None:
    stored = repository.add_entry(_new_entry())

    repository.delete_entry(stored.id)

    assert repository.fetch_entries() == []


def test_delete_missing_entry_raises(repository) -> None:
    """Unknown ids raise EntryNotFoundError and log a warning."""
    with pytest.raises(EntryNotFoundError):
        repository.delete_entry("does-not-exist")

    repository._logger.warning.assert_called_once()
