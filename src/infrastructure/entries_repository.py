"""SQLAlchemy-backed repository for ledger entries."""

from datetime import date, datetime, timezone
from uuid import uuid4

from sqlalchemy import Date, DateTime, Numeric, String, bindparam, text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.entries_repository import EntriesRepositoryPort
from src.domain.errors import EntryNotFoundError
from src.domain.models import Entry, NewEntry
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal

ENTRIES_TABLE = "accounting_entries"

CREATE_ENTRIES_SQL = f"""
CREATE TABLE IF NOT EXISTS {ENTRIES_TABLE} (
    id TEXT PRIMARY KEY,
    date DATE NOT NULL,
    description TEXT NOT NULL,
    type TEXT NOT NULL CHECK (type IN ('Income', 'Expense')),
    category TEXT NOT NULL,
    amount NUMERIC(14, 2) NOT NULL,
    created_by TEXT,
    created_at TIMESTAMP NOT NULL
)
"""

SELECT_ENTRIES_SQL = text(
    f"""
    SELECT id, date, description, type, category, amount, created_by
    FROM {ENTRIES_TABLE}
    ORDER BY date DESC, created_at DESC
    """
).columns(
    id=String,
    date=Date,
    description=String,
    type=String,
    category=String,
    amount=Numeric(14, 2, asdecimal=True),
    created_by=String,
)

INSERT_ENTRY_SQL = text(
    f"""
    INSERT INTO {ENTRIES_TABLE} (
        id,
        date,
        description,
        type,
        category,
        amount,
        created_by,
        created_at
    )
    VALUES (
        :id,
        :date,
        :description,
        :type,
        :category,
        :amount,
        :created_by,
        :created_at
    )
    """
).bindparams(
    bindparam("date", type_=Date),
    bindparam("amount", type_=Numeric(14, 2, asdecimal=True)),
    bindparam("created_at", type_=DateTime),
)

DELETE_ENTRY_SQL = text(f"DELETE FROM {ENTRIES_TABLE} WHERE id = :id")


def _coerce_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


class SqlAlchemyEntriesRepository(EntriesRepositoryPort):
    """Repository backed by SQLAlchemy for ledger entries."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def prepare_storage(self) -> None:
        """Ensure the entries table exists."""
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_ENTRIES_SQL)

    def fetch_entries(self) -> list[Entry]:
        """Return every stored entry, newest first."""
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_ENTRIES_SQL).all()
        return [
            Entry(
                id=str(row.id),
                date=_coerce_date(row.date),
                description=row.description,
                kind=row.type,
                category=row.category,
                amount=coerce_decimal(row.amount),
                created_by=row.created_by,
            )
            for row in rows
        ]

    def add_entry(self, entry: NewEntry) -> Entry:
        """Insert a validated entry and return it with its new id.

        Args:
            entry: Entry validated by the application layer.

        Returns:
            Entry: Stored entry.
        """
        entry_id = str(uuid4())
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_ENTRY_SQL,
                {
                    "id": entry_id,
                    "date": entry.date,
                    "description": entry.description,
                    "type": entry.kind,
                    "category": entry.category,
                    "amount": entry.amount,
                    "created_by": entry.created_by,
                    "created_at": datetime.now(timezone.utc),
                },
            )
        return Entry(
            id=entry_id,
            date=entry.date,
            description=entry.description,
            kind=entry.kind,
            category=entry.category,
            amount=entry.amount,
            created_by=entry.created_by,
        )

    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry by id.

        Raises:
            EntryNotFoundError: If no row matches ``entry_id``.
        """
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            deleted = conn.execute(DELETE_ENTRY_SQL, {"id": entry_id}).rowcount
        if deleted == 0:
            self._logger.warning(f"Delete requested for missing entry {entry_id}")
            raise EntryNotFoundError(entry_id)


__all__ = ["SqlAlchemyEntriesRepository", "CREATE_ENTRIES_SQL"]
