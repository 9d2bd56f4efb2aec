"""Domain models for ledger entries."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.constants import ENTRY_KINDS


@dataclass(frozen=True)
class Entry:
    """A stored income or expense line item.

    Attributes:
        id: Identifier assigned by the storage layer.
        date: Calendar date used for bucketing and filtering.
        description: Free-text label.
        kind: Either ``Income`` or ``Expense``.
        category: Free-text category label, matched case-sensitively.
        amount: Stored amount; aggregations always use its magnitude.
        created_by: Optional author identifier for display.
    """

    id: str
    date: date
    description: str
    kind: str
    category: str
    amount: Decimal
    created_by: str | None = None

    def __post_init__(self) -> None:
        if self.kind not in ENTRY_KINDS:
            raise ValueError(
                f"Unsupported entry kind: {self.kind}. "
                f"Expected one of {', '.join(ENTRY_KINDS)}."
            )

    @property
    def magnitude(self) -> Decimal:
        """Return the non-negative amount used by aggregations."""
        return abs(self.amount)


@dataclass(frozen=True)
class EntryDraft:
    """Raw entry values as submitted by a form or CLI."""

    date: date | str | None
    description: str
    kind: str
    category: str
    amount: Decimal | float | int | str | None
    created_by: str | None = None


@dataclass(frozen=True)
class NewEntry:
    """Validated entry ready to be persisted."""

    date: date
    description: str
    kind: str
    category: str
    amount: Decimal
    created_by: str | None = None


__all__ = ["Entry", "EntryDraft", "NewEntry"]
