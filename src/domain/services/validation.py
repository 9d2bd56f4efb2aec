"""Domain validation helpers."""

from datetime import date
from decimal import Decimal, InvalidOperation

from src.domain.constants import ENTRY_KINDS
from src.domain.errors import InvalidAmountError, InvalidEntryError
from src.domain.models import EntryDraft, NewEntry
from src.domain.services.normalization import normalize_email, normalize_label


def parse_amount(value) -> Decimal:
    """Parse a submitted amount into a positive finite Decimal.

    Args:
        value: Raw amount from a form field or CLI argument.

    Returns:
        Decimal: Parsed amount.

    Raises:
        InvalidAmountError: If the value is missing, non-numeric,
            non-finite or not strictly positive.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidAmountError("Please enter a valid amount")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise InvalidAmountError(
            f"Please enter a valid amount, got {value!r}"
        ) from exc
    if not amount.is_finite() or amount <= 0:
        raise InvalidAmountError(
            f"Amount must be a positive number, got {value!r}"
        )
    return amount


def parse_entry_date(value) -> date:
    """Parse a submitted entry date.

    Raises:
        InvalidEntryError: If the value is missing or not an ISO date.
    """
    if isinstance(value, date):
        return value
    if not value:
        raise InvalidEntryError("Entry date is required")
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError as exc:
        raise InvalidEntryError(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        ) from exc


def validate_entry_draft(draft: EntryDraft) -> NewEntry:
    """Validate a submitted entry before it reaches storage.

    Args:
        draft: Raw submitted values.

    Returns:
        NewEntry: Normalized entry ready to persist.

    Raises:
        InvalidEntryError: If a field is missing or malformed.
        InvalidAmountError: If the amount is not a positive number.
    """
    description = normalize_label(draft.description)
    if not description:
        raise InvalidEntryError("Description is required")
    if draft.kind not in ENTRY_KINDS:
        raise InvalidEntryError(
            f"Unsupported entry type: {draft.kind}. "
            f"Expected one of {', '.join(ENTRY_KINDS)}."
        )
    category = normalize_label(draft.category)
    if not category:
        raise InvalidEntryError("Category is required")
    return NewEntry(
        date=parse_entry_date(draft.date),
        description=description,
        kind=draft.kind,
        category=category,
        amount=parse_amount(draft.amount),
        created_by=normalize_email(draft.created_by),
    )


__all__ = ["parse_amount", "parse_entry_date", "validate_entry_draft"]
