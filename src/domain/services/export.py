"""Domain service assembling report export payloads."""

from collections.abc import Sequence

from src.domain.constants import DATE_RANGE_ALL
from src.domain.errors import NoPeriodSelectedError
from src.domain.models import Entry, ExportPayload, FilterCriteria
from src.domain.services.filtering import apply_filters, describe_filters
from src.domain.services.finance import compute_totals


def build_export_payload(
    entries: Sequence[Entry],
    criteria: FilterCriteria,
) -> ExportPayload:
    """Return the filtered rows, their totals and a period label.

    Args:
        entries: Full entry collection.
        criteria: Resolved filter criteria.

    Returns:
        ExportPayload: Data handed to the report renderer.

    Raises:
        NoPeriodSelectedError: If the criteria cover all time.
    """
    if criteria.date_range == DATE_RANGE_ALL:
        raise NoPeriodSelectedError()
    rows = apply_filters(entries, criteria)
    return ExportPayload(
        rows=rows,
        totals=compute_totals(rows),
        period_label=describe_filters(criteria),
    )


__all__ = ["build_export_payload"]
