"""Domain services for date ranges, filters and pagination."""

import math
from collections.abc import Sequence
from datetime import date, timedelta
from typing import TypeVar

from src.domain.constants import (
    ALL_KINDS,
    DATE_RANGE_ALL,
    DATE_RANGE_CURRENT_MONTH,
    DATE_RANGE_CUSTOM,
    DATE_RANGE_LABELS,
    DATE_RANGE_PREVIOUS_MONTH,
    TRAILING_DAY_RANGES,
)
from src.domain.models import DateRange, Entry, FilterCriteria, Page

T = TypeVar("T")


def resolve_date_range(
    range_kind: str,
    today: date,
    existing_custom: DateRange | None = None,
) -> DateRange:
    """Resolve a date range key into concrete inclusive bounds.

    Args:
        range_kind: One of the date range keys.
        today: Reference date for relative ranges.
        existing_custom: Previously selected custom bounds, if any.

    Returns:
        DateRange: Resolved bounds; ``all`` leaves both sides open.

    Raises:
        ValueError: If ``range_kind`` is not a known date range key.
    """
    if range_kind == DATE_RANGE_ALL:
        return DateRange()
    if range_kind == DATE_RANGE_CURRENT_MONTH:
        return DateRange(start=today.replace(day=1), end=today)
    if range_kind == DATE_RANGE_PREVIOUS_MONTH:
        last_day = today.replace(day=1) - timedelta(days=1)
        return DateRange(start=last_day.replace(day=1), end=last_day)
    if range_kind in TRAILING_DAY_RANGES:
        days = TRAILING_DAY_RANGES[range_kind]
        return DateRange(start=today - timedelta(days=days), end=today)
    if range_kind == DATE_RANGE_CUSTOM:
        previous = existing_custom or DateRange()
        return DateRange(
            start=previous.start,
            end=previous.end or today,
        )
    raise ValueError(
        f"Unsupported date range: {range_kind}. "
        f"Expected one of {', '.join(DATE_RANGE_LABELS)}."
    )


def build_filter_criteria(
    date_range: str,
    today: date,
    kind: str | None = ALL_KINDS,
    category: str | None = "",
    custom_start: date | None = None,
    custom_end: date | None = None,
) -> FilterCriteria:
    """Build filter criteria with bounds resolved against ``today``."""
    bounds = resolve_date_range(
        date_range,
        today,
        DateRange(start=custom_start, end=custom_end),
    )
    return FilterCriteria(
        date_range=date_range,
        start_date=bounds.start,
        end_date=bounds.end,
        kind=kind,
        category=category,
    )


def _matches_date(entry: Entry, criteria: FilterCriteria) -> bool:
    if criteria.date_range == DATE_RANGE_ALL:
        return True
    if criteria.start_date is not None and entry.date < criteria.start_date:
        return False
    if criteria.end_date is not None and entry.date > criteria.end_date:
        return False
    return True


def _matches_kind(entry: Entry, criteria: FilterCriteria) -> bool:
    if not criteria.kind or criteria.kind == ALL_KINDS:
        return True
    return entry.kind == criteria.kind


def _matches_category(entry: Entry, criteria: FilterCriteria) -> bool:
    if not criteria.category:
        return True
    return entry.category == criteria.category


def apply_filters(
    entries: Sequence[Entry],
    criteria: FilterCriteria,
) -> list[Entry]:
    """Return the entries that pass the date, kind and category tests.

    Args:
        entries: Entries to filter; never mutated.
        criteria: Resolved filter criteria.

    Returns:
        list[Entry]: Matching entries in input order.
    """
    return [
        entry
        for entry in entries
        if _matches_date(entry, criteria)
        and _matches_kind(entry, criteria)
        and _matches_category(entry, criteria)
    ]


def paginate(
    items: Sequence[T],
    page_number: int,
    page_size: int,
) -> Page[T]:
    """Return one 1-based page of ``items``.

    Out-of-range pages yield an empty item list rather than an error.

    Raises:
        ValueError: If ``page_size`` is not positive.
    """
    if page_size < 1:
        raise ValueError(f"Page size must be positive, got {page_size}")
    total_pages = math.ceil(len(items) / page_size)
    if page_number < 1:
        page_items: list[T] = []
    else:
        start = (page_number - 1) * page_size
        page_items = list(items[start:start + page_size])
    return Page(
        items=page_items,
        total_pages=total_pages,
        page_number=page_number,
        page_size=page_size,
        total_items=len(items),
    )


def describe_filters(criteria: FilterCriteria) -> str:
    """Render filter criteria as a human-readable period label."""
    parts: list[str] = []
    if criteria.date_range == DATE_RANGE_CUSTOM:
        if criteria.start_date and criteria.end_date:
            parts.append(
                f"Custom Range: {criteria.start_date.isoformat()} "
                f"to {criteria.end_date.isoformat()}"
            )
    elif criteria.date_range != DATE_RANGE_ALL:
        parts.append(
            DATE_RANGE_LABELS.get(criteria.date_range, criteria.date_range)
        )
    if criteria.kind and criteria.kind != ALL_KINDS:
        parts.append(f"{criteria.kind} Only")
    if criteria.category:
        parts.append(f"Category: {criteria.category}")
    if not parts:
        return "All Entries"
    return f"Filter: {', '.join(parts)}"


__all__ = [
    "resolve_date_range",
    "build_filter_criteria",
    "apply_filters",
    "paginate",
    "describe_filters",
]
