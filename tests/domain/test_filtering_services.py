"""Tests for date range resolution, filters and pagination."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.constants import ALL_KINDS, EXPENSE, INCOME
from src.domain.models import DateRange, Entry, FilterCriteria
from src.domain.services.filtering import (
    apply_filters,
    build_filter_criteria,
    describe_filters,
    paginate,
    resolve_date_range,
)

TODAY = date(2024, 3, 15)


def _entry(
    entry_id: str,
    entry_date: date,
    kind: str = EXPENSE,
    category: str = "Food",
) -> Entry:
    return Entry(
        id=entry_id,
        date=entry_date,
        description=f"entry {entry_id}",
        kind=kind,
        category=category,
        amount=Decimal("10"),
    )


def test_resolve_current_month() -> None:
    assert resolve_date_range("current-month", TODAY) == DateRange(
        start=date(2024, 3, 1),
        end=TODAY,
    )


def test_resolve_previous_month_handles_year_and_leap_day() -> None:
    """Previous month should span its full calendar month."""
    assert resolve_date_range("previous-month", TODAY) == DateRange(
        start=date(2024, 2, 1),
        end=date(2024, 2, 29),
    )
    assert resolve_date_range("previous-month", date(2024, 1, 10)) == (
        DateRange(start=date(2023, 12, 1), end=date(2023, 12, 31))
    )


@pytest.mark.parametrize(
    ("range_kind", "expected_start"),
    [
        ("last-30", date(2024, 2, 14)),
        ("last-60", date(2024, 1, 15)),
        ("last-90", date(2023, 12, 16)),
    ],
)
def test_resolve_trailing_days(range_kind: str, expected_start: date) -> None:
    assert resolve_date_range(range_kind, TODAY) == DateRange(
        start=expected_start,
        end=TODAY,
    )


def test_resolve_custom_preserves_existing_bounds() -> None:
    """Custom keeps previous bounds and defaults the end to today."""
    existing = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))

    assert resolve_date_range("custom", TODAY, existing) == existing
    assert resolve_date_range("custom", TODAY) == DateRange(
        start=None,
        end=TODAY,
    )


def test_resolve_all_leaves_bounds_open_and_rejects_unknown() -> None:
    assert resolve_date_range("all", TODAY) == DateRange()
    with pytest.raises(ValueError):
        resolve_date_range("last-year", TODAY)


def test_apply_filters_uses_inclusive_bounds() -> None:
    """Entries on either bound should be kept."""
    entries = [
        _entry("before", date(2024, 2, 29)),
        _entry("start", date(2024, 3, 1)),
        _entry("end", TODAY),
        _entry("after", date(2024, 3, 16)),
    ]
    criteria = build_filter_criteria("current-month", TODAY)

    result = apply_filters(entries, criteria)

    assert [entry.id for entry in result] == ["start", "end"]


def test_apply_filters_all_range_ignores_stale_bounds() -> None:
    """The all range keeps every date even if bounds are present."""
    entries = [_entry("old", date(2001, 1, 1)), _entry("new", TODAY)]
    criteria = FilterCriteria(
        date_range="all",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
    )

    assert apply_filters(entries, criteria) == entries


def test_apply_filters_combines_kind_and_category() -> None:
    """Kind and category tests are combined with the date test."""
    entries = [
        _entry("1", TODAY, EXPENSE, "Food"),
        _entry("2", TODAY, INCOME, "Food"),
        _entry("3", TODAY, EXPENSE, "food"),
        _entry("4", TODAY, EXPENSE, "Bills"),
    ]
    criteria = build_filter_criteria(
        "last-30",
        TODAY,
        kind=EXPENSE,
        category="Food",
    )

    result = apply_filters(entries, criteria)

    assert [entry.id for entry in result] == ["1"]
    assert len(entries) == 4


def test_apply_filters_unset_kind_and_category_keep_everything() -> None:
    entries = [_entry("1", TODAY, EXPENSE), _entry("2", TODAY, INCOME)]
    criteria = FilterCriteria(kind=None, category=None)

    assert apply_filters(entries, criteria) == entries
    assert apply_filters(entries, FilterCriteria(kind=ALL_KINDS)) == entries


def test_apply_filters_is_idempotent() -> None:
    """Applying the same filter twice changes nothing."""
    entries = [
        _entry("1", date(2024, 3, 2), INCOME, "Salary"),
        _entry("2", date(2024, 1, 2), EXPENSE, "Food"),
        _entry("3", date(2024, 3, 10), EXPENSE, "Food"),
    ]
    criteria = build_filter_criteria("last-30", TODAY, kind=EXPENSE)

    once = apply_filters(entries, criteria)

    assert apply_filters(once, criteria) == once


def test_paginate_reconstructs_items_in_order() -> None:
    """Concatenating every page gives back the original list."""
    items = list(range(23))

    first = paginate(items, 1, 10)
    pages = [
        paginate(items, number, 10).items
        for number in range(1, first.total_pages + 1)
    ]

    assert first.total_pages == 3
    assert first.total_items == 23
    assert [item for page in pages for item in page] == items
    assert pages[-1] == [20, 21, 22]


def test_paginate_out_of_range_is_empty() -> None:
    """Pages past the end or before the start are empty."""
    assert paginate([1, 2, 3], 5, 2).items == []
    assert paginate([1, 2, 3], 0, 2).items == []
    empty = paginate([], 1, 10)
    assert empty.items == []
    assert empty.total_pages == 0
    assert empty.has_next is False


def test_paginate_rejects_non_positive_page_size() -> None:
    with pytest.raises(ValueError):
        paginate([1], 1, 0)


def test_describe_filters() -> None:
    """Descriptions follow the report header wording."""
    assert describe_filters(FilterCriteria()) == "All Entries"
    assert describe_filters(
        build_filter_criteria(
            "last-30",
            TODAY,
            kind=EXPENSE,
            category="Food",
        )
    ) == "Filter: Last 30 Days, Expense Only, Category: Food"
    custom = build_filter_criteria(
        "custom",
        TODAY,
        custom_start=date(2024, 1, 1),
        custom_end=date(2024, 1, 31),
    )
    assert describe_filters(custom) == (
        "Filter: Custom Range: 2024-01-01 to 2024-01-31"
    )
    open_custom = build_filter_criteria("custom", TODAY, kind=INCOME)
    assert describe_filters(open_custom) == "Filter: Income Only"
