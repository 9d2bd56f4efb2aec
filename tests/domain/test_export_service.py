"""Tests for the export payload builder."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.constants import EXPENSE, INCOME
from src.domain.errors import NoPeriodSelectedError
from src.domain.models import Entry, FilterCriteria
from src.domain.services.export import build_export_payload
from src.domain.services.filtering import build_filter_criteria


def _entries() -> list[Entry]:
    return [
        Entry(
            id="1",
            date=date(2024, 1, 15),
            description="Consulting",
            kind=INCOME,
            category="Freelance",
            amount=Decimal("1000"),
        ),
        Entry(
            id="2",
            date=date(2024, 1, 20),
            description="Groceries",
            kind=EXPENSE,
            category="Food",
            amount=Decimal("400"),
        ),
        Entry(
            id="3",
            date=date(2023, 12, 20),
            description="Rent",
            kind=EXPENSE,
            category="Bills",
            amount=Decimal("700"),
        ),
    ]


def test_export_refuses_all_time() -> None:
    """An unbounded export is refused."""
    with pytest.raises(NoPeriodSelectedError):
        build_export_payload(_entries(), FilterCriteria(date_range="all"))


def test_export_payload_filters_and_totals_rows() -> None:
    """Rows are filtered and totals computed over them only."""
    criteria = build_filter_criteria("current-month", date(2024, 1, 31))

    payload = build_export_payload(_entries(), criteria)

    assert [entry.id for entry in payload.rows] == ["1", "2"]
    assert payload.totals.income == Decimal("1000")
    assert payload.totals.expense == Decimal("400")
    assert payload.totals.balance == Decimal("600")
    assert payload.period_label == "Filter: Current Month"


def test_export_payload_may_be_empty() -> None:
    """A bounded period without matches still exports."""
    criteria = build_filter_criteria("previous-month", date(2024, 6, 1))

    payload = build_export_payload(_entries(), criteria)

    assert payload.rows == []
    assert payload.totals.balance == Decimal("0")
