"""Tests for ledger aggregation services."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.constants import ALL_KINDS, EXPENSE, INCOME
from src.domain.models import Entry, PeriodTotals
from src.domain.services.finance import (
    build_category_breakdown,
    build_month_buckets,
    build_monthly_series,
    compute_month_totals,
    compute_totals,
    list_categories,
    overall_savings_rate,
    sort_entries_by_date,
)


def _entry(
    entry_id: str,
    entry_date: date,
    kind: str,
    amount: str,
    category: str = "Other",
) -> Entry:
    return Entry(
        id=entry_id,
        date=entry_date,
        description=f"entry {entry_id}",
        kind=kind,
        category=category,
        amount=Decimal(amount),
    )


def test_compute_totals_of_empty_collection_is_zero() -> None:
    """No entries should produce zero totals."""
    totals = compute_totals([])

    assert totals.income == Decimal("0")
    assert totals.expense == Decimal("0")
    assert totals.balance == Decimal("0")


def test_compute_totals_concrete_scenario() -> None:
    """Income and expense should sum separately with a derived balance."""
    entries = [
        _entry("1", date(2024, 1, 15), INCOME, "1000"),
        _entry("2", date(2024, 1, 20), EXPENSE, "400"),
    ]

    totals = compute_totals(entries)

    assert totals.income == Decimal("1000")
    assert totals.expense == Decimal("400")
    assert totals.balance == Decimal("600")


def test_compute_totals_uses_magnitude_of_signed_amounts() -> None:
    """A negative income still counts as positive income."""
    totals = compute_totals(
        [
            _entry("1", date(2024, 1, 1), INCOME, "-500"),
            _entry("2", date(2024, 1, 2), EXPENSE, "-120.50"),
        ]
    )

    assert totals.income == Decimal("500")
    assert totals.expense == Decimal("120.50")
    assert totals.balance == Decimal("379.50")


def test_compute_totals_is_additive_over_partitions() -> None:
    """Totals of a concatenation equal the sum of partition totals."""
    first = [
        _entry("1", date(2024, 1, 1), INCOME, "100"),
        _entry("2", date(2024, 2, 1), EXPENSE, "30"),
    ]
    second = [
        _entry("3", date(2024, 3, 1), EXPENSE, "45.25"),
        _entry("4", date(2024, 3, 2), INCOME, "12"),
    ]

    combined = compute_totals(first + second)
    left = compute_totals(first)
    right = compute_totals(second)

    assert combined.income == left.income + right.income
    assert combined.expense == left.expense + right.expense
    assert combined.balance == left.balance + right.balance
    assert compute_totals(list(reversed(first + second))) == combined


def test_compute_month_totals_keeps_only_reference_month() -> None:
    """Current month totals should ignore other months and years."""
    entries = [
        _entry("1", date(2024, 3, 2), INCOME, "200"),
        _entry("2", date(2024, 2, 28), INCOME, "999"),
        _entry("3", date(2023, 3, 10), EXPENSE, "50"),
        _entry("4", date(2024, 3, 31), EXPENSE, "80"),
    ]

    totals = compute_month_totals(entries, date(2024, 3, 15))

    assert totals.income == Decimal("200")
    assert totals.expense == Decimal("80")


def test_build_month_buckets_cross_year_boundary() -> None:
    """Buckets should run April 2023 to March 2024 for March 2024."""
    buckets = build_month_buckets(date(2024, 3, 9))

    assert len(buckets) == 12
    assert (buckets[0].year, buckets[0].month) == (2023, 4)
    assert (buckets[-1].year, buckets[-1].month) == (2024, 3)
    assert buckets[0].label == "Apr 23"
    assert buckets[-1].label == "Mar 24"
    assert [b.month for b in buckets[8:10]] == [12, 1]


def test_build_monthly_series_has_twelve_zero_points_without_entries() -> None:
    """Every series should have 12 elements even without entries."""
    series = build_monthly_series([], date(2024, 6, 1))

    assert len(series.buckets) == 12
    for values in (
        series.monthly.income,
        series.monthly.expenses,
        series.monthly.balance,
        series.savings_rate,
        series.expense_ratio,
    ):
        assert len(values) == 12
        assert all(value == 0 for value in values)
    assert series.labels == series.monthly.labels


def test_build_monthly_series_concrete_rates() -> None:
    """January with 1000 income and 400 expense gives 60% and 40%."""
    entries = [
        _entry("2", date(2024, 1, 20), EXPENSE, "400"),
        _entry("1", date(2024, 1, 15), INCOME, "1000"),
        _entry("3", date(2022, 1, 15), INCOME, "5000"),
    ]

    series = build_monthly_series(entries, date(2024, 1, 31))

    assert series.buckets[-1].label == "Jan 24"
    assert series.monthly.income[-1] == Decimal("1000")
    assert series.monthly.expenses[-1] == Decimal("400")
    assert series.monthly.balance[-1] == Decimal("600")
    assert series.savings_rate[-1] == Decimal("60")
    assert series.expense_ratio[-1] == Decimal("40")
    assert sum(series.monthly.income) == Decimal("1000")


def test_build_monthly_series_clamps_overspending() -> None:
    """Overspending reports 0% savings and a 100% expense ratio."""
    entries = [
        _entry("1", date(2024, 5, 1), INCOME, "1000"),
        _entry("2", date(2024, 5, 3), EXPENSE, "1500"),
    ]

    series = build_monthly_series(entries, date(2024, 5, 20))

    assert series.savings_rate[-1] == Decimal("0")
    assert series.expense_ratio[-1] == Decimal("100")
    assert series.monthly.balance[-1] == Decimal("-500")


def test_build_monthly_series_without_income_reports_zero_rates() -> None:
    """Expense-only months report zero for both rates."""
    entries = [_entry("1", date(2024, 5, 3), EXPENSE, "75")]

    series = build_monthly_series(entries, date(2024, 5, 20))

    assert series.savings_rate[-1] == Decimal("0")
    assert series.expense_ratio[-1] == Decimal("0")


def test_category_breakdown_keeps_top_eight_by_sum() -> None:
    """Ten categories should be cut to the eight largest."""
    entries = [
        _entry(str(i), date(2024, 1, 1), EXPENSE, str((i + 1) * 10), f"C{i}")
        for i in range(10)
    ]

    breakdown = build_category_breakdown(entries, EXPENSE)

    assert len(breakdown.labels) == 8
    assert breakdown.labels == [f"C{i}" for i in range(9, 1, -1)]
    assert breakdown.data == sorted(breakdown.data, reverse=True)
    assert "C0" not in breakdown.labels
    assert "C1" not in breakdown.labels


def test_category_breakdown_filters_by_view_and_groups_exactly() -> None:
    """Views filter by kind and grouping is case-sensitive."""
    entries = [
        _entry("1", date(2024, 1, 1), EXPENSE, "10", "Food"),
        _entry("2", date(2024, 1, 2), EXPENSE, "-5", "Food"),
        _entry("3", date(2024, 1, 3), EXPENSE, "7", "food"),
        _entry("4", date(2024, 1, 4), INCOME, "100", "Salary"),
    ]

    expense_view = build_category_breakdown(entries, EXPENSE)
    income_view = build_category_breakdown(entries, INCOME)
    all_view = build_category_breakdown(entries, ALL_KINDS)

    assert expense_view.labels == ["Food", "food"]
    assert expense_view.data == [Decimal("15"), Decimal("7")]
    assert income_view.labels == ["Salary"]
    assert all_view.labels == ["Salary", "Food", "food"]


def test_category_breakdown_ties_keep_first_appearance_order() -> None:
    """Equal sums should keep insertion order."""
    entries = [
        _entry("1", date(2024, 1, 1), EXPENSE, "10", "Bills"),
        _entry("2", date(2024, 1, 1), EXPENSE, "10", "Anime"),
        _entry("3", date(2024, 1, 1), EXPENSE, "10", "Cafe"),
    ]

    breakdown = build_category_breakdown(entries, EXPENSE, top_n=2)

    assert breakdown.labels == ["Bills", "Anime"]


def test_category_breakdown_rejects_unknown_view() -> None:
    """Unknown views are a programming error."""
    with pytest.raises(ValueError):
        build_category_breakdown([], "Transfers")


def test_list_categories_and_sort_by_date() -> None:
    """Helpers should return distinct categories and newest-first rows."""
    entries = [
        _entry("1", date(2024, 1, 1), EXPENSE, "1", "Food"),
        _entry("2", date(2024, 3, 1), EXPENSE, "1", "Bills"),
        _entry("3", date(2024, 1, 1), EXPENSE, "1", "Food"),
    ]

    assert list_categories(entries) == ["Bills", "Food"]
    assert [e.id for e in sort_entries_by_date(entries)] == ["2", "1", "3"]


def test_overall_savings_rate_is_not_clamped() -> None:
    """Overspending shows as a negative overall rate."""
    saved = PeriodTotals(income=Decimal("1000"), expense=Decimal("400"))
    overspent = PeriodTotals(income=Decimal("1000"), expense=Decimal("1500"))

    assert overall_savings_rate(saved) == Decimal("60")
    assert overall_savings_rate(overspent) == Decimal("-50")


def test_overall_savings_rate_without_income_is_zero() -> None:
    totals = PeriodTotals(income=Decimal("0"), expense=Decimal("250"))

    assert overall_savings_rate(totals) == Decimal("0")
