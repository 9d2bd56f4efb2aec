"""Domain services for ledger aggregates."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    ALL_KINDS,
    CATEGORY_VIEWS,
    DEFAULT_TOP_CATEGORIES,
    INCOME,
    MONTH_ABBREVIATIONS,
    TRAILING_MONTHS,
)
from src.domain.models import (
    CategoryBreakdown,
    Entry,
    MonthBucket,
    MonthlyData,
    MonthlySeries,
    PeriodTotals,
)

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def compute_totals(entries: Iterable[Entry]) -> PeriodTotals:
    """Sum entry magnitudes into income and expense totals.

    Amounts count by magnitude, so a negative stored income still adds to
    income. Amounts must be finite; callers validate before persisting.

    Args:
        entries: Any collection of entries, possibly empty.

    Returns:
        PeriodTotals: Income, expense and derived balance.
    """
    income = _ZERO
    expense = _ZERO
    for entry in entries:
        if entry.kind == INCOME:
            income += entry.magnitude
        else:
            expense += entry.magnitude
    return PeriodTotals(income=income, expense=expense)


def entries_in_month(
    entries: Iterable[Entry],
    year: int,
    month: int,
) -> list[Entry]:
    """Return the entries dated within the given calendar month."""
    return [
        entry
        for entry in entries
        if entry.date.year == year and entry.date.month == month
    ]


def compute_month_totals(entries: Iterable[Entry], today: date) -> PeriodTotals:
    """Return totals for the calendar month containing ``today``."""
    return compute_totals(entries_in_month(entries, today.year, today.month))


def format_month_label(year: int, month: int) -> str:
    """Return a short month label such as ``Jan 24``."""
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year % 100:02d}"


def build_month_buckets(
    now: date,
    count: int = TRAILING_MONTHS,
) -> list[MonthBucket]:
    """Return trailing calendar month buckets ending at ``now``'s month.

    Args:
        now: Reference date; its month is the newest bucket.
        count: Number of buckets to produce.

    Returns:
        list[MonthBucket]: Buckets ordered oldest to newest.
    """
    buckets: list[MonthBucket] = []
    for offset in range(count - 1, -1, -1):
        month_index = now.year * 12 + (now.month - 1) - offset
        year, month = divmod(month_index, 12)
        buckets.append(
            MonthBucket(
                year=year,
                month=month + 1,
                label=format_month_label(year, month + 1),
            )
        )
    return buckets


def savings_rate(totals: PeriodTotals) -> Decimal:
    """Return the retained share of income in percent, floored at zero."""
    if totals.income <= 0:
        return _ZERO
    rate = totals.balance / totals.income * _HUNDRED
    return max(_ZERO, rate)


def overall_savings_rate(totals: PeriodTotals) -> Decimal:
    """Return the retained share of all income in percent.

    Unlike the monthly rate this is not clamped, so overspending shows as a
    negative percentage. Zero when there is no income.
    """
    if totals.income <= 0:
        return _ZERO
    return totals.balance / totals.income * _HUNDRED


def expense_ratio(totals: PeriodTotals) -> Decimal:
    """Return expenses as a percentage of income, capped at 100."""
    if totals.income <= 0:
        return _ZERO
    ratio = totals.expense / totals.income * _HUNDRED
    return min(_HUNDRED, ratio)


def build_monthly_series(
    entries: Iterable[Entry],
    now: date,
    months: int = TRAILING_MONTHS,
) -> MonthlySeries:
    """Aggregate entries into trailing monthly totals and rate series.

    Args:
        entries: Entries in any order.
        now: Reference date whose month closes the series.
        months: Number of trailing months.

    Returns:
        MonthlySeries: Aligned income, expense, balance and rate series.
    """
    by_month: dict[tuple[int, int], list[Entry]] = {}
    for entry in entries:
        key = (entry.date.year, entry.date.month)
        by_month.setdefault(key, []).append(entry)

    buckets = build_month_buckets(now, months)
    income: list[Decimal] = []
    expenses: list[Decimal] = []
    balance: list[Decimal] = []
    savings: list[Decimal] = []
    ratios: list[Decimal] = []
    for bucket in buckets:
        totals = compute_totals(by_month.get((bucket.year, bucket.month), []))
        income.append(totals.income)
        expenses.append(totals.expense)
        balance.append(totals.balance)
        savings.append(savings_rate(totals))
        ratios.append(expense_ratio(totals))

    return MonthlySeries(
        buckets=buckets,
        monthly=MonthlyData(
            labels=[bucket.label for bucket in buckets],
            income=income,
            expenses=expenses,
            balance=balance,
        ),
        savings_rate=savings,
        expense_ratio=ratios,
    )


def build_category_breakdown(
    entries: Iterable[Entry],
    view: str = ALL_KINDS,
    top_n: int = DEFAULT_TOP_CATEGORIES,
) -> CategoryBreakdown:
    """Return the largest categories for the selected view.

    Categories are grouped by exact label. Equal sums keep the order in
    which the category first appeared. Categories beyond ``top_n`` are
    dropped, not folded into an aggregate.

    Args:
        entries: Entries in any order.
        view: ``Income``, ``Expense`` or ``All``.
        top_n: Maximum number of categories returned.

    Returns:
        CategoryBreakdown: Labels and sums ordered by descending sum.

    Raises:
        ValueError: If ``view`` is not a known category view.
    """
    if view not in CATEGORY_VIEWS:
        raise ValueError(
            f"Unsupported category view: {view}. "
            f"Expected one of {', '.join(CATEGORY_VIEWS)}."
        )
    totals: dict[str, Decimal] = {}
    for entry in entries:
        if view != ALL_KINDS and entry.kind != view:
            continue
        totals[entry.category] = (
            totals.get(entry.category, _ZERO) + entry.magnitude
        )

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    ranked = ranked[: max(top_n, 0)]
    return CategoryBreakdown(
        view=view,
        labels=[category for category, _ in ranked],
        data=[amount for _, amount in ranked],
    )


def list_categories(entries: Iterable[Entry]) -> list[str]:
    """Return the sorted distinct non-empty categories."""
    return sorted({entry.category for entry in entries if entry.category})


def sort_entries_by_date(entries: Iterable[Entry]) -> list[Entry]:
    """Return entries newest first, keeping input order for equal dates."""
    return sorted(entries, key=lambda entry: entry.date, reverse=True)


__all__ = [
    "compute_totals",
    "entries_in_month",
    "compute_month_totals",
    "format_month_label",
    "build_month_buckets",
    "savings_rate",
    "overall_savings_rate",
    "expense_ratio",
    "build_monthly_series",
    "build_category_breakdown",
    "list_categories",
    "sort_entries_by_date",
]
