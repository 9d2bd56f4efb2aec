"""Domain models for financial aggregates."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PeriodTotals:
    """Income and expense totals over a set of entries.

    Attributes:
        income: Sum of income magnitudes.
        expense: Sum of expense magnitudes.
    """

    income: Decimal
    expense: Decimal

    @property
    def balance(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class MonthBucket:
    """A calendar month aggregation window."""

    year: int
    month: int
    label: str


@dataclass(frozen=True)
class MonthlyData:
    """Income, expense and balance series aligned with month labels."""

    labels: list[str]
    income: list[Decimal]
    expenses: list[Decimal]
    balance: list[Decimal]


@dataclass(frozen=True)
class MonthlySeries:
    """Trailing monthly series used by the trend and rate charts.

    Every list is positionally aligned with ``buckets``.
    """

    buckets: list[MonthBucket]
    monthly: MonthlyData
    savings_rate: list[Decimal]
    expense_ratio: list[Decimal]

    @property
    def labels(self) -> list[str]:
        """Return the bucket labels, oldest first."""
        return [bucket.label for bucket in self.buckets]


@dataclass(frozen=True)
class CategoryBreakdown:
    """Top categories by summed magnitude, largest first."""

    view: str
    labels: list[str]
    data: list[Decimal]


@dataclass(frozen=True)
class DashboardView:
    """Summary cards and chart inputs for the dashboard page."""

    totals: PeriodTotals
    current_month_totals: PeriodTotals
    series: MonthlySeries
    categories: CategoryBreakdown
    entry_count: int
    category_count: int
    overall_savings_rate: Decimal


__all__ = [
    "PeriodTotals",
    "MonthBucket",
    "MonthlyData",
    "MonthlySeries",
    "CategoryBreakdown",
    "DashboardView",
]
