"""Domain models for filtering, pagination and export."""

from dataclasses import dataclass
from datetime import date
from typing import Generic, TypeVar

from src.domain.constants import ALL_KINDS, DATE_RANGE_ALL
from src.domain.models.entries import Entry
from src.domain.models.finance import PeriodTotals

T = TypeVar("T")


@dataclass(frozen=True)
class DateRange:
    """Inclusive date bounds; ``None`` leaves a side open."""

    start: date | None = None
    end: date | None = None


@dataclass(frozen=True)
class FilterCriteria:
    """Date range, kind and category constraints for table and export.

    Attributes:
        date_range: One of the date range keys (``all``, ``last-30``...).
        start_date: Inclusive lower bound, resolved from ``date_range``.
        end_date: Inclusive upper bound, resolved from ``date_range``.
        kind: ``Income``, ``Expense`` or ``All``.
        category: Exact category to keep; empty keeps every category.
    """

    date_range: str = DATE_RANGE_ALL
    start_date: date | None = None
    end_date: date | None = None
    kind: str | None = ALL_KINDS
    category: str | None = ""


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of items plus the page count of the whole collection."""

    items: list[T]
    total_pages: int
    page_number: int
    page_size: int
    total_items: int

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages


@dataclass(frozen=True)
class EntriesView:
    """Filtered table page with totals over the whole filtered set."""

    page: Page[Entry]
    totals: PeriodTotals
    categories: list[str]


@dataclass(frozen=True)
class ExportPayload:
    """Rows, totals and a period label handed to the report renderer."""

    rows: list[Entry]
    totals: PeriodTotals
    period_label: str


__all__ = [
    "DateRange",
    "FilterCriteria",
    "Page",
    "EntriesView",
    "ExportPayload",
]
