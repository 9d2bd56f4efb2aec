"""Domain models package."""

from .entries import Entry, EntryDraft, NewEntry
from .filters import (
    DateRange,
    EntriesView,
    ExportPayload,
    FilterCriteria,
    Page,
)
from .finance import (
    CategoryBreakdown,
    DashboardView,
    MonthBucket,
    MonthlyData,
    MonthlySeries,
    PeriodTotals,
)

__all__ = [
    "Entry",
    "EntryDraft",
    "NewEntry",
    "DateRange",
    "EntriesView",
    "ExportPayload",
    "FilterCriteria",
    "Page",
    "CategoryBreakdown",
    "DashboardView",
    "MonthBucket",
    "MonthlyData",
    "MonthlySeries",
    "PeriodTotals",
]
