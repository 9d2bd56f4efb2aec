"""Domain package for business rules and core models."""

from .constants import (
    ALL_KINDS,
    DATE_RANGE_ALL,
    DATE_RANGE_LABELS,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TOP_CATEGORIES,
    ENTRY_KINDS,
    EXPENSE,
    INCOME,
    SUGGESTED_CATEGORIES,
)
from .errors import (
    EntryNotFoundError,
    InvalidAmountError,
    InvalidEntryError,
    LedgerError,
    NoPeriodSelectedError,
    UnauthorizedUserError,
)
from .models import (
    CategoryBreakdown,
    DashboardView,
    DateRange,
    EntriesView,
    Entry,
    EntryDraft,
    ExportPayload,
    FilterCriteria,
    MonthBucket,
    MonthlyData,
    MonthlySeries,
    NewEntry,
    Page,
    PeriodTotals,
)
from .policies import is_user_admin, is_user_authorized
from .services import (
    apply_filters,
    build_category_breakdown,
    build_export_payload,
    build_filter_criteria,
    build_monthly_series,
    compute_totals,
    describe_filters,
    paginate,
    resolve_date_range,
    validate_entry_draft,
)

__all__ = [
    "ALL_KINDS",
    "DATE_RANGE_ALL",
    "DATE_RANGE_LABELS",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_TOP_CATEGORIES",
    "ENTRY_KINDS",
    "EXPENSE",
    "INCOME",
    "SUGGESTED_CATEGORIES",
    "EntryNotFoundError",
    "InvalidAmountError",
    "InvalidEntryError",
    "LedgerError",
    "NoPeriodSelectedError",
    "UnauthorizedUserError",
    "CategoryBreakdown",
    "DashboardView",
    "DateRange",
    "EntriesView",
    "Entry",
    "EntryDraft",
    "ExportPayload",
    "FilterCriteria",
    "MonthBucket",
    "MonthlyData",
    "MonthlySeries",
    "NewEntry",
    "Page",
    "PeriodTotals",
    "is_user_admin",
    "is_user_authorized",
    "apply_filters",
    "build_category_breakdown",
    "build_export_payload",
    "build_filter_criteria",
    "build_monthly_series",
    "compute_totals",
    "describe_filters",
    "paginate",
    "resolve_date_range",
    "validate_entry_draft",
]
