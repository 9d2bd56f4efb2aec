"""Domain services package."""

from .export import build_export_payload
from .filtering import (
    apply_filters,
    build_filter_criteria,
    describe_filters,
    paginate,
    resolve_date_range,
)
from .finance import (
    build_category_breakdown,
    build_month_buckets,
    build_monthly_series,
    compute_month_totals,
    compute_totals,
    expense_ratio,
    list_categories,
    overall_savings_rate,
    savings_rate,
    sort_entries_by_date,
)
from .normalization import normalize_email, normalize_label
from .validation import parse_amount, validate_entry_draft

__all__ = [
    "build_export_payload",
    "apply_filters",
    "build_filter_criteria",
    "describe_filters",
    "paginate",
    "resolve_date_range",
    "build_category_breakdown",
    "build_month_buckets",
    "build_monthly_series",
    "compute_month_totals",
    "compute_totals",
    "expense_ratio",
    "list_categories",
    "overall_savings_rate",
    "savings_rate",
    "sort_entries_by_date",
    "normalize_email",
    "normalize_label",
    "parse_amount",
    "validate_entry_draft",
]
