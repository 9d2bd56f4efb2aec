"""Domain constants for ledger analytics."""

INCOME = "Income"
EXPENSE = "Expense"
ALL_KINDS = "All"

ENTRY_KINDS = (INCOME, EXPENSE)
CATEGORY_VIEWS = (EXPENSE, INCOME, ALL_KINDS)

SUGGESTED_CATEGORIES = {
    INCOME: ("Salary", "Freelance", "Investment", "Business", "Other"),
    EXPENSE: (
        "Food",
        "Transport",
        "Entertainment",
        "Shopping",
        "Bills",
        "Healthcare",
        "Education",
        "Other",
    ),
}

DATE_RANGE_ALL = "all"
DATE_RANGE_CURRENT_MONTH = "current-month"
DATE_RANGE_PREVIOUS_MONTH = "previous-month"
DATE_RANGE_LAST_30 = "last-30"
DATE_RANGE_LAST_60 = "last-60"
DATE_RANGE_LAST_90 = "last-90"
DATE_RANGE_CUSTOM = "custom"

DATE_RANGE_LABELS = {
    DATE_RANGE_ALL: "All Time",
    DATE_RANGE_CURRENT_MONTH: "Current Month",
    DATE_RANGE_PREVIOUS_MONTH: "Previous Month",
    DATE_RANGE_LAST_30: "Last 30 Days",
    DATE_RANGE_LAST_60: "Last 60 Days",
    DATE_RANGE_LAST_90: "Last 90 Days",
    DATE_RANGE_CUSTOM: "Custom Range",
}

TRAILING_DAY_RANGES = {
    DATE_RANGE_LAST_30: 30,
    DATE_RANGE_LAST_60: 60,
    DATE_RANGE_LAST_90: 90,
}

TRAILING_MONTHS = 12
DEFAULT_TOP_CATEGORIES = 8
DEFAULT_PAGE_SIZE = 10

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


__all__ = [
    "INCOME",
    "EXPENSE",
    "ALL_KINDS",
    "ENTRY_KINDS",
    "CATEGORY_VIEWS",
    "SUGGESTED_CATEGORIES",
    "DATE_RANGE_ALL",
    "DATE_RANGE_CURRENT_MONTH",
    "DATE_RANGE_PREVIOUS_MONTH",
    "DATE_RANGE_LAST_30",
    "DATE_RANGE_LAST_60",
    "DATE_RANGE_LAST_90",
    "DATE_RANGE_CUSTOM",
    "DATE_RANGE_LABELS",
    "TRAILING_DAY_RANGES",
    "TRAILING_MONTHS",
    "DEFAULT_TOP_CATEGORIES",
    "DEFAULT_PAGE_SIZE",
    "MONTH_ABBREVIATIONS",
]
