"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.ports.entries_repository import EntriesRepositoryPort
from src.application.use_cases.add_entry import AddEntryUseCase
from src.application.use_cases.delete_entry import DeleteEntryUseCase
from src.application.use_cases.export_report import ExportReportUseCase
from src.application.use_cases.get_dashboard import (
    DashboardView,
    GetDashboardUseCase,
)
from src.application.use_cases.list_entries import (
    EntriesView,
    ListEntriesUseCase,
)
from src.domain.constants import (
    ALL_KINDS,
    CATEGORY_VIEWS,
    DATE_RANGE_CUSTOM,
    DATE_RANGE_LABELS,
    ENTRY_KINDS,
    EXPENSE,
    SUGGESTED_CATEGORIES,
)
from src.domain.errors import (
    EntryNotFoundError,
    InvalidEntryError,
    NoPeriodSelectedError,
)
from src.domain.models import (
    CategoryBreakdown,
    EntryDraft,
    FilterCriteria,
    MonthlySeries,
)
from src.domain.policies.access import is_user_admin, is_user_authorized
from src.domain.services.filtering import build_filter_criteria
from src.domain.services.finance import list_categories
from src.infrastructure.container import (
    build_entries_repository,
    build_report_renderer,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import LedgerSettings
from src.utils.formatting import (
    format_currency,
    format_currency_for_display,
    format_percent,
)

PAGE_KEY = "entries_page"
CRITERIA_KEY = "entries_criteria"

TREND_SERIES = ("Income", "Expenses", "Balance")
TREND_COLORS = ("#16a34a", "#dc2626", "#2563eb")
CATEGORY_PALETTE = (
    "#dc3545",
    "#fd7e14",
    "#ffc107",
    "#28a745",
    "#20c997",
    "#17a2b8",
    "#6f42c1",
    "#e83e8c",
    "#6c757d",
    "#495057",
    "#343a40",
    "#212529",
)


@st.cache_resource(show_spinner=False)
def _get_entries_repository() -> EntriesRepositoryPort:
    """Build the entries repository once per server process."""
    return build_entries_repository()


@st.cache_resource(show_spinner=False)
def _load_settings() -> LedgerSettings:
    """Cached wrapper around build_settings."""
    return build_settings()


def _fetch_dashboard(
    today: date,
    category_view: str,
    top_categories: int,
) -> DashboardView:
    """Fetch the dashboard view through its use case."""
    use_case = GetDashboardUseCase(
        entries_repository=_get_entries_repository(),
        top_categories=top_categories,
    )
    return use_case.execute(today=today, category_view=category_view)


def _fetch_entries_view(
    criteria: FilterCriteria,
    page_number: int,
    page_size: int,
) -> EntriesView:
    """Fetch one filtered page of entries."""
    use_case = ListEntriesUseCase(
        entries_repository=_get_entries_repository(),
        page_size=page_size,
    )
    return use_case.execute(criteria, page_number=page_number)


def _fetch_categories() -> list[str]:
    """Return the categories currently present in storage."""
    return list_categories(_get_entries_repository().fetch_entries())


def _current_user_email() -> str | None:
    """Return the signed-in user's email, or None when signed out."""
    user = getattr(st, "user", None)
    if user is None or not getattr(user, "is_logged_in", False):
        return None
    return getattr(user, "email", None)


def _prepare_trend_chart_data(
    series: MonthlySeries,
    visible: Sequence[str] = TREND_SERIES,
) -> list[dict[str, str | float | int]]:
    """Flatten monthly income, expense and balance into chart rows.

    Args:
        series: Trailing monthly series.
        visible: Series names to keep.

    Returns:
        Altair-ready rows with month, series name and amount.
    """
    columns = {
        "Income": series.monthly.income,
        "Expenses": series.monthly.expenses,
        "Balance": series.monthly.balance,
    }
    data: list[dict[str, str | float | int]] = []
    for name in TREND_SERIES:
        if name not in visible:
            continue
        for position, (label, amount) in enumerate(
            zip(series.monthly.labels, columns[name])
        ):
            data.append(
                {
                    "month": label,
                    "position": position,
                    "series": name,
                    "amount": float(amount),
                }
            )
    return data


def _prepare_rate_chart_data(
    labels: Sequence[str],
    values: Sequence[Decimal],
) -> list[dict[str, str | float | int]]:
    """Pair month labels with a percentage series."""
    return [
        {
            "month": label,
            "position": position,
            "rate": float(value),
            "rate_label": format_percent(value),
        }
        for position, (label, value) in enumerate(zip(labels, values))
    ]


def _prepare_category_chart_data(
    breakdown: CategoryBreakdown,
    currency_prefix: str,
) -> list[dict[str, str | float]]:
    """Prepare donut chart rows with amount and share labels.

    Shares are computed over the displayed categories only.
    """
    total_amount = sum(breakdown.data, start=Decimal("0"))
    data: list[dict[str, str | float]] = []
    for category, amount in zip(breakdown.labels, breakdown.data):
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": category,
                "amount": float(amount),
                "amount_label": format_currency(amount, prefix=currency_prefix),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _render_summary(view: DashboardView, currency_prefix: str) -> None:
    """Render the summary metric cards."""
    (
        income_col,
        expense_col,
        balance_col,
        savings_col,
        count_col,
    ) = st.columns(5)
    income_col.metric(
        "Total Income",
        format_currency_for_display(view.totals.income, currency_prefix),
        "This month: "
        + format_currency_for_display(
            view.current_month_totals.income,
            currency_prefix,
        ),
        delta_color="off",
    )
    expense_col.metric(
        "Total Expenses",
        format_currency_for_display(view.totals.expense, currency_prefix),
        "This month: "
        + format_currency_for_display(
            view.current_month_totals.expense,
            currency_prefix,
        ),
        delta_color="off",
    )
    sign = "-" if view.totals.balance < 0 else ""
    balance_col.metric(
        "Net Balance",
        sign + format_currency_for_display(
            view.totals.balance,
            currency_prefix,
        ),
        "This month: "
        + format_currency_for_display(
            view.current_month_totals.balance,
            currency_prefix,
        ),
        delta_color="off",
    )
    savings_label = format_percent(view.overall_savings_rate)
    savings_col.metric(
        "Savings Rate",
        savings_label,
        (
            f"{savings_label} of income saved"
            if view.totals.income > 0
            else "No income data"
        ),
        delta_color="off",
    )
    count_col.metric(
        "Entries",
        f"{view.entry_count}",
        f"{view.category_count} categories",
        delta_color="off",
    )


def _render_trends_chart(series: MonthlySeries) -> None:
    """Render monthly income, expense and balance lines."""
    st.subheader("Monthly Trends")
    visible = st.multiselect(
        "Series",
        options=list(TREND_SERIES),
        default=list(TREND_SERIES),
    )
    data = _prepare_trend_chart_data(series, visible)
    if not data:
        st.info("Select at least one series to display.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_line(point=True).encode(
        x=alt.X("month:N", sort=series.labels, title=None),
        y=alt.Y("amount:Q", title=None),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(
                domain=list(TREND_SERIES),
                range=list(TREND_COLORS),
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("month:N"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    ).properties(height=320)
    st.altair_chart(chart, width="stretch")


def _render_rate_chart(
    title: str,
    labels: Sequence[str],
    values: Sequence[Decimal],
    color: str,
) -> None:
    """Render a 0-100% bar chart for a rate series."""
    st.subheader(title)
    data = _prepare_rate_chart_data(labels, values)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        color=color,
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("month:N", sort=list(labels), title=None),
        y=alt.Y(
            "rate:Q",
            scale=alt.Scale(domain=[0, 100]),
            title="%",
        ),
        tooltip=[alt.Tooltip("month:N"), alt.Tooltip("rate_label:N")],
    ).properties(height=260)
    st.altair_chart(chart, width="stretch")


def _render_category_chart(
    breakdown: CategoryBreakdown,
    currency_prefix: str,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of the top categories."""
    st.subheader(f"Category Breakdown ({breakdown.view})")
    if not breakdown.labels:
        st.info("No entries available for this view.")
        return
    data = _prepare_category_chart_data(breakdown, currency_prefix)
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.3,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            sort=list(breakdown.labels),
            scale=alt.Scale(range=list(CATEGORY_PALETTE)),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(width=chart_size, height=chart_size)
    st.altair_chart(chart, width="stretch")


def _render_entry_form(user_email: str) -> None:
    """Render the add-entry form and store valid submissions."""
    st.subheader("Add Entry")
    kind = st.radio(
        "Type",
        options=list(ENTRY_KINDS),
        index=list(ENTRY_KINDS).index(EXPENSE),
        horizontal=True,
    )
    with st.form("add_entry", clear_on_submit=True):
        date_col, description_col, category_col, amount_col = st.columns(4)
        entry_date = date_col.date_input("Date", value=date.today())
        description = description_col.text_input("Description")
        category = category_col.selectbox(
            "Category",
            options=list(SUGGESTED_CATEGORIES[kind]),
        )
        amount = amount_col.text_input("Amount", placeholder="0.00")
        submitted = st.form_submit_button("Add Entry")

    if not submitted:
        return
    draft = EntryDraft(
        date=entry_date,
        description=description,
        kind=kind,
        category=category,
        amount=amount,
        created_by=user_email,
    )
    try:
        entry = AddEntryUseCase(_get_entries_repository()).execute(draft)
    except InvalidEntryError as exc:
        get_app_logger().warning(f"Rejected entry from {user_email}: {exc}")
        st.error(str(exc))
        return
    get_usage_logger().info(f"{user_email} added entry {entry.id}")
    st.success("Entry added.")
    st.rerun()


def _read_filter_criteria(
    categories: Sequence[str],
    today: date,
) -> FilterCriteria:
    """Read date range, type and category filters from the sidebar."""
    st.sidebar.subheader("Filters")
    date_range = st.sidebar.selectbox(
        "Date Range",
        options=list(DATE_RANGE_LABELS),
        format_func=DATE_RANGE_LABELS.get,
    )
    custom_start = None
    custom_end = None
    if date_range == DATE_RANGE_CUSTOM:
        custom_start = st.sidebar.date_input("Start Date", value=None)
        custom_end = st.sidebar.date_input("End Date", value=today)
    kind = st.sidebar.selectbox(
        "Type",
        options=[ALL_KINDS, *ENTRY_KINDS],
        format_func=lambda k: "All Types" if k == ALL_KINDS else f"{k} Only",
    )
    category = st.sidebar.selectbox(
        "Category",
        options=["", *categories],
        format_func=lambda c: c or "All Categories",
    )
    return build_filter_criteria(
        date_range,
        today,
        kind=kind,
        category=category,
        custom_start=custom_start,
        custom_end=custom_end,
    )


def _sync_page_number(criteria: FilterCriteria) -> int:
    """Return the current page, resetting to 1 when criteria change."""
    state = st.session_state
    if state.get(CRITERIA_KEY) != criteria:
        state[CRITERIA_KEY] = criteria
        state[PAGE_KEY] = 1
    return state.get(PAGE_KEY, 1)


def _build_table_rows(
    entries_view: EntriesView,
    currency_prefix: str,
) -> list[dict[str, str]]:
    """Return display rows for the current page."""
    return [
        {
            "Date": entry.date.isoformat(),
            "Description": entry.description,
            "Type": entry.kind,
            "Category": entry.category,
            "Amount": format_currency(entry.amount, prefix=currency_prefix),
            "Created By": entry.created_by or "-",
        }
        for entry in entries_view.page.items
    ]


def _render_entries_table(
    entries_view: EntriesView,
    currency_prefix: str,
    can_delete: bool,
    user_email: str,
) -> None:
    """Render the paginated entries table with navigation and delete."""
    page = entries_view.page
    totals = entries_view.totals
    st.caption(
        f"{page.total_items} entries · income "
        f"{format_currency(totals.income, currency_prefix)} · expenses "
        f"{format_currency(totals.expense, currency_prefix)}"
    )
    if not page.items:
        st.info("No entries match the selected filters.")
        return
    st.dataframe(
        _build_table_rows(entries_view, currency_prefix),
        width="stretch",
        hide_index=True,
    )

    previous_col, status_col, next_col = st.columns([1, 2, 1])
    if previous_col.button("Previous", disabled=not page.has_previous):
        st.session_state[PAGE_KEY] = page.page_number - 1
        st.rerun()
    status_col.caption(f"Page {page.page_number} of {page.total_pages}")
    if next_col.button("Next", disabled=not page.has_next):
        st.session_state[PAGE_KEY] = page.page_number + 1
        st.rerun()

    if not can_delete:
        return
    labels = {
        entry.id: (
            f"{entry.date.isoformat()} · {entry.description} · "
            f"{format_currency(entry.amount, currency_prefix)}"
        )
        for entry in page.items
    }
    entry_id = st.selectbox(
        "Delete entry",
        options=list(labels),
        format_func=labels.get,
    )
    if st.button("Delete selected entry"):
        try:
            DeleteEntryUseCase(_get_entries_repository()).execute(entry_id)
        except EntryNotFoundError as exc:
            get_app_logger().warning(str(exc))
            st.warning("This entry was already deleted.")
            return
        get_usage_logger().info(f"{user_email} deleted entry {entry_id}")
        st.rerun()


def _render_export(
    criteria: FilterCriteria,
    today: date,
    settings: LedgerSettings,
    user_email: str,
) -> None:
    """Render the PDF export controls in the sidebar."""
    st.sidebar.subheader("Export")
    if not st.sidebar.button("Prepare PDF report"):
        return
    use_case = ExportReportUseCase(
        entries_repository=_get_entries_repository(),
        report_renderer=build_report_renderer(settings),
    )
    try:
        report = use_case.execute(criteria, today)
    except NoPeriodSelectedError:
        st.sidebar.warning(
            "Please select a date range for export (not 'All Time')."
        )
        return
    get_usage_logger().info(
        f"{user_email} exported {report.file_name} "
        f"({len(report.payload.rows)} rows)"
    )
    st.sidebar.download_button(
        "Download PDF",
        data=report.content,
        file_name=report.file_name,
        mime=report.media_type,
    )


def _render_dashboard_page(
    today: date,
    settings: LedgerSettings,
    user_email: str,
) -> None:
    """Render summary cards, the entry form and the charts."""
    category_view = st.sidebar.radio(
        "Category view",
        options=list(CATEGORY_VIEWS),
        index=0,
    )
    view = _fetch_dashboard(today, category_view, settings.top_categories)
    _render_summary(view, settings.currency_prefix)
    _render_entry_form(user_email)
    if view.entry_count == 0:
        st.info("No entries yet. Add your first entry above.")
        return

    _render_trends_chart(view.series)
    savings_col, ratio_col = st.columns(2)
    with savings_col:
        _render_rate_chart(
            "Savings Rate",
            view.series.labels,
            view.series.savings_rate,
            "#16a34a",
        )
    with ratio_col:
        _render_rate_chart(
            "Expense Ratio",
            view.series.labels,
            view.series.expense_ratio,
            "#dc2626",
        )
    _render_category_chart(view.categories, settings.currency_prefix)


def _render_entries_page(
    today: date,
    settings: LedgerSettings,
    user_email: str,
) -> None:
    """Render filters, the paginated table and export controls."""
    criteria = _read_filter_criteria(_fetch_categories(), today)
    page_number = _sync_page_number(criteria)
    entries_view = _fetch_entries_view(
        criteria,
        page_number,
        settings.page_size,
    )
    # Deletions can shrink the result set below the stored page.
    last_page = max(1, entries_view.page.total_pages)
    if page_number > last_page:
        st.session_state[PAGE_KEY] = last_page
        entries_view = _fetch_entries_view(
            criteria,
            last_page,
            settings.page_size,
        )
    st.subheader("Entries")
    can_delete = not settings.admin_users or is_user_admin(
        user_email,
        settings.admin_users,
    )
    _render_entries_table(
        entries_view,
        settings.currency_prefix,
        can_delete,
        user_email,
    )
    _render_export(criteria, today, settings, user_email)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Ledger Dashboard", layout="wide")
    st.title("Ledger Dashboard")

    settings = _load_settings()
    user_email = _current_user_email()
    if user_email is None:
        st.info("Sign in with your Google account to access the ledger.")
        if st.button("Sign in with Google"):
            st.login()
        return
    if not is_user_authorized(user_email, settings.authorized_users):
        get_app_logger().warning(f"Rejected sign-in for {user_email}")
        st.error(
            "Access denied. Your account is not authorized to use this "
            "ledger."
        )
        if st.button("Sign out"):
            st.logout()
        return

    st.sidebar.caption(f"Signed in as {user_email}")
    if st.sidebar.button("Sign out"):
        get_usage_logger().info(f"{user_email} signed out")
        st.logout()
        return

    today = date.today()
    page = st.sidebar.selectbox("Page", ["Dashboard", "Entries"])
    get_usage_logger().info(f"{user_email} opened {page}")
    if page == "Dashboard":
        _render_dashboard_page(today, settings, user_email)
    else:
        _render_entries_page(today, settings, user_email)


if __name__ == "__main__":  # pragma: no cover
    main()
