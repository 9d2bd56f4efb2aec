"""Use case to compute the dashboard summary and chart inputs."""

from datetime import date

from src.application.ports.entries_repository import EntriesRepositoryPort
from src.domain.constants import DEFAULT_TOP_CATEGORIES, EXPENSE
from src.domain.models import DashboardView
from src.domain.services.finance import (
    build_category_breakdown,
    build_monthly_series,
    compute_month_totals,
    compute_totals,
    list_categories,
    overall_savings_rate,
)
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardUseCase:
    """Compute totals, monthly series and category breakdown."""

    def __init__(
        self,
        entries_repository: EntriesRepositoryPort,
        logger=None,
        top_categories: int = DEFAULT_TOP_CATEGORIES,
    ) -> None:
        """Initialize the use case.

        Args:
            entries_repository: Port providing stored entries.
            logger: Optional logger compatible with logging.Logger-like API.
            top_categories: Number of categories kept in the breakdown.
        """
        self._entries_repository = entries_repository
        self._logger = logger or get_app_logger()
        self._top_categories = top_categories

    def execute(
        self,
        today: date,
        category_view: str = EXPENSE,
    ) -> DashboardView:
        """Return the dashboard view for the given reference date.

        Args:
            today: Reference date closing the trailing monthly series.
            category_view: ``Income``, ``Expense`` or ``All``.

        Returns:
            DashboardView: Summary cards and chart inputs.
        """
        entries = self._entries_repository.fetch_entries()
        self._logger.info(f"Fetched {len(entries)} entries for dashboard")

        totals = compute_totals(entries)
        view = DashboardView(
            totals=totals,
            current_month_totals=compute_month_totals(entries, today),
            series=build_monthly_series(entries, today),
            categories=build_category_breakdown(
                entries,
                category_view,
                self._top_categories,
            ),
            entry_count=len(entries),
            category_count=len(list_categories(entries)),
            overall_savings_rate=overall_savings_rate(totals),
        )
        self._logger.info(
            f"Dashboard totals computed: income={totals.income}, "
            f"expense={totals.expense}, balance={totals.balance}, "
            f"savings_rate={view.overall_savings_rate}"
        )
        return view


__all__ = ["GetDashboardUseCase", "DashboardView"]
