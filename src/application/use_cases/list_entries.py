"""Use case to list filtered entries one page at a time."""

from src.application.ports.entries_repository import EntriesRepositoryPort
from src.domain.constants import DEFAULT_PAGE_SIZE
from src.domain.models import EntriesView, FilterCriteria
from src.domain.services.filtering import apply_filters, paginate
from src.domain.services.finance import (
    compute_totals,
    list_categories,
    sort_entries_by_date,
)
from src.infrastructure.logging.logger import get_app_logger


class ListEntriesUseCase:
    """Filter, sort and paginate entries for table display.

    Callers must go back to page 1 whenever the criteria change.
    """

    def __init__(
        self,
        entries_repository: EntriesRepositoryPort,
        logger=None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        """Initialize the use case.

        Args:
            entries_repository: Port providing stored entries.
            logger: Optional logger compatible with logging.Logger-like API.
            page_size: Default number of rows per page.
        """
        self._entries_repository = entries_repository
        self._logger = logger or get_app_logger()
        self._page_size = page_size

    def execute(
        self,
        criteria: FilterCriteria,
        page_number: int = 1,
        page_size: int | None = None,
    ) -> EntriesView:
        """Return one page of filtered entries, newest first.

        Args:
            criteria: Resolved filter criteria.
            page_number: 1-based page to return.
            page_size: Optional override of the default page size.

        Returns:
            EntriesView: Page, totals over the filtered set and the
            categories available for filtering.
        """
        entries = self._entries_repository.fetch_entries()
        filtered = sort_entries_by_date(apply_filters(entries, criteria))
        page = paginate(filtered, page_number, page_size or self._page_size)
        self._logger.info(
            f"Listed page {page.page_number}/{page.total_pages} of "
            f"{page.total_items} filtered entries "
            f"(range={criteria.date_range}, kind={criteria.kind}, "
            f"category={criteria.category or '*'})"
        )
        return EntriesView(
            page=page,
            totals=compute_totals(filtered),
            categories=list_categories(entries),
        )


__all__ = ["ListEntriesUseCase", "EntriesView"]
