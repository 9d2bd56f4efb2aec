"""Use case to export filtered entries as a report document."""

from dataclasses import dataclass
from datetime import date

from src.application.ports.entries_repository import EntriesRepositoryPort
from src.application.ports.report_renderer import ReportRendererPort
from src.domain.constants import DATE_RANGE_ALL
from src.domain.errors import NoPeriodSelectedError
from src.domain.models import ExportPayload, FilterCriteria
from src.domain.services.export import build_export_payload
from src.domain.services.finance import sort_entries_by_date
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ExportedReport:
    """Rendered report ready to be saved or downloaded.

    Attributes:
        file_name: Suggested file name including the extension.
        content: Rendered document bytes.
        media_type: MIME type of ``content``.
        payload: Data the document was rendered from.
    """

    file_name: str
    content: bytes
    media_type: str
    payload: ExportPayload


class ExportReportUseCase:
    """Build an export payload and hand it to the report renderer."""

    def __init__(
        self,
        entries_repository: EntriesRepositoryPort,
        report_renderer: ReportRendererPort,
        logger=None,
        file_prefix: str = "financial-report",
    ) -> None:
        """Initialize the use case.

        Args:
            entries_repository: Port providing stored entries.
            report_renderer: Port rendering the payload into a document.
            logger: Optional logger compatible with logging.Logger-like API.
            file_prefix: Prefix of the generated file name.
        """
        self._entries_repository = entries_repository
        self._report_renderer = report_renderer
        self._logger = logger or get_app_logger()
        self._file_prefix = file_prefix

    def execute(
        self,
        criteria: FilterCriteria,
        today: date,
    ) -> ExportedReport:
        """Render the report for the given criteria.

        Args:
            criteria: Resolved filter criteria; ``all`` is refused.
            today: Generation date printed on the report and file name.

        Returns:
            ExportedReport: Document bytes and metadata.

        Raises:
            NoPeriodSelectedError: If the criteria cover all time. No
                entries are fetched and nothing is rendered.
        """
        if criteria.date_range == DATE_RANGE_ALL:
            self._logger.warning("Export refused: no period selected")
            raise NoPeriodSelectedError()

        entries = self._entries_repository.fetch_entries()
        payload = build_export_payload(sort_entries_by_date(entries), criteria)
        content = self._report_renderer.render(payload, today)
        file_name = (
            f"{self._file_prefix}-{today.isoformat()}."
            f"{self._report_renderer.file_extension}"
        )
        self._logger.info(
            f"Exported {len(payload.rows)} entries to {file_name} "
            f"({payload.period_label})"
        )
        return ExportedReport(
            file_name=file_name,
            content=content,
            media_type=self._report_renderer.media_type,
            payload=payload,
        )


__all__ = ["ExportReportUseCase", "ExportedReport"]
