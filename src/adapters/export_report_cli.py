"""CLI adapter to export a filtered ledger report to disk."""

from datetime import date
import os
from pathlib import Path

from src.application.use_cases.export_report import ExportReportUseCase
from src.domain.constants import ALL_KINDS, DATE_RANGE_LAST_30
from src.domain.errors import NoPeriodSelectedError
from src.domain.services.filtering import build_filter_criteria
from src.infrastructure.container import (
    build_entries_repository,
    build_report_renderer,
)
from src.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> None:
    """Export the report selected by EXPORT_* environment variables."""
    logger = get_app_logger()
    today = date.today()
    try:
        criteria = build_filter_criteria(
            os.getenv("EXPORT_RANGE", DATE_RANGE_LAST_30).strip().lower(),
            today,
            kind=os.getenv("EXPORT_KIND", ALL_KINDS),
            category=os.getenv("EXPORT_CATEGORY", ""),
            custom_start=_parse_date(os.getenv("EXPORT_START_DATE"), logger),
            custom_end=_parse_date(os.getenv("EXPORT_END_DATE"), logger),
        )
    except ValueError as exc:
        logger.error(str(exc))
        return

    use_case = ExportReportUseCase(
        entries_repository=build_entries_repository(),
        report_renderer=build_report_renderer(),
        logger=logger,
    )
    try:
        report = use_case.execute(criteria, today)
    except NoPeriodSelectedError as exc:
        logger.error(str(exc))
        return

    output_dir = Path(os.getenv("EXPORT_OUTPUT_DIR", ".")).expanduser()
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / report.file_name
    output_path.write_bytes(report.content)

    print(
        f"Exported {len(report.payload.rows)} entries "
        f"({report.payload.period_label}) to {output_path}"
    )
    print(
        f"income={report.payload.totals.income}, "
        f"expense={report.payload.totals.expense}, "
        f"balance={report.payload.totals.balance}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
