"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.entries_repository import EntriesRepositoryPort
from src.application.ports.report_renderer import ReportRendererPort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.entries_repository import SqlAlchemyEntriesRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.pdf_report import ReportLabReportRenderer
from src.infrastructure.settings import LedgerSettings


def build_settings() -> LedgerSettings:
    """Return settings sourced from the environment."""
    return LedgerSettings.from_env()


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_entries_repository(
    db_port: DatabaseEnginePort | None = None,
) -> EntriesRepositoryPort:
    """Return the SQL-backed entries repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyEntriesRepository(resolved_db, logger=get_app_logger())


def build_report_renderer(
    settings: LedgerSettings | None = None,
) -> ReportRendererPort:
    """Return the PDF report renderer configured from settings."""
    resolved = settings or build_settings()
    return ReportLabReportRenderer(
        title=resolved.report_title,
        currency_prefix=resolved.currency_prefix,
    )


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_entries_repository",
    "build_report_renderer",
]
