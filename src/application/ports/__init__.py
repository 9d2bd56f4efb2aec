"""Application ports package."""

from .database import DatabaseEnginePort
from .entries_repository import EntriesRepositoryPort
from .report_renderer import ReportRendererPort

__all__ = [
    "DatabaseEnginePort",
    "EntriesRepositoryPort",
    "ReportRendererPort",
]
