"""Application use cases package."""

from .add_entry import AddEntryUseCase
from .delete_entry import DeleteEntryUseCase
from .export_report import ExportedReport, ExportReportUseCase
from .get_dashboard import DashboardView, GetDashboardUseCase
from .list_entries import EntriesView, ListEntriesUseCase

__all__ = [
    "AddEntryUseCase",
    "DeleteEntryUseCase",
    "ExportedReport",
    "ExportReportUseCase",
    "DashboardView",
    "GetDashboardUseCase",
    "EntriesView",
    "ListEntriesUseCase",
]
