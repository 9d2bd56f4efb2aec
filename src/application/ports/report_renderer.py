"""Port for rendering exported reports."""

from datetime import date
from typing import Protocol

from src.domain.models import ExportPayload


class ReportRendererPort(Protocol):
    """Port turning an export payload into a document."""

    file_extension: str
    media_type: str

    def render(self, payload: ExportPayload, generated_on: date) -> bytes:
        """Return the rendered document bytes."""


__all__ = ["ReportRendererPort"]
