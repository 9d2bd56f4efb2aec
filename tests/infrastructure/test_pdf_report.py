"""Tests for the ReportLab report renderer."""

from datetime import date
from decimal import Decimal

from src.domain.constants import EXPENSE, INCOME
from src.domain.models import Entry, ExportPayload, PeriodTotals
from src.infrastructure.pdf_report import (
    NumberedCanvas,
    ReportLabReportRenderer,
)


def _payload(rows) -> ExportPayload:
    return ExportPayload(
        rows=rows,
        totals=PeriodTotals(income=Decimal("1000"), expense=Decimal("400")),
        period_label="Filter: Current Month",
    )


def test_render_produces_pdf_with_rows() -> None:
    rows = [
        Entry(
            id=str(index),
            date=date(2024, 1, 1 + index % 28),
            description=f"Entry <{index}> & co",
            kind=INCOME if index % 2 else EXPENSE,
            category="Food",
            amount=Decimal("12.34"),
        )
        for index in range(80)
    ]

    content = ReportLabReportRenderer(title="Ledger").render(
        _payload(rows),
        date(2024, 1, 31),
    )

    assert content.startswith(b"%PDF")
    assert content.rstrip().endswith(b"%%EOF")


def test_render_handles_empty_rows() -> None:
    """Empty periods still produce a document with the summary."""
    renderer = ReportLabReportRenderer(currency_prefix="$")

    content = renderer.render(_payload([]), date(2024, 1, 31))

    assert content.startswith(b"%PDF")
    assert renderer.file_extension == "pdf"
    assert renderer.media_type == "application/pdf"


def test_render_stamps_page_of_total_footers(monkeypatch) -> None:
    """Every page footer knows the final page count."""
    stamped: list[tuple[int, int, date]] = []

    def _record_footer(canvas, page_count: int) -> None:
        stamped.append(
            (canvas.getPageNumber(), page_count, canvas._generated_on)
        )

    monkeypatch.setattr(NumberedCanvas, "_draw_footer", _record_footer)
    rows = [
        Entry(
            id=str(index),
            date=date(2024, 1, 1 + index % 28),
            description="Groceries",
            kind=EXPENSE,
            category="Food",
            amount=Decimal("12.34"),
        )
        for index in range(120)
    ]

    ReportLabReportRenderer().render(_payload(rows), date(2024, 1, 31))

    page_count = len(stamped)
    assert page_count >= 2
    assert stamped == [
        (number, page_count, date(2024, 1, 31))
        for number in range(1, page_count + 1)
    ]
