"""ReportLab renderer for exported ledger reports."""

from datetime import date
from functools import partial
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfgen.canvas import Canvas
from reportlab.platypus import (
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from src.application.ports.report_renderer import ReportRendererPort
from src.domain.models import ExportPayload
from src.utils.formatting import (
    DEFAULT_CURRENCY_PREFIX,
    format_currency,
    format_currency_for_display,
)

HEADER_COLOR = colors.HexColor("#344e80")
INCOME_COLOR = "#22c55e"
EXPENSE_COLOR = "#ef4444"
BALANCE_COLOR = "#3b82f6"
MUTED_COLOR = colors.HexColor("#9ca3af")
ALTERNATE_ROW_COLOR = colors.HexColor("#f8fafc")

TABLE_HEADERS = ["Date", "Description", "Type", "Category", "Amount"]
COLUMN_WIDTHS = [25 * mm, 60 * mm, 25 * mm, 30 * mm, 30 * mm]
PAGE_MARGIN = 20 * mm
FOOTER_Y = 10 * mm


class NumberedCanvas(Canvas):
    """Canvas that defers page output to stamp ``Page i of N`` footers."""

    def __init__(self, *args, generated_on: date, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._generated_on = generated_on
        self._saved_page_states: list[dict] = []

    def showPage(self) -> None:
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self) -> None:
        page_count = len(self._saved_page_states)
        for state in self._saved_page_states:
            self.__dict__.update(state)
            self._draw_footer(page_count)
            super().showPage()
        super().save()

    def _draw_footer(self, page_count: int) -> None:
        self.saveState()
        self.setFont("Helvetica", 8)
        self.setFillColor(MUTED_COLOR)
        self.drawString(
            PAGE_MARGIN,
            FOOTER_Y,
            f"Page {self.getPageNumber()} of {page_count}",
        )
        self.drawRightString(
            self._pagesize[0] - PAGE_MARGIN,
            FOOTER_Y,
            f"Generated on {self._generated_on.isoformat()}",
        )
        self.restoreState()


class ReportLabReportRenderer(ReportRendererPort):
    """Render export payloads as PDF documents."""

    file_extension = "pdf"
    media_type = "application/pdf"

    def __init__(
        self,
        title: str = "Financial Report",
        currency_prefix: str = DEFAULT_CURRENCY_PREFIX,
    ) -> None:
        """Initialize the renderer.

        Args:
            title: Report title printed at the top of the first page.
            currency_prefix: Prefix used when formatting amounts.
        """
        self._title = title
        self._currency_prefix = currency_prefix

    def render(self, payload: ExportPayload, generated_on: date) -> bytes:
        """Render the payload into PDF bytes.

        Args:
            payload: Filtered rows, totals and period label.
            generated_on: Date printed in the page footer.

        Returns:
            bytes: PDF document.
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=PAGE_MARGIN,
            rightMargin=PAGE_MARGIN,
            topMargin=PAGE_MARGIN,
            bottomMargin=PAGE_MARGIN,
            title=self._title,
        )
        doc.build(
            self._build_story(payload),
            canvasmaker=partial(NumberedCanvas, generated_on=generated_on),
        )
        return buffer.getvalue()

    def _build_story(self, payload: ExportPayload) -> list:
        styles = getSampleStyleSheet()
        story: list = [
            Paragraph(escape(self._title), styles["Title"]),
            Paragraph(escape(payload.period_label), styles["Normal"]),
            Spacer(1, 8 * mm),
            Paragraph("Summary", styles["Heading2"]),
        ]
        summary_lines = [
            ("Total Income", payload.totals.income, INCOME_COLOR),
            ("Total Expenses", payload.totals.expense, EXPENSE_COLOR),
            ("Net Balance", payload.totals.balance, BALANCE_COLOR),
        ]
        for label, amount, color in summary_lines:
            formatted = format_currency_for_display(
                amount,
                prefix=self._currency_prefix,
            )
            story.append(
                Paragraph(
                    f'<font color="{color}">{label}: {escape(formatted)}</font>',
                    styles["Normal"],
                )
            )

        if not payload.rows:
            story.append(Spacer(1, 6 * mm))
            story.append(
                Paragraph("No entries match this period.", styles["Italic"])
            )
            return story

        story.append(Spacer(1, 8 * mm))
        story.append(Paragraph("Entries", styles["Heading2"]))
        cell_style = styles["BodyText"]
        table_data: list[list] = [TABLE_HEADERS]
        for entry in payload.rows:
            table_data.append(
                [
                    entry.date.isoformat(),
                    Paragraph(escape(entry.description), cell_style),
                    entry.kind,
                    Paragraph(escape(entry.category), cell_style),
                    format_currency(entry.amount, prefix=self._currency_prefix),
                ]
            )
        table = Table(table_data, colWidths=COLUMN_WIDTHS, repeatRows=1)
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), HEADER_COLOR),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 8),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("ALIGN", (-1, 1), (-1, -1), "RIGHT"),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, ALTERNATE_ROW_COLOR],
                    ),
                    ("GRID", (0, 0), (-1, -1), 0.25, colors.lightgrey),
                ]
            )
        )
        story.append(table)
        return story


__all__ = ["NumberedCanvas", "ReportLabReportRenderer"]
