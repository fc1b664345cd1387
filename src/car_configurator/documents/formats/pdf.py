"""
Module: documents.formats.pdf

Purpose:
    PDF document rendered with ReportLab. The title is drawn as a heading
    on the first page; content lines are wrapped to the page width and
    flow onto further pages as needed.

Key Classes:
    - PdfDocument: "pdf" format

Dependencies:
    - reportlab: PDF generation
"""

from __future__ import annotations

import io
import logging

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from car_configurator.documents.base import Document

logger = logging.getLogger(__name__)

# Constants
A4_WIDTH, A4_HEIGHT = A4
MARGIN = 50
LINE_HEIGHT = 14
BODY_FONT = "Helvetica"
BODY_FONT_SIZE = 10
TITLE_FONT = "Helvetica-Bold"
TITLE_FONT_SIZE = 16


class PdfDocument(Document):
    """PDF document (ReportLab)."""

    FORMAT_KEY = "pdf"

    def save(self) -> bytes:
        """
        Render the document to PDF bytes.

        Returns:
            Complete PDF file contents (starts with b"%PDF")
        """
        buffer = io.BytesIO()
        c = canvas.Canvas(buffer, pagesize=A4)
        c.setTitle(self.title)

        c.setFont(TITLE_FONT, TITLE_FONT_SIZE)
        c.drawString(MARGIN, A4_HEIGHT - MARGIN, self.title)
        y = A4_HEIGHT - MARGIN - 2 * LINE_HEIGHT

        c.setFont(BODY_FONT, BODY_FONT_SIZE)
        pages = 1
        for line in self._wrapped_lines():
            if y < MARGIN:
                c.showPage()
                c.setFont(BODY_FONT, BODY_FONT_SIZE)
                y = A4_HEIGHT - MARGIN
                pages += 1
            c.drawString(MARGIN, y, line)
            y -= LINE_HEIGHT

        c.showPage()
        c.save()

        logger.debug(f"Rendered '{self.title}' to {pages} PDF page(s)")
        return buffer.getvalue()

    def _wrapped_lines(self) -> list[str]:
        max_width = A4_WIDTH - 2 * MARGIN
        lines: list[str] = []
        for raw in self.content.splitlines():
            if not raw.strip():
                lines.append("")
                continue
            lines.extend(simpleSplit(raw, BODY_FONT, BODY_FONT_SIZE, max_width))
        return lines

    def render(self) -> str:
        rule = "=" * 35
        return (
            "[PDF Preview]\n"
            f"{rule}\n"
            f"Title: {self.title}\n"
            f"{'-' * 35}\n"
            f"{self.content}\n"
            f"{rule}\n"
            "[End of PDF Preview]"
        )
