"""
Module: documents.formats.word

Purpose:
    Word document written as a single WordprocessingML part. Each content
    line is its own paragraph.

Key Classes:
    - WordDocument: "word" format
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from car_configurator.documents.base import Document

WORD_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
_QUOTES = {'"': "&quot;", "'": "&apos;"}


class WordDocument(Document):
    """Word (WordprocessingML) document."""

    FORMAT_KEY = "word"

    def save(self) -> bytes:
        paragraphs = "".join(
            "    <w:p>\n"
            "      <w:r>\n"
            f"        <w:t xml:space=\"preserve\">{escape(line, _QUOTES)}</w:t>\n"
            "      </w:r>\n"
            "    </w:p>\n"
            for line in self.content.split("\n")
        )
        xml = (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            f'<w:document xmlns:w="{WORD_NAMESPACE}">\n'
            "  <w:body>\n"
            f"    <w:title>{escape(self.title, _QUOTES)}</w:title>\n"
            f"{paragraphs}"
            "  </w:body>\n"
            "</w:document>"
        )
        return xml.encode("utf-8")

    def render(self) -> str:
        border = "-" * 33
        body = self.content.replace("\n", "\n| ")
        return (
            "[Word Document Preview]\n"
            f"+{border}+\n"
            f"| {self.title}\n"
            f"+{border}+\n"
            f"| {body}\n"
            f"+{border}+\n"
            "[End of Word Preview]"
        )
