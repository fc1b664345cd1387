"""
Module: documents.formats.html

Purpose:
    HTML5 document. Each content line becomes an escaped <p> element.

Key Classes:
    - HtmlDocument: "html" format
"""

from __future__ import annotations

from html import escape

from car_configurator.documents.base import Document


class HtmlDocument(Document):
    """HTML document."""

    FORMAT_KEY = "html"

    def save(self) -> bytes:
        title = escape(self.title)
        body = "".join(
            f"        <p>{escape(line)}</p>\n" for line in self.content.split("\n")
        ) if self.content else ""

        html = (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            "<head>\n"
            '  <meta charset="UTF-8">\n'
            '  <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
            f"  <title>{title}</title>\n"
            "</head>\n"
            "<body>\n"
            "  <main>\n"
            f"    <h1>{title}</h1>\n"
            '    <div class="content">\n'
            f"{body}"
            "    </div>\n"
            "  </main>\n"
            "</body>\n"
            "</html>"
        )
        return html.encode("utf-8")

    def render(self) -> str:
        return (
            "[HTML Preview]\n"
            "<html>\n"
            f"  <head><title>{self.title}</title></head>\n"
            "  <body>\n"
            f"    <h1>{self.title}</h1>\n"
            f"    <p>{self.content}</p>\n"
            "  </body>\n"
            "</html>\n"
            "[End of HTML Preview]"
        )
