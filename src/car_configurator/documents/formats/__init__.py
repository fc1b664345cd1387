"""
Module: documents.formats

Purpose:
    Concrete document formats.

Key Classes:
    - PdfDocument: ReportLab PDF ("pdf")
    - WordDocument: WordprocessingML XML ("word")
    - HtmlDocument: HTML5 ("html")
"""

from .html import HtmlDocument
from .pdf import PdfDocument
from .word import WordDocument

__all__ = [
    "HtmlDocument",
    "PdfDocument",
    "WordDocument",
]
