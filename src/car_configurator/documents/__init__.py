"""
Module: documents

Purpose:
    Document generation in several output formats behind one interface.
    Consumes finished configurations as plain text content.

Key Classes:
    - Document: Abstract document
    - DocumentFactory: Provider registry keyed by format
    - Editor: Open / edit / preview / save
    - UnknownDocumentFormatError: Unregistered format key

Dependencies:
    - reportlab: PDF output
"""

from .base import Document
from .editor import Editor
from .errors import UnknownDocumentFormatError
from .factory import DocumentFactory
from .formats import HtmlDocument, PdfDocument, WordDocument

__all__ = [
    "Document",
    "DocumentFactory",
    "Editor",
    "HtmlDocument",
    "PdfDocument",
    "UnknownDocumentFormatError",
    "WordDocument",
]
