"""
Module: documents.factory

Purpose:
    Registry-based document factory. Providers are registered by format
    key at startup; the factory and editor never name a concrete format.

Key Classes:
    - DocumentFactory: Format key → provider registry

Dependencies:
    - documents.base: Document
    - documents.formats: Default providers

Used By:
    - documents.editor: Editor
    - integration.system: CarManagementSystem
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Tuple, Type

from .base import Document
from .errors import UnknownDocumentFormatError
from .formats import HtmlDocument, PdfDocument, WordDocument

logger = logging.getLogger(__name__)

DocumentProvider = Callable[[str], Document]


class DocumentFactory:
    """
    Creates documents from a case-insensitive format key.

    Example:
        >>> factory = DocumentFactory.create_default()
        >>> factory.create_document("PDF", "Report").format_key
        'pdf'
    """

    def __init__(self) -> None:
        self._registry: Dict[str, DocumentProvider] = {}

    def register(
        self,
        provider: Type[Document] | DocumentProvider,
        format_key: Optional[str] = None,
    ) -> DocumentFactory:
        """
        Register a provider.

        Args:
            provider: Document subclass or callable taking a title
            format_key: Key to register under; defaults to the
                Document subclass' FORMAT_KEY

        Raises:
            ValueError: If provider is None or no key can be determined
        """
        if provider is None:
            raise ValueError("Provider cannot be None")
        key = format_key or getattr(provider, "FORMAT_KEY", "")
        if not key:
            raise ValueError(f"No format key given for provider {provider!r}")

        key = key.lower()
        if key in self._registry:
            logger.debug(f"Replacing document provider for '{key}'")
        self._registry[key] = provider
        return self

    def register_all(self, *providers: Type[Document]) -> DocumentFactory:
        for provider in providers:
            self.register(provider)
        return self

    def create_document(self, format_key: str, title: str) -> Document:
        """
        Create a new document.

        Raises:
            UnknownDocumentFormatError: If format_key is not registered
            ValueError: If title is blank
        """
        provider = self._registry.get((format_key or "").lower())
        if provider is None:
            raise UnknownDocumentFormatError(format_key, self._registry)
        return provider(title)

    def supports_format(self, format_key: str) -> bool:
        return (format_key or "").lower() in self._registry

    @property
    def supported_formats(self) -> Tuple[str, ...]:
        return tuple(sorted(self._registry))

    @classmethod
    def create_default(cls) -> DocumentFactory:
        """Factory with the PDF, Word and HTML providers registered."""
        return cls().register_all(PdfDocument, WordDocument, HtmlDocument)
