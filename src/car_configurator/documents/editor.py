"""
Module: documents.editor

Purpose:
    Minimal editor holding one open document at a time. Works with any
    format through the DocumentFactory.

Key Classes:
    - Editor: new_document / edit / preview / save
"""

from __future__ import annotations

from typing import Optional

from .base import Document
from .factory import DocumentFactory


class Editor:
    """Edits one document at a time; every call except new_document needs one open."""

    def __init__(self, document_factory: DocumentFactory) -> None:
        if document_factory is None:
            raise ValueError("DocumentFactory cannot be None")
        self.document_factory = document_factory
        self._current: Optional[Document] = None

    def new_document(self, format_key: str, title: str) -> Editor:
        self._current = self.document_factory.create_document(format_key, title)
        return self

    def edit(self, content: str) -> Editor:
        self._require_document().content = content
        return self

    def preview(self) -> str:
        return self._require_document().render()

    def save(self) -> bytes:
        return self._require_document().save()

    @property
    def current_document(self) -> Optional[Document]:
        return self._current

    @property
    def has_open_document(self) -> bool:
        return self._current is not None

    def close_document(self) -> None:
        self._current = None

    def _require_document(self) -> Document:
        if self._current is None:
            raise RuntimeError(
                "No document is currently open. Use new_document() to create one first."
            )
        return self._current
