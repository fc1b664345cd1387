"""
Module: documents.base

Purpose:
    Document abstraction shared by every output format. The editor and
    factory only depend on this interface, so new formats plug in without
    touching them.

Key Classes:
    - Document: Abstract base with title, content, render() and save()

Used By:
    - documents.formats: Concrete formats
    - documents.factory: Provider registry
    - documents.editor: Editor
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Optional


class Document(ABC):
    """
    A titled text document in one output format.

    Attributes:
        FORMAT_KEY: Lower-case key identifying the format ("pdf", "word", ...)
        title: Non-blank document title
        content: Body text (None is stored as "")
    """

    FORMAT_KEY: ClassVar[str] = ""

    def __init__(self, title: str) -> None:
        if title is None or not title.strip():
            raise ValueError("Document title cannot be None or blank")
        self._title = title
        self._content = ""

    @property
    def title(self) -> str:
        return self._title

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: Optional[str]) -> None:
        self._content = value if value is not None else ""

    @property
    def format_key(self) -> str:
        return self.FORMAT_KEY

    @abstractmethod
    def save(self) -> bytes:
        """Serialize the document to its binary file format."""

    @abstractmethod
    def render(self) -> str:
        """Text preview of the document."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(title={self._title!r})"
