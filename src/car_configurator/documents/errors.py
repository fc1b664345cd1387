"""
Module: documents.errors

Purpose:
    Exceptions raised by the document subsystem.
"""

from __future__ import annotations

from typing import Iterable


class UnknownDocumentFormatError(LookupError):
    """
    Raised when no provider is registered for a format key.

    Attributes:
        format_key: The key that was requested
        supported_formats: Keys that are registered
    """

    def __init__(self, format_key: str, supported_formats: Iterable[str] = ()):
        self.format_key = format_key
        self.supported_formats = tuple(sorted(supported_formats))
        super().__init__(
            f"Unknown document format: '{format_key}'. "
            f"Supported formats: {', '.join(self.supported_formats) or 'none'}"
        )

    def __str__(self) -> str:
        return self.args[0]
