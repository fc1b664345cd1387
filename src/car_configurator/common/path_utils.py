"""Path and filename utilities.

Shared helpers for turning document titles into safe file names.
"""

from __future__ import annotations

import re

_INVALID_CHARS = re.compile(r'[\\/:*?"<>|]')
_WHITESPACE = re.compile(r"\s+")

# Extension per document format key; anything else is written as .bin
FORMAT_EXTENSIONS = {
    "pdf": "pdf",
    "html": "html",
    "word": "xml",
}


def sanitize_file_name(text: str | None) -> str:
    """Make a title safe to use as a file name.

    Replaces characters that are invalid on common filesystems with ``_``
    and collapses runs of whitespace into a single ``_``.

    Args:
        text: Raw title (None is treated as empty).

    Returns:
        Sanitized name, possibly empty.

    Examples:
        >>> sanitize_file_name("SUV Configuration Report")
        'SUV_Configuration_Report'
        >>> sanitize_file_name('A:/B*C')
        'A__B_C'
    """
    if text is None:
        return ""
    normalized = _INVALID_CHARS.sub("_", text.strip())
    return _WHITESPACE.sub("_", normalized)


def extension_for(format_key: str) -> str:
    """File extension (without dot) for a document format key."""
    return FORMAT_EXTENSIONS.get((format_key or "").lower(), "bin")
