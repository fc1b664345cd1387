"""
Module: integration.storage

Purpose:
    Write rendered document bytes to disk with a sanitized file name and
    a format-appropriate extension.

Key Functions:
    - save_document(): Write payload, return the path

Key Classes:
    - StorageError: Writing failed
"""

from __future__ import annotations

import logging
from pathlib import Path

from car_configurator.common.path_utils import extension_for, sanitize_file_name

logger = logging.getLogger(__name__)

DEFAULT_BASE_NAME = "document"


class StorageError(Exception):
    """Error writing a document to disk."""
    pass


def save_document(output_dir: Path, format_key: str, title: str, payload: bytes) -> Path:
    """
    Save a rendered document.

    Args:
        output_dir: Directory to write into (created if missing)
        format_key: Document format key, decides the extension
        title: Document title, sanitized into the file name
        payload: Document bytes

    Returns:
        Path of the written file (overwritten if it already existed)

    Raises:
        StorageError: If the directory or file cannot be written

    Example:
        >>> save_document(Path("output"), "pdf", "SUV Configuration Report", data)
        PosixPath('output/SUV_Configuration_Report.pdf')
    """
    base_name = sanitize_file_name(title) or DEFAULT_BASE_NAME
    output_path = Path(output_dir) / f"{base_name}.{extension_for(format_key)}"

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(payload)
    except OSError as e:
        raise StorageError(f"Failed to write document to {output_path}: {e}") from e

    logger.info(f"Saved {len(payload)} bytes to {output_path}")
    return output_path
