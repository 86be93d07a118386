"""File utility functions."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final

from settingsfile.constants import TMP_SUFFIX

logger: Final = logging.getLogger(__name__)


def ensure_directory_exists(directory: Path) -> None:
    """Create directory if it doesn't exist.

    Args:
        directory: Path to create
    """
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug("Created directory: %s", directory)


def read_text_if_exists(file_path: Path) -> str | None:
    """Read a UTF-8 file, or return None if there is no such file.

    Args:
        file_path: File to read

    Returns:
        File contents, or None when the file does not exist
    """
    try:
        return file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def atomic_write_text(file_path: Path, text: str) -> None:
    """Replace a file's contents without leaving a half-written file behind.

    The text goes to a temporary sibling first, which is then moved over
    the target. Missing parent directories are created.

    Args:
        file_path: File to write
        text: New contents
    """
    ensure_directory_exists(file_path.parent)
    tmp = file_path.with_name(file_path.name + TMP_SUFFIX)
    tmp.write_text(text, encoding="utf-8")
    os.replace(tmp, file_path)
