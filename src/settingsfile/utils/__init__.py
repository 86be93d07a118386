"""Common utility functions for the settingsfile package."""

from settingsfile.utils.file import atomic_write_text, ensure_directory_exists, read_text_if_exists

__all__ = [
    "atomic_write_text",
    "ensure_directory_exists",
    "read_text_if_exists",
]
