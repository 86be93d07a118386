"""Exception classes for settings access.

This module defines the hierarchy of exceptions raised while parsing
dot-path keys, navigating settings trees and encoding or decoding
settings documents. Failures while reading or writing files are not
wrapped: they surface as the original ``OSError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class SettingsError(Exception):
    """Base class for all settings errors."""

    def __init__(self, message: str) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
        """
        super().__init__(message)
        self.message: str = message


class InvalidKeyError(SettingsError):
    """Raised when a dot-path key is malformed.

    A key is malformed when it is empty, is not a string, or contains an
    empty segment (``"a..b"``, ``".a"``, ``"a."``).
    """

    def __init__(self, key: object, reason: str = "empty segment") -> None:
        """Initialize with the offending key.

        Args:
            key: The key as supplied by the caller
            reason: Short description of what is wrong with it
        """
        super().__init__(f"invalid key {key!r}: {reason}")
        self.key = key
        self.reason = reason


class NotFoundError(SettingsError, KeyError):
    """Raised when a key resolves in neither the local nor the global tree."""

    def __init__(self, key: str) -> None:
        super().__init__(f"no setting found for {key!r}")
        self.key = key

    def __str__(self) -> str:
        return self.message


class PathConflictError(SettingsError):
    """Raised when a write would have to descend through a non-table value."""

    def __init__(self, key: str, conflict: str) -> None:
        """Initialize with the requested key and the conflicting prefix.

        Args:
            key: The full key that was being written
            conflict: Prefix of ``key`` that holds a scalar or sequence
        """
        super().__init__(f"cannot set {key!r}: {conflict!r} is not a table")
        self.key = key
        self.conflict = conflict


class SerializeError(SettingsError):
    """Raised when a settings tree cannot be encoded."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with encoding error details.

        Args:
            message: Description of the encoding error
            original_error: The original exception that was caught
        """
        super().__init__(message)
        self.original_error = original_error


class DeserializeError(SettingsError):
    """Raised when a settings document cannot be decoded."""

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        path: Optional[Path] = None,
    ) -> None:
        """Initialize with decoding error details.

        Args:
            message: Description of the decoding error
            original_error: The original exception that was caught
            path: File being loaded, when known
        """
        super().__init__(f"{path}: {message}" if path else message)
        self.original_error = original_error
        self.path = path
