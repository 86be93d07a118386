"""Dot-path keys addressing a location in a settings tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from settingsfile.constants import KEY_SEPARATOR
from settingsfile.errors import InvalidKeyError


@dataclass(frozen=True)
class KeyPath:
    """An ordered, non-empty sequence of non-empty key segments.

    Build instances with ``KeyPath.parse`` (from a dotted string such as
    ``"user.name"``) or ``KeyPath.from_segments``. Joining the segments with
    ``.`` always reproduces the parsed string.
    """

    _segments: tuple[str, ...]

    @classmethod
    def parse(cls, key: str) -> KeyPath:
        """Split a dotted key into a path.

        Args:
            key: Dot-separated key, e.g. ``"user.name"``

        Returns:
            The parsed path

        Raises:
            InvalidKeyError: If ``key`` is not a string, is empty, or has an
                empty segment (``"a..b"``, ``".a"``, ``"a."``)
        """
        if not isinstance(key, str):
            raise InvalidKeyError(key, "keys must be strings")
        if not key:
            raise InvalidKeyError(key, "key is empty")
        segments = tuple(key.split(KEY_SEPARATOR))
        if any(not segment for segment in segments):
            raise InvalidKeyError(key)
        return cls(segments)

    @classmethod
    def from_segments(cls, segments: Iterable[str]) -> KeyPath:
        """Build a path from already split segments.

        Raises:
            InvalidKeyError: If there are no segments, or a segment is empty
                or contains the separator
        """
        parts = tuple(segments)
        if not parts:
            raise InvalidKeyError("", "key is empty")
        for segment in parts:
            if not isinstance(segment, str) or not segment or KEY_SEPARATOR in segment:
                raise InvalidKeyError(segment, "not a valid key segment")
        return cls(parts)

    def segments(self) -> tuple[str, ...]:
        return self._segments

    def head(self) -> str:
        """First segment."""
        return self._segments[0]

    def rest(self) -> KeyPath | None:
        """Path after the first segment, or None if this is the last one."""
        if len(self._segments) == 1:
            return None
        return KeyPath(self._segments[1:])

    def leaf(self) -> str:
        """Last segment."""
        return self._segments[-1]

    def parent(self) -> KeyPath | None:
        """Path without the last segment, or None for a single segment."""
        if len(self._segments) == 1:
            return None
        return KeyPath(self._segments[:-1])

    def child(self, segment: str) -> KeyPath:
        return KeyPath.from_segments((*self._segments, segment))

    def prefixes(self) -> Iterator[KeyPath]:
        """Yield every leading sub-path, shortest first, ending with self."""
        for end in range(1, len(self._segments) + 1):
            yield KeyPath(self._segments[:end])

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __str__(self) -> str:
        return KEY_SEPARATOR.join(self._segments)
