"""A settings tree paired with the file it is persisted in."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from settingsfile.errors import DeserializeError
from settingsfile.formats import Serializer
from settingsfile.utils.file import atomic_write_text, read_text_if_exists
from settingsfile.value import Table

logger: Final = logging.getLogger(__name__)


@dataclass
class Document:
    """One settings file and its in-memory tree."""

    path: Path
    tree: Table = field(default_factory=Table)

    @property
    def exists(self) -> bool:
        return self.path.exists()

    @classmethod
    def load(cls, path: Path, serializer: Serializer) -> Document:
        """Load the document at ``path``.

        A missing or blank file yields an empty table.

        Args:
            path: File to read
            serializer: Format of the file

        Returns:
            The loaded document

        Raises:
            DeserializeError: If the file exists but cannot be decoded
            OSError: If the file exists but cannot be read
        """
        text = read_text_if_exists(path)
        if text is None:
            logger.debug("No settings file at %s, starting empty", path)
            return cls(path)
        if not text.strip():
            logger.debug("Settings file %s is empty", path)
            return cls(path)

        try:
            tree = serializer.deserialize(text)
        except DeserializeError as err:
            raise DeserializeError(err.message, err.original_error, path=path) from err
        logger.debug("Loaded %d top-level keys from %s", len(tree), path)
        return cls(path, tree)

    def save(self, serializer: Serializer) -> None:
        """Serialize the whole tree and overwrite the file.

        Raises:
            SerializeError: If the tree cannot be encoded
            OSError: If the file cannot be written
        """
        text = serializer.serialize(self.tree)
        atomic_write_text(self.path, text)
        logger.debug("Wrote %s", self.path)
