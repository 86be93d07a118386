"""Layered settings store with write-through persistence."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final

from settingsfile.common.enums import Scope
from settingsfile.document import Document
from settingsfile.errors import InvalidKeyError, NotFoundError, SettingsError
from settingsfile.formats import Serializer, serializer_for
from settingsfile.keypath import KeyPath
from settingsfile.location import DocumentLocation
from settingsfile.navigator import TreeNavigator
from settingsfile.options import StoreOptions
from settingsfile.shadow import ShadowResolver
from settingsfile.value import Table, Value

logger: Final = logging.getLogger(__name__)


class SettingsStore:
    """Read and write settings across a global and a local document.

    The global document lives in the user's config directory and the local
    document in the working directory. Reads check the local document first
    and fall back to the global one (see ``ShadowResolver``). Writes go to
    the global document unless ``Scope.LOCAL`` is requested, and every write
    is flushed to disk before the call returns.

    Values handed out are copies; changing them never changes the store.

    Examples:
        store = SettingsStore(DocumentLocation(folder="myapp", extension="toml"))
        store.set_value("user.name", "snsvrno")
        store.get_value("user.name").unwrap()  # "snsvrno"
        store.get_value_or("user.theme", "dark").unwrap()  # "dark"
    """

    def __init__(
        self,
        location: DocumentLocation,
        serializer: Serializer | None = None,
        options: StoreOptions | None = None,
        *,
        base_dir: Path | None = None,
        cwd: Path | None = None,
    ):
        """Load both documents.

        Args:
            location: File naming for the two documents
            serializer: Document format (default: picked from ``options``)
            options: Store behaviour (default: ``StoreOptions()``)
            base_dir: User config directory override
            cwd: Working directory override for the local document

        Raises:
            DeserializeError: If an existing document cannot be decoded
            OSError: If an existing document cannot be read
        """
        self.location = location
        self.options = options or StoreOptions()
        self.serializer = serializer or serializer_for(self.options.file_format)
        self._base_dir = base_dir
        self._cwd = cwd

        self._global: Document
        self._local: Document | None
        self.reload()

    # ---- documents ----
    @property
    def global_path(self) -> Path:
        return self.location.global_path(self._base_dir)

    @property
    def local_path(self) -> Path:
        return self.location.local_path(self._cwd)

    def reload(self) -> None:
        """Re-read both documents from disk, discarding in-memory state."""
        self._global = Document.load(self.global_path, self.serializer)
        if self.options.local_enabled:
            self._local = Document.load(self.local_path, self.serializer)
        else:
            self._local = None

    def flush(self) -> None:
        """Write the global document (and the local one, if enabled) to disk."""
        self._global.save(self.serializer)
        if self._local is not None and (self._local.tree or self._local.exists):
            self._local.save(self.serializer)

    def _document(self, scope: Scope) -> Document:
        if scope is Scope.GLOBAL:
            return self._global
        if self._local is None:
            raise SettingsError("local settings are disabled for this store")
        return self._local

    @property
    def _local_tree(self) -> Table | None:
        return None if self._local is None else self._local.tree

    # ---- reads ----
    def get_value(self, key: str) -> Value:
        """Return the setting at ``key``.

        Raises:
            InvalidKeyError: If ``key`` is not a valid dot-path
            NotFoundError: If neither document has ``key``
        """
        path = KeyPath.parse(key)
        found = ShadowResolver.resolve(self._local_tree, self._global.tree, path)
        if found.is_absent:
            raise NotFoundError(key)
        return found.copy()

    def get_value_or(self, key: str, default: Any) -> Value:
        """Return the setting at ``key``, or ``default`` if there is none.

        Invalid keys are treated as missing and never raise. ``default`` may
        be a ``Value`` or plain Python data, and is checked whether or not
        ``key`` is set.

        Raises:
            TypeError: If ``default`` has no settings representation (``None``)
        """
        fallback = Value.wrap(default)
        try:
            return self.get_value(key)
        except (InvalidKeyError, NotFoundError):
            return fallback

    def has_value(self, key: str) -> bool:
        try:
            path = KeyPath.parse(key)
        except InvalidKeyError:
            return False
        return not ShadowResolver.resolve(self._local_tree, self._global.tree, path).is_absent

    def origin(self, key: str) -> Scope | None:
        """Which document ``get_value(key)`` would read from, if any.

        Raises:
            InvalidKeyError: If ``key`` is not a valid dot-path
        """
        return ShadowResolver.origin(self._local_tree, self._global.tree, KeyPath.parse(key))

    def describe(self, key: str) -> str:
        """Short description of the setting at ``key`` (``"absent"`` if none)."""
        path = KeyPath.parse(key)
        found = ShadowResolver.resolve(self._local_tree, self._global.tree, path)
        return TreeNavigator.describe_value(found)

    def keys(self) -> list[str]:
        """Sorted dotted keys of every leaf setting visible to ``get_value``."""
        return ShadowResolver.visible_keys(self._local_tree, self._global.tree)

    def snapshot(self, scope: Scope | None = None) -> Table:
        """Copy of one document's tree, or of the combined view if ``scope`` is None."""
        if scope is None:
            return ShadowResolver.snapshot(self._local_tree, self._global.tree)
        tree = self._document(scope).tree.copy()
        assert isinstance(tree, Table)
        return tree

    # ---- writes ----
    def _commit(self, document: Document, tree: Table) -> None:
        # The in-memory tree only changes once the file has been written
        Document(document.path, tree).save(self.serializer)
        document.tree = tree

    def set_value(self, key: str, value: Any, scope: Scope = Scope.GLOBAL) -> None:
        """Store ``value`` at ``key`` and write the document to disk.

        If the write fails the store is left as it was.

        Args:
            key: Dot-path to write
            value: A ``Value`` or plain Python data
            scope: Document to write (default: the global document)

        Raises:
            InvalidKeyError: If ``key`` is not a valid dot-path
            PathConflictError: If part of ``key`` holds a non-table value
            SettingsError: If ``scope`` is LOCAL and local settings are disabled
            SerializeError: If the document cannot be encoded
            OSError: If the document cannot be written
        """
        path = KeyPath.parse(key)
        document = self._document(scope)
        tree = document.tree.copy()
        assert isinstance(tree, Table)
        TreeNavigator.set(tree, path, Value.wrap(value).copy())
        self._commit(document, tree)
        logger.debug("Set %s in %s settings", key, scope.value)

    def delete_key(self, key: str, scope: Scope = Scope.GLOBAL) -> bool:
        """Remove ``key`` and everything below it, then write the document.

        The document is rewritten even when nothing was removed, unless its
        file does not exist yet. If the write fails the store is left as it
        was.

        Returns:
            True if something was removed

        Raises:
            InvalidKeyError: If ``key`` is not a valid dot-path
            SettingsError: If ``scope`` is LOCAL and local settings are disabled
            SerializeError: If the document cannot be encoded
            OSError: If the document cannot be written
        """
        path = KeyPath.parse(key)
        document = self._document(scope)
        tree = document.tree.copy()
        assert isinstance(tree, Table)
        removed = TreeNavigator.delete(tree, path)
        if removed or document.exists:
            self._commit(document, tree)
        return removed
