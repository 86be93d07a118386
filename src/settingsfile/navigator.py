"""Path-addressed reads and writes over a settings tree."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Final

from settingsfile.errors import PathConflictError
from settingsfile.keypath import KeyPath
from settingsfile.value import ABSENT, Scalar, Sequence, Table, Value

logger: Final = logging.getLogger(__name__)


def _require_table(root: Value) -> Table:
    if not isinstance(root, Table):
        raise TypeError(f"settings root must be a Table, got {type(root).__name__}")
    return root


class TreeNavigator:
    """Operations that follow a ``KeyPath`` through nested tables.

    Missing entries are reported as ``ABSENT`` rather than raised, so reads
    compose without exception handling. The only structural error is a
    write that would descend into a scalar or sequence.
    """

    @staticmethod
    def get(root: Table, path: KeyPath) -> Value:
        """Look up the node at ``path``.

        Args:
            root: Table to search
            path: Location to look up

        Returns:
            The node, or ``ABSENT`` if a segment is missing or an intermediate
            node is not a table
        """
        node: Value = _require_table(root)
        for segment in path:
            if not isinstance(node, Table):
                return ABSENT
            node = node.get(segment)
            if node.is_absent:
                return ABSENT
        return node

    @staticmethod
    def get_or(root: Table, path: KeyPath, default: Value) -> Value:
        """Look up ``path``, returning ``default`` when it is absent."""
        found = TreeNavigator.get(root, path)
        return default if found.is_absent else found

    @staticmethod
    def set(root: Table, path: KeyPath, value: Value) -> None:
        """Store ``value`` at ``path``, creating intermediate tables.

        Whatever is stored at the final segment is replaced.

        Args:
            root: Table to modify
            path: Location to write
            value: Node to store (stored as is, not copied)

        Raises:
            PathConflictError: If an intermediate segment holds a scalar or
                sequence. The tree is left unchanged.
            TypeError: If ``value`` is not a storable node
        """
        if not isinstance(value, Value) or value.is_absent:
            raise TypeError("only present Value nodes can be stored")

        node = _require_table(root)
        parent = path.parent()
        if parent is not None:
            for prefix in parent.prefixes():
                child = node.get(prefix.leaf())
                if child.is_absent:
                    child = Table()
                    node[prefix.leaf()] = child
                elif not isinstance(child, Table):
                    raise PathConflictError(str(path), str(prefix))
                node = child
        node[path.leaf()] = value

    @staticmethod
    def delete(root: Table, path: KeyPath) -> bool:
        """Remove the entry at ``path`` together with everything below it.

        Parent tables left empty are kept.

        Returns:
            True if an entry was removed
        """
        parent_path = path.parent()
        parent = (
            _require_table(root)
            if parent_path is None
            else TreeNavigator.get(root, parent_path)
        )
        if not isinstance(parent, Table) or path.leaf() not in parent:
            return False
        del parent[path.leaf()]
        logger.debug("Deleted %s", path)
        return True

    @staticmethod
    def describe(root: Table, path: KeyPath) -> str:
        """Describe what is stored at ``path``.

        Returns:
            ``"absent"``, a scalar kind such as ``"integer"``, ``"sequence[N]"``
            or ``"table{key, ...}"`` with sorted keys
        """
        return TreeNavigator.describe_value(TreeNavigator.get(root, path))

    @staticmethod
    def describe_value(node: Value) -> str:
        if isinstance(node, Scalar):
            return node.scalar_kind.value
        if isinstance(node, Sequence):
            return f"sequence[{len(node)}]"
        if isinstance(node, Table):
            return "table{" + ", ".join(sorted(node)) + "}"
        return "absent"

    @staticmethod
    def flatten(root: Table) -> dict[str, Value]:
        """Map dotted keys to every non-table leaf below ``root``.

        Sequences count as leaves. Empty tables have no leaves and so do not
        appear in the result.
        """
        flat: dict[str, Value] = {}

        def walk(table: Table, prefix: KeyPath | None) -> None:
            for key, item in table.items():
                path = KeyPath.from_segments((key,)) if prefix is None else prefix.child(key)
                if isinstance(item, Table):
                    walk(item, path)
                else:
                    flat[str(path)] = item

        walk(_require_table(root), None)
        return flat

    @staticmethod
    def unflatten(flat: Mapping[str, Value]) -> Table:
        """Rebuild a tree from dotted keys, as produced by ``flatten``.

        Raises:
            InvalidKeyError: If a key is not a valid dot-path
            PathConflictError: If one key is a prefix of another
        """
        root = Table()
        for key, item in flat.items():
            TreeNavigator.set(root, KeyPath.parse(key), Value.wrap(item))
        return root

    @staticmethod
    def overlay_into(base: Table, other: Table) -> None:
        """Lay ``other`` on top of ``base`` in place, leaf by leaf.

        Every leaf of ``other`` is written into ``base`` and wins over what
        was there. Tables are combined rather than replaced, so keys only
        ``base`` holds survive. A leaf in ``other`` replaces a whole table in
        ``base``; a scalar or sequence in ``base`` that sits where ``other``
        needs a table is dropped. Empty tables in ``other`` add nothing.
        """
        _require_table(base)
        for key, leaf in TreeNavigator.flatten(other).items():
            path = KeyPath.parse(key)
            parent = path.parent()
            if parent is not None:
                for prefix in parent.prefixes():
                    node = TreeNavigator.get(base, prefix)
                    if node.is_absent:
                        break
                    if not isinstance(node, Table):
                        TreeNavigator.delete(base, prefix)
                        break
            TreeNavigator.set(base, path, leaf.copy())

    @staticmethod
    def overlay(base: Table, other: Table) -> Table:
        """New tree with ``other`` laid on top of ``base`` (see ``overlay_into``)."""
        combined = _require_table(base).copy()
        assert isinstance(combined, Table)
        TreeNavigator.overlay_into(combined, other)
        return combined
