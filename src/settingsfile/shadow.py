"""Read view combining a local settings tree with a global one.

The local tree shadows the global tree one lookup path at a time: if the
local tree has anything at the requested path, that node is returned whole,
otherwise the global tree is consulted. Tables are not merged key by key,
so a local table at ``user`` hides every ``user.*`` entry of the global
table when ``user`` itself is read, while ``user.email`` read on its own
still falls through to the global tree if the local table lacks it.
"""

from __future__ import annotations

from typing import Optional

from settingsfile.common.enums import Scope
from settingsfile.keypath import KeyPath
from settingsfile.navigator import TreeNavigator
from settingsfile.value import Table, Value


class ShadowResolver:
    """Resolve reads against a local tree first and a global tree second.

    ``local`` may be None when local documents are disabled; every method
    then reads the global tree alone.
    """

    @staticmethod
    def resolve(local: Optional[Table], global_: Table, path: KeyPath) -> Value:
        """Return the local node at ``path`` if present, else the global one.

        Returns:
            The winning node, or ``ABSENT`` if neither tree has the path
        """
        if local is not None:
            found = TreeNavigator.get(local, path)
            if not found.is_absent:
                return found
        return TreeNavigator.get(global_, path)

    @staticmethod
    def origin(local: Optional[Table], global_: Table, path: KeyPath) -> Optional[Scope]:
        """Report which tree ``resolve`` would take the value from."""
        if local is not None and not TreeNavigator.get(local, path).is_absent:
            return Scope.LOCAL
        if not TreeNavigator.get(global_, path).is_absent:
            return Scope.GLOBAL
        return None

    @staticmethod
    def visible_keys(local: Optional[Table], global_: Table) -> list[str]:
        """Sorted dotted keys of every leaf reachable through ``resolve``."""
        keys = set(TreeNavigator.flatten(global_))
        if local is not None:
            keys.update(TreeNavigator.flatten(local))
        return sorted(keys)

    @staticmethod
    def snapshot(local: Optional[Table], global_: Table) -> Table:
        """Copy of the combined view at the top level.

        Each top-level local entry replaces the global entry of the same
        name, exactly as ``resolve`` does for a single-segment path.
        """
        view = Table()
        for key, item in global_.items():
            view[key] = item.copy()
        if local is not None:
            for key, item in local.items():
                view[key] = item.copy()
        return view
