"""Typed tree nodes holding one settings document.

A settings tree is built from four node types:

- ``Scalar``: a string, integer, float or boolean
- ``Sequence``: an ordered list of nodes
- ``Table``: a mapping from key to node
- ``ABSENT``: the "not found" sentinel returned by lookups

Every node reports its ``kind`` so callers can branch on a closed set of
variants instead of inspecting Python types.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Union

from settingsfile.constants import KEY_SEPARATOR
from settingsfile.errors import InvalidKeyError

ScalarType = Union[str, int, float, bool]


class ValueKind(Enum):
    """Variants of a settings tree node."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    TABLE = "table"
    ABSENT = "absent"


class ScalarKind(Enum):
    """Variants of a scalar node."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"


def _scalar_kind(value: object) -> ScalarKind:
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return ScalarKind.BOOLEAN
    if isinstance(value, int):
        return ScalarKind.INTEGER
    if isinstance(value, float):
        return ScalarKind.FLOAT
    if isinstance(value, str):
        return ScalarKind.STRING
    raise TypeError(f"unsupported scalar type: {type(value).__name__}")


class Value:
    """Base class of every settings tree node."""

    kind: ClassVar[ValueKind]

    @property
    def is_absent(self) -> bool:
        return self.kind is ValueKind.ABSENT

    @property
    def is_table(self) -> bool:
        return self.kind is ValueKind.TABLE

    def copy(self) -> Value:
        """Return a deep copy that shares no mutable state with this node."""
        return copy.deepcopy(self)

    def unwrap(self) -> Any:
        """Convert the node back into plain Python data."""
        raise NotImplementedError

    @staticmethod
    def wrap(obj: Any) -> Value:
        """Convert plain Python data into a settings tree.

        Existing ``Value`` nodes are returned unchanged. Mappings become
        tables, lists and tuples become sequences.

        Args:
            obj: Data to convert

        Returns:
            The equivalent tree node

        Raises:
            TypeError: If ``obj`` (or anything nested in it) has no settings
                representation, including ``None``
            InvalidKeyError: If a mapping key is not a valid table key
        """
        if isinstance(obj, Value):
            return obj
        if isinstance(obj, Mapping):
            return Table({key: Value.wrap(item) for key, item in obj.items()})
        if isinstance(obj, (list, tuple)):
            return Sequence([Value.wrap(item) for item in obj])
        if obj is None:
            raise TypeError("None has no settings representation")
        return Scalar(obj)


@dataclass(frozen=True)
class Scalar(Value):
    """A single string, integer, float or boolean."""

    kind: ClassVar[ValueKind] = ValueKind.SCALAR

    value: ScalarType
    scalar_kind: ScalarKind = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "scalar_kind", _scalar_kind(self.value))

    def unwrap(self) -> ScalarType:
        return self.value


@dataclass
class Sequence(Value):
    """An ordered list of nodes. Items may be of different kinds."""

    kind: ClassVar[ValueKind] = ValueKind.SEQUENCE

    items: list[Value] = field(default_factory=list)

    def __post_init__(self) -> None:
        for item in self.items:
            _check_storable(item)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]

    def append(self, item: Value) -> None:
        _check_storable(item)
        self.items.append(item)

    def unwrap(self) -> list[Any]:
        return [item.unwrap() for item in self.items]


class Table(Value, MutableMapping[str, Value]):
    """A mapping from key to node.

    Keys are non-empty strings that never contain the key separator, so
    every entry is reachable through a dot-path. Insertion order is kept
    so that documents round-trip in the order they were written.
    """

    kind: ClassVar[ValueKind] = ValueKind.TABLE

    def __init__(
        self, entries: Mapping[str, Value] | Iterable[tuple[str, Value]] = ()
    ) -> None:
        self._entries: dict[str, Value] = {}
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        for key, item in pairs:
            self[key] = item

    def __getitem__(self, key: str) -> Value:
        return self._entries[key]

    def __setitem__(self, key: str, item: Value) -> None:
        check_table_key(key)
        _check_storable(item)
        self._entries[key] = item

    def __delitem__(self, key: str) -> None:
        del self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Table({self._entries!r})"

    def get(self, key: str, default: Value | None = None) -> Value:  # type: ignore[override]
        """Return the entry for ``key``, or ``default`` (``ABSENT`` if omitted)."""
        if key in self._entries:
            return self._entries[key]
        return ABSENT if default is None else default

    def unwrap(self) -> dict[str, Any]:
        return {key: item.unwrap() for key, item in self._entries.items()}


class Absent(Value):
    """Sentinel for "nothing stored here". Use the ``ABSENT`` instance."""

    kind: ClassVar[ValueKind] = ValueKind.ABSENT
    _instance: ClassVar[Absent | None] = None

    def __new__(cls) -> Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __copy__(self) -> Absent:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Absent:
        return self

    def __reduce__(self) -> str:
        return "ABSENT"

    def unwrap(self) -> None:
        return None


ABSENT = Absent()


def check_table_key(key: object) -> None:
    """Validate a single table key.

    Raises:
        InvalidKeyError: If ``key`` is not a non-empty string free of the
            key separator
    """
    if not isinstance(key, str):
        raise InvalidKeyError(key, "table keys must be strings")
    if not key:
        raise InvalidKeyError(key, "table keys cannot be empty")
    if KEY_SEPARATOR in key:
        raise InvalidKeyError(key, f"table keys cannot contain {KEY_SEPARATOR!r}")


def _check_storable(item: object) -> None:
    if not isinstance(item, Value):
        raise TypeError(f"expected a Value, got {type(item).__name__}")
    if item.is_absent:
        raise TypeError("ABSENT cannot be stored in a settings tree")
