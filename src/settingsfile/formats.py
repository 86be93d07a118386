"""Text formats for settings documents.

Each serializer turns a ``Table`` into text and back. The store only
depends on the ``Serializer`` protocol, so any object with the same two
methods can be injected in place of the built-in formats.
"""

from __future__ import annotations

import json
import tomllib
from typing import Any, Protocol, runtime_checkable

import tomli_w
import yaml

from settingsfile.common.enums import FileFormat
from settingsfile.errors import DeserializeError, InvalidKeyError, SerializeError
from settingsfile.value import Table, Value


@runtime_checkable
class Serializer(Protocol):
    """Protocol for settings document encoders.

    Implementations must round-trip: ``deserialize(serialize(t))`` has to be
    structurally equal to ``t`` for every table the format can represent.
    """

    def serialize(self, tree: Table) -> str:
        """Encode a settings tree.

        Args:
            tree: Root table of the document

        Returns:
            The document text

        Raises:
            SerializeError: If the tree cannot be encoded
        """
        ...

    def deserialize(self, text: str) -> Table:
        """Decode a settings document.

        Args:
            text: The document text

        Returns:
            Root table of the document

        Raises:
            DeserializeError: If the text cannot be decoded into a table
        """
        ...


def _to_table(data: Any, format_name: str) -> Table:
    """Wrap decoded data, rejecting roots and values a tree cannot hold."""
    if data is None:
        return Table()
    if not isinstance(data, dict):
        raise DeserializeError(
            f"{format_name} document root is {type(data).__name__}, not a table"
        )
    try:
        tree = Value.wrap(data)
    except (TypeError, InvalidKeyError) as exc:
        raise DeserializeError(
            f"unsupported {format_name} content: {exc}", original_error=exc
        ) from exc
    assert isinstance(tree, Table)
    return tree


class TomlSerializer:
    """TOML documents, read with ``tomllib`` and written with ``tomli_w``."""

    def serialize(self, tree: Table) -> str:
        try:
            return tomli_w.dumps(tree.unwrap())
        except (TypeError, ValueError) as exc:
            raise SerializeError(f"cannot encode TOML: {exc}", original_error=exc) from exc

    def deserialize(self, text: str) -> Table:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise DeserializeError(f"invalid TOML: {exc}", original_error=exc) from exc
        return _to_table(data, "TOML")


class JsonSerializer:
    """JSON documents with a two-space indent."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def serialize(self, tree: Table) -> str:
        try:
            return json.dumps(tree.unwrap(), indent=self.indent, ensure_ascii=False) + "\n"
        except (TypeError, ValueError) as exc:
            raise SerializeError(f"cannot encode JSON: {exc}", original_error=exc) from exc

    def deserialize(self, text: str) -> Table:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DeserializeError(f"invalid JSON: {exc}", original_error=exc) from exc
        return _to_table(data, "JSON")


class YamlSerializer:
    """YAML documents using the safe loader and dumper."""

    def serialize(self, tree: Table) -> str:
        try:
            return yaml.safe_dump(tree.unwrap(), sort_keys=False, allow_unicode=True)
        except yaml.YAMLError as exc:
            raise SerializeError(f"cannot encode YAML: {exc}", original_error=exc) from exc

    def deserialize(self, text: str) -> Table:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DeserializeError(f"invalid YAML: {exc}", original_error=exc) from exc
        return _to_table(data, "YAML")


_SERIALIZERS: dict[FileFormat, type[Serializer]] = {
    FileFormat.TOML: TomlSerializer,
    FileFormat.JSON: JsonSerializer,
    FileFormat.YAML: YamlSerializer,
}


def serializer_for(file_format: FileFormat) -> Serializer:
    """Return a serializer instance for ``file_format``."""
    return _SERIALIZERS[file_format]()
