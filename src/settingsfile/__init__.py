"""Layered settings files addressed by dot-path keys.

A ``SettingsStore`` keeps a user-scoped global document and an optional
document in the working directory. Reads let the local document shadow the
global one; writes are persisted immediately.
"""

__version__ = "0.1.0"

from .common.enums import FileFormat, Scope
from .document import Document
from .errors import (
    DeserializeError,
    InvalidKeyError,
    NotFoundError,
    PathConflictError,
    SerializeError,
    SettingsError,
)
from .formats import JsonSerializer, Serializer, TomlSerializer, YamlSerializer, serializer_for
from .keypath import KeyPath
from .location import DocumentLocation, user_config_dir
from .navigator import TreeNavigator
from .options import StoreOptions
from .shadow import ShadowResolver
from .store import SettingsStore
from .value import ABSENT, Absent, Scalar, ScalarKind, Sequence, Table, Value, ValueKind

__all__ = [
    "ABSENT",
    "Absent",
    "DeserializeError",
    "Document",
    "DocumentLocation",
    "FileFormat",
    "InvalidKeyError",
    "JsonSerializer",
    "KeyPath",
    "NotFoundError",
    "PathConflictError",
    "Scalar",
    "ScalarKind",
    "Scope",
    "SerializeError",
    "Sequence",
    "Serializer",
    "SettingsError",
    "SettingsStore",
    "ShadowResolver",
    "StoreOptions",
    "Table",
    "TomlSerializer",
    "TreeNavigator",
    "Value",
    "ValueKind",
    "YamlSerializer",
    "serializer_for",
    "user_config_dir",
]
