from enum import Enum


class Scope(Enum):
    """Which settings document a read came from or a write goes to.

    GLOBAL is the user-scoped document and the default write target.
    LOCAL is the document in the current working directory, which shadows
    GLOBAL on reads.
    """

    GLOBAL = "global"
    LOCAL = "local"


class FileFormat(Enum):
    """Text formats a settings document can be stored in."""

    TOML = "toml"
    JSON = "json"
    YAML = "yaml"
