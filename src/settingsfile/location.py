"""Where settings documents live on disk."""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from settingsfile.constants import DEFAULT_FILENAME, HOME_ENV_VAR

_SEPARATORS = re.compile(r"[\\/]+")


def user_config_dir() -> Path:
    """Return the base directory for user-scoped settings.

    Checked in order: ``$SETTINGSFILE_HOME``, ``%APPDATA%`` on Windows,
    ``$XDG_CONFIG_HOME``, then ``~/.config``.
    """
    env_home = os.environ.get(HOME_ENV_VAR)
    if env_home:
        return Path(env_home).expanduser()
    if sys.platform == "win32" and os.environ.get("APPDATA"):
        return Path(os.environ["APPDATA"])
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg).expanduser()
    return Path.home() / ".config"


def normalize_folder(folder: str) -> Path:
    """Turn a folder written with ``/`` or ``\\`` into a host path.

    Absolute folders are kept absolute; relative ones stay relative so they
    can be joined onto a base directory.
    """
    if Path(folder).is_absolute():
        return Path(folder)
    parts = [part for part in _SEPARATORS.split(folder) if part]
    if folder.startswith(("/", "\\")):
        return Path(os.sep, *parts)
    return Path(*parts)


class DocumentLocation(BaseModel):
    """File name convention shared by the global and local documents.

    Examples:
        # ~/.config/myapp/settings.toml and ./settings.toml
        DocumentLocation(folder="myapp", filename="settings", extension="toml")

        # hidden local override: ./.myapp
        DocumentLocation(folder="myapp", local_filename=".myapp")
    """

    folder: str = Field(..., min_length=1, description="Subfolder under the user config dir")
    filename: str = Field(DEFAULT_FILENAME, min_length=1, description="File name without extension")
    extension: str | None = Field(None, description="Optional file extension")
    local_filename: str | None = Field(
        None, description="Local document name; defaults to the global file name"
    )

    # ---- validators ----
    @field_validator("filename", "local_filename")
    @classmethod
    def validate_plain_name(cls, v: str | None) -> str | None:
        if v is not None and _SEPARATORS.search(v):
            raise ValueError("file names cannot contain path separators")
        return v

    @field_validator("extension")
    @classmethod
    def strip_dot(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.lstrip(".")
        return v or None

    # ---- paths ----
    @property
    def file_name(self) -> str:
        """Document file name including the extension, if any."""
        if self.extension:
            return f"{self.filename}.{self.extension}"
        return self.filename

    def global_path(self, base_dir: Path | None = None) -> Path:
        """Absolute path of the global document.

        Args:
            base_dir: User config directory (default: ``user_config_dir()``)
        """
        base = base_dir if base_dir is not None else user_config_dir()
        return base / normalize_folder(self.folder) / self.file_name

    def local_path(self, cwd: Path | None = None) -> Path:
        """Path of the local document in ``cwd`` (default: current directory)."""
        directory = cwd if cwd is not None else Path.cwd()
        return directory / (self.local_filename or self.file_name)
