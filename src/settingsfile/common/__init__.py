"""Shared enumerations."""

from settingsfile.common.enums import FileFormat, Scope

__all__ = ["FileFormat", "Scope"]
