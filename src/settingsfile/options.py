"""Behavioural options for a settings store."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from settingsfile.common.enums import FileFormat


class StoreOptions(BaseModel):
    """Options controlling how a ``SettingsStore`` reads and writes documents.

    The defaults store TOML and let a document in the working directory
    shadow the user-scoped one.
    """

    model_config = ConfigDict(frozen=True)

    file_format: FileFormat = Field(FileFormat.TOML, description="Document text format")
    local_enabled: bool = Field(
        True, description="Read (and allow writing) the document in the working directory"
    )
