from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from settingsfile.errors import SerializeError
from settingsfile.formats import JsonSerializer, TomlSerializer
from settingsfile.location import DocumentLocation
from settingsfile.store import SettingsStore
from settingsfile.value import Table


class RecordingSerializer(TomlSerializer):
    """TOML serializer that remembers every tree it was asked to encode."""

    def __init__(self) -> None:
        self.serialize_calls: list[dict[str, Any]] = []

    def serialize(self, tree: Table) -> str:
        self.serialize_calls.append(tree.unwrap())
        return super().serialize(tree)


class FailingSerializer(JsonSerializer):
    """Serializer that can decode but never encode."""

    def serialize(self, tree: Table) -> str:
        raise SerializeError("disk format unavailable")


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """User config directory for the global document."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Working directory for the local document."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def location() -> DocumentLocation:
    return DocumentLocation(folder="testapp", filename="settings", extension="toml")


@pytest.fixture
def make_store(
    home: Path, workdir: Path, location: DocumentLocation
) -> Callable[..., SettingsStore]:
    """Build stores rooted in the temporary home and working directories."""

    def factory(**kwargs: Any) -> SettingsStore:
        return SettingsStore(location, base_dir=home, cwd=workdir, **kwargs)

    return factory


@pytest.fixture
def write_global(home: Path, location: DocumentLocation) -> Callable[[str], Path]:
    def write(text: str) -> Path:
        path = location.global_path(home)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return write


@pytest.fixture
def write_local(workdir: Path, location: DocumentLocation) -> Callable[[str], Path]:
    def write(text: str) -> Path:
        path = location.local_path(workdir)
        path.write_text(text, encoding="utf-8")
        return path

    return write
