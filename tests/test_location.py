import sys
from pathlib import Path

import pytest

from settingsfile.location import DocumentLocation, normalize_folder, user_config_dir


def test_file_name_with_and_without_extension() -> None:
    assert DocumentLocation(folder="app").file_name == "settings"
    assert DocumentLocation(folder="app", extension="toml").file_name == "settings.toml"
    assert DocumentLocation(folder="app", extension=".toml").file_name == "settings.toml"
    assert DocumentLocation(folder="app", filename="conf", extension="").file_name == "conf"


def test_global_path(tmp_path: Path) -> None:
    location = DocumentLocation(folder="program_app_folder", extension="toml")
    assert location.global_path(tmp_path) == tmp_path / "program_app_folder" / "settings.toml"


def test_folder_separators_are_normalized(tmp_path: Path) -> None:
    location = DocumentLocation(folder="vendor\\app/sub", extension="toml")
    assert location.global_path(tmp_path) == tmp_path / "vendor" / "app" / "sub" / "settings.toml"
    assert normalize_folder("a//b\\\\c") == Path("a", "b", "c")


def test_absolute_folder_ignores_base_dir(tmp_path: Path) -> None:
    location = DocumentLocation(folder=str(tmp_path / "abs"))
    assert location.global_path(tmp_path / "elsewhere") == tmp_path / "abs" / "settings"


def test_local_path(tmp_path: Path) -> None:
    location = DocumentLocation(folder="app", extension="toml")
    assert location.local_path(tmp_path) == tmp_path / "settings.toml"

    hidden = DocumentLocation(folder="app", extension="toml", local_filename=".myapp")
    assert hidden.local_path(tmp_path) == tmp_path / ".myapp"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"folder": ""},
        {"folder": "app", "filename": ""},
        {"folder": "app", "filename": "nested/settings"},
        {"folder": "app", "local_filename": "..\\escape"},
    ],
)
def test_invalid_locations(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        DocumentLocation(**kwargs)


class TestUserConfigDir:
    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SETTINGSFILE_HOME", str(tmp_path))
        assert user_config_dir() == tmp_path

    def test_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SETTINGSFILE_HOME", raising=False)
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        assert user_config_dir() == tmp_path / "xdg"

    def test_home_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SETTINGSFILE_HOME", raising=False)
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        assert user_config_dir() == tmp_path / ".config"

    def test_windows_appdata(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SETTINGSFILE_HOME", raising=False)
        monkeypatch.setattr(sys, "platform", "win32")
        monkeypatch.setenv("APPDATA", str(tmp_path))
        assert user_config_dir() == tmp_path
