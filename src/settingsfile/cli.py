"""Settings file CLI.

This module provides a thin command-line front end over ``SettingsStore``
for reading, writing and inspecting layered settings documents.
"""

from __future__ import annotations

import logging
import sys
from typing import Final, NoReturn

import typer
import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from settingsfile.common.enums import FileFormat, Scope
from settingsfile.constants import DEFAULT_FILENAME
from settingsfile.errors import SettingsError
from settingsfile.location import DocumentLocation
from settingsfile.options import StoreOptions
from settingsfile.store import SettingsStore
from settingsfile.value import Scalar, Value

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Layered settings file CLI", add_completion=False)

logger: Final = logging.getLogger(__name__)  # Will be "settingsfile.cli"

# Options shared by every command
FOLDER_OPTION = typer.Option(
    ..., "--folder", "-f", help="Settings folder under the user config directory"
)
NAME_OPTION = typer.Option(DEFAULT_FILENAME, "--name", "-n", help="Settings file name")
EXT_OPTION = typer.Option(None, "--ext", "-e", help="Settings file extension")
FORMAT_OPTION = typer.Option(FileFormat.TOML, "--format", help="Settings file format")
NO_LOCAL_OPTION = typer.Option(
    False, "--no-local", help="Ignore the settings file in the working directory"
)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")

KEY_ARGUMENT = typer.Argument(..., help="Dot-path key, e.g. user.name")
VALUE_ARGUMENT = typer.Argument(..., help="Value, parsed as YAML (5, true, [1, 2])")
DEFAULT_OPTION = typer.Option(None, "--default", "-d", help="Printed when the key is missing")
LOCAL_OPTION = typer.Option(
    False, "--local", "-l", help="Write the settings file in the working directory"
)


def _fail(exc: Exception) -> NoReturn:
    typer.secho(str(exc), fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def _store(ctx: typer.Context) -> SettingsStore:
    store: SettingsStore = ctx.obj
    return store


def parse_value(raw: str) -> Value:
    """Interpret a command-line value.

    YAML syntax gives typed values (``5`` is an integer, ``true`` a boolean,
    ``{a: 1}`` a table). Anything YAML cannot turn into a settings value,
    such as an empty string, ``null`` or a date, is kept as plain text.
    """
    try:
        return Value.wrap(yaml.safe_load(raw))
    except (yaml.YAMLError, TypeError, SettingsError):
        return Scalar(raw)


def format_value(value: Value, inline: bool = False) -> str:
    """Render a value for display.

    Args:
        value: Value to render
        inline: Keep containers on one line (YAML flow style)

    Returns:
        Scalars as plain text, containers as YAML
    """
    if isinstance(value, Scalar):
        if isinstance(value.value, bool):
            return "true" if value.value else "false"
        return str(value.value)
    text = yaml.safe_dump(
        value.unwrap(), sort_keys=False, allow_unicode=True, default_flow_style=inline
    )
    return text.rstrip()


@app.callback()
def main(
    ctx: typer.Context,
    folder: str = FOLDER_OPTION,
    name: str = NAME_OPTION,
    ext: str | None = EXT_OPTION,
    file_format: FileFormat = FORMAT_OPTION,
    no_local: bool = NO_LOCAL_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Open the settings documents shared by every command."""
    # SETTINGSFILE_HOME may come from a .env file
    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        location = DocumentLocation(folder=folder, filename=name, extension=ext)
        options = StoreOptions(file_format=file_format, local_enabled=not no_local)
        ctx.obj = SettingsStore(location, options=options)
    except (ValidationError, SettingsError, OSError) as exc:
        _fail(exc)


@app.command()
def get(
    ctx: typer.Context,
    key: str = KEY_ARGUMENT,
    default: str | None = DEFAULT_OPTION,
) -> None:
    """Print the value stored at KEY."""
    store = _store(ctx)
    try:
        value = store.get_value(key)
    except SettingsError as exc:
        if default is None:
            _fail(exc)
        value = parse_value(default)
    typer.echo(format_value(value))


@app.command("set")
def set_(
    ctx: typer.Context,
    key: str = KEY_ARGUMENT,
    value: str = VALUE_ARGUMENT,
    local: bool = LOCAL_OPTION,
) -> None:
    """Store VALUE at KEY."""
    store = _store(ctx)
    scope = Scope.LOCAL if local else Scope.GLOBAL
    try:
        store.set_value(key, parse_value(value), scope=scope)
    except (SettingsError, OSError) as exc:
        _fail(exc)
    logger.info("Set %s in %s settings", key, scope.value)


@app.command()
def delete(
    ctx: typer.Context,
    key: str = KEY_ARGUMENT,
    local: bool = LOCAL_OPTION,
) -> None:
    """Remove KEY and everything below it."""
    store = _store(ctx)
    scope = Scope.LOCAL if local else Scope.GLOBAL
    try:
        removed = store.delete_key(key, scope=scope)
    except (SettingsError, OSError) as exc:
        _fail(exc)
    if not removed:
        typer.secho(f"{key} was not set", fg=typer.colors.YELLOW, err=True)


@app.command("list")
def list_(ctx: typer.Context) -> None:
    """Print every visible setting as KEY = VALUE."""
    store = _store(ctx)
    for key in store.keys():
        typer.echo(f"{key} = {format_value(store.get_value(key), inline=True)}")


@app.command()
def describe(ctx: typer.Context, key: str = KEY_ARGUMENT) -> None:
    """Print the type of the value stored at KEY."""
    try:
        typer.echo(_store(ctx).describe(key))
    except SettingsError as exc:
        _fail(exc)


@app.command()
def where(ctx: typer.Context, key: str = KEY_ARGUMENT) -> None:
    """Print which document (local or global) KEY is read from."""
    try:
        scope = _store(ctx).origin(key)
    except SettingsError as exc:
        _fail(exc)
    if scope is None:
        typer.secho(f"{key} is not set", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.echo(scope.value)


@app.command()
def paths(ctx: typer.Context) -> None:
    """Print the locations of the global and local documents."""
    store = _store(ctx)
    typer.echo(f"global: {store.global_path}")
    if store.options.local_enabled:
        typer.echo(f"local: {store.local_path}")


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
