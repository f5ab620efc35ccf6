# -*- coding: utf-8 -*-
"""CLI commands for path normalization and image checks."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from garage.config import build_runtime_config, load_config, save_config
from garage.constants import APP_NAME, APP_VERSION
from garage.misc_util import MiscUtil
from garage.models.runtime_config import RuntimeConfig
from garage.utils.logger import LOG_DATE_FORMAT, LOG_FORMAT, set_log_level, setup_session_logging
from garage.utils.path_utils import PathDecodeError

app = typer.Typer(help="Path and image file helpers for the Garage editor")
logger = logging.getLogger(__name__)


def _util(ctx: typer.Context) -> MiscUtil:
    return ctx.obj["util"]


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    settings: Path = typer.Option(None, "--settings", help="Settings JSON file (default: settings.json)"),
    version: bool = typer.Option(
        False, "--version", callback=_print_version, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Load settings and bind the helpers to them."""
    try:
        config = load_config(settings)
        runtime = build_runtime_config(config)
    except ValueError as e:
        typer.echo(f"Invalid settings: {e}", err=True)
        raise typer.Exit(2)

    level = config["logging"]["level"]
    if config["logging"].get("session_log"):
        setup_session_logging(Path.cwd(), APP_NAME, level)
    else:
        logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    set_log_level(level)
    logger.debug("Runtime config: %s", runtime)
    ctx.obj = {"settings": config, "settings_path": settings, "util": MiscUtil(runtime)}


@app.command()
def path(
    ctx: typer.Context,
    raw_path: str = typer.Argument(..., help="Path or file:// URL to normalize"),
    convert_backslashes: bool = typer.Option(False, help="Replace backslashes with forward slashes"),
    platform: str = typer.Option(None, help="Normalize as on this platform (win32, darwin, linux)"),
) -> None:
    """Print the normalized filesystem path."""
    util = _util(ctx)
    if platform:
        util = MiscUtil(RuntimeConfig(platform, util.config.is_bz, util.config.max_image_filesize))
    try:
        typer.echo(util.get_appropriate_path(raw_path, convert_backslashes))
    except PathDecodeError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)


@app.command("platform")
def show_platform(ctx: typer.Context) -> None:
    """Show the detected platform and build variant."""
    util = _util(ctx)
    typer.echo(f"platform: {util.config.platform}")
    typer.echo(f"windows: {util.is_windows()}")
    typer.echo(f"darwin: {util.is_darwin()}")
    typer.echo(f"bz: {util.is_bz()}")


@app.command()
def check_image(
    ctx: typer.Context,
    paths: list[Path] = typer.Argument(..., help="Image files to check"),
    max_size: int = typer.Option(None, help="Override the maximum image size in bytes"),
) -> None:
    """Check images against the device's size and JPEG limits."""
    util = _util(ctx)
    if max_size is not None:
        if max_size <= 0:
            typer.echo("--max-size must be positive", err=True)
            raise typer.Exit(2)
        util = MiscUtil(RuntimeConfig(util.config.platform, util.config.is_bz, max_size))

    failures = 0
    for image_path in paths:
        status = util.check_image(image_path)
        typer.echo(f"{image_path}: {status.name} ({int(status)}) - {status.description}")
        if not status.ok:
            failures += 1

    if failures:
        raise typer.Exit(1)


@app.command()
def exists(
    ctx: typer.Context,
    target: str = typer.Argument(..., help="Path to test"),
) -> None:
    """Print whether a plain (non-directory) file exists."""
    if _util(ctx).exists_file(target):
        typer.echo("yes")
        return
    typer.echo("no")
    raise typer.Exit(1)


@app.command()
def write_settings(ctx: typer.Context) -> None:
    """Write the effective settings (file + .env overrides) back to the settings file."""
    target = save_config(ctx.obj["settings"], ctx.obj["settings_path"])
    typer.echo(f"Settings saved to: {target}")


if __name__ == "__main__":
    app()
