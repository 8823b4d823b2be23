# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from typing import Annotated, Final

import typer

from .. import __version__
from ..config import ConfigError, load_settings
from ..logging import enable_debug_logging, fail
from . import add, install, ls
from .shared import CLIState

PROGRAM_TITLE: Final[str] = "Bun Catalog Manager"

app = typer.Typer(
    name="bun-catalog",
    help="Manage your Bun package catalog.",
    add_completion=False,
    no_args_is_help=True,
)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"{PROGRAM_TITLE} {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Toggle coloured output when writing to a terminal."),
    ] = True,
    emoji: Annotated[
        bool,
        typer.Option("--emoji/--no-emoji", help="Toggle emoji in CLI output."),
    ] = True,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log manifest and subprocess activity to stderr."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_print_version,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Manage your Bun package catalog."""

    use_color = None if color else False
    if verbose:
        enable_debug_logging()
    try:
        settings = load_settings()
    except ConfigError as exc:
        fail(str(exc), use_emoji=emoji, use_color=use_color)
        raise typer.Exit(code=1) from exc
    ctx.obj = CLIState(settings=settings, use_color=use_color, use_emoji=emoji)


add.register(app)
install.register(app)
ls.register(app)

__all__ = ["app"]
