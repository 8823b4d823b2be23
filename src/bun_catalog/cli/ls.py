# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``bun-catalog ls`` command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..console import terminal_columns
from ..logging import print_text
from ..operations import list_catalogs
from ..repository import default_manifest_path
from ..specs import parse_catalog_name
from .shared import get_state, report_failures


def ls_command(
    ctx: typer.Context,
    catalog: Annotated[
        str | None,
        typer.Argument(help="The catalog to list the packages from. Example: ui"),
    ] = None,
    package_json: Annotated[
        Path | None,
        typer.Option(
            "--package-json",
            dir_okay=False,
            help="The path to the package.json file to use. Defaults to ./package.json.",
        ),
    ] = None,
) -> None:
    """List all packages in the catalog."""

    state = get_state(ctx)
    settings = state.settings
    with report_failures(state):
        catalog_name = None if catalog is None else parse_catalog_name(catalog)
        listing = list_catalogs(
            package_json if package_json is not None else default_manifest_path(),
            catalog_name,
            terminal_width=terminal_columns(settings.fallback_width),
            min_width=settings.min_width,
            max_width=settings.max_width,
        )
    print_text(listing, use_color=state.use_color, use_emoji=state.use_emoji)


def register(app: typer.Typer) -> None:
    """Register the ls command with ``app``."""

    app.command(name="ls")(ls_command)


__all__ = ["ls_command", "register"]
