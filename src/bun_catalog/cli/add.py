# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``bun-catalog add`` command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..logging import print_text
from ..operations import add_package_to_catalog
from ..printer import render_added
from ..repository import default_manifest_path
from ..specs import parse_catalog_name, parse_package_spec
from .shared import get_state, report_failures


def add_command(
    ctx: typer.Context,
    package_spec: Annotated[
        str,
        typer.Argument(metavar="PACKAGE-SPEC", help="The package to add to the catalog. Example: react@latest"),
    ],
    catalog: Annotated[
        str | None,
        typer.Argument(help="The catalog to add the package to. Example: ui"),
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
    """Add a package to the catalog."""

    state = get_state(ctx)
    with report_failures(state):
        spec = parse_package_spec(package_spec)
        catalog_name = None if catalog is None else parse_catalog_name(catalog)
        event = add_package_to_catalog(
            package_json if package_json is not None else default_manifest_path(),
            spec,
            catalog_name,
            package_manager=state.package_manager(),
        )
    print_text(render_added(event), use_color=state.use_color, use_emoji=state.use_emoji)


def register(app: typer.Typer) -> None:
    """Register the add command with ``app``."""

    app.command(name="add")(add_command)


__all__ = ["add_command", "register"]
