# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``bun-catalog install`` command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..logging import print_text
from ..operations import install_package_to_workspace
from ..printer import render_installed
from ..specs import parse_version_spec
from .shared import get_state, report_failures


def install_command(
    ctx: typer.Context,
    version_spec: Annotated[
        str,
        typer.Argument(metavar="VERSION-SPEC", help="The package to install from the catalog. Example: react:ui"),
    ],
    workspace: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=False,
            help="The path to the workspace to install the package to. Example: apps/web",
        ),
    ],
    save_dev: Annotated[
        bool,
        typer.Option("--save-dev", "-d", help="Save the package as a dev dependency."),
    ] = False,
) -> None:
    """Install a package from the catalog to a specific workspace."""

    state = get_state(ctx)
    with report_failures(state):
        spec = parse_version_spec(version_spec)
        event = install_package_to_workspace(
            spec,
            workspace,
            save_dev=save_dev,
            package_manager=state.package_manager(),
        )
    print_text(render_installed(event), use_color=state.use_color, use_emoji=state.use_emoji)


def register(app: typer.Typer) -> None:
    """Register the install command with ``app``."""

    app.command(name="install")(install_command)


__all__ = ["install_command", "register"]
