# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (state, errors, package-manager wiring)."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

import typer

from ..config import CatalogSettings, ConfigError
from ..errors import CatalogError
from ..logging import fail
from ..package_manager import PackageManager
from ..process import SubprocessExecutionError


@dataclass(slots=True)
class CLIState:
    """Presentation flags and settings shared by every sub-command."""

    settings: CatalogSettings = field(default_factory=CatalogSettings)
    use_color: bool | None = None
    use_emoji: bool = True

    def package_manager(self) -> PackageManager:
        """Return a package manager configured from the settings."""

        return PackageManager(
            executable=self.settings.package_manager,
            timeout=self.settings.command_timeout,
        )


def get_state(ctx: typer.Context) -> CLIState:
    """Return the :class:`CLIState` stored on the root context."""

    state = ctx.find_object(CLIState)
    if state is None:
        state = CLIState()
        ctx.obj = state
    return state


@contextmanager
def report_failures(state: CLIState) -> Iterator[None]:
    """Print known failures to stderr and exit with a non-zero status."""

    try:
        yield
    except (CatalogError, ConfigError, SubprocessExecutionError, OSError) as exc:
        fail(str(exc), use_emoji=state.use_emoji, use_color=state.use_color)
        raise typer.Exit(code=1) from exc


__all__ = ["CLIState", "get_state", "report_failures"]
