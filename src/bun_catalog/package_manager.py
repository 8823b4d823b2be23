# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Adapter around the ``bun`` executable used for version lookups and installs."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

from .errors import VersionLookupError
from .process import run_command
from .specs import VersionSpec

DEFAULT_EXECUTABLE: Final[str] = "bun"
CATALOG_PROTOCOL: Final[str] = "catalog:"
DEV_FLAG: Final[str] = "-d"

CommandRunner = Callable[..., CompletedProcess[str]]


def catalog_reference(spec: VersionSpec) -> str:
    """Return the ``<name>@catalog:<catalog>`` dependency reference for ``spec``.

    The catalog part is left empty when ``spec`` targets the default catalog.
    """

    catalog = "" if spec.catalog_name is None else spec.catalog_name
    return f"{spec.package_name}@{CATALOG_PROTOCOL}{catalog}"


@dataclass(slots=True)
class PackageManager:
    """Run package-manager commands through an injectable runner."""

    executable: str = DEFAULT_EXECUTABLE
    runner: CommandRunner = field(default=run_command)
    timeout: float | None = None

    def latest_version(self, package_name: str, *, cwd: Path | None = None) -> str:
        """Return the latest published version of ``package_name``.

        Runs ``<executable> info <package> version`` and trims its output.

        Raises:
            SubprocessExecutionError: If the command fails.
            VersionLookupError: If the command succeeds but prints no version.
        """

        args = (self.executable, "info", package_name, "version")
        completed = self.runner(args, cwd=cwd, check=True, capture_output=True, timeout=self.timeout)
        version = (completed.stdout or "").strip()
        if not version:
            raise VersionLookupError(package_name)
        return version

    def add_command(self, spec: VersionSpec, *, save_dev: bool) -> tuple[str, ...]:
        """Return the argument vector that installs ``spec`` from its catalog."""

        flags = (DEV_FLAG,) if save_dev else ()
        return (self.executable, "add", *flags, catalog_reference(spec))

    def add_from_catalog(self, spec: VersionSpec, workspace: Path, *, save_dev: bool) -> None:
        """Install ``spec`` into ``workspace`` by catalog reference.

        The command output is captured and discarded; only failures surface.

        Raises:
            SubprocessExecutionError: If the package manager exits with a non-zero status.
            FileNotFoundError: If the executable cannot be found.
        """

        self.runner(
            self.add_command(spec, save_dev=save_dev),
            cwd=workspace,
            check=True,
            capture_output=True,
            timeout=self.timeout,
        )


__all__ = ["CommandRunner", "PackageManager", "catalog_reference"]
