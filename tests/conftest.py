# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest

from bun_catalog.console import get_console_manager

SAMPLE_MANIFEST: dict[str, Any] = {
    "name": "my-monorepo",
    "version": "1.0.0",
    "private": True,
    "scripts": {"build": "tsc", "test": "vitest"},
    "workspaces": {
        "packages": ["packages/*"],
        "catalog": {
            "package-a": "^1.0.0",
            "package-b": "2.0.0",
            "@org/package-c": "^3.0.0",
        },
        "catalogs": {
            "misc": {"package-d": "~2.0.0"},
        },
        "customField": "keep-me",
    },
}


class RecordingRunner:
    """Command runner double that records invocations and replays canned output."""

    def __init__(self, stdout: str = "", returncode: int = 0) -> None:
        self.stdout = stdout
        self.returncode = returncode
        self.calls: list[tuple[tuple[str, ...], Path | None]] = []

    def __call__(self, args: Sequence[str], *, cwd: Path | None = None, **_: object) -> subprocess.CompletedProcess[str]:
        self.calls.append((tuple(args), cwd))
        return subprocess.CompletedProcess(args=list(args), returncode=self.returncode, stdout=self.stdout, stderr="")


@pytest.fixture
def sample_manifest() -> dict[str, Any]:
    """Return a fresh copy of the sample manifest structure."""

    return json.loads(json.dumps(SAMPLE_MANIFEST))


@pytest.fixture
def sample_manifest_text() -> str:
    """Return the sample manifest serialised the way ``bun`` writes it."""

    return json.dumps(SAMPLE_MANIFEST, indent=2) + "\n"


@pytest.fixture
def manifest_file(tmp_path: Path, sample_manifest_text: str) -> Path:
    """Write the sample manifest to ``tmp_path/package.json``."""

    path = tmp_path / "package.json"
    path.write_text(sample_manifest_text, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _fresh_consoles() -> None:
    """Rebind cached Rich consoles to the streams of the current test."""

    get_console_manager().clear()


@pytest.fixture
def make_runner() -> type[RecordingRunner]:
    """Return the :class:`RecordingRunner` factory."""

    return RecordingRunner
