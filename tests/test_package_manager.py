# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the package-manager adapter and the subprocess wrapper."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from bun_catalog.errors import VersionLookupError
from bun_catalog.package_manager import PackageManager, catalog_reference
from bun_catalog.process import SubprocessExecutionError, resolve_executable, run_command
from bun_catalog.specs import VersionSpec


def test_catalog_reference() -> None:
    assert catalog_reference(VersionSpec("react", "ui")) == "react@catalog:ui"
    assert catalog_reference(VersionSpec("@org/pkg")) == "@org/pkg@catalog:"


def test_latest_version_trims_output(make_runner) -> None:
    runner = make_runner(stdout="  18.3.1\n")
    manager = PackageManager(executable="bunx", runner=runner)

    assert manager.latest_version("react") == "18.3.1"
    assert runner.calls == [(("bunx", "info", "react", "version"), None)]


def test_latest_version_rejects_empty_output(make_runner) -> None:
    manager = PackageManager(runner=make_runner(stdout="\n"))

    with pytest.raises(VersionLookupError) as excinfo:
        manager.latest_version("react")

    message = str(excinfo.value)
    assert excinfo.value.package_name == "react"
    assert "react" in message
    assert "status" not in message


def test_add_command_includes_dev_flag() -> None:
    manager = PackageManager()

    assert manager.add_command(VersionSpec("a", "b"), save_dev=True) == ("bun", "add", "-d", "a@catalog:b")
    assert manager.add_command(VersionSpec("a"), save_dev=False) == ("bun", "add", "a@catalog:")


def test_add_from_catalog_passes_options(tmp_path: Path) -> None:
    captured: dict[str, object] = {}

    def runner(args, **kwargs):
        captured["args"] = tuple(args)
        captured.update(kwargs)
        return subprocess.CompletedProcess(args=list(args), returncode=0, stdout="done", stderr="")

    PackageManager(runner=runner, timeout=12.5).add_from_catalog(VersionSpec("a", "b"), tmp_path, save_dev=False)

    assert captured == {
        "args": ("bun", "add", "a@catalog:b"),
        "cwd": tmp_path,
        "check": True,
        "capture_output": True,
        "timeout": 12.5,
    }


def test_run_command_missing_executable() -> None:
    with pytest.raises(FileNotFoundError):
        run_command(["definitely-not-a-real-binary-for-tests"])


def test_run_command_rejects_empty_args() -> None:
    with pytest.raises(ValueError):
        run_command([])


def test_run_command_raises_on_failure(monkeypatch) -> None:
    monkeypatch.setattr("shutil.which", lambda cmd: f"/usr/bin/{cmd}")

    def fake_run(args, **kwargs):
        return subprocess.CompletedProcess(args=args, returncode=3, stdout="", stderr="boom")

    monkeypatch.setattr(subprocess, "run", fake_run)

    with pytest.raises(SubprocessExecutionError) as excinfo:
        run_command(["bun", "add", "x"], capture_output=True)

    assert excinfo.value.returncode == 3
    assert excinfo.value.command == ("bun", "add", "x")
    assert "boom" in str(excinfo.value)


def test_run_command_reports_timeout(monkeypatch) -> None:
    monkeypatch.setattr("shutil.which", lambda cmd: f"/usr/bin/{cmd}")

    def fake_run(args, **kwargs):
        raise subprocess.TimeoutExpired(cmd=args, timeout=kwargs["timeout"])

    monkeypatch.setattr(subprocess, "run", fake_run)

    completed = run_command(["bun", "info", "x"], check=False, timeout=1.0)

    assert completed.returncode == 124
    assert "timed out" in completed.stderr


def test_run_command_resolves_executable(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr("shutil.which", lambda cmd: f"/opt/bin/{cmd}")
    seen: dict[str, object] = {}

    def fake_run(args, **kwargs):
        seen["args"] = args
        seen["cwd"] = kwargs["cwd"]
        return subprocess.CompletedProcess(args=args, returncode=0, stdout="ok", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)

    completed = run_command(["bun", "--version"], cwd=tmp_path, capture_output=True)

    assert completed.stdout == "ok"
    assert seen == {"args": ["/opt/bin/bun", "--version"], "cwd": tmp_path}


def test_resolve_executable_accepts_absolute_path(tmp_path: Path) -> None:
    executable = tmp_path / "bun"
    executable.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    executable.chmod(0o755)

    assert resolve_executable(str(executable)) == str(executable)


def test_resolve_executable_rejects_non_executable_path(tmp_path: Path) -> None:
    plain = tmp_path / "bun"
    plain.write_text("", encoding="utf-8")
    plain.chmod(0o644)

    with pytest.raises(FileNotFoundError):
        resolve_executable(str(plain))
