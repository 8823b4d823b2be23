# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run package-manager executables and turn their failures into exceptions."""

from __future__ import annotations

import logging
import shutil

# Bandit: commands are passed as argument lists; ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

LOGGER = logging.getLogger(__name__)

TIMEOUT_RETURNCODE: Final[int] = 124


class SubprocessExecutionError(RuntimeError):
    """Raised when a package-manager command exits with a non-zero status."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        detail = (stderr or "").strip() or "<none>"
        super().__init__(f"Command '{' '.join(self.command)}' exited with status {returncode}. stderr: {detail}")


def resolve_executable(name: str) -> str:
    """Return the path ``name`` resolves to on ``PATH``.

    Absolute and relative paths to an executable file resolve to themselves.

    Raises:
        FileNotFoundError: If no executable called ``name`` can be found.
    """

    resolved = shutil.which(name)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{name}' was not found on PATH")
    return resolved


def _as_text(value: str | bytes | None) -> str:
    if isinstance(value, bytes):
        return value.decode(errors="ignore")
    return value or ""


def _timed_out(argv: list[str], exc: subprocess.TimeoutExpired, timeout: float | None) -> CompletedProcess[str]:
    note = f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out"
    stderr = _as_text(exc.stderr)
    return CompletedProcess(
        args=argv,
        returncode=TIMEOUT_RETURNCODE,
        stdout=_as_text(exc.stdout),
        stderr=f"{stderr}\n{note}" if stderr else note,
    )


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    check: bool = True,
    capture_output: bool = False,
    timeout: float | None = None,
) -> CompletedProcess[str]:
    """Run ``args`` with text-mode pipes, resolving the executable on ``PATH`` first.

    Args:
        args: Executable followed by its arguments, e.g. ``("bun", "info", "react", "version")``.
        cwd: Working directory for the command, the current directory when ``None``.
        check: Raise when the command exits with a non-zero status.
        capture_output: Capture stdout and stderr instead of inheriting them.
        timeout: Seconds to wait before the command is killed; a timeout is
            reported as exit status ``124``.

    Returns:
        CompletedProcess[str]: The finished command.

    Raises:
        ValueError: If ``args`` is empty.
        FileNotFoundError: If the executable cannot be found.
        SubprocessExecutionError: If ``check`` is set and the command fails or times out.
    """

    if not args:
        raise ValueError("a command needs at least an executable")
    executable, *rest = args
    argv = [resolve_executable(executable), *rest]
    LOGGER.debug("Running %s (cwd=%s)", " ".join(args), cwd or ".")

    try:
        completed = subprocess.run(  # nosec B603
            argv,
            cwd=cwd,
            check=False,
            capture_output=capture_output,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as exc:
        completed = _timed_out(argv, exc, timeout)

    if check and completed.returncode != 0:
        raise SubprocessExecutionError(args, completed.returncode, completed.stdout, completed.stderr)
    return completed


__all__ = ["SubprocessExecutionError", "resolve_executable", "run_command"]
