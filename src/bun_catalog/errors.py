# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by catalog operations."""

from __future__ import annotations

from collections.abc import Iterable


class CatalogError(RuntimeError):
    """Base class for failures surfaced by catalog operations."""


class ParseError(CatalogError, ValueError):
    """Raised when a user-supplied package or version spec cannot be parsed."""

    def __init__(self, kind: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid {kind} {value!r}: {reason}")
        self.kind = kind
        self.value = value
        self.reason = reason


class DecodeError(CatalogError):
    """Raised when a manifest document is not valid JSON or fails validation.

    Every validation issue found in the document is collected in ``issues`` so
    the user can fix them in a single pass.
    """

    def __init__(self, issues: Iterable[str], *, source: str = "package.json") -> None:
        self.issues = tuple(issues)
        self.source = source
        lines = [f"Invalid {source}:"]
        lines.extend(f"  {issue}" for issue in self.issues)
        super().__init__("\n".join(lines))


class CatalogNotFound(CatalogError, LookupError):
    """Raised when a named catalog is absent from the manifest."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            "\n".join(
                [
                    f'The catalog "{name}" was not found.',
                    "Please ensure that the catalog exists and is properly configured in your package.json file.",
                ]
            )
        )


class VersionLookupError(CatalogError):
    """Raised when the package manager reports no version for a package."""

    def __init__(self, package_name: str) -> None:
        self.package_name = package_name
        super().__init__(f'Could not determine the latest version of "{package_name}": the package manager reported none.')


__all__ = ["CatalogError", "CatalogNotFound", "DecodeError", "ParseError", "VersionLookupError"]
