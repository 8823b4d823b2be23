# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Parsers for the compact package references accepted on the command line.

Two grammars are supported:

``name[@version]``
    Used by ``add``. Scoped names (``@scope/name``) keep their leading ``@``;
    the version separator is searched for after the scope slash.

``name[:catalog]``
    Used by ``install``. The catalog part selects a named catalog; without it
    the default catalog is referenced.

Absent parts are represented by ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .errors import ParseError

PACKAGE_SPEC_KIND: Final[str] = "package spec"
VERSION_SPEC_KIND: Final[str] = "version spec"
CATALOG_NAME_KIND: Final[str] = "catalog name"
VERSION_SEPARATOR: Final[str] = "@"
CATALOG_SEPARATOR: Final[str] = ":"


def _require_text(kind: str, raw: str) -> str:
    text = raw.strip()
    if not text:
        raise ParseError(kind, raw, "expected a non-empty string")
    return text


def _require_part(kind: str, raw: str, part: str, label: str) -> str:
    value = part.strip()
    if not value:
        raise ParseError(kind, raw, f"{label} must not be empty")
    return value


@dataclass(frozen=True, slots=True)
class PackageSpec:
    """Package name with an optional pinned version."""

    package_name: str
    package_version: str | None = None

    def encode(self) -> str:
        """Return the ``name[@version]`` form of the spec."""

        if self.package_version is None:
            return self.package_name
        return f"{self.package_name}{VERSION_SEPARATOR}{self.package_version}"

    def __str__(self) -> str:
        return self.encode()


@dataclass(frozen=True, slots=True)
class VersionSpec:
    """Package name with an optional catalog reference."""

    package_name: str
    catalog_name: str | None = None

    def encode(self) -> str:
        """Return the ``name[:catalog]`` form of the spec."""

        if self.catalog_name is None:
            return self.package_name
        return f"{self.package_name}{CATALOG_SEPARATOR}{self.catalog_name}"

    def __str__(self) -> str:
        return self.encode()


def _version_separator_index(text: str) -> int:
    if text.startswith(VERSION_SEPARATOR):
        return text.find(VERSION_SEPARATOR, max(text.find("/"), 1))
    return text.find(VERSION_SEPARATOR)


def parse_package_spec(raw: str) -> PackageSpec:
    """Parse ``raw`` as ``name[@version]``.

    Args:
        raw: Text supplied by the user, e.g. ``react@^18.0.0`` or ``@scope/pkg``.

    Returns:
        PackageSpec: Parsed spec. ``package_version`` is ``None`` when the input
        carries no interior version separator.

    Raises:
        ParseError: If ``raw`` is empty or whitespace only.
    """

    text = _require_text(PACKAGE_SPEC_KIND, raw)
    index = _version_separator_index(text)
    if 0 < index < len(text) - 1:
        name = _require_part(PACKAGE_SPEC_KIND, raw, text[:index], "package name")
        version = _require_part(PACKAGE_SPEC_KIND, raw, text[index + 1 :], "package version")
        return PackageSpec(package_name=name, package_version=version)
    return PackageSpec(package_name=text)


def parse_catalog_name(raw: str) -> str:
    """Return ``raw`` trimmed, raising :class:`ParseError` when it is empty."""

    return _require_text(CATALOG_NAME_KIND, raw)


def parse_version_spec(raw: str) -> VersionSpec:
    """Parse ``raw`` as ``name[:catalog]``.

    Args:
        raw: Text supplied by the user, e.g. ``react:ui`` or ``react``.

    Returns:
        VersionSpec: Parsed spec with ``catalog_name`` set to ``None`` when no
        catalog was given. Input with an empty catalog part (``pkg:``) is kept
        whole as the package name.

    Raises:
        ParseError: If ``raw`` is empty or the package name before the separator is empty.
    """

    text = _require_text(VERSION_SPEC_KIND, raw)
    name, _, catalog = text.partition(CATALOG_SEPARATOR)
    package_name = _require_part(VERSION_SPEC_KIND, raw, name, "package name")
    catalog_name = catalog.strip()
    if not catalog_name:
        return VersionSpec(package_name=text)
    return VersionSpec(package_name=package_name, catalog_name=catalog_name)


__all__ = [
    "PackageSpec",
    "VersionSpec",
    "parse_catalog_name",
    "parse_package_spec",
    "parse_version_spec",
]
