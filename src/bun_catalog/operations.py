# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Use cases behind the ``add``, ``ls`` and ``install`` commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from rich.text import Text

from .manifest import ManifestDocument
from .package_manager import PackageManager
from .printer import CatalogSection, clamp_line_width, render_catalogs
from .repository import load_manifest, resolve_catalog, save_manifest, with_catalog_entry
from .specs import PackageSpec, VersionSpec

LOGGER = logging.getLogger(__name__)

DEFAULT_CATALOG_LABEL: Final[str] = "default"


@dataclass(frozen=True, slots=True)
class AddedPackage:
    """Confirmation emitted after a package was pinned in a catalog."""

    package_name: str
    version: str
    catalog_name: str | None

    @property
    def catalog_label(self) -> str:
        """Return the catalog name, or ``"default"`` for the default catalog."""

        return DEFAULT_CATALOG_LABEL if self.catalog_name is None else self.catalog_name


@dataclass(frozen=True, slots=True)
class InstalledPackage:
    """Confirmation emitted after a workspace installed a catalog package."""

    package_name: str
    catalog_name: str | None
    workspace_path: Path
    save_dev: bool


def add_package_to_catalog(
    manifest_path: Path,
    spec: PackageSpec,
    catalog_name: str | None,
    *,
    package_manager: PackageManager,
    cwd: Path | None = None,
) -> AddedPackage:
    """Pin ``spec`` in a catalog and write the manifest back.

    The version lookup, when the spec carries no version, happens before the
    catalog is resolved and before anything is written. A missing catalog aborts
    the operation with nothing written.

    Args:
        manifest_path: Manifest to read.
        spec: Package to add; its version is looked up when absent.
        catalog_name: Named catalog to update, ``None`` for the default catalog.
        package_manager: Collaborator used for the latest-version lookup.
        cwd: Directory whose ``package.json`` receives the result.

    Returns:
        AddedPackage: Confirmation describing the recorded entry.

    Raises:
        CatalogNotFound: If ``catalog_name`` does not exist.
        DecodeError: If the manifest is malformed.
        OSError: If the manifest cannot be read or written.
        SubprocessExecutionError: If the version lookup fails.
        VersionLookupError: If the version lookup reports no version.
    """

    document = load_manifest(manifest_path)
    if spec.package_version is None:
        version = package_manager.latest_version(spec.package_name)
        LOGGER.debug("Resolved latest version of %s to %s", spec.package_name, version)
    else:
        version = spec.package_version
    updated = with_catalog_entry(document, catalog_name, spec.package_name, version)
    save_manifest(updated, cwd=cwd)
    return AddedPackage(package_name=spec.package_name, version=version, catalog_name=catalog_name)


def collect_catalog_sections(document: ManifestDocument, catalog_name: str | None) -> list[CatalogSection]:
    """Return the catalogs to list.

    Without ``catalog_name`` the default catalog comes first, followed by every
    named catalog ordered by name. Otherwise only the requested catalog is
    returned.

    Raises:
        CatalogNotFound: If ``catalog_name`` does not exist.
    """

    if catalog_name is not None:
        return [CatalogSection(label=catalog_name, catalog=resolve_catalog(document, catalog_name))]
    named = sorted(document.workspaces.catalogs.items(), key=lambda item: item[0])
    return [
        CatalogSection(label=DEFAULT_CATALOG_LABEL, catalog=document.workspaces.catalog),
        *(CatalogSection(label=name, catalog=catalog) for name, catalog in named),
    ]


def list_catalogs(
    manifest_path: Path,
    catalog_name: str | None,
    *,
    terminal_width: int,
    min_width: int | None = None,
    max_width: int | None = None,
) -> Text:
    """Render the catalogs of the manifest at ``manifest_path``.

    Args:
        manifest_path: Manifest to read.
        catalog_name: Single catalog to list, ``None`` for all of them.
        terminal_width: Reported terminal width; clamped before rendering.
        min_width: Lower clamp bound override.
        max_width: Upper clamp bound override.

    Returns:
        Text: Rendered listing.

    Raises:
        CatalogNotFound: If ``catalog_name`` does not exist.
        DecodeError: If the manifest is malformed.
        OSError: If the manifest cannot be read.
    """

    document = load_manifest(manifest_path)
    sections = collect_catalog_sections(document, catalog_name)
    bounds: dict[str, int] = {}
    if min_width is not None:
        bounds["minimum"] = min_width
    if max_width is not None:
        bounds["maximum"] = max_width
    return render_catalogs(sections, clamp_line_width(terminal_width, **bounds))


def install_package_to_workspace(
    spec: VersionSpec,
    workspace: Path,
    *,
    save_dev: bool,
    package_manager: PackageManager,
) -> InstalledPackage:
    """Install ``spec`` into ``workspace`` by catalog reference.

    The manifest is not consulted; the package manager reports unknown
    catalogs or packages itself.

    Raises:
        SubprocessExecutionError: If the package manager fails.
        FileNotFoundError: If the package manager executable is missing.
    """

    package_manager.add_from_catalog(spec, workspace, save_dev=save_dev)
    return InstalledPackage(
        package_name=spec.package_name,
        catalog_name=spec.catalog_name,
        workspace_path=workspace,
        save_dev=save_dev,
    )


__all__ = [
    "DEFAULT_CATALOG_LABEL",
    "AddedPackage",
    "InstalledPackage",
    "add_package_to_catalog",
    "collect_catalog_sections",
    "install_package_to_workspace",
    "list_catalogs",
]
