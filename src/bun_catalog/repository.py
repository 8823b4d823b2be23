# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Read, look up and write catalogs stored in the workspace manifest."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import CatalogNotFound
from .manifest import MANIFEST_FILENAME, Catalog, ManifestDocument, decode_manifest, encode_manifest

LOGGER = logging.getLogger(__name__)


def default_manifest_path(cwd: Path | None = None) -> Path:
    """Return ``<cwd>/package.json``."""

    return (cwd if cwd is not None else Path.cwd()) / MANIFEST_FILENAME


def load_manifest(path: Path) -> ManifestDocument:
    """Read and decode the manifest at ``path``.

    Args:
        path: Location of the manifest to read.

    Returns:
        ManifestDocument: Decoded document.

    Raises:
        OSError: If the file cannot be read.
        DecodeError: If the file content is not a valid manifest.
    """

    LOGGER.debug("Reading manifest from %s", path)
    text = path.read_text(encoding="utf-8")
    return decode_manifest(text, source=str(path))


def save_manifest(document: ManifestDocument, *, cwd: Path | None = None) -> Path:
    """Write ``document`` to the manifest of the current working directory.

    The destination is always ``<cwd>/package.json``, even when the document was
    loaded from another path.

    Args:
        document: Document to persist.
        cwd: Directory override; defaults to :func:`pathlib.Path.cwd`.

    Returns:
        Path: The file that was written.

    Raises:
        OSError: If the file cannot be written.
    """

    target = default_manifest_path(cwd)
    LOGGER.debug("Writing manifest to %s", target)
    target.write_text(encode_manifest(document), encoding="utf-8")
    return target


def resolve_catalog(document: ManifestDocument, name: str | None) -> Catalog:
    """Return the catalog called ``name``, or the default catalog when ``None``.

    Raises:
        CatalogNotFound: If ``name`` is given and no such named catalog exists.
    """

    if name is None:
        return document.workspaces.catalog
    catalog = document.workspaces.catalogs.get(name)
    if catalog is None:
        raise CatalogNotFound(name)
    return catalog


def with_catalog_entry(
    document: ManifestDocument,
    catalog_name: str | None,
    package_name: str,
    version: str,
) -> ManifestDocument:
    """Return a copy of ``document`` with ``package_name`` pinned to ``version``.

    Args:
        document: Source document; it is left untouched.
        catalog_name: Named catalog to update, ``None`` for the default catalog.
        package_name: Package entry to add or overwrite.
        version: Version string recorded for the package.

    Returns:
        ManifestDocument: New document differing only in the target catalog.

    Raises:
        CatalogNotFound: If ``catalog_name`` names a catalog that does not exist.
    """

    entries = {**resolve_catalog(document, catalog_name), package_name: version}
    workspaces = document.workspaces
    if catalog_name is None:
        update: dict[str, object] = {"catalog": entries}
    else:
        update = {"catalogs": {**workspaces.catalogs, catalog_name: entries}}
    return document.model_copy(update={"workspaces": workspaces.model_copy(update=update)})


__all__ = [
    "default_manifest_path",
    "load_manifest",
    "resolve_catalog",
    "save_manifest",
    "with_catalog_entry",
]
