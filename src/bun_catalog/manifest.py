# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typed model of the catalog-related parts of a ``package.json`` manifest.

Only ``workspaces.packages``, ``workspaces.catalog`` and ``workspaces.catalogs``
are interpreted. Every other key, at the top level or inside ``workspaces``,
is kept verbatim and re-emitted in its original position when the document is
encoded again.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Annotated, Any, Final, Self, TypeAlias

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    PrivateAttr,
    ValidationError,
    ValidatorFunctionWrapHandler,
    model_validator,
)

from .errors import DecodeError

MANIFEST_FILENAME: Final[str] = "package.json"
JSON_INDENT: Final[int] = 2


def _require_trimmed(value: str) -> str:
    if not value:
        raise ValueError("must be a non-empty string")
    if value != value.strip():
        raise ValueError("must not have leading or trailing whitespace")
    return value


NonEmptyTrimmedStr: TypeAlias = Annotated[str, AfterValidator(_require_trimmed)]

PackageName: TypeAlias = NonEmptyTrimmedStr
PackageVersion: TypeAlias = NonEmptyTrimmedStr
CatalogName: TypeAlias = NonEmptyTrimmedStr
WorkspacePath: TypeAlias = NonEmptyTrimmedStr

Catalog: TypeAlias = dict[PackageName, PackageVersion]
Catalogs: TypeAlias = dict[CatalogName, Catalog]


class _OrderPreservingModel(BaseModel):
    """Model that keeps unknown keys and remembers the order keys were read in."""

    model_config = ConfigDict(extra="allow")

    _key_order: tuple[str, ...] = PrivateAttr(default=())

    @model_validator(mode="wrap")
    @classmethod
    def _capture_key_order(cls, data: Any, handler: ValidatorFunctionWrapHandler) -> Self:
        model = handler(data)
        if isinstance(data, Mapping):
            model._key_order = tuple(str(key) for key in data)
        return model

    def to_json_data(self) -> dict[str, Any]:
        """Return a JSON-ready mapping with keys in their original order.

        Returns:
            dict[str, Any]: Known fields and preserved unknown keys. Keys that were
            not present when the model was decoded are appended at the end.
        """

        values: dict[str, Any] = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            values[name] = value.to_json_data() if isinstance(value, _OrderPreservingModel) else value
        values.update(self.__pydantic_extra__ or {})

        ordered = {key: values[key] for key in self._key_order if key in values}
        ordered.update((key, value) for key, value in values.items() if key not in ordered)
        return ordered

    @property
    def extra_fields(self) -> dict[str, Any]:
        """Return the unrecognised keys captured while decoding."""

        return dict(self.__pydantic_extra__ or {})


class Workspaces(_OrderPreservingModel):
    """The ``workspaces`` record of a monorepo manifest."""

    packages: list[NonEmptyTrimmedStr]
    catalog: Catalog
    catalogs: Catalogs


class ManifestDocument(_OrderPreservingModel):
    """A ``package.json`` document carrying a ``workspaces`` record."""

    workspaces: Workspaces


def _format_location(location: tuple[int | str, ...]) -> str:
    if not location:
        return "<root>"
    return ".".join(str(part) for part in location)


def _validation_issues(exc: ValidationError) -> list[str]:
    return [f"{_format_location(error['loc'])}: {error['msg']}" for error in exc.errors(include_url=False)]


def decode_manifest(text: str, *, source: str = MANIFEST_FILENAME) -> ManifestDocument:
    """Parse and validate manifest ``text``.

    Args:
        text: Raw JSON document.
        source: Label used in error messages, usually the file path.

    Returns:
        ManifestDocument: Validated document retaining all unknown fields.

    Raises:
        DecodeError: If ``text`` is not valid JSON or the ``workspaces`` record is
            missing or malformed. All validation issues are reported together.
    """

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError([f"line {exc.lineno}, column {exc.colno}: {exc.msg}"], source=source) from exc
    try:
        return ManifestDocument.model_validate(raw)
    except ValidationError as exc:
        raise DecodeError(_validation_issues(exc), source=source) from exc


def encode_manifest(document: ManifestDocument) -> str:
    """Serialise ``document`` with two-space indentation and a trailing newline."""

    return json.dumps(document.to_json_data(), indent=JSON_INDENT, ensure_ascii=False) + "\n"


__all__ = [
    "MANIFEST_FILENAME",
    "Catalog",
    "CatalogName",
    "Catalogs",
    "ManifestDocument",
    "PackageName",
    "PackageVersion",
    "WorkspacePath",
    "Workspaces",
    "decode_manifest",
    "encode_manifest",
]
