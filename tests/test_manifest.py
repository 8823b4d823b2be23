# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for decoding, encoding and updating manifest documents."""

from __future__ import annotations

import json
from typing import Any

import pytest

from bun_catalog.errors import CatalogNotFound, DecodeError
from bun_catalog.manifest import decode_manifest, encode_manifest
from bun_catalog.repository import with_catalog_entry


def test_decode_exposes_catalogs(sample_manifest_text: str, sample_manifest: dict[str, Any]) -> None:
    document = decode_manifest(sample_manifest_text)

    assert document.workspaces.packages == ["packages/*"]
    assert document.workspaces.catalog == sample_manifest["workspaces"]["catalog"]
    assert document.workspaces.catalogs == sample_manifest["workspaces"]["catalogs"]
    assert document.extra_fields["scripts"] == {"build": "tsc", "test": "vitest"}
    assert document.workspaces.extra_fields == {"customField": "keep-me"}


def test_encode_reproduces_the_original_text(sample_manifest_text: str) -> None:
    assert encode_manifest(decode_manifest(sample_manifest_text)) == sample_manifest_text


def test_round_trip_preserves_key_order() -> None:
    raw = {
        "zeta": 1,
        "workspaces": {
            "nohoist": ["**/x"],
            "catalogs": {},
            "packages": ["apps/*"],
            "catalog": {"b": "1", "a": "2"},
        },
        "alpha": {"nested": [1, 2, {"k": None}]},
        "name": "ünïcode",
    }
    text = json.dumps(raw, indent=2, ensure_ascii=False) + "\n"

    encoded = encode_manifest(decode_manifest(text))

    assert encoded == text
    assert list(json.loads(encoded)) == ["zeta", "workspaces", "alpha", "name"]
    assert list(json.loads(encoded)["workspaces"]) == ["nohoist", "catalogs", "packages", "catalog"]


def test_encode_uses_two_space_indent_and_single_trailing_newline(sample_manifest_text: str) -> None:
    encoded = encode_manifest(decode_manifest(sample_manifest_text))

    assert encoded.endswith("}\n")
    assert not encoded.endswith("\n\n")
    assert encoded.splitlines()[1].startswith('  "name"')


def test_decode_rejects_invalid_json() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode_manifest("{not json", source="broken.json")

    assert "broken.json" in str(excinfo.value)
    assert len(excinfo.value.issues) == 1


def test_decode_requires_workspaces() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode_manifest('{"name": "x"}')

    assert any(issue.startswith("workspaces") for issue in excinfo.value.issues)


def test_decode_rejects_non_object_document() -> None:
    with pytest.raises(DecodeError):
        decode_manifest("[1, 2, 3]")


def test_decode_collects_every_issue() -> None:
    text = json.dumps(
        {
            "workspaces": {
                "packages": "packages/*",
                "catalog": {"ok": "1.0.0", "bad": 3},
                "catalogs": {"ui": {"react": ""}},
            }
        }
    )

    with pytest.raises(DecodeError) as excinfo:
        decode_manifest(text)

    issues = excinfo.value.issues
    assert len(issues) == 3
    assert any(issue.startswith("workspaces.packages") for issue in issues)
    assert any(issue.startswith("workspaces.catalog.bad") for issue in issues)
    assert any(issue.startswith("workspaces.catalogs.ui.react") for issue in issues)
    for issue in issues:
        assert issue in str(excinfo.value)


def test_decode_rejects_untrimmed_versions() -> None:
    text = json.dumps({"workspaces": {"packages": [], "catalog": {"a": " 1.0.0"}, "catalogs": {}}})

    with pytest.raises(DecodeError) as excinfo:
        decode_manifest(text)

    assert "whitespace" in str(excinfo.value)


def test_with_catalog_entry_adds_to_default_catalog(sample_manifest_text: str) -> None:
    document = decode_manifest(sample_manifest_text)

    updated = with_catalog_entry(document, None, "package-e", "^3.0.0")

    assert updated.workspaces.catalog["package-e"] == "^3.0.0"
    assert "package-e" not in document.workspaces.catalog
    assert updated.workspaces.catalogs == document.workspaces.catalogs


def test_with_catalog_entry_overwrites_existing_entry(sample_manifest_text: str) -> None:
    document = decode_manifest(sample_manifest_text)

    first = with_catalog_entry(document, "misc", "package-d", "3.0.0")
    second = with_catalog_entry(first, "misc", "package-d", "4.0.0")

    assert second.workspaces.catalogs["misc"] == {"package-d": "4.0.0"}
    assert second.workspaces.catalog == document.workspaces.catalog


def test_with_catalog_entry_keeps_other_catalogs_isolated(sample_manifest_text: str) -> None:
    document = decode_manifest(sample_manifest_text.replace('"misc": {', '"other": {"x": "1"},\n      "misc": {'))

    updated = with_catalog_entry(document, "misc", "package-f", "^4.0.0")

    assert updated.workspaces.catalogs["other"] == {"x": "1"}
    assert updated.workspaces.catalog == document.workspaces.catalog
    assert document.workspaces.catalogs["misc"] == {"package-d": "~2.0.0"}


def test_with_catalog_entry_preserves_unknown_fields(sample_manifest_text: str) -> None:
    document = decode_manifest(sample_manifest_text)

    encoded = json.loads(encode_manifest(with_catalog_entry(document, None, "package-e", "1")))
    original = json.loads(sample_manifest_text)

    assert {key: value for key, value in encoded.items() if key != "workspaces"} == {
        key: value for key, value in original.items() if key != "workspaces"
    }
    assert encoded["workspaces"]["customField"] == "keep-me"
    assert list(encoded) == list(original)


def test_with_catalog_entry_rejects_unknown_catalog(sample_manifest_text: str) -> None:
    document = decode_manifest(sample_manifest_text)

    with pytest.raises(CatalogNotFound) as excinfo:
        with_catalog_entry(document, "nonexistent", "a", "1")

    assert excinfo.value.name == "nonexistent"
