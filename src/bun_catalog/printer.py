# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Box-drawing renderer for catalog listings and one-line confirmations.

All functions are pure and return :class:`rich.text.Text`; the plain text of the
result is fully determined by the inputs. Styles are decorative spans only.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from rich.text import Text

if TYPE_CHECKING:
    from .operations import AddedPackage, InstalledPackage

MIN_LINE_WIDTH: Final[int] = 30
MAX_LINE_WIDTH: Final[int] = 80

CHECK: Final[str] = "✓"
TOP_LEFT: Final[str] = "╭"
TOP_RIGHT: Final[str] = "╮"
BOTTOM_LEFT: Final[str] = "╰"
BOTTOM_RIGHT: Final[str] = "╯"
H_BAR: Final[str] = "─"
V_BAR: Final[str] = "│"
MIDDLE_LEFT: Final[str] = "├"
MIDDLE_RIGHT: Final[str] = "┤"
DOT: Final[str] = "·"

EMPTY_LABEL: Final[str] = "(empty)"
DEV_DEPENDENCY_LABEL: Final[str] = "(as a dev dependency)"

# border + padding on both sides of a row
ROW_CHROME: Final[int] = 6
ROW_PADDING: Final[str] = "  "

BORDER_STYLE: Final[str] = "bright_black"
LABEL_STYLE: Final[str] = "bold blue"
PACKAGE_STYLE: Final[str] = "italic"
VERSION_STYLE: Final[str] = "bright_cyan"
DOT_STYLE: Final[str] = "bright_black"
DIM_STYLE: Final[str] = "italic bright_black"
COUNT_STYLE: Final[str] = "white"


@dataclass(frozen=True, slots=True)
class CatalogSection:
    """A labelled catalog rendered as one block of the listing."""

    label: str
    catalog: Mapping[str, str]

    def sorted_entries(self) -> list[tuple[str, str]]:
        """Return ``(package, version)`` pairs ordered by package name."""

        return sorted(self.catalog.items(), key=lambda item: item[0])


def clamp_line_width(width: int, *, minimum: int = MIN_LINE_WIDTH, maximum: int = MAX_LINE_WIDTH) -> int:
    """Clamp ``width`` into ``[minimum, maximum]``."""

    return max(minimum, min(width, maximum))


def _header(label: str, count: int, line_width: int, *, first: bool) -> Text:
    left, right = (TOP_LEFT, TOP_RIGHT) if first else (MIDDLE_LEFT, MIDDLE_RIGHT)
    count_text = f"({count})"
    used = len(left) + len(H_BAR) + 1 + len(label) + 1 + len(count_text) + 1 + len(right)
    fill = max(0, line_width - used)
    return Text.assemble(
        (f"{left}{H_BAR} ", BORDER_STYLE),
        (label, LABEL_STYLE),
        " ",
        (count_text, COUNT_STYLE),
        (f" {H_BAR * fill}{right}", BORDER_STYLE),
    )


def _row(content: Text) -> Text:
    return Text.assemble((V_BAR, BORDER_STYLE), ROW_PADDING, content, ROW_PADDING, (V_BAR, BORDER_STYLE))


def _dot_leader(gap: int) -> str:
    if gap > 2:
        return f" {DOT * (gap - 2)} "
    return " " * max(1, gap)


def _package_row(package: str, version: str, line_width: int) -> Text:
    gap = line_width - ROW_CHROME - len(package) - len(version)
    return _row(
        Text.assemble(
            (package, PACKAGE_STYLE),
            (_dot_leader(gap), DOT_STYLE),
            (version, VERSION_STYLE),
        )
    )


def _empty_row(line_width: int) -> Text:
    padding = max(0, line_width - ROW_CHROME - len(EMPTY_LABEL))
    return _row(Text.assemble((EMPTY_LABEL, DIM_STYLE), " " * padding))


def _footer(line_width: int) -> Text:
    return Text(f"{BOTTOM_LEFT}{H_BAR * max(0, line_width - 2)}{BOTTOM_RIGHT}", style=BORDER_STYLE)


def render_catalogs(sections: Sequence[CatalogSection], line_width: int) -> Text:
    """Render ``sections`` as a single box, one block per catalog.

    Args:
        sections: Catalogs to render, in display order.
        line_width: Total width of every line in the box.

    Returns:
        Text: Multi-line styled text without a trailing newline.
    """

    lines: list[Text] = []
    for index, section in enumerate(sections):
        entries = section.sorted_entries()
        lines.append(_header(section.label, len(entries), line_width, first=index == 0))
        if not entries:
            lines.append(_empty_row(line_width))
            continue
        lines.extend(_package_row(package, version, line_width) for package, version in entries)
    lines.append(_footer(line_width))
    return Text("\n").join(lines)


def render_added(event: AddedPackage) -> Text:
    """Return ``✓ Added <name>@<version> to the <catalog> catalog``."""

    return Text.assemble(
        (CHECK, "bright_green"),
        " Added ",
        (event.package_name, "bright_cyan"),
        ("@", DIM_STYLE),
        (event.version, "white"),
        " to the ",
        (event.catalog_label, "green"),
        " catalog",
    )


def render_installed(event: InstalledPackage) -> Text:
    """Return ``✓ Installed <name>[@<catalog>] to the <path> workspace``.

    Dev installs end with ``(as a dev dependency)``.
    """

    text = Text.assemble((CHECK, "bright_green"), " Installed ", (event.package_name, "bright_cyan"))
    if event.catalog_name is not None:
        text.append("@", style=DIM_STYLE)
        text.append(event.catalog_name, style="white")
    text.append(" to the ")
    text.append(str(event.workspace_path), style="green")
    text.append(" workspace")
    if event.save_dev:
        text.append(f" {DEV_DEPENDENCY_LABEL}")
    return text


__all__ = [
    "MAX_LINE_WIDTH",
    "MIN_LINE_WIDTH",
    "CatalogSection",
    "clamp_line_width",
    "render_added",
    "render_catalogs",
    "render_installed",
]
