"""Table styles: box-drawing glyphs and per-row-kind case formats."""

from __future__ import annotations

from dataclasses import dataclass, field

from pi.table.text import Format


@dataclass(frozen=True)
class BoxStyle:
    """Glyphs used to draw borders, separators and cell padding."""

    bottom_left: str = "+"
    bottom_right: str = "+"
    bottom_separator: str = "+"
    left: str = "|"
    left_separator: str = "+"
    middle_horizontal: str = "-"
    middle_separator: str = "+"
    middle_vertical: str = "|"
    padding_left: str = " "
    padding_right: str = " "
    right: str = "|"
    right_separator: str = "+"
    top_left: str = "+"
    top_right: str = "+"
    top_separator: str = "+"
    unfinished_row: str = " ~"
    # Replaces ``middle_vertical`` inside cell content; empty disables it.
    separator_substitute: str = "¦"


@dataclass(frozen=True)
class FormatOptions:
    """Case transforms per row kind."""

    header: Format = Format.UPPER
    footer: Format = Format.UPPER
    rows: Format = Format.DEFAULT


@dataclass(frozen=True)
class Style:
    """A named, immutable table style."""

    name: str = "StyleDefault"
    box: BoxStyle = field(default_factory=BoxStyle)
    format: FormatOptions = field(default_factory=FormatOptions)


def _box_drawing(
    horizontal: str,
    vertical: str,
    corners: str,
    tees: str,
    cross: str,
) -> BoxStyle:
    """Build a box style from glyph groups.

    *corners* is top-left, top-right, bottom-left, bottom-right. *tees* is
    top, bottom, left, right junction.
    """
    top_left, top_right, bottom_left, bottom_right = corners
    top_sep, bottom_sep, left_sep, right_sep = tees
    return BoxStyle(
        bottom_left=bottom_left,
        bottom_right=bottom_right,
        bottom_separator=bottom_sep,
        left=vertical,
        left_separator=left_sep,
        middle_horizontal=horizontal,
        middle_separator=cross,
        middle_vertical=vertical,
        right=vertical,
        right_separator=right_sep,
        top_left=top_left,
        top_right=top_right,
        top_separator=top_sep,
        unfinished_row=" ≈",
    )


STYLE_DEFAULT = Style()

STYLE_BOLD = Style(
    name="StyleBold",
    box=_box_drawing("━", "┃", "┏┓┗┛", "┳┻┣┫", "╋"),
)

STYLE_DOUBLE = Style(
    name="StyleDouble",
    box=_box_drawing("═", "║", "╔╗╚╝", "╦╩╠╣", "╬"),
)

STYLE_LIGHT = Style(
    name="StyleLight",
    box=_box_drawing("─", "│", "┌┐└┘", "┬┴├┤", "┼"),
)

STYLE_ROUNDED = Style(
    name="StyleRounded",
    box=_box_drawing("─", "│", "╭╮╰╯", "┬┴├┤", "┼"),
)

STYLES: dict[str, Style] = {
    style.name: style
    for style in (STYLE_DEFAULT, STYLE_BOLD, STYLE_DOUBLE, STYLE_LIGHT, STYLE_ROUNDED)
}
