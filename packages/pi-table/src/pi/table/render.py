"""Grid composition and row-length truncation for the bordered text render."""

from __future__ import annotations

import logging

from pi.table.cell import DEFAULT_TAB_WIDTH, normalize
from pi.table.layout import Layout, LayoutRow, reflow_layout
from pi.table.style import BoxStyle
from pi.table.text import Align
from pi.table.utils import truncate_to_width, visible_width, wrap_hard

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------


def _horizontal_line(
    widths: list[int],
    box: BoxStyle,
    left: str,
    junction: str,
    right: str,
    border: bool,
) -> str:
    pad = visible_width(box.padding_left) + visible_width(box.padding_right)
    fill = junction.join(box.middle_horizontal * (w + pad) for w in widths)
    if not border:
        return fill
    return left + fill + right


def top_border(widths: list[int], box: BoxStyle) -> str:
    return _horizontal_line(widths, box, box.top_left, box.top_separator, box.top_right, True)


def bottom_border(widths: list[int], box: BoxStyle) -> str:
    return _horizontal_line(
        widths, box, box.bottom_left, box.bottom_separator, box.bottom_right, True
    )


def separator(widths: list[int], box: BoxStyle, border: bool = True) -> str:
    return _horizontal_line(
        widths, box, box.left_separator, box.middle_separator, box.right_separator, border
    )


def render_row(row: LayoutRow, layout: Layout) -> list[str]:
    """Render one logical row to its physical lines.

    Every cell is padded vertically to the row height, aligned horizontally
    to its column width and then coloured.
    """
    box = layout.config.style.box
    border = not layout.config.disable_border
    height = row.height

    columns_text: list[list[str]] = []
    for column, cell in zip(layout.columns, row.cells):
        align = column.align_for(row, cell)
        colors = column.colors_for(row.kind)
        lines = column.valign.apply(list(cell.lines), height)
        columns_text.append([colors.sprint(align.apply(line, column.width)) for line in lines])

    out: list[str] = []
    for line_idx in range(height):
        parts = [
            box.padding_left + column_lines[line_idx] + box.padding_right
            for column_lines in columns_text
        ]
        line = box.middle_vertical.join(parts)
        if border:
            line = box.left + line + box.right
        out.append(line)
    return out


def caption_lines(caption: str, width: int, tab_width: int = DEFAULT_TAB_WIDTH) -> list[str]:
    """Split *caption* like cell text, then wrap and pad each line to *width*."""
    lines: list[str] = []
    for line in normalize(caption, tab_width=tab_width, separator="").lines:
        lines.extend(Align.LEFT.apply(chunk, width) for chunk in wrap_hard(line, width))
    return lines


def compose_lines(layout: Layout) -> list[str]:
    """Compose every physical line of the grid, caption first.

    *layout* must already be reflowed.
    """
    if not layout.columns or not layout.rows:
        return []

    config = layout.config
    box = config.style.box
    border = not config.disable_border
    widths = layout.widths

    lines: list[str] = []
    if border:
        lines.append(top_border(widths, box))

    for row in layout.header:
        lines.extend(render_row(row, layout))
    if layout.header and (layout.body or layout.footer):
        lines.append(separator(widths, box, border))

    for idx, row in enumerate(layout.body):
        if idx > 0 and config.enable_separators:
            lines.append(separator(widths, box, border))
        lines.extend(render_row(row, layout))

    if layout.footer and (layout.header or layout.body):
        lines.append(separator(widths, box, border))
    for row in layout.footer:
        lines.extend(render_row(row, layout))

    if border:
        lines.append(bottom_border(widths, box))

    if config.caption:
        lines[:0] = caption_lines(config.caption, visible_width(lines[0]), config.tab_width)
    return lines


# ---------------------------------------------------------------------------
# Truncation
# ---------------------------------------------------------------------------


def truncate_lines(lines: list[str], allowed: int, marker: str) -> list[str]:
    """Apply the row-length cap to composed lines.

    A cap of zero (or less) leaves the lines alone. A cap no wider than
    *marker* leaves no room for content and yields no lines at all.
    """
    if allowed <= 0:
        return lines
    if allowed <= visible_width(marker):
        logger.debug("Allowed row length %d leaves no room past %r", allowed, marker)
        return []

    truncated = [truncate_to_width(line, allowed, marker) for line in lines]
    logger.debug(
        "Truncated %d of %d lines to %d columns",
        sum(1 for old, new in zip(lines, truncated) if old is not new),
        len(lines),
        allowed,
    )
    return truncated


def render_text(layout: Layout) -> str:
    """Render a measured layout as a bordered grid."""
    config = layout.config
    lines = compose_lines(reflow_layout(layout))
    lines = truncate_lines(lines, config.allowed_row_length, config.style.box.unfinished_row)
    return "\n".join(lines)
