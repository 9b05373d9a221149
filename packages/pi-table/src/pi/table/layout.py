"""Layout: normalized rows plus resolved columns, measured before rendering.

Rendering is two passes. :func:`build_layout` normalizes every row and
measures every column; :func:`reflow_layout` then re-wraps cell text to the
resolved widths. Both return fresh immutable structures, so a layout can be
inspected (or handed to an encoder) at either stage.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Sequence

from pi.table.cell import Cell, ValueKind, empty_cell, normalize
from pi.table.config import RenderConfig
from pi.table.text import Align, Colors, Format, VAlign
from pi.table.utils import wrap_hard

Row = Sequence[Any]


class RowKind(Enum):
    HEADER = "header"
    BODY = "body"
    FOOTER = "footer"


@dataclass(frozen=True)
class LayoutRow:
    """One logical row, padded on the right to the table's column count."""

    kind: RowKind
    index: int
    cells: tuple[Cell, ...]
    auto_index: bool = False

    @property
    def height(self) -> int:
        """Physical line count: the tallest cell, at least one."""
        return max((cell.height for cell in self.cells), default=1) or 1


@dataclass(frozen=True)
class Column:
    """Resolved presentation for one column."""

    index: int
    width: int
    cap: int = 0
    numeric: bool = False
    align: Align = Align.DEFAULT
    valign: VAlign = VAlign.DEFAULT
    colors: Colors = Colors()
    colors_header: Colors = Colors()
    colors_footer: Colors = Colors()
    auto_index: bool = False

    def colors_for(self, kind: RowKind) -> Colors:
        """Row-kind colours win over the general column colours."""
        if kind is RowKind.HEADER and self.colors_header:
            return self.colors_header
        if kind is RowKind.FOOTER and self.colors_footer:
            return self.colors_footer
        return self.colors

    def align_for(self, row: LayoutRow, cell: Cell) -> Align:
        """Resolve the horizontal alignment of *cell* in *row*."""
        if self.align is not Align.DEFAULT:
            return self.align
        if row.auto_index:
            return Align.CENTER
        if row.kind is RowKind.HEADER:
            return Align.RIGHT if self.numeric else Align.LEFT
        return Align.RIGHT if cell.kind.is_numeric else Align.LEFT


@dataclass(frozen=True)
class Layout:
    header: tuple[LayoutRow, ...]
    body: tuple[LayoutRow, ...]
    footer: tuple[LayoutRow, ...]
    columns: tuple[Column, ...]
    config: RenderConfig

    @property
    def rows(self) -> tuple[LayoutRow, ...]:
        return self.header + self.body + self.footer

    @property
    def widths(self) -> list[int]:
        return [column.width for column in self.columns]

    @property
    def has_auto_index(self) -> bool:
        return bool(self.columns) and self.columns[0].auto_index


# ---------------------------------------------------------------------------
# Auto-index labels
# ---------------------------------------------------------------------------


def column_letter(index: int) -> str:
    """Spreadsheet-style label for a 0-based column index (A..Z, AA, AB..)."""
    label = ""
    index += 1
    while index > 0:
        index, rem = divmod(index - 1, 26)
        label = chr(ord("A") + rem) + label
    return label


def column_letters(count: int) -> list[str]:
    return [column_letter(idx) for idx in range(count)]


# ---------------------------------------------------------------------------
# Pass 1: normalize and measure
# ---------------------------------------------------------------------------


def _format_for(kind: RowKind, config: RenderConfig) -> Format:
    options = config.style.format
    if kind is RowKind.HEADER:
        return options.header
    if kind is RowKind.FOOTER:
        return options.footer
    return options.rows


def normalize_row(
    values: Row,
    kind: RowKind,
    config: RenderConfig,
    separator: str,
    offset: int = 0,
) -> list[Cell]:
    """Normalize one caller row, numbering cells from *offset*."""
    text_format = _format_for(kind, config)
    substitute = config.style.box.separator_substitute
    return [
        normalize(
            value,
            column=offset + idx,
            tab_width=config.tab_width,
            separator=separator,
            substitute=substitute,
            text_format=text_format,
        )
        for idx, value in enumerate(values)
    ]


def resolve_widths(rows: Sequence[Sequence[Cell]], caps: Sequence[int], column_count: int) -> list[int]:
    """Per-column content width: widest cell, clamped to a positive cap."""
    widths = [0] * column_count
    for cells in rows:
        for idx, cell in enumerate(cells):
            widths[idx] = max(widths[idx], cell.width)
    for idx, cap in enumerate(caps[:column_count]):
        if 0 < cap < widths[idx]:
            widths[idx] = cap
    return widths


def _is_numeric_column(body: Sequence[Sequence[Cell]], idx: int) -> bool:
    kinds = [cells[idx].kind for cells in body if idx < len(cells)]
    has_number = any(kind.is_numeric for kind in kinds)
    has_text = any(kind in (ValueKind.TEXT, ValueKind.BOOLEAN) for kind in kinds)
    return has_number and not has_text


def build_layout(
    header: Sequence[Row],
    body: Sequence[Row],
    footer: Sequence[Row],
    config: RenderConfig,
    separator: str | None = None,
) -> Layout:
    """Normalize all rows and resolve every column.

    *separator* is the glyph neutralized inside cell content; it defaults to
    the style's column separator. Pass ``""`` to keep content verbatim.
    """
    if separator is None:
        separator = config.style.box.middle_vertical

    auto_index = config.auto_index and not header
    offset = 1 if auto_index else 0

    header_cells = [normalize_row(row, RowKind.HEADER, config, separator, offset) for row in header]
    body_cells = [normalize_row(row, RowKind.BODY, config, separator, offset) for row in body]
    footer_cells = [normalize_row(row, RowKind.FOOTER, config, separator, offset) for row in footer]

    real_count = max((len(row) for row in (*header, *body, *footer)), default=0)

    if auto_index:
        header_cells = [
            [empty_cell(0)]
            + [normalize(label, column=idx + 1) for idx, label in enumerate(column_letters(real_count))]
        ]
        body_cells = [
            [normalize(idx + 1, column=0)] + cells for idx, cells in enumerate(body_cells)
        ]
        footer_cells = [[empty_cell(0)] + cells for cells in footer_cells]

    column_count = real_count + offset if real_count else 0
    all_cells = header_cells + body_cells + footer_cells

    caps = [0] * offset + [config.cap_for(idx) for idx in range(real_count)]
    widths = resolve_widths(all_cells, caps, column_count)

    columns = []
    for idx in range(column_count):
        real = idx - offset
        if real < 0:
            columns.append(Column(index=idx, width=widths[idx], numeric=True, auto_index=True))
            continue
        columns.append(
            Column(
                index=idx,
                width=widths[idx],
                cap=caps[idx],
                numeric=_is_numeric_column(body_cells, idx),
                align=config.align_for(real),
                valign=config.valign_for(real),
                colors=_lookup_colors(config.colors, real),
                colors_header=_lookup_colors(config.colors_header, real),
                colors_footer=_lookup_colors(config.colors_footer, real),
            )
        )

    def _rows(kind: RowKind, rows: list[list[Cell]], synthetic: bool = False) -> tuple[LayoutRow, ...]:
        return tuple(
            LayoutRow(kind=kind, index=idx, cells=_pad(cells, column_count), auto_index=synthetic)
            for idx, cells in enumerate(rows)
        )

    return Layout(
        header=_rows(RowKind.HEADER, header_cells, synthetic=auto_index),
        body=_rows(RowKind.BODY, body_cells),
        footer=_rows(RowKind.FOOTER, footer_cells),
        columns=tuple(columns),
        config=config,
    )


def _pad(cells: list[Cell], column_count: int) -> tuple[Cell, ...]:
    return tuple(cells) + tuple(empty_cell(idx) for idx in range(len(cells), column_count))


def _lookup_colors(values: Sequence[Colors], index: int) -> Colors:
    if 0 <= index < len(values):
        return Colors(*values[index])
    return Colors()


# ---------------------------------------------------------------------------
# Pass 2: reflow
# ---------------------------------------------------------------------------


def reflow(cell: Cell, width: int) -> Cell:
    """Hard-wrap every line of *cell* to *width* columns.

    Lines from explicit line breaks are wrapped independently.
    """
    lines: list[str] = []
    for line in cell.lines:
        lines.extend(wrap_hard(line, width))
    if len(lines) == len(cell.lines):
        return cell
    return replace(cell, lines=tuple(lines))


def reflow_layout(layout: Layout) -> Layout:
    """Re-wrap every cell to its column width.

    A wide grapheme cannot be split, so a column capped narrower than such a
    grapheme grows to fit it.
    """
    widths = layout.widths

    def _reflow_rows(rows: tuple[LayoutRow, ...]) -> tuple[LayoutRow, ...]:
        return tuple(
            replace(row, cells=tuple(reflow(cell, widths[idx]) for idx, cell in enumerate(row.cells)))
            for row in rows
        )

    header = _reflow_rows(layout.header)
    body = _reflow_rows(layout.body)
    footer = _reflow_rows(layout.footer)

    columns = list(layout.columns)
    for row in header + body + footer:
        for idx, cell in enumerate(row.cells):
            if cell.width > columns[idx].width:
                columns[idx] = replace(columns[idx], width=cell.width)

    return replace(layout, header=header, body=body, footer=footer, columns=tuple(columns))
