"""Render configuration snapshot."""

from __future__ import annotations

from dataclasses import dataclass

from pi.table.cell import DEFAULT_TAB_WIDTH
from pi.table.style import STYLE_DEFAULT, Style
from pi.table.text import Align, Colors, VAlign


@dataclass(frozen=True)
class RenderConfig:
    """Everything a render pass reads, captured once when the pass starts.

    Per-column sequences are indexed by the caller's column index; an
    auto-index column, when present, is not counted.
    """

    style: Style = STYLE_DEFAULT
    align: tuple[Align, ...] = ()
    valign: tuple[VAlign, ...] = ()
    colors: tuple[Colors, ...] = ()
    colors_header: tuple[Colors, ...] = ()
    colors_footer: tuple[Colors, ...] = ()
    allowed_column_lengths: tuple[int, ...] = ()
    allowed_row_length: int = 0
    auto_index: bool = False
    disable_border: bool = False
    enable_separators: bool = False
    caption: str = ""
    html_css_class: str = ""
    tab_width: int = DEFAULT_TAB_WIDTH

    def align_for(self, column: int) -> Align:
        return _lookup(self.align, column, Align.DEFAULT)

    def valign_for(self, column: int) -> VAlign:
        return _lookup(self.valign, column, VAlign.DEFAULT)

    def cap_for(self, column: int) -> int:
        return max(_lookup(self.allowed_column_lengths, column, 0), 0)


def _lookup(values: tuple, index: int, default):
    if 0 <= index < len(values):
        return values[index]
    return default
