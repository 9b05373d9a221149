"""Table: row storage, presentation settings and the render entry points."""

from __future__ import annotations

import logging
from typing import Callable, Protocol, Sequence

from pi.table import encoders
from pi.table.config import RenderConfig
from pi.table.layout import Layout, Row, build_layout
from pi.table.render import render_text
from pi.table.style import STYLE_DEFAULT, Style
from pi.table.text import Align, Color, Colors, VAlign

logger = logging.getLogger(__name__)


class OutputMirror(Protocol):
    """Anything with a text ``write`` method, e.g. ``sys.stdout``."""

    def write(self, text: str, /) -> object: ...


class Table:
    """A table of header, body and footer rows rendered as an aligned grid.

    Rows are appended first, presentation is configured with the ``set_*``
    methods (each replaces the previous value), and every ``render*`` call
    measures the table afresh::

        table = Table()
        table.append_header(["#", "Name"])
        table.append_row([1, "Arya"])
        print(table.render())
    """

    def __init__(self) -> None:
        self._rows_header: list[list] = []
        self._rows: list[list] = []
        self._rows_footer: list[list] = []

        self._style: Style | None = None
        self._align: tuple[Align, ...] | None = None
        self._valign: tuple[VAlign, ...] | None = None
        self._colors: tuple[Colors, ...] = ()
        self._colors_header: tuple[Colors, ...] = ()
        self._colors_footer: tuple[Colors, ...] = ()
        self._allowed_column_lengths: tuple[int, ...] = ()
        self._allowed_row_length = 0
        self._auto_index = False
        self._disable_border = False
        self._enable_separators = False
        self._caption = ""
        self._html_css_class = ""
        self._output_mirror: OutputMirror | None = None

    # -- rows -----------------------------------------------------------------

    def append_header(self, row: Row) -> None:
        self._rows_header.append(list(row))

    def append_footer(self, row: Row) -> None:
        self._rows_footer.append(list(row))

    def append_row(self, row: Row) -> None:
        self._rows.append(list(row))

    def append_rows(self, rows: Sequence[Row]) -> None:
        for row in rows:
            self.append_row(row)

    def length(self) -> int:
        """Number of body rows; headers and footers are not counted."""
        return len(self._rows)

    def __len__(self) -> int:
        return self.length()

    # -- configuration ---------------------------------------------------------

    def style(self) -> Style | None:
        """The style set by the caller, or ``None`` (renders use the default)."""
        return self._style

    def set_style(self, style: Style) -> None:
        self._style = style

    def set_align(self, align: Sequence[Align]) -> None:
        self._align = tuple(align)

    def set_valign(self, valign: Sequence[VAlign]) -> None:
        self._valign = tuple(valign)

    def set_colors(self, colors: Sequence[Sequence[Color]]) -> None:
        self._colors = tuple(Colors(*c) for c in colors)

    def set_colors_header(self, colors: Sequence[Sequence[Color]]) -> None:
        self._colors_header = tuple(Colors(*c) for c in colors)

    def set_colors_footer(self, colors: Sequence[Sequence[Color]]) -> None:
        self._colors_footer = tuple(Colors(*c) for c in colors)

    def set_allowed_column_lengths(self, lengths: Sequence[int]) -> None:
        """Hard width caps per column; ``0`` leaves a column unlimited."""
        self._allowed_column_lengths = tuple(lengths)

    def set_allowed_row_length(self, length: int) -> None:
        """Cap every rendered line at *length* columns; ``0`` is unlimited."""
        self._allowed_row_length = length

    def set_auto_index(self, auto_index: bool) -> None:
        self._auto_index = auto_index

    def show_border(self, show: bool) -> None:
        self._disable_border = not show

    def show_separators(self, show: bool) -> None:
        self._enable_separators = show

    def set_caption(self, caption: str) -> None:
        self._caption = caption

    def set_html_css_class(self, css_class: str) -> None:
        self._html_css_class = css_class

    def set_output_mirror(self, mirror: OutputMirror | None) -> None:
        """Every render also writes its output plus a newline to *mirror*."""
        self._output_mirror = mirror

    def config(self) -> RenderConfig:
        """Snapshot the current settings for one render pass."""
        return RenderConfig(
            style=self._style or STYLE_DEFAULT,
            align=self._align or (),
            valign=self._valign or (),
            colors=self._colors,
            colors_header=self._colors_header,
            colors_footer=self._colors_footer,
            allowed_column_lengths=self._allowed_column_lengths,
            allowed_row_length=self._allowed_row_length,
            auto_index=self._auto_index,
            disable_border=self._disable_border,
            enable_separators=self._enable_separators,
            caption=self._caption,
            html_css_class=self._html_css_class,
        )

    # -- rendering -------------------------------------------------------------

    def layout(self, separator: str | None = None) -> Layout:
        """Normalize and measure the table without rendering it."""
        return build_layout(
            self._rows_header, self._rows, self._rows_footer, self.config(), separator
        )

    def render(self) -> str:
        """Render the bordered text grid."""
        logger.debug(
            "Rendering table: %d header, %d body, %d footer rows",
            len(self._rows_header),
            len(self._rows),
            len(self._rows_footer),
        )
        return self._mirror(render_text(self.layout()))

    def render_csv(self) -> str:
        return self._render_with(encoders.render_csv)

    def render_markdown(self) -> str:
        return self._render_with(encoders.render_markdown)

    def render_html(self) -> str:
        return self._render_with(encoders.render_html)

    def _render_with(self, encoder: Callable[[Layout], str]) -> str:
        return self._mirror(encoder(self.layout(separator="")))

    def _mirror(self, out: str) -> str:
        if self._output_mirror is not None:
            self._output_mirror.write(out + "\n")
        return out
