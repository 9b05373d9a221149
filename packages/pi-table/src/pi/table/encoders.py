"""Alternate encoders over the measured layout: CSV, Markdown and HTML.

These read the same normalized rows and resolved columns as the text
render, before any reflow, and apply their own escaping to the column
separator and to line breaks.
"""

from __future__ import annotations

import csv
import html
import io

from pi.table.layout import Column, Layout, LayoutRow
from pi.table.text import Align

DEFAULT_HTML_CSS_CLASS = "pi-table"


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------


def render_csv(layout: Layout) -> str:
    """Comma-separated rows, multi-line cells quoted with embedded newlines."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    for row in layout.rows:
        writer.writerow([cell.text for cell in row.cells])
    return buf.getvalue().rstrip("\n")


# ---------------------------------------------------------------------------
# Markdown
# ---------------------------------------------------------------------------

_MARKDOWN_ALIGN = {
    Align.LEFT: "---",
    Align.CENTER: ":---:",
    Align.RIGHT: "---:",
}


def _column_align(column: Column) -> Align:
    if column.align is not Align.DEFAULT:
        return column.align
    return Align.RIGHT if column.numeric else Align.LEFT


def _markdown_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", "<br/>")


def _markdown_line(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def render_markdown(layout: Layout) -> str:
    """GitHub-flavoured Markdown table.

    Markdown has a single header line; extra header rows follow it as
    ordinary rows, and a table without headers gets empty labels.
    """
    if not layout.columns:
        return ""

    rows = list(layout.rows)
    if layout.header:
        head = [_markdown_cell(cell.text) for cell in rows.pop(0).cells]
    else:
        head = [""] * len(layout.columns)

    lines = [
        _markdown_line(head),
        _markdown_line([_MARKDOWN_ALIGN.get(_column_align(col), "---") for col in layout.columns]),
    ]
    for row in rows:
        lines.append(_markdown_line([_markdown_cell(cell.text) for cell in row.cells]))
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------


def _html_row(row: LayoutRow, layout: Layout, tag: str) -> list[str]:
    lines = ["  <tr>"]
    for column, cell in zip(layout.columns, row.cells):
        align = column.align_for(row, cell)
        attr = "" if align in (Align.LEFT, Align.DEFAULT) else f' align="{align.value}"'
        content = "<br/>".join(html.escape(line) for line in cell.lines)
        lines.append(f"    <{tag}{attr}>{content}</{tag}>")
    lines.append("  </tr>")
    return lines


def render_html(layout: Layout) -> str:
    """HTML ``<table>`` with ``thead``/``tbody``/``tfoot`` sections."""
    if not layout.columns:
        return ""

    config = layout.config
    css_class = config.html_css_class or DEFAULT_HTML_CSS_CLASS

    lines = [f'<table class="{html.escape(css_class)}">']
    if config.caption:
        lines.append(f"  <caption>{html.escape(config.caption)}</caption>")

    sections = (
        ("thead", "th", layout.header),
        ("tbody", "td", layout.body),
        ("tfoot", "td", layout.footer),
    )
    for section, tag, rows in sections:
        if not rows:
            continue
        lines.append(f"  <{section}>")
        for row in rows:
            lines.extend(_html_row(row, layout, tag))
        lines.append(f"  </{section}>")

    lines.append("</table>")
    return "\n".join(lines)
