"""pi-table: aligned, bordered text tables for terminals and documents."""

# Cells
from pi.table.cell import DEFAULT_TAB_WIDTH, Cell, ValueKind, normalize

# Configuration
from pi.table.config import RenderConfig

# Encoders
from pi.table.encoders import DEFAULT_HTML_CSS_CLASS

# Layout
from pi.table.layout import Column, Layout, LayoutRow, Row, RowKind, column_letter

# Styles
from pi.table.style import (
    STYLE_BOLD,
    STYLE_DEFAULT,
    STYLE_DOUBLE,
    STYLE_LIGHT,
    STYLE_ROUNDED,
    STYLES,
    BoxStyle,
    FormatOptions,
    Style,
)

# Table
from pi.table.table import OutputMirror, Table

# Text primitives
from pi.table.text import Align, Color, Colors, Format, VAlign

# Utilities
from pi.table.utils import truncate_to_width, visible_width, wrap_hard

__all__ = [
    # Cells
    "DEFAULT_TAB_WIDTH",
    "Cell",
    "ValueKind",
    "normalize",
    # Configuration
    "RenderConfig",
    # Encoders
    "DEFAULT_HTML_CSS_CLASS",
    # Layout
    "Column",
    "Layout",
    "LayoutRow",
    "Row",
    "RowKind",
    "column_letter",
    # Styles
    "STYLE_BOLD",
    "STYLE_DEFAULT",
    "STYLE_DOUBLE",
    "STYLE_LIGHT",
    "STYLE_ROUNDED",
    "STYLES",
    "BoxStyle",
    "FormatOptions",
    "Style",
    # Table
    "OutputMirror",
    "Table",
    # Text primitives
    "Align",
    "Color",
    "Colors",
    "Format",
    "VAlign",
    # Utilities
    "truncate_to_width",
    "visible_width",
    "wrap_hard",
]
