"""Cell normalization: raw values to multi-line display text."""

from __future__ import annotations

import numbers
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from pi.table.text import Format
from pi.table.utils import visible_width

DEFAULT_TAB_WIDTH = 4

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class ValueKind(Enum):
    """Runtime kind of a raw cell value, resolved once at normalization."""

    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    BOOLEAN = "boolean"
    EMPTY = "empty"

    @property
    def is_numeric(self) -> bool:
        return self in (ValueKind.INTEGER, ValueKind.FLOAT)


def value_kind(value: Any) -> ValueKind:
    """Classify *value*. ``bool`` is checked before integers."""
    if value is None or (isinstance(value, str) and value == ""):
        return ValueKind.EMPTY
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Integral):
        return ValueKind.INTEGER
    if isinstance(value, (numbers.Real, Decimal)):
        return ValueKind.FLOAT
    return ValueKind.TEXT


@dataclass(frozen=True)
class Cell:
    """A normalized value at one row/column intersection."""

    value: Any
    kind: ValueKind
    lines: tuple[str, ...]
    column: int = 0

    @property
    def width(self) -> int:
        """Visible width of the widest line."""
        return max((visible_width(line) for line in self.lines), default=0)

    @property
    def height(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def empty_cell(column: int) -> Cell:
    """Filler for rows shorter than the table's column count."""
    return Cell(value=None, kind=ValueKind.EMPTY, lines=("",), column=column)


def stringify(value: Any, kind: ValueKind) -> str:
    if kind is ValueKind.EMPTY:
        return ""
    return str(value)


def normalize(
    value: Any,
    column: int = 0,
    tab_width: int = DEFAULT_TAB_WIDTH,
    separator: str = "|",
    substitute: str = "¦",
    text_format: Format = Format.DEFAULT,
) -> Cell:
    """Turn a raw *value* into a :class:`Cell`.

    The value is stringified, case-transformed by *text_format*, tabs are
    expanded to *tab_width* spaces, the text is split on ``\\r\\n``, ``\\r``
    and ``\\n``, and any *separator* glyph in the content is replaced with
    *substitute* so it cannot be mistaken for a column border.
    """
    kind = value_kind(value)
    text = text_format.apply(stringify(value, kind))
    text = text.replace("\t", " " * max(tab_width, 0))

    lines = _LINE_BREAK_RE.split(text)
    if separator and substitute:
        lines = [line.replace(separator, substitute) for line in lines]

    return Cell(value=value, kind=kind, lines=tuple(lines), column=column)
