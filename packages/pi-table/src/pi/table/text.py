"""Text primitives: horizontal/vertical alignment, case formats, ANSI colours."""

from __future__ import annotations

from enum import Enum, IntEnum

from pi.table.utils import RESET, visible_width


# ---------------------------------------------------------------------------
# Align
# ---------------------------------------------------------------------------


class Align(Enum):
    """Horizontal alignment of text within a column."""

    DEFAULT = "default"
    LEFT = "left"
    CENTER = "center"
    JUSTIFY = "justify"
    RIGHT = "right"

    def apply(self, text: str, width: int) -> str:
        """Pad *text* with spaces to *width* visible columns.

        ``DEFAULT`` behaves like ``LEFT``; callers resolve it before this
        point. Text that is already wide enough is returned unchanged.
        """
        padding = width - visible_width(text)
        if padding <= 0:
            return text

        if self is Align.RIGHT:
            return " " * padding + text
        if self is Align.CENTER:
            left = (padding + 1) // 2
            return " " * left + text + " " * (padding - left)
        if self is Align.JUSTIFY:
            return _justify(text, width)
        return text + " " * padding


def _justify(text: str, width: int) -> str:
    words = text.split()
    if len(words) < 2:
        return Align.LEFT.apply(text, width)

    gaps = len(words) - 1
    spaces = width - sum(visible_width(word) for word in words)
    base, extra = divmod(spaces, gaps)

    parts: list[str] = []
    for idx, word in enumerate(words[:-1]):
        parts.append(word)
        parts.append(" " * (base + (1 if idx < extra else 0)))
    parts.append(words[-1])
    return "".join(parts)


# ---------------------------------------------------------------------------
# VAlign
# ---------------------------------------------------------------------------


class VAlign(Enum):
    """Vertical alignment of a cell's lines within a multi-line row."""

    DEFAULT = "default"
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"

    def apply(self, lines: list[str], height: int) -> list[str]:
        """Pad *lines* with blank lines up to *height* lines."""
        missing = height - len(lines)
        if missing <= 0:
            return list(lines)

        if self is VAlign.BOTTOM:
            return [""] * missing + list(lines)
        if self is VAlign.MIDDLE:
            above = missing // 2
            return [""] * above + list(lines) + [""] * (missing - above)
        return list(lines) + [""] * missing


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------


class Format(Enum):
    """Case transform applied to a row kind's text before measurement."""

    DEFAULT = "default"
    LOWER = "lower"
    TITLE = "title"
    UPPER = "upper"

    def apply(self, text: str) -> str:
        if self is Format.LOWER:
            return text.lower()
        if self is Format.TITLE:
            return text.title()
        if self is Format.UPPER:
            return text.upper()
        return text


# ---------------------------------------------------------------------------
# Color / Colors
# ---------------------------------------------------------------------------


class Color(IntEnum):
    """SGR attribute codes."""

    RESET = 0
    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK_SLOW = 5
    BLINK_RAPID = 6
    REVERSE_VIDEO = 7
    CONCEALED = 8
    CROSSED_OUT = 9

    FG_BLACK = 30
    FG_RED = 31
    FG_GREEN = 32
    FG_YELLOW = 33
    FG_BLUE = 34
    FG_MAGENTA = 35
    FG_CYAN = 36
    FG_WHITE = 37

    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_WHITE = 47

    FG_HI_BLACK = 90
    FG_HI_RED = 91
    FG_HI_GREEN = 92
    FG_HI_YELLOW = 93
    FG_HI_BLUE = 94
    FG_HI_MAGENTA = 95
    FG_HI_CYAN = 96
    FG_HI_WHITE = 97

    BG_HI_BLACK = 100
    BG_HI_RED = 101
    BG_HI_GREEN = 102
    BG_HI_YELLOW = 103
    BG_HI_BLUE = 104
    BG_HI_MAGENTA = 105
    BG_HI_CYAN = 106
    BG_HI_WHITE = 107


class Colors(tuple):
    """An ordered set of :class:`Color` attributes applied together.

    ``Colors()`` is the empty set and decorates nothing.
    """

    def __new__(cls, *colors: Color) -> Colors:
        return super().__new__(cls, colors)

    def __repr__(self) -> str:
        return f"Colors({', '.join(c.name for c in self)})"

    def escape_seq(self) -> str:
        """Return the SGR sequence that switches these attributes on."""
        if not self:
            return ""
        return "\x1b[" + ";".join(str(int(c)) for c in self) + "m"

    def sprint(self, text: str) -> str:
        """Wrap *text* in these attributes, resetting afterwards.

        Empty text and the empty set come back unchanged.
        """
        if not self or not text:
            return text
        return f"{self.escape_seq()}{text}{RESET}"
