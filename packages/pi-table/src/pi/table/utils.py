"""Terminal text utilities: width measurement, ANSI tracking, hard wrapping.

Cell content may carry ANSI SGR sequences (pre-coloured strings) and wide
graphemes, so every width in the layout engine is a *visible* width and every
cut happens on a grapheme boundary with escape sequences carried through.
"""

from __future__ import annotations

import re
import unicodedata
from functools import lru_cache

import grapheme
import wcwidth as _wcwidth

# CSI (colour, cursor, erase), then OSC/APC ended by BEL or ST.
_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*[mGKHJ]|\x1b[\]_][^\x07\x1b]*(?:\x07|\x1b\\)")

RESET = "\x1b[0m"

_VS16 = "\ufe0f"
_ZWJ = "\u200d"


# ---------------------------------------------------------------------------
# Measurement
# ---------------------------------------------------------------------------


def _is_emoji_sequence(cluster: str) -> bool:
    if _VS16 in cluster or _ZWJ in cluster:
        return True
    return any(
        0x1F3FB <= ord(ch) <= 0x1F3FF or 0x1F1E6 <= ord(ch) <= 0x1F1FF
        for ch in cluster
    )


def cluster_width(cluster: str) -> int:
    """Columns taken by one grapheme cluster.

    Controls and combining marks take none, emoji sequences take two, and
    everything else is whatever wcwidth says about the base character.
    """
    if not cluster:
        return 0
    base = cluster[0]
    cp = ord(base)
    if cp < 0x20 or 0x7F <= cp <= 0x9F:
        return 0
    if len(cluster) > 1:
        if _is_emoji_sequence(cluster) or cp >= 0x1F000 or 0x2600 <= cp <= 0x27BF:
            return 2
        category = unicodedata.category(base)
        if category == "Cf" or category.startswith("M"):
            return 0
    return max(_wcwidth.wcwidth(base), 0)


def strip_ansi(text: str) -> str:
    return _ESCAPE_RE.sub("", text)


@lru_cache(maxsize=512)
def _plain_width(plain: str) -> int:
    return sum(cluster_width(g) for g in grapheme.graphemes(plain))


def visible_width(text: str) -> int:
    """Columns *text* occupies on a terminal, escape sequences excluded.

    Tabs must already be expanded; a raw tab measures zero.
    """
    plain = strip_ansi(text) if "\x1b" in text else text
    if plain.isascii() and plain.isprintable():
        return len(plain)
    return _plain_width(plain)


# ---------------------------------------------------------------------------
# Escape sequences
# ---------------------------------------------------------------------------


def extract_ansi_code(text: str, pos: int) -> tuple[str, int] | None:
    """The escape sequence starting exactly at *pos*, with its length."""
    match = _ESCAPE_RE.match(text, pos)
    if match is None:
        return None
    return match.group(), match.end() - pos


def _segments(text: str) -> list[tuple[str, bool]]:
    """Split *text* into ``(piece, is_escape)`` pairs.

    Visible pieces are single grapheme clusters so that callers can cut on
    cluster boundaries.
    """
    result: list[tuple[str, bool]] = []
    last = 0
    for match in _ESCAPE_RE.finditer(text):
        result.extend((g, False) for g in grapheme.graphemes(text[last : match.start()]))
        result.append((match.group(), True))
        last = match.end()
    result.extend((g, False) for g in grapheme.graphemes(text[last:]))
    return result


class SgrState:
    """SGR codes in effect at some point of a line.

    Every ``ESC[...m`` seen since the last reset is remembered, so a chunk cut
    mid-colour can be closed with :meth:`close` and the next chunk reopened
    with :meth:`reopen`. Other escape sequences are ignored.
    """

    def __init__(self) -> None:
        self._codes: list[str] = []

    def __bool__(self) -> bool:
        return bool(self._codes)

    def feed(self, code: str) -> None:
        if not (code.startswith("\x1b[") and code.endswith("m")):
            return
        if set(code[2:-1].split(";")) <= {"", "0"}:
            self._codes.clear()
        else:
            self._codes.append(code)

    def reopen(self) -> str:
        return "".join(self._codes)

    def close(self) -> str:
        return RESET if self._codes else ""


# ---------------------------------------------------------------------------
# Cutting
# ---------------------------------------------------------------------------


def wrap_hard(line: str, width: int) -> list[str]:
    """Cut *line* into chunks of *width* visible columns, last one shorter.

    Words are ignored. A wide grapheme that would straddle a boundary starts
    the next chunk instead, and gets a chunk of its own when it is wider
    than *width*. Open colours are closed at each cut and reopened after it.
    A non-positive *width* leaves the line whole.
    """
    if width <= 0 or visible_width(line) <= width:
        return [line]

    state = SgrState()
    chunks: list[str] = []
    current: list[str] = []
    used = 0

    for piece, is_escape in _segments(line):
        if is_escape:
            state.feed(piece)
            current.append(piece)
            continue
        w = cluster_width(piece)
        if used and used + w > width:
            chunks.append("".join(current) + state.close())
            current = [state.reopen()]
            used = 0
        current.append(piece)
        used += w

    chunks.append("".join(current))
    return chunks


def take_columns(text: str, max_cols: int) -> str:
    """Longest prefix of *text* no wider than *max_cols*, colours closed."""
    state = SgrState()
    kept: list[str] = []
    used = 0

    for piece, is_escape in _segments(text):
        if is_escape:
            state.feed(piece)
            kept.append(piece)
            continue
        used += cluster_width(piece)
        if used > max_cols:
            break
        kept.append(piece)

    return "".join(kept) + state.close()


def truncate_to_width(text: str, max_width: int, marker: str) -> str:
    """Cut *text* so it is exactly *max_width* wide and ends in *marker*.

    Text that already fits comes back as is. A wide grapheme at the cut
    leaves a gap, which is filled with spaces before the marker.
    """
    if visible_width(text) <= max_width:
        return text

    room = max_width - visible_width(marker)
    if room <= 0:
        return take_columns(marker, max_width)

    head = take_columns(text, room)
    return head + " " * (room - visible_width(head)) + marker
