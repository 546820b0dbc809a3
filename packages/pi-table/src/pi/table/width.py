"""Terminal text utilities: escape-sequence scanning and width measurement.

Provides functions for measuring the visible terminal width of text that may
contain ANSI escape sequences, stripping those sequences, and padding text to
a column width with a given alignment.
"""

from __future__ import annotations

import unicodedata

import grapheme
import wcwidth as _wcwidth

from pi.table.format import Alignment

_ESC = "\x1b"
_BEL = "\x07"

# String sequences terminated by BEL or ST (ESC \):
# OSC (ESC ]), DCS (ESC P), APC (ESC _), PM (ESC ^), SOS (ESC X)
_STRING_INTRODUCERS = frozenset("]P_^X")

TAB_WIDTH = 3

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Escape sequence scanning
# ---------------------------------------------------------------------------


def _scan_escape(text: str, pos: int) -> int:
    """Return the length of the escape sequence starting at *pos*.

    *text[pos]* must be ESC. The result is always at least 1 and never runs
    past the end of *text*, so callers can advance unconditionally.
    """
    end = len(text)
    i = pos + 1
    if i >= end:
        # Lone ESC at the end of the string
        return 1

    intro = text[i]

    # CSI: ESC [ <params 0x30-0x3F>* <intermediates 0x20-0x2F>* <final 0x40-0x7E>
    if intro == "[":
        i += 1
        while i < end and "\x30" <= text[i] <= "\x3f":
            i += 1
        while i < end and "\x20" <= text[i] <= "\x2f":
            i += 1
        if i < end and "\x40" <= text[i] <= "\x7e":
            return i + 1 - pos
        # Unterminated (end of string) or interrupted by a byte outside the
        # CSI grammar: the sequence stops here, the byte is left in place.
        return i - pos

    if intro in _STRING_INTRODUCERS:
        i += 1
        while i < end:
            ch = text[i]
            if ch == _BEL:
                return i + 1 - pos
            if ch == _ESC and i + 1 < end and text[i + 1] == "\\":
                return i + 2 - pos
            i += 1
        # Unterminated string sequence swallows the rest of the text
        return end - pos

    # Two-byte escape (ESC 7, ESC c, ESC =, ...), possibly with intermediates
    while i < end and "\x20" <= text[i] <= "\x2f":
        i += 1
    if i < end:
        return i + 1 - pos
    return end - pos


def extract_ansi_code(text: str, pos: int) -> tuple[str, int] | None:
    """Extract an escape sequence starting at *pos* in *text*.

    Returns ``(code, length)`` where *code* is the full escape sequence and
    *length* is the number of characters consumed, or ``None`` if there is no
    escape sequence at *pos*.

    Handles:
    * CSI sequences: ``ESC[`` parameters, intermediates, final byte
    * String sequences (OSC, DCS, APC, PM, SOS) ending in ``BEL`` or ``ST``
    * Two-byte escapes

    Truncated sequences are returned as-is up to the end of *text*.
    """
    if pos < 0 or pos >= len(text) or text[pos] != _ESC:
        return None
    length = _scan_escape(text, pos)
    return (text[pos : pos + length], length)


def strip_ansi(text: str) -> str:
    """Return *text* with every escape sequence removed."""
    if _ESC not in text:
        return text
    parts: list[str] = []
    i = 0
    end = len(text)
    while i < end:
        nxt = text.find(_ESC, i)
        if nxt < 0:
            parts.append(text[i:])
            break
        parts.append(text[i:nxt])
        i = nxt + _scan_escape(text, nxt)
    return "".join(parts)


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------


def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, etc.) -> 0
    2. Emoji (contains VS16 U+FE0F, ZWJ sequences, etc.) -> 2
    3. Otherwise delegate to wcwidth for the first meaningful codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        if cp == 0xFE0F or cp == 0x200D:  # VS16, ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF:  # Skin tone modifiers
            return 2
        if 0x1F1E6 <= cp <= 0x1F1FF:  # Regional indicators
            return 2

    first = g[0]
    if ord(first) >= 0x1F000:
        return 2

    cat = unicodedata.category(first)
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(first), 0)


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    * Skips escape sequences, including truncated ones.
    * Treats tabs as 3 columns.
    * Uses a fast ASCII path when possible.
    * Caches results for non-ASCII strings.

    Never raises for any input string.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = 0
    for g in grapheme.graphemes(stripped):
        if g == "\t":
            total += TAB_WIDTH
        else:
            total += _grapheme_width(g)

    return _cache_width(stripped, total)


def expand_tabs(text: str) -> str:
    """Replace tabs with spaces so the output matches :func:`visible_width`."""
    return text.replace("\t", " " * TAB_WIDTH)


# ---------------------------------------------------------------------------
# Alignment
# ---------------------------------------------------------------------------


def align_text(text: str, alignment: Alignment, width: int, fill: str = " ") -> str:
    """Pad *text* with *fill* to *width* visible columns.

    Text already wider than *width* is returned unchanged. For centered text
    an odd remainder puts the extra column on the right.
    """
    missing = width - visible_width(text)
    if missing <= 0:
        return text

    if alignment is Alignment.RIGHT:
        return fill * missing + text
    if alignment is Alignment.CENTER:
        left = missing // 2
        return fill * left + text + fill * (missing - left)
    return text + fill * missing
