"""Cell style attributes and their ANSI SGR rendering.

Styles never influence layout: they are turned into escape sequences only
when a table is rendered with colours enabled, and :func:`visible_width`
ignores those sequences.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Union

from pi.table.format import Alignment


class Color(enum.IntEnum):
    """The 16 standard terminal colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    BRIGHT_BLACK = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    BRIGHT_WHITE = 15


@dataclass(frozen=True)
class Foreground:
    color: Color

    @property
    def sgr(self) -> str:
        if self.color < 8:
            return str(30 + self.color)
        return str(90 + self.color - 8)


@dataclass(frozen=True)
class Background:
    color: Color

    @property
    def sgr(self) -> str:
        if self.color < 8:
            return str(40 + self.color)
        return str(100 + self.color - 8)


@dataclass(frozen=True)
class Bold:
    sgr = "1"


@dataclass(frozen=True)
class Italic:
    sgr = "3"


@dataclass(frozen=True)
class Underline:
    sgr = "4"


Attr = Union[Foreground, Background, Bold, Italic, Underline]

RESET = "\x1b[0m"


def merge_style(style: Iterable[Attr], attr: Attr) -> tuple[Attr, ...]:
    """Add *attr* to *style*, replacing any earlier attribute of the same kind.

    The replaced attribute keeps its position so the emitted sequence is
    stable.
    """
    result: list[Attr] = []
    replaced = False
    for existing in style:
        if type(existing) is type(attr):
            if not replaced:
                result.append(attr)
                replaced = True
            continue
        result.append(existing)
    if not replaced:
        result.append(attr)
    return tuple(result)


def sgr_sequence(style: Iterable[Attr]) -> str:
    """Return the escape sequence that turns on every attribute of *style*."""
    params = [attr.sgr for attr in style]
    if not params:
        return ""
    return f"\x1b[{';'.join(params)}m"


def apply_style(text: str, style: Iterable[Attr]) -> str:
    """Wrap *text* in the SGR sequence for *style* followed by a reset.

    Resets already inside *text* (e.g. from a nested table rendered with
    colours) are followed by *style* again so it covers the whole text.
    """
    prefix = sgr_sequence(style)
    if not prefix:
        return text
    return f"{prefix}{text.replace(RESET, RESET + prefix)}{RESET}"


# ---------------------------------------------------------------------------
# Style spec mini-language
# ---------------------------------------------------------------------------

_SPEC_COLORS = {
    "d": Color.BLACK,
    "r": Color.RED,
    "g": Color.GREEN,
    "y": Color.YELLOW,
    "b": Color.BLUE,
    "m": Color.MAGENTA,
    "c": Color.CYAN,
    "w": Color.WHITE,
    "D": Color.BRIGHT_BLACK,
    "R": Color.BRIGHT_RED,
    "G": Color.BRIGHT_GREEN,
    "Y": Color.BRIGHT_YELLOW,
    "B": Color.BRIGHT_BLUE,
    "M": Color.BRIGHT_MAGENTA,
    "C": Color.BRIGHT_CYAN,
    "W": Color.BRIGHT_WHITE,
}

_SPEC_ALIGNMENTS = {
    "l": Alignment.LEFT,
    "c": Alignment.CENTER,
    "r": Alignment.RIGHT,
}


def parse_style_spec(spec: str) -> tuple[tuple[Attr, ...], Alignment | None]:
    """Parse a style specifier such as ``"FrBybl"``.

    Specifiers:

    * ``F<color>`` foreground, ``B<color>`` background
    * ``b`` bold, ``i`` italic, ``u`` underline
    * ``l`` / ``c`` / ``r`` align left, center, right

    Colours are ``r g y b m c w d`` (red, green, yellow, blue, magenta, cyan,
    white, black); uppercase selects the bright variant. Unknown characters
    are ignored, as is a colour prefix followed by an unknown colour.

    Returns the attributes and the alignment (``None`` when not given).
    """
    style: tuple[Attr, ...] = ()
    alignment: Alignment | None = None
    pending: type[Foreground] | type[Background] | None = None

    for ch in spec:
        if pending is not None:
            color = _SPEC_COLORS.get(ch)
            if color is not None:
                style = merge_style(style, pending(color))
            pending = None
            continue

        if ch == "F":
            pending = Foreground
        elif ch == "B":
            pending = Background
        elif ch == "b":
            style = merge_style(style, Bold())
        elif ch == "i":
            style = merge_style(style, Italic())
        elif ch == "u":
            style = merge_style(style, Underline())
        elif ch in _SPEC_ALIGNMENTS:
            alignment = _SPEC_ALIGNMENTS[ch]

    return style, alignment
