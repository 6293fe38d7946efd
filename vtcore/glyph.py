"""Character cells, their attributes and selection enumerations."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass

_TRUECOLOR_FLAG = 1 << 24


class Attr(enum.IntFlag):
    """Rendering attributes of a character cell."""

    NULL = 0
    BOLD = 1 << 0
    FAINT = 1 << 1
    ITALIC = 1 << 2
    UNDERLINE = 1 << 3
    BLINK = 1 << 4
    REVERSE = 1 << 5
    INVISIBLE = 1 << 6
    STRUCK = 1 << 7
    WRAP = 1 << 8
    WIDE = 1 << 9
    WDUMMY = 1 << 10
    BOLD_FAINT = BOLD | FAINT


class SelectionMode(enum.IntEnum):
    IDLE = 0
    EMPTY = 1
    READY = 2


class SelectionType(enum.IntEnum):
    REGULAR = 1
    RECTANGULAR = 2


class SelectionSnap(enum.IntEnum):
    NONE = 0
    WORD = 1
    LINE = 2


def truecolor(r: int, g: int, b: int) -> int:
    """Pack an RGB triple into a colour value marked as direct colour."""
    for component in (r, g, b):
        if not 0 <= component <= 255:
            raise ValueError(f"colour component {component} out of range")
    return _TRUECOLOR_FLAG | (r << 16) | (g << 8) | b


def is_truecolor(color: int) -> bool:
    """Tell whether ``color`` is a packed RGB value rather than an index."""
    return bool(color & _TRUECOLOR_FLAG)


@dataclass
class Glyph:
    """One character cell: code point, attributes and colours."""

    u: int = ord(" ")
    mode: Attr = Attr.NULL
    fg: int = 0
    bg: int = 0

    def copy(self) -> Glyph:
        """Return an independent copy of this cell."""
        return dataclasses.replace(self)