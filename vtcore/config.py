"""Terminal configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

_NORMAL_COLORS = (
    "black",
    "red3",
    "green3",
    "yellow3",
    "blue2",
    "magenta3",
    "cyan3",
    "gray90",
)

_BRIGHT_COLORS = (
    "gray50",
    "red",
    "green",
    "yellow",
    "#5c5cff",
    "magenta",
    "cyan",
    "white",
)

# Entries placed after index 255, used by the default_* indices.
_EXTRA_COLORS = (
    "#cccccc",
    "#555555",
    "gray90",  # default foreground colour
    "black",  # default background colour
)

_PALETTE_SIZE = 256

ASCII_PRINTABLE = (
    " !\"#$%&'()*+,-./0123456789:;<=>?"
    "@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_"
    "`abcdefghijklmnopqrstuvwxyz{|}~"
)


def default_colornames() -> list[Optional[str]]:
    """Return a fresh list of the default colour names.

    Indices 0-15 are the named ANSI colours, 16-255 are unset (``None``)
    and the entries from 256 on are the extra default colours.
    """
    names: list[Optional[str]] = [*_NORMAL_COLORS, *_BRIGHT_COLORS]
    names.extend([None] * (_PALETTE_SIZE - len(names)))
    names.extend(_EXTRA_COLORS)
    return names


@dataclass
class Config:
    """Settings that shape the terminal's behaviour and appearance."""

    font: str = "0xProto Nerd Font:pixelsize=13:antialias=true:autohint=true"
    border_px: int = 2

    shell: str = "/bin/sh"
    utmp: Optional[str] = None
    scroll: Optional[str] = None
    stty_args: str = "stty raw pass8 nl -echo -iexten -cstopb 38400"

    # Identification sequence returned in DA and DECID.
    vtiden: str = "\033[?6c"

    cw_scale: float = 1.0
    ch_scale: float = 1.0

    word_delimiters: str = " "

    double_click_timeout: int = 300
    triple_click_timeout: int = 600

    alpha: float = 0.7

    allow_alt_screen: bool = True
    allow_window_ops: bool = False

    min_latency: float = 2.0
    max_latency: float = 33.0

    blink_timeout: int = 800
    cursor_thickness: int = 2
    bell_volume: int = 0

    termname: str = "st-256color"
    tabspaces: int = 8

    colornames: list[Optional[str]] = field(default_factory=default_colornames)

    default_fg: int = 258
    default_bg: int = 259
    default_cs: int = 7
    default_rcs: int = 257

    cursor_shape: int = 2

    cols: int = 80
    rows: int = 24

    mouse_fg: int = 7
    mouse_bg: int = 0

    default_attr: int = 11

    ascii_printable: str = ASCII_PRINTABLE

    def color_name(self, index: int) -> Optional[str]:
        """Return the configured name of colour ``index``, or None if unset.

        Raises IndexError when ``index`` lies outside the colour table.
        """
        if not 0 <= index < len(self.colornames):
            raise IndexError(f"colour index {index} out of range")
        return self.colornames[index]