"""The character grid of a terminal: lines, cursor, tabs and scrolling."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional

from . import utf8
from .config import Config
from .glyph import Attr, Glyph

CURSOR_DEFAULT = 0
CURSOR_WRAPNEXT = 1
CURSOR_ORIGIN = 2

_SPACE = ord(" ")

# DEC special graphics, applied to 0x41-0x7e when the G0 graphic set is active.
_VT100_GRAPHICS = {
    ord(src): ord(dst)
    for src, dst in (
        *zip("ABCDEFG", "↑↓→←█▚☃"),
        ("_", " "),
        *zip(
            "`abcdefghijklmnopqrstuvwxyz{|}~",
            "◆▒␉␌␍␊°±␤␋┘┐┌└┼⎺⎻─⎼⎽├┤┴┬│≤≥π≠£·",
        ),
    )
}


class TermMode(enum.IntFlag):
    """Terminal mode flags."""

    WRAP = 1 << 0
    INSERT = 1 << 1
    ALTSCREEN = 1 << 2
    CRLF = 1 << 3
    ECHO = 1 << 4
    PRINT = 1 << 5
    UTF8 = 1 << 6


class Charset(enum.IntEnum):
    GRAPHIC0 = 0
    GRAPHIC1 = 1
    UK = 2
    USA = 3
    MULTI = 4
    GER = 5
    FIN = 6


@dataclass
class Cursor:
    """Cursor position, the attributes new characters get, and state bits."""

    attr: Glyph = field(default_factory=Glyph)
    x: int = 0
    y: int = 0
    state: int = CURSOR_DEFAULT

    def copy(self) -> Cursor:
        return Cursor(self.attr.copy(), self.x, self.y, self.state)


def _clamp(value: int, low: int, high: int) -> int:
    if value < low:
        return low
    if value > high:
        return high
    return value


class Screen:
    """A grid of glyphs with a primary and an alternate buffer."""

    def __init__(self, cols: int, rows: int, config: Optional[Config] = None) -> None:
        self.config = config if config is not None else Config()
        self.cols = 0
        self.rows = 0
        self.lines: list[list[Glyph]] = []
        self.alt: list[list[Glyph]] = []
        self.dirty: list[bool] = []
        self.tabs: list[bool] = []
        self.cursor = Cursor(Glyph(fg=self.config.default_fg, bg=self.config.default_bg))
        self._saved = [Cursor(Glyph(u=0)), Cursor(Glyph(u=0))]
        self.top = 0
        self.bot = 0
        self.mode = TermMode(0)
        self.trantbl = [Charset.GRAPHIC0] * 4
        self.charset = 0
        self.icharset = 0
        self.lastc = 0
        self.ocx = 0
        self.ocy = 0
        # Set by a Selection bound to this screen.
        self.selection: Any = None
        self.resize(cols, rows)
        self.reset()

    @property
    def is_alt(self) -> bool:
        return bool(self.mode & TermMode.ALTSCREEN)

    def _blank(self) -> Glyph:
        return Glyph(u=_SPACE)

    def resize(self, cols: int, rows: int) -> None:
        """Change the grid size, keeping the cursor's line on screen."""
        if cols < 1 or rows < 1:
            raise ValueError(f"cannot resize to {cols}x{rows}")

        minrow = min(rows, self.rows)
        mincol = min(cols, self.cols)

        # Drop lines from the top so the cursor's line stays visible.
        shift = max(0, self.cursor.y - rows + 1)

        def fit(buffer: list[list[Glyph]]) -> list[list[Glyph]]:
            kept = [
                line[:cols] + [self._blank() for _ in range(cols - len(line))]
                for line in buffer[shift:shift + rows]
            ]
            kept.extend([self._blank() for _ in range(cols)] for _ in range(rows - len(kept)))
            return kept

        self.lines = fit(self.lines)
        self.alt = fit(self.alt)
        self.dirty = (self.dirty + [False] * rows)[:rows]

        old_cols = self.cols
        tabs = self.tabs[:cols] + [False] * max(0, cols - len(self.tabs))
        if cols > old_cols:
            pos = old_cols - 1
            while pos > 0 and not tabs[pos]:
                pos -= 1
            pos += self.config.tabspaces
            while pos < cols:
                tabs[pos] = True
                pos += self.config.tabspaces
        self.tabs = tabs

        self.cols = cols
        self.rows = rows
        self.set_scroll_region(0, rows - 1)
        self.move_to(self.cursor.x, self.cursor.y)

        saved = self.cursor.copy()
        for _ in range(2):
            if mincol < cols and minrow > 0:
                self.clear_region(mincol, 0, cols - 1, minrow - 1)
            if minrow < rows:
                self.clear_region(0, minrow, cols - 1, rows - 1)
            self.swap_screen()
            self.load_cursor()
        self.cursor = saved

    def reset(self) -> None:
        """Return to the initial state and clear both buffers."""
        self.cursor = Cursor(
            Glyph(mode=Attr.NULL, fg=self.config.default_fg, bg=self.config.default_bg)
        )
        step = self.config.tabspaces
        self.tabs = [False] * self.cols
        for pos in range(step, self.cols, step):
            self.tabs[pos] = True
        self.top = 0
        self.bot = self.rows - 1
        self.mode = TermMode.WRAP | TermMode.UTF8
        self.trantbl = [Charset.USA] * 4
        self.charset = 0

        for _ in range(2):
            self.move_to(0, 0)
            self.save_cursor()
            self.clear_region(0, 0, self.cols - 1, self.rows - 1)
            self.swap_screen()

    def line_length(self, y: int) -> int:
        """Length of line ``y`` without trailing blanks, or full width if wrapped."""
        line = self.lines[y]
        length = self.cols
        if line[length - 1].mode & Attr.WRAP:
            return length
        while length > 0 and line[length - 1].u == _SPACE:
            length -= 1
        return length

    def set_dirty(self, top: int, bot: int) -> None:
        top = _clamp(top, 0, self.rows - 1)
        bot = _clamp(bot, 0, self.rows - 1)
        for y in range(top, bot + 1):
            self.dirty[y] = True

    def full_dirty(self) -> None:
        self.set_dirty(0, self.rows - 1)

    def dirty_attr(self, attr: int) -> None:
        """Mark dirty every line holding a cell with ``attr``."""
        for y, line in enumerate(self.lines[: self.rows - 1]):
            if any(g.mode & attr for g in line[: self.cols - 1]):
                self.set_dirty(y, y)

    def has_attr(self, attr: int) -> bool:
        """Tell whether any cell on screen carries ``attr``."""
        return any(
            g.mode & attr
            for line in self.lines[: self.rows - 1]
            for g in line[: self.cols - 1]
        )

    def clear_region(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Blank a rectangle using the cursor's colours."""
        if x1 > x2:
            x1, x2 = x2, x1
        if y1 > y2:
            y1, y2 = y2, y1
        x1 = _clamp(x1, 0, self.cols - 1)
        x2 = _clamp(x2, 0, self.cols - 1)
        y1 = _clamp(y1, 0, self.rows - 1)
        y2 = _clamp(y2, 0, self.rows - 1)

        attr = self.cursor.attr
        for y in range(y1, y2 + 1):
            self.dirty[y] = True
            line = self.lines[y]
            for x in range(x1, x2 + 1):
                sel = self.selection
                if sel is not None and sel.selected(x, y):
                    sel.clear()
                cell = line[x]
                cell.fg = attr.fg
                cell.bg = attr.bg
                cell.mode = Attr.NULL
                cell.u = _SPACE

    def scroll_down(self, orig: int, n: int) -> None:
        """Move lines ``orig``..bottom down by ``n``, blanking the top ones."""
        n = _clamp(n, 0, self.bot - orig + 1)
        self.set_dirty(orig, self.bot - n)
        self.clear_region(0, self.bot - n + 1, self.cols - 1, self.bot)
        region = self.lines[orig:self.bot + 1]
        cut = len(region) - n
        self.lines[orig:self.bot + 1] = region[cut:] + region[:cut]
        if self.selection is not None:
            self.selection.scroll(orig, n)

    def scroll_up(self, orig: int, n: int) -> None:
        """Move lines below ``orig`` up by ``n``, blanking the bottom ones."""
        n = _clamp(n, 0, self.bot - orig + 1)
        self.clear_region(0, orig, self.cols - 1, orig + n - 1)
        self.set_dirty(orig + n, self.bot)
        region = self.lines[orig:self.bot + 1]
        self.lines[orig:self.bot + 1] = region[n:] + region[:n]
        if self.selection is not None:
            self.selection.scroll(orig, -n)

    def move_to(self, x: int, y: int) -> None:
        if self.cursor.state & CURSOR_ORIGIN:
            miny, maxy = self.top, self.bot
        else:
            miny, maxy = 0, self.rows - 1
        self.cursor.state &= ~CURSOR_WRAPNEXT
        self.cursor.x = _clamp(x, 0, self.cols - 1)
        self.cursor.y = _clamp(y, miny, maxy)

    def move_to_absolute(self, x: int, y: int) -> None:
        """Move relative to the scroll region when origin mode is on."""
        offset = self.top if self.cursor.state & CURSOR_ORIGIN else 0
        self.move_to(x, y + offset)

    def new_line(self, first_col: bool) -> None:
        y = self.cursor.y
        if y == self.bot:
            self.scroll_up(self.top, 1)
        else:
            y += 1
        self.move_to(0 if first_col else self.cursor.x, y)

    def set_char(self, rune: int, attr: Glyph, x: int, y: int) -> None:
        """Store ``rune`` with ``attr`` at (x, y), breaking any wide pair."""
        if self.trantbl[self.charset] == Charset.GRAPHIC0 and 0x41 <= rune <= 0x7E:
            rune = _VT100_GRAPHICS.get(rune, rune)

        line = self.lines[y]
        cell = line[x]
        if cell.mode & Attr.WIDE:
            if x + 1 < self.cols:
                line[x + 1].u = _SPACE
                line[x + 1].mode &= ~Attr.WDUMMY
        elif cell.mode & Attr.WDUMMY:
            line[x - 1].u = _SPACE
            line[x - 1].mode &= ~Attr.WIDE

        self.dirty[y] = True
        cell.u = rune
        cell.mode = attr.mode
        cell.fg = attr.fg
        cell.bg = attr.bg

    def delete_chars(self, n: int) -> None:
        x, y = self.cursor.x, self.cursor.y
        n = _clamp(n, 0, self.cols - x)
        line = self.lines[y]
        line[x:self.cols - n] = [g.copy() for g in line[x + n:self.cols]]
        self.clear_region(self.cols - n, y, self.cols - 1, y)

    def insert_blanks(self, n: int) -> None:
        x, y = self.cursor.x, self.cursor.y
        n = _clamp(n, 0, self.cols - x)
        dst = x + n
        line = self.lines[y]
        line[dst:self.cols] = [g.copy() for g in line[x:self.cols - n]]
        self.clear_region(x, y, dst - 1, y)

    def insert_blank_lines(self, n: int) -> None:
        if self.top <= self.cursor.y <= self.bot:
            self.scroll_down(self.cursor.y, n)

    def delete_lines(self, n: int) -> None:
        if self.top <= self.cursor.y <= self.bot:
            self.scroll_up(self.cursor.y, n)

    def put_tab(self, n: int) -> None:
        """Move the cursor ``n`` tab stops forward, or back if negative."""
        x = self.cursor.x
        if n > 0:
            for _ in range(n):
                if x >= self.cols:
                    break
                x += 1
                while x < self.cols and not self.tabs[x]:
                    x += 1
        elif n < 0:
            for _ in range(-n):
                if x <= 0:
                    break
                x -= 1
                while x > 0 and not self.tabs[x]:
                    x -= 1
        self.cursor.x = _clamp(x, 0, self.cols - 1)

    def save_cursor(self) -> None:
        self._saved[int(self.is_alt)] = self.cursor.copy()

    def load_cursor(self) -> None:
        saved = self._saved[int(self.is_alt)]
        self.cursor = saved.copy()
        self.move_to(saved.x, saved.y)

    def swap_screen(self) -> None:
        self.lines, self.alt = self.alt, self.lines
        self.mode ^= TermMode.ALTSCREEN
        self.full_dirty()

    def set_scroll_region(self, top: int, bot: int) -> None:
        top = _clamp(top, 0, self.rows - 1)
        bot = _clamp(bot, 0, self.rows - 1)
        if top > bot:
            top, bot = bot, top
        self.top = top
        self.bot = bot

    def dump_line(self, y: int) -> bytes:
        """Return line ``y`` as UTF-8 without trailing blanks, plus a newline."""
        line = self.lines[y]
        length = min(self.line_length(y), self.cols)
        out = bytearray()
        if not (length == 1 and line[0].u == _SPACE):
            for glyph in line[:length]:
                out += utf8.encode(glyph.u)
        out += b"\n"
        return bytes(out)

    def dump(self) -> bytes:
        return b"".join(self.dump_line(y) for y in range(self.rows))

    def text(self) -> str:
        """The visible characters, one row per line, trailing blanks removed."""
        return "\n".join(
            "".join(chr(g.u) for g in line if not g.mode & Attr.WDUMMY).rstrip(" ")
            for line in self.lines
        )