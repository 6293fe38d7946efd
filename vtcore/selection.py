"""Text selection over a screen, with word and line snapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from . import utf8
from .glyph import Attr, SelectionMode, SelectionSnap, SelectionType
from .screen import Screen


@dataclass
class _Point:
    x: int = 0
    y: int = 0


class Selection:
    """The selection on one screen.

    ``ob``/``oe`` are the original begin and end points, ``nb``/``ne`` the
    normalized ones.
    """

    def __init__(self, screen: Screen) -> None:
        self.screen = screen
        self.mode = SelectionMode.IDLE
        self.type = SelectionType.REGULAR
        self.snap = SelectionSnap.NONE
        self.nb = _Point()
        self.ne = _Point()
        self.ob = _Point(-1, 0)
        self.oe = _Point()
        self.alt = False
        screen.selection = self

    @property
    def active(self) -> bool:
        return self.ob.x != -1

    def clear(self) -> None:
        if not self.active:
            return
        self.mode = SelectionMode.IDLE
        self.ob.x = -1
        self.screen.set_dirty(self.nb.y, self.ne.y)

    def start(self, col: int, row: int, snap: int) -> None:
        self.clear()
        self.mode = SelectionMode.EMPTY
        self.type = SelectionType.REGULAR
        self.alt = self.screen.is_alt
        self.snap = SelectionSnap(snap)
        self.ob = _Point(col, row)
        self.oe = _Point(col, row)
        self.normalize()
        if self.snap != SelectionSnap.NONE:
            self.mode = SelectionMode.READY
        self.screen.set_dirty(self.nb.y, self.ne.y)

    def extend(self, col: int, row: int, type: int, done: bool) -> None:
        if self.mode == SelectionMode.IDLE:
            return
        if done and self.mode == SelectionMode.EMPTY:
            self.clear()
            return

        old_ey, old_ex = self.oe.y, self.oe.x
        old_sby, old_sey = self.nb.y, self.ne.y
        old_type = self.type

        self.oe = _Point(col, row)
        self.normalize()
        self.type = SelectionType(type)

        if (
            old_ey != self.oe.y
            or old_ex != self.oe.x
            or old_type != self.type
            or self.mode == SelectionMode.EMPTY
        ):
            self.screen.set_dirty(min(self.nb.y, old_sby), max(self.ne.y, old_sey))

        self.mode = SelectionMode.IDLE if done else SelectionMode.READY

    def normalize(self) -> None:
        ob, oe = self.ob, self.oe
        if self.type == SelectionType.REGULAR and ob.y != oe.y:
            nbx = ob.x if ob.y < oe.y else oe.x
            nex = oe.x if ob.y < oe.y else ob.x
        else:
            nbx, nex = min(ob.x, oe.x), max(ob.x, oe.x)
        nb = _Point(*self._snap(nbx, min(ob.y, oe.y), -1))
        ne = _Point(*self._snap(nex, max(ob.y, oe.y), +1))
        self.nb, self.ne = nb, ne

        if self.type == SelectionType.RECTANGULAR:
            return
        length = self.screen.line_length(nb.y)
        if length < nb.x:
            nb.x = length
        if self.screen.line_length(ne.y) <= ne.x:
            ne.x = self.screen.cols - 1

    def _is_delim(self, rune: int) -> bool:
        return rune != 0 and chr(rune) in self.screen.config.word_delimiters

    def _snap(self, x: int, y: int, direction: int) -> tuple[int, int]:
        screen = self.screen
        cols, rows = screen.cols, screen.rows
        lines = screen.lines

        if self.snap == SelectionSnap.WORD:
            prev = lines[y][x]
            prev_delim = self._is_delim(prev.u)
            while True:
                newx, newy = x + direction, y
                if not 0 <= newx <= cols - 1:
                    newy += direction
                    newx = (newx + cols) % cols
                    if not 0 <= newy <= rows - 1:
                        break
                    yt, xt = (y, x) if direction > 0 else (newy, newx)
                    if not lines[yt][xt].mode & Attr.WRAP:
                        break
                if newx >= screen.line_length(newy):
                    break
                glyph = lines[newy][newx]
                delim = self._is_delim(glyph.u)
                if not glyph.mode & Attr.WDUMMY and (
                    delim != prev_delim or (delim and glyph.u != prev.u)
                ):
                    break
                x, y = newx, newy
                prev, prev_delim = glyph, delim
        elif self.snap == SelectionSnap.LINE:
            x = 0 if direction < 0 else cols - 1
            if direction < 0:
                while y > 0 and lines[y - 1][cols - 1].mode & Attr.WRAP:
                    y += direction
            elif direction > 0:
                while y < rows - 1 and lines[y][cols - 1].mode & Attr.WRAP:
                    y += direction
        return x, y

    def selected(self, x: int, y: int) -> bool:
        if (
            self.mode == SelectionMode.EMPTY
            or not self.active
            or self.alt != self.screen.is_alt
        ):
            return False
        nb, ne = self.nb, self.ne
        if self.type == SelectionType.RECTANGULAR:
            return nb.y <= y <= ne.y and nb.x <= x <= ne.x
        return (
            nb.y <= y <= ne.y
            and (y != nb.y or x >= nb.x)
            and (y != ne.y or x <= ne.x)
        )

    def scroll(self, orig: int, n: int) -> None:
        """Follow lines moved by ``n`` within the region starting at ``orig``."""
        screen = self.screen
        if not self.active or self.alt != screen.is_alt:
            return
        begin_in = orig <= self.nb.y <= screen.bot
        end_in = orig <= self.ne.y <= screen.bot
        if begin_in != end_in:
            self.clear()
        elif begin_in:
            self.ob.y += n
            self.oe.y += n
            if not (
                screen.top <= self.ob.y <= screen.bot
                and screen.top <= self.oe.y <= screen.bot
            ):
                self.clear()
            else:
                self.normalize()

    def text(self) -> Optional[str]:
        """The selected text, or None when there is no selection."""
        if not self.active:
            return None
        screen = self.screen
        rectangular = self.type == SelectionType.RECTANGULAR
        out = bytearray()
        for y in range(self.nb.y, self.ne.y + 1):
            length = screen.line_length(y)
            if length == 0:
                out += b"\n"
                continue
            line = screen.lines[y]
            if rectangular:
                first, lastx = self.nb.x, self.ne.x
            else:
                first = self.nb.x if self.nb.y == y else 0
                lastx = self.ne.x if self.ne.y == y else screen.cols - 1
            last = min(lastx, length - 1)
            while last >= first and line[last].u == ord(" "):
                last -= 1
            for glyph in line[first:last + 1]:
                if not glyph.mode & Attr.WDUMMY:
                    out += utf8.encode(glyph.u)
            wrapped = last >= 0 and bool(line[last].mode & Attr.WRAP)
            if (y < self.ne.y or lastx >= length) and (not wrapped or rectangular):
                out += b"\n"
        return out.decode("utf-8")