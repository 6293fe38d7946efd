import pytest

from vtcore.config import Config
from vtcore.glyph import SelectionMode, SelectionSnap, SelectionType
from vtcore.screen import Screen
from vtcore.selection import Selection

COLS, ROWS = 20, 5


def write(screen, y, text):
    for x, ch in enumerate(text):
        screen.set_char(ord(ch), screen.cursor.attr, x, y)


@pytest.fixture
def screen():
    return Screen(COLS, ROWS, Config())


@pytest.fixture
def sel(screen):
    return Selection(screen)


def test_no_selection(sel):
    assert sel.text() is None
    assert not sel.selected(0, 0)


def test_single_line(screen, sel):
    write(screen, 0, "hello world")
    sel.start(0, 0, SelectionSnap.NONE)
    assert sel.mode == SelectionMode.EMPTY
    assert not sel.selected(0, 0)
    sel.extend(4, 0, SelectionType.REGULAR, False)
    assert sel.mode == SelectionMode.READY
    assert sel.text() == "hello"
    assert sel.selected(2, 0)
    assert not sel.selected(5, 0)


def test_extend_past_line_end_adds_newline(screen, sel):
    write(screen, 0, "hello")
    sel.start(0, 0, SelectionSnap.NONE)
    sel.extend(15, 0, SelectionType.REGULAR, False)
    assert sel.text() == "hello\n"


def test_multi_line(screen, sel):
    write(screen, 0, "hello")
    write(screen, 1, "world")
    sel.start(2, 0, SelectionSnap.NONE)
    sel.extend(2, 1, SelectionType.REGULAR, True)
    assert sel.mode == SelectionMode.IDLE
    assert sel.text() == "llo\nwor"


def test_rectangular(screen, sel):
    write(screen, 0, "abcd")
    write(screen, 1, "efgh")
    sel.start(1, 0, SelectionSnap.NONE)
    sel.extend(2, 1, SelectionType.RECTANGULAR, False)
    assert sel.text() == "bc\nfg"
    assert sel.selected(1, 1)
    assert not sel.selected(0, 1)


def test_word_snap(screen, sel):
    write(screen, 0, "foo bar baz")
    sel.start(5, 0, SelectionSnap.WORD)
    assert sel.mode == SelectionMode.READY
    assert sel.text() == "bar"


def test_line_snap(screen, sel):
    write(screen, 0, "one")
    write(screen, 1, "two")
    sel.start(1, 1, SelectionSnap.LINE)
    assert sel.text() == "two\n"


def test_done_on_empty_clears(screen, sel):
    write(screen, 0, "abc")
    sel.start(1, 0, SelectionSnap.NONE)
    sel.extend(1, 0, SelectionType.REGULAR, True)
    assert sel.text() is None


def test_clear(screen, sel):
    write(screen, 0, "abc")
    sel.start(0, 0, SelectionSnap.NONE)
    sel.extend(2, 0, SelectionType.REGULAR, False)
    sel.clear()
    assert sel.text() is None
    assert not sel.selected(1, 0)


def test_scroll_follows_content(screen, sel):
    write(screen, 1, "world")
    sel.start(0, 1, SelectionSnap.NONE)
    sel.extend(2, 1, SelectionType.REGULAR, False)
    before = sel.text()
    screen.scroll_up(0, 1)
    assert sel.nb.y == 0
    assert sel.text() == before


def test_scroll_out_clears(screen, sel):
    write(screen, 0, "hello")
    sel.start(0, 0, SelectionSnap.NONE)
    sel.extend(2, 0, SelectionType.REGULAR, False)
    screen.scroll_up(0, 1)
    assert sel.text() is None


def test_clearing_selected_cells_clears_selection(screen, sel):
    write(screen, 0, "hello")
    sel.start(0, 0, SelectionSnap.NONE)
    sel.extend(3, 0, SelectionType.REGULAR, False)
    screen.clear_region(0, 0, COLS - 1, 0)
    assert sel.text() is None


def test_not_selected_on_other_buffer(screen, sel):
    write(screen, 0, "hello")
    sel.start(0, 0, SelectionSnap.NONE)
    sel.extend(3, 0, SelectionType.REGULAR, False)
    screen.swap_screen()
    assert not sel.selected(1, 0)
    screen.swap_screen()
    assert sel.selected(1, 0)