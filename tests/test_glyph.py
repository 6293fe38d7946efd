import pytest

from vtcore.glyph import Attr, Glyph, is_truecolor, truecolor


def test_truecolor_is_marked():
    assert is_truecolor(truecolor(10, 20, 30)) is True


def test_truecolor_channels_unpack():
    color = truecolor(10, 20, 30)
    assert (color >> 16) & 0xFF == 10
    assert (color >> 8) & 0xFF == 20
    assert color & 0xFF == 30


def test_truecolor_black_differs_from_index_zero():
    assert truecolor(0, 0, 0) != 0
    assert is_truecolor(truecolor(0, 0, 0))


@pytest.mark.parametrize("index", [0, 7, 255, 258, 259])
def test_palette_index_is_not_truecolor(index):
    assert is_truecolor(index) is False


@pytest.mark.parametrize("rgb", [(256, 0, 0), (0, -1, 0), (0, 0, 1000)])
def test_truecolor_rejects_out_of_range(rgb):
    with pytest.raises(ValueError):
        truecolor(*rgb)


def test_glyph_default_is_blank():
    glyph = Glyph()
    assert glyph.u == ord(" ")
    assert glyph.mode == Attr.NULL


def test_glyph_copy_is_equal_and_independent():
    original = Glyph(u=ord("x"), mode=Attr.BOLD | Attr.WIDE, fg=1, bg=2)
    duplicate = original.copy()
    assert duplicate == original
    duplicate.u = ord("y")
    duplicate.mode &= ~Attr.WIDE
    assert original.u == ord("x")
    assert original.mode & Attr.WIDE


def test_attr_clear_bits():
    glyph = Glyph(mode=Attr.BOLD | Attr.FAINT | Attr.ITALIC)
    glyph.mode &= ~Attr.BOLD_FAINT
    assert glyph.mode == Attr.ITALIC