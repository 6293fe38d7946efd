# vtcore

`vtcore` provides the building blocks of a VT100/xterm-style terminal
emulator as a plain Python library. It includes a character-cell screen
with a primary and an alternate buffer, text selection, buffers for escape
sequences, and UTF-8 and base64 helpers. It has no dependencies outside the
standard library.

## Modules

- **`vtcore.config`**: `Config`, a dataclass that holds the defaults. These
  cover size (80×24), tab width, default colour indices, the `TERM` name,
  word delimiters, timings, and whether the alternate screen and window
  operations are allowed. `default_colornames()` returns the colour table.
  Entries 0–15 are the named ANSI colours, 16–255 are unset (`None`), and
  the extra default colours start at index 256. `Config.color_name(index)`
  looks up one entry and raises `IndexError` when the index is outside the
  table.
- **`vtcore.utf8`**: `decode(data)` returns `(rune, consumed)` and reports
  0 bytes consumed for an incomplete sequence. `encode(rune)` returns the
  UTF-8 bytes. `validate(rune, length)` range-checks a code point. Invalid
  input becomes U+FFFD in all three. `base64_decode(text)` is lenient: it
  skips non-printable characters and assumes any missing padding.
- **`vtcore.glyph`**: the `Glyph` cell (code point, `Attr` flags, colours)
  and the `Attr` flags themselves: bold, faint, italic, underline, blink,
  reverse, invisible, struck, wrap, wide and the wide-character dummy. It
  also holds the `SelectionMode`, `SelectionType` and `SelectionSnap`
  enumerations, and `truecolor(r, g, b)` and `is_truecolor(color)` for
  24-bit colours.
- **`vtcore.screen`**: `Screen`, a grid of glyphs. It supports resizing
  that keeps the cursor's line visible, scroll regions, and scrolling up
  and down. It inserts and deletes characters and lines, keeps tab stops,
  and moves the cursor with origin mode. It saves and restores the cursor
  for each buffer, swaps to the alternate buffer and tracks dirty lines.
  It maps characters through the DEC special graphics set when that set
  is selected. `dump()`, `dump_line(y)` and `text()` return plain-text
  dumps.
- **`vtcore.selection`**: `Selection`, which attaches itself to a `Screen`.
  It makes regular and rectangular selections, and it can snap to words or
  to whole lines across wrapped lines. It follows scrolling and returns
  the selected text with `text()`.
- **`vtcore.escapes`**: `CSIEscape` collects and parses a control sequence
  into its private marker, numeric arguments and final characters.
  `STREscape` collects a string sequence (OSC, DCS, APC, PM) and splits it
  into its `;`-separated arguments. Both have a `dump()` method that
  returns a readable form for diagnostics.

## Installation

```
pip install vtcore
```

## Examples

Write characters into a screen and read them back:

```python
from vtcore.screen import Screen

screen = Screen(20, 3)
attr = screen.cursor.attr
for x, ch in enumerate("hello world"):
    screen.set_char(ord(ch), attr, x, 0)

print(screen.text())         # "hello world\n\n"
```

Select a word:

```python
from vtcore.glyph import SelectionSnap
from vtcore.selection import Selection

selection = Selection(screen)
selection.start(0, 0, SelectionSnap.WORD)
print(selection.text())      # "hello"
```

Parse a control sequence and a string sequence:

```python
from vtcore.escapes import CSIEscape, STREscape

csi = CSIEscape()
for byte in b"1;31m":
    csi.append(byte)
csi.parse()
print(csi.args, csi.mode)    # [1, 31] ('m', '\x00')

osc = STREscape(type="]")
osc.append(b"0;my title")
osc.parse()
print(osc.args)              # ['0', 'my title']
```

UTF-8 and base64:

```python
from vtcore import utf8

utf8.decode(b"\xe2\x82\xac")      # (8364, 3)
utf8.encode(0x20AC)               # b'\xe2\x82\xac'
utf8.base64_decode("aGVsbG8=")    # b'hello'
```

## What it does not do

`vtcore` does not interpret a byte stream. No component reads program
output, applies the parsed escape sequences to a `Screen`, or sends
replies. That means SGR attributes, mode changes, device status reports
and title changes are not acted on: `CSIEscape` and `STREscape` only
collect and parse sequences. The package does not start a shell, open a
pseudo-terminal or serial line, or handle window drawing, fonts, keyboard
or mouse input. A front end built on these modules has to provide all of
that itself.

## Running the tests

```
pip install -e .[test]
pytest
```