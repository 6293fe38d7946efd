"""Building blocks of a VT100/xterm-style terminal: screen, selection, escape buffers and UTF-8."""

__version__ = "0.1.0"

__all__ = ["config", "escapes", "glyph", "screen", "selection", "utf8"]