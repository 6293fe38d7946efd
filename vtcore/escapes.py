"""Buffers and parsers for CSI and string (OSC, DCS, APC, PM) escape sequences."""

from __future__ import annotations

from dataclasses import dataclass, field

ESC_BUF_SIZE = 128 * 4
ESC_ARG_SIZE = 16
STR_ARG_SIZE = ESC_ARG_SIZE

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)


def _printable(byte: int) -> str:
    if 0x20 <= byte <= 0x7E:
        return chr(byte)
    if byte == 0x0A:
        return "(\\n)"
    if byte == 0x0D:
        return "(\\r)"
    if byte == 0x1B:
        return "(\\e)"
    return f"({byte:02x})"


def _strtol(buf: bytes, pos: int) -> tuple[int, int]:
    """Parse a decimal integer like strtol; return (value, end position)."""
    end = len(buf)
    i = pos
    while i < end and buf[i] in b" \t\n\v\f\r":
        i += 1
    sign = 1
    if i < end and buf[i] in b"+-":
        sign = -1 if buf[i] == ord("-") else 1
        i += 1
    start = i
    while i < end and 0x30 <= buf[i] <= 0x39:
        i += 1
    if i == start:
        return 0, pos
    value = sign * int(buf[start:i])
    if value >= _LONG_MAX or value <= _LONG_MIN:
        return -1, i
    return ((value + 2**31) % 2**32) - 2**31, i


@dataclass
class CSIEscape:
    """A control sequence: ESC '[' [priv] args final."""

    buf: bytearray = field(default_factory=bytearray)
    priv: bool = False
    args: list[int] = field(default_factory=list)
    mode: tuple[str, str] = ("\0", "\0")

    def append(self, byte: int) -> bool:
        """Add one byte; return True when the sequence is complete."""
        self.buf.append(byte & 0xFF)
        return 0x40 <= byte <= 0x7E or len(self.buf) >= ESC_BUF_SIZE - 1

    def arg(self, index: int, default: int = 0) -> int:
        """Argument ``index``, with ``default`` replacing a missing or zero value."""
        value = self.args[index] if index < len(self.args) else 0
        return value if value else default

    def parse(self) -> None:
        buf = bytes(self.buf)
        end = len(buf)

        def at(pos: int) -> int:
            return buf[pos] if pos < end else 0

        self.args = []
        pos = 0
        if at(0) == ord("?"):
            self.priv = True
            pos = 1
        sep = ord(";")
        while pos < end:
            value, pos = _strtol(buf, pos)
            self.args.append(value)
            if sep == ord(";") and at(pos) == ord(":"):
                sep = ord(":")
            if at(pos) != sep or len(self.args) == ESC_ARG_SIZE:
                break
            pos += 1
        first = chr(at(pos))
        second = chr(buf[pos + 1]) if pos + 1 < end else "\0"
        self.mode = (first, second)

    def dump(self) -> str:
        return "ESC[" + "".join(_printable(b) for b in self.buf)


@dataclass
class STREscape:
    """A string sequence: ESC type [args] ST."""

    type: str = "\0"
    buf: bytearray = field(default_factory=bytearray)
    args: list[str] = field(default_factory=list)

    def append(self, data: bytes) -> None:
        self.buf += data

    def parse(self) -> None:
        if not self.buf:
            self.args = []
            return
        parts = bytes(self.buf).split(b";")[:STR_ARG_SIZE]
        self.args = [p.decode("utf-8", errors="replace") for p in parts]

    def dump(self) -> str:
        out = ["ESC", self.type]
        for byte in self.buf:
            if byte == 0:
                return "".join(out)
            out.append(_printable(byte))
        out.append("ESC\\")
        return "".join(out)