"""UTF-8 encoding and decoding with replacement of invalid sequences, plus a
lenient base64 decoder."""

from __future__ import annotations

from typing import Union

UTF_INVALID = 0xFFFD
UTF_SIZE = 4

# Lead-byte markers and masks, indexed by sequence length (0 = continuation).
_UTF_BYTE = (0x80, 0x00, 0xC0, 0xE0, 0xF0)
_UTF_MASK = (0xC0, 0x80, 0xE0, 0xF0, 0xF8)
_UTF_MIN = (0, 0, 0x80, 0x800, 0x10000)
_UTF_MAX = (0x10FFFF, 0x7F, 0x7FF, 0xFFFF, 0x10FFFF)

_BASE64_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"


def _decode_byte(byte: int) -> tuple[int, int]:
    """Return the payload bits of ``byte`` and its class.

    The class is 0 for a continuation byte, 1-4 for a lead byte of that
    sequence length, and 5 for a byte that fits no class.
    """
    for kind, (mask, marker) in enumerate(zip(_UTF_MASK, _UTF_BYTE)):
        if byte & mask == marker:
            return byte & ~mask & 0xFF, kind
    return 0, len(_UTF_MASK)


def validate(rune: int, length: int) -> tuple[int, int]:
    """Check ``rune`` against the range of a ``length``-byte sequence.

    Returns the rune, replaced by U+FFFD if it is out of range or a
    surrogate, together with the number of bytes needed to encode it.
    A ``length`` of 0 accepts any valid code point.
    """
    if not 0 <= length <= UTF_SIZE:
        raise ValueError(f"sequence length {length} out of range")
    if not _UTF_MIN[length] <= rune <= _UTF_MAX[length] or 0xD800 <= rune <= 0xDFFF:
        rune = UTF_INVALID
    size = next(i for i in range(1, UTF_SIZE + 1) if rune <= _UTF_MAX[i])
    return rune, size


def decode(data: bytes) -> tuple[int, int]:
    """Decode one character from the start of ``data``.

    Returns ``(rune, consumed)``. ``consumed`` is 0 when ``data`` is empty
    or ends inside an incomplete sequence; malformed input yields U+FFFD
    and consumes the bytes examined so far.
    """
    if not data:
        return UTF_INVALID, 0
    decoded, length = _decode_byte(data[0])
    if not 1 <= length <= UTF_SIZE:
        return UTF_INVALID, 1
    consumed = 1
    for byte in data[1:length]:
        bits, kind = _decode_byte(byte)
        decoded = (decoded << 6) | bits
        if kind != 0:
            return UTF_INVALID, consumed
        consumed += 1
    if consumed < length:
        return UTF_INVALID, 0
    rune, _ = validate(decoded, length)
    return rune, length


def encode(rune: int) -> bytes:
    """Encode ``rune`` as UTF-8, substituting U+FFFD for invalid code points."""
    rune, length = validate(rune, 0)
    tail = []
    for _ in range(length - 1):
        tail.append(_UTF_BYTE[0] | (rune & ~_UTF_MASK[0] & 0xFF))
        rune >>= 6
    lead = (_UTF_BYTE[length] | (rune & ~_UTF_MASK[length])) & 0xFF
    return bytes([lead, *reversed(tail)])


def _base64_table() -> list[int]:
    table = [0] * 256
    for value, char in enumerate(_BASE64_ALPHABET):
        table[char] = value
    table[ord("=")] = -1
    return table


_BASE64_DIGITS = _base64_table()


def _is_print(byte: int) -> bool:
    return 0x20 <= byte <= 0x7E


def base64_decode(text: Union[str, bytes]) -> bytes:
    """Decode base64 leniently.

    Non-printable characters are skipped, missing padding is assumed, and
    decoding stops at the first padding or invalid position.
    """
    src = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    pos = 0
    end = len(src)

    def next_char() -> int:
        nonlocal pos
        while pos < end and not _is_print(src[pos]):
            pos += 1
        if pos < end:
            pos += 1
            return src[pos - 1]
        return ord("=")

    out = bytearray()
    while pos < end:
        a, b, c, d = (_BASE64_DIGITS[next_char()] for _ in range(4))
        if a == -1 or b == -1:
            break
        out.append(((a << 2) | ((b & 0x30) >> 4)) & 0xFF)
        if c == -1:
            break
        out.append((((b & 0x0F) << 4) | ((c & 0x3C) >> 2)) & 0xFF)
        if d == -1:
            break
        out.append((((c & 0x03) << 6) | d) & 0xFF)
    return bytes(out)