import base64

import pytest

from vtcore.utf8 import UTF_INVALID, base64_decode, decode, encode, validate

SAMPLES = ["A", "~", "é", "ß", "€", "☃", "▫", "𝄞", "\U0010FFFF", "\x00"]
REPLACEMENT = "\ufffd".encode("utf-8")


@pytest.mark.parametrize("char", SAMPLES)
def test_encode_matches_utf8(char):
    assert encode(ord(char)) == char.encode("utf-8")


@pytest.mark.parametrize("char", SAMPLES)
def test_decode_round_trip(char):
    data = char.encode("utf-8")
    assert decode(data) == (ord(char), len(data))


def test_decode_reads_only_first_character():
    data = "€abc".encode("utf-8")
    assert decode(data) == (ord("€"), len("€".encode("utf-8")))


def test_decode_empty():
    assert decode(b"") == (UTF_INVALID, 0)


def test_decode_incomplete_sequence_consumes_nothing():
    partial = "€".encode("utf-8")[:2]
    assert decode(partial) == (UTF_INVALID, 0)


def test_decode_stray_continuation_byte():
    assert decode(b"\x80abc") == (UTF_INVALID, 1)


def test_decode_invalid_lead_byte():
    assert decode(b"\xffabc") == (UTF_INVALID, 1)


def test_decode_broken_continuation():
    assert decode(b"\xe2A") == (UTF_INVALID, 1)


def test_decode_overlong_is_replaced():
    rune, consumed = decode(b"\xc0\x80")
    assert rune == UTF_INVALID
    assert consumed == 2


def test_encode_surrogate_is_replaced():
    assert encode(0xD800) == REPLACEMENT


def test_encode_beyond_unicode_is_replaced():
    assert encode(0x110000) == REPLACEMENT


def test_encode_negative_is_replaced():
    assert encode(-1) == REPLACEMENT


def test_validate_accepts_in_range():
    assert validate(ord("A"), 1) == (ord("A"), 1)


@pytest.mark.parametrize("char", SAMPLES)
def test_validate_any_length_reports_size(char):
    assert validate(ord(char), 0) == (ord(char), len(char.encode("utf-8")))


def test_validate_rejects_wrong_length():
    assert validate(ord("A"), 2) == (UTF_INVALID, len(REPLACEMENT))


def test_validate_bad_length_raises():
    with pytest.raises(ValueError):
        validate(ord("A"), 5)


@pytest.mark.parametrize(
    "payload", [b"", b"h", b"hi", b"hello", b"hello world", bytes(range(1, 200))]
)
def test_base64_round_trip(payload):
    assert base64_decode(base64.b64encode(payload).decode("ascii")) == payload


def test_base64_accepts_bytes():
    encoded = base64.b64encode(b"clipboard")
    assert base64_decode(encoded) == b"clipboard"


def test_base64_skips_non_printable():
    assert base64_decode("aGVs\nbG8=") == base64.b64decode("aGVsbG8=")


def test_base64_missing_padding():
    assert base64_decode("aGVsbG8") == base64.b64decode("aGVsbG8=")


def test_base64_only_newline_gives_nothing():
    assert base64_decode("\n") == b""


def test_base64_leading_padding_gives_nothing():
    assert base64_decode("=abc") == b""