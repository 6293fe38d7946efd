import pytest

from vtcore.escapes import CSIEscape, STREscape


def _csi(text: bytes) -> CSIEscape:
    csi = CSIEscape()
    for b in text:
        csi.append(b)
    csi.parse()
    return csi


def test_append_reports_final_byte():
    csi = CSIEscape()
    assert csi.append(ord("1")) is False
    assert csi.append(ord(";")) is False
    assert csi.append(ord("H")) is True


def test_parse_two_args():
    csi = _csi(b"1;2H")
    assert csi.args == [1, 2]
    assert csi.mode[0] == "H"
    assert csi.priv is False


def test_parse_private():
    csi = _csi(b"?25h")
    assert csi.priv is True
    assert csi.args == [25]
    assert csi.mode[0] == "h"


def test_parse_colon_separator():
    csi = _csi(b"38:2:1:2:3m")
    assert csi.args == [38, 2, 1, 2, 3]
    assert csi.mode[0] == "m"


def test_parse_second_mode_char():
    csi = _csi(b"2 q")
    assert csi.mode == (" ", "q")
    assert csi.args == [2]


def test_arg_default():
    csi = _csi(b"H")
    assert csi.arg(0, 1) == 1
    assert csi.arg(5, 7) == 7


def test_arg_limit():
    csi = _csi(b";".join(b"1" for _ in range(20)) + b"m")
    assert len(csi.args) == 16


def test_csi_dump():
    csi = CSIEscape()
    csi.append(ord("1"))
    csi.append(0x0A)
    assert csi.dump() == "ESC[1(\\n)"


def test_str_parse():
    seq = STREscape(type="]")
    seq.append(b"0;title")
    seq.parse()
    assert seq.args == ["0", "title"]


@pytest.mark.parametrize("data", [b"", b"abc"])
def test_str_parse_counts(data):
    seq = STREscape(type="]")
    seq.append(data)
    seq.parse()
    assert seq.args == ([data.decode()] if data else [])


def test_str_dump():
    seq = STREscape(type="]")
    seq.append(b"2;x")
    assert seq.dump() == "ESC]2;xESC\\"