import struct

import pytest

from sfsynth.errors import ParseError
from sfsynth.reader import Reader


def test_integers_round_trip():
    data = struct.pack("<BHIbh", 200, 0xBEEF, 0xDEADBEEF, -5, -1234)
    reader = Reader(data)
    assert reader.read_u8() == 200
    assert reader.read_u16() == 0xBEEF
    assert reader.read_u32() == 0xDEADBEEF
    assert reader.read_i8() == -5
    assert reader.read_i16() == -1234


def test_little_endian_byte_order():
    reader = Reader(b"\x01\x02")
    assert reader.read_u16() == 0x0201


def test_read_returns_consecutive_slices():
    reader = Reader(b"abcdef")
    assert reader.read(2) == b"ab"
    assert reader.read(3) == b"cde"
    assert reader.read(1) == b"f"


def test_read_string_stops_at_nul():
    field = b"Piano".ljust(20, b"\0")
    reader = Reader(field + b"\x07\x00")
    assert reader.read_string(20) == "Piano"
    assert reader.read_u16() == 7


def test_read_string_without_terminator_uses_whole_field():
    reader = Reader(b"abcd")
    assert reader.read_string(4) == "abcd"


def test_read_string_rejects_invalid_utf8():
    reader = Reader(b"\xff\xfe\x00\x00")
    with pytest.raises(ParseError):
        reader.read_string(4)


def test_short_read_raises():
    reader = Reader(b"\x01")
    with pytest.raises(ParseError):
        reader.read_u16()


def test_read_past_end_raises():
    reader = Reader(b"abc")
    reader.read(3)
    with pytest.raises(ParseError):
        reader.read(1)