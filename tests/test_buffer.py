import struct

import pytest

from tpistream.buffer import ParseBuffer
from tpistream.errors import UnexpectedEof


def test_integer_round_trip():
    data = struct.pack("<BHhIiQq", 0xAB, 0xBEEF, -2, 0xDEADBEEF, -5, 2**63 + 7, -9)
    buf = ParseBuffer(data)
    assert buf.parse_u8() == 0xAB
    assert buf.parse_u16() == 0xBEEF
    assert buf.parse_i16() == -2
    assert buf.parse_u32() == 0xDEADBEEF
    assert buf.parse_i32() == -5
    assert buf.parse_u64() == 2**63 + 7
    assert buf.parse_i64() == -9
    assert buf.is_empty()
    assert buf.pos() == len(data)


def test_little_endian_u16():
    buf = ParseBuffer(b"\x09\x16")
    assert buf.parse_u16() == 0x1609


def test_peek_does_not_advance():
    buf = ParseBuffer(b"\x03\x15\x00")
    assert buf.peek_u8() == 0x03
    assert buf.peek_u16() == 0x1503
    assert buf.pos() == 0
    assert len(buf) == 3


def test_take_and_len():
    buf = ParseBuffer(b"abcdef")
    assert buf.take(2) == b"ab"
    assert len(buf) == 4
    assert buf.take(4) == b"cdef"
    assert buf.is_empty()


def test_take_past_end_raises():
    buf = ParseBuffer(b"abc")
    with pytest.raises(UnexpectedEof):
        buf.take(4)
    assert buf.pos() == 0


@pytest.mark.parametrize(
    "method", ["parse_u8", "parse_u16", "parse_u32", "parse_u64", "peek_u8", "peek_u16"]
)
def test_reading_empty_raises(method):
    with pytest.raises(UnexpectedEof):
        getattr(ParseBuffer(b""), method)()


def test_cstring():
    buf = ParseBuffer(b"H_size\x00.?AUH_size@@\x00")
    assert buf.parse_cstring() == b"H_size"
    assert buf.parse_cstring() == b".?AUH_size@@"
    assert buf.is_empty()


def test_cstring_without_terminator_raises():
    with pytest.raises(UnexpectedEof):
        ParseBuffer(b"abc").parse_cstring()


def test_pascal_string():
    buf = ParseBuffer(b"\x03foox")
    assert buf.parse_u8_pascal_string() == b"foo"
    assert buf.take(1) == b"x"


def test_pascal_string_too_short_raises():
    with pytest.raises(UnexpectedEof):
        ParseBuffer(b"\x05ab").parse_u8_pascal_string()


def test_copy_is_independent():
    buf = ParseBuffer(b"\x01\x02\x03")
    buf.parse_u8()
    other = buf.copy()
    assert other.parse_u8() == 2
    assert buf.pos() == 1
    assert other.pos() == 2