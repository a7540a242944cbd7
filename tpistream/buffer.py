"""A cursor over little-endian binary data."""

import struct

from .errors import UnexpectedEof


class ParseBuffer:
    """Reads little-endian values from a byte string, advancing as it goes."""

    __slots__ = ("_data", "_pos")

    def __init__(self, data):
        self._data = bytes(data)
        self._pos = 0

    def __len__(self):
        """Number of bytes not yet consumed."""
        return len(self._data) - self._pos

    def __repr__(self):
        return f"ParseBuffer(pos={self._pos}, remaining={len(self)})"

    def pos(self):
        """Number of bytes consumed so far."""
        return self._pos

    def is_empty(self):
        return self._pos >= len(self._data)

    def copy(self):
        """An independent buffer at the same position over the same data."""
        other = ParseBuffer.__new__(ParseBuffer)
        other._data = self._data
        other._pos = self._pos
        return other

    def take(self, count):
        """Consume and return the next ``count`` bytes."""
        if count < 0 or count > len(self):
            raise UnexpectedEof()
        start = self._pos
        self._pos += count
        return self._data[start:self._pos]

    def _peek(self, fmt):
        size = struct.calcsize(fmt)
        if size > len(self):
            raise UnexpectedEof()
        return struct.unpack_from(fmt, self._data, self._pos)[0]

    def _parse(self, fmt):
        value = self._peek(fmt)
        self._pos += struct.calcsize(fmt)
        return value

    def peek_u8(self):
        return self._peek("<B")

    def peek_u16(self):
        return self._peek("<H")

    def parse_u8(self):
        return self._parse("<B")

    def parse_u16(self):
        return self._parse("<H")

    def parse_i16(self):
        return self._parse("<h")

    def parse_u32(self):
        return self._parse("<I")

    def parse_i32(self):
        return self._parse("<i")

    def parse_u64(self):
        return self._parse("<Q")

    def parse_i64(self):
        return self._parse("<q")

    def parse_cstring(self):
        """Consume a NUL-terminated string and return it without the NUL."""
        end = self._data.find(b"\x00", self._pos)
        if end < 0:
            raise UnexpectedEof()
        value = self._data[self._pos:end]
        self._pos = end + 1
        return value

    def parse_u8_pascal_string(self):
        """Consume a string prefixed by a one-byte length."""
        length = self.parse_u8()
        return self.take(length)