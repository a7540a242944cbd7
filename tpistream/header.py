"""The header at the start of a type or id stream."""

from dataclasses import dataclass

from .errors import InvalidTypeInformationHeader

_MAX_HEADER_SIZE = 1024
_MIN_TYPE_INDEX = 4096


@dataclass(frozen=True)
class Slice:
    """An offset and size pair locating data in another stream."""

    offset: int
    size: int


@dataclass(frozen=True)
class Header:
    """Parsed stream header."""

    version: int
    header_size: int
    minimum_index: int
    maximum_index: int
    gprec_size: int
    tpi_hash_stream: int
    tpi_hash_pad_stream: int
    hash_key_size: int
    hash_bucket_size: int
    hash_values: Slice
    ti_off: Slice
    hash_adj: Slice

    @classmethod
    def empty(cls):
        """A header for a missing stream: it describes no items."""
        empty_slice = Slice(0, 0)
        return cls(0, 0, 0, 0, 0, 0, 0, 0, 0, empty_slice, empty_slice, empty_slice)

    @classmethod
    def parse(cls, buf):
        """Read and validate a header, consuming all the bytes it claims."""
        if buf.is_empty():
            return cls.empty()

        start = buf.pos()
        header = cls(
            version=buf.parse_u32(),
            header_size=buf.parse_u32(),
            minimum_index=buf.parse_u32(),
            maximum_index=buf.parse_u32(),
            gprec_size=buf.parse_u32(),
            tpi_hash_stream=buf.parse_u16(),
            tpi_hash_pad_stream=buf.parse_u16(),
            hash_key_size=buf.parse_u32(),
            hash_bucket_size=buf.parse_u32(),
            hash_values=Slice(buf.parse_i32(), buf.parse_u32()),
            ti_off=Slice(buf.parse_i32(), buf.parse_u32()),
            hash_adj=Slice(buf.parse_i32(), buf.parse_u32()),
        )

        bytes_read = buf.pos() - start
        if header.header_size < bytes_read:
            raise InvalidTypeInformationHeader("header size is impossibly small")
        if header.header_size > _MAX_HEADER_SIZE:
            raise InvalidTypeInformationHeader("header size is unreasonably large")

        buf.take(header.header_size - bytes_read)

        if header.minimum_index < _MIN_TYPE_INDEX:
            raise InvalidTypeInformationHeader("minimum type index is < 4096")
        if header.maximum_index < header.minimum_index:
            raise InvalidTypeInformationHeader(
                "maximum type index is < minimum type index"
            )
        return header