"""Sequential and random access to the records of a type or id stream."""

from . import constants as c
from .buffer import ParseBuffer
from .errors import TypeNotFound, TypeNotIndexed, TypeTooShort
from .header import Header
from .ids import parse_id_data
from .primitive import type_data_for_primitive
from .typedata import parse_type_data

# Data served for primitive type indices. It carries no type-specific
# content but reads as raw kind 0xffff, a reserved value.
_PRIMITIVE_DATA = b"\xff\xff"

_FIRST_NON_PRIMITIVE = 0x1000


class Item:
    """One record of a type or id stream: its index and its raw bytes.

    The 16-bit length prefix that precedes every record in the stream is not
    part of ``data``.
    """

    __slots__ = ("index", "data")

    def __init__(self, index, data):
        self.index = index
        self.data = bytes(data)

    def __len__(self):
        """Length of the record in bytes, without its length prefix."""
        return len(self.data)

    def __eq__(self, other):
        if not isinstance(other, Item) or type(self) is not type(other):
            return NotImplemented
        return self.index == other.index and self.data == other.data

    def __hash__(self):
        return hash((type(self), self.index, self.data))

    def __repr__(self):
        return (
            f"{type(self).__name__}(index=0x{self.index:x}, "
            f"kind=0x{self.raw_kind():04x}, {len(self.data)} bytes)"
        )

    def raw_kind(self):
        """The leaf kind of the record; 0xffff for a primitive type."""
        return self.data[0] | (self.data[1] << 8)

    def parse(self):
        """Parse the record as an id or a type, according to its leaf kind."""
        if c.LF_FUNC_ID <= self.raw_kind() <= c.LF_ID_MAX:
            return parse_id_data(self.data)
        if self.index < _FIRST_NON_PRIMITIVE:
            return type_data_for_primitive(self.index)
        return parse_type_data(self.data)


class Type(Item):
    """A record of the type stream: a primitive type, class, procedure and so on."""

    __slots__ = ()

    def parse(self):
        """Parse the record into one of the type record classes.

        Raises UnimplementedTypeKind for record kinds that are not understood
        and UnexpectedEof for truncated records.
        """
        if self.index < _FIRST_NON_PRIMITIVE:
            return type_data_for_primitive(self.index)
        return parse_type_data(self.data)


class Id(Item):
    """A record of the id stream: inline functions, build info, source references."""

    __slots__ = ()

    def parse(self):
        """Parse the record into one of the id record classes."""
        return parse_id_data(self.data)


class ItemIter:
    """Iterates over the records of a stream in index order."""

    def __init__(self, buf, index, item_class):
        self._buf = buf
        self._index = index
        self._item_class = item_class

    @property
    def index(self):
        """Index of the record the next call to ``next`` will return."""
        return self._index

    @property
    def position(self):
        """Offset in the stream of the record the next call will return."""
        return self._buf.pos()

    def __iter__(self):
        return self

    def __next__(self):
        if self._buf.is_empty():
            raise StopIteration
        length = self._buf.parse_u16()
        if length < 2:
            raise TypeTooShort()
        data = self._buf.take(length)
        index = self._index
        self._index += 1
        return self._item_class(index, data)


class ItemFinder:
    """Random access to records by index, filled in while iterating.

    Every ``2 ** shift``-th record position is remembered; a lookup jumps to
    the nearest remembered position and skips forward from there.
    """

    def __init__(self, info, shift):
        header = info.header
        count = header.maximum_index - header.minimum_index
        round_base = (1 << shift) - 1
        shifted_count = ((count + round_base) & ~round_base) >> shift

        self._data = info.data
        self._item_class = info.item_class
        self._minimum_index = header.minimum_index
        self._maximum_index = header.maximum_index
        self._shift = shift
        # the first record always sits right after the header
        self._positions = [header.header_size] if shifted_count > 0 else []

    def _resolve(self, index):
        raw = index - self._minimum_index
        return raw >> self._shift, raw & ((1 << self._shift) - 1)

    def max_index(self):
        """The highest index this finder can currently resolve, or 0 if none."""
        if not self._positions:
            return 0
        return (len(self._positions) << self._shift) + self._minimum_index - 1

    def update(self, iterator):
        """Record the iterator's position; call after every step of iteration."""
        slot, skip = self._resolve(iterator.index)
        if skip == 0 and slot == len(self._positions):
            self._positions.append(iterator.position)

    def find(self, index):
        """Return the item with the given index.

        Raises TypeNotFound for an index beyond the stream and TypeNotIndexed
        for an index the finder has not been updated far enough to reach.
        """
        if index < self._minimum_index:
            return self._item_class(index, _PRIMITIVE_DATA)
        if index > self._maximum_index:
            raise TypeNotFound(index)

        slot, skip = self._resolve(index)
        if slot >= len(self._positions):
            raise TypeNotIndexed(index, self.max_index())

        buf = ParseBuffer(self._data)
        buf.take(self._positions[slot])
        for _ in range(skip):
            buf.take(buf.parse_u16())
        length = buf.parse_u16()
        return self._item_class(index, buf.take(length))


class ItemInformation:
    """A type or id stream: a header followed by length-prefixed records.

    An empty stream stands for a missing one and holds no records.
    """

    item_class = Item

    def __init__(self, stream):
        self.data = bytes(stream)
        self.header = Header.parse(ParseBuffer(self.data))

    def iter(self):
        """An iterator over the records in index order."""
        buf = ParseBuffer(self.data)
        buf.take(self.header.header_size)
        return ItemIter(buf, self.header.minimum_index, self.item_class)

    def __iter__(self):
        return self.iter()

    def __len__(self):
        """Number of records stored; primitive types are not counted."""
        return self.header.maximum_index - self.header.minimum_index

    def is_empty(self):
        return len(self) == 0

    def finder(self):
        """A new, empty finder remembering every eighth record."""
        return ItemFinder(self, 3)


class TypeInformation(ItemInformation):
    """The type stream."""

    item_class = Type


class IdInformation(ItemInformation):
    """The id stream."""

    item_class = Id