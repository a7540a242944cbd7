"""Exceptions raised while reading type and id streams."""


class PdbError(Exception):
    """Base class for all errors raised by this package."""


class UnexpectedEof(PdbError):
    """The data ended before a complete value could be read."""

    def __init__(self, message="unexpected end of data"):
        super().__init__(message)


class TypeTooShort(PdbError):
    """A type record was shorter than the smallest valid record."""

    def __init__(self, message="type record is too short"):
        super().__init__(message)


class UnimplementedTypeKind(PdbError):
    """A record of a kind this package does not understand was encountered."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"unimplemented type kind 0x{kind:04x}")


class TypeNotFound(PdbError):
    """The requested type or id index does not exist."""

    def __init__(self, index):
        self.index = index
        super().__init__(f"type {index} not found")


class TypeNotIndexed(PdbError):
    """The requested index exists but is not yet known to the finder."""

    def __init__(self, index, max_index):
        self.index = index
        self.max_index = max_index
        super().__init__(
            f"type {index} not indexed (index covers up to {max_index})"
        )


class InvalidTypeInformationHeader(PdbError):
    """The header of a type or id stream is malformed."""


class UnimplementedFeature(PdbError):
    """The data uses a feature this package does not support."""


class UnexpectedNumericPrefix(PdbError):
    """A numeric leaf carried a prefix that is not understood."""

    def __init__(self, prefix):
        self.prefix = prefix
        super().__init__(f"unexpected numeric prefix 0x{prefix:04x}")