"""Bit-packed attribute words and the small enumerations found in type records."""

import enum
from dataclasses import dataclass


class ClassKind(enum.Enum):
    """Distinguishes class-like concepts."""

    CLASS = enum.auto()
    STRUCT = enum.auto()
    INTERFACE = enum.auto()


class Access(enum.IntEnum):
    """Member access protection."""

    NONE = 0x00
    PRIVATE = 0x01
    PROTECTED = 0x02
    PUBLIC = 0x03


class PointerKind(enum.Enum):
    """The kind of a pointer type; the value is its code in the attribute word."""

    NEAR16 = 0x00
    FAR16 = 0x01
    HUGE16 = 0x02
    BASE_SEG = 0x03
    BASE_VAL = 0x04
    BASE_SEG_VAL = 0x05
    BASE_ADDR = 0x06
    BASE_SEG_ADDR = 0x07
    BASE_TYPE = 0x08
    BASE_SELF = 0x09
    NEAR32 = 0x0A
    FAR32 = 0x0B
    PTR64 = 0x0C


class PointerMode(enum.Enum):
    """The mode of a pointer type; the value is its code in the attribute word."""

    POINTER = 0x00
    LVALUE_REFERENCE = 0x01
    MEMBER = 0x02
    MEMBER_FUNCTION = 0x03
    RVALUE_REFERENCE = 0x04


class VirtualTableShapeDescriptor(enum.IntEnum):
    """A single entry of a virtual table shape."""

    NEAR = 0x00
    FAR = 0x01
    THIN = 0x02
    OUTER = 0x03
    META = 0x04
    NEAR32 = 0x05
    FAR32 = 0x06
    UNUSED = 0x07


@dataclass(frozen=True)
class TypeProperties:
    """Properties of a class, union or enumeration."""

    value: int

    def _bit(self, mask):
        return self.value & mask != 0

    def packed(self):
        """Whether the type is packed via ``#pragma pack`` or similar."""
        return self._bit(0x0001)

    def constructors(self):
        """Whether the type has constructors or destructors."""
        return self._bit(0x0002)

    def overloaded_operators(self):
        """Whether the type has overloaded operators."""
        return self._bit(0x0004)

    def is_nested_type(self):
        """Whether the type is nested inside another type."""
        return self._bit(0x0008)

    def contains_nested_types(self):
        """Whether the type contains nested types."""
        return self._bit(0x0010)

    def overloaded_assignment(self):
        """Whether the type overloads the assignment operator."""
        return self._bit(0x0020)

    def overloaded_casting(self):
        """Whether the type has casting methods."""
        return self._bit(0x0040)

    def forward_reference(self):
        """Whether the type is an incomplete forward reference."""
        return self._bit(0x0080)

    def scoped_definition(self):
        return self._bit(0x0100)

    def has_unique_name(self):
        """Whether a decorated name follows the regular name."""
        return self._bit(0x0200)

    def sealed(self):
        """Whether the class cannot be used as a base class."""
        return self._bit(0x0400)

    def hfa(self):
        return (self.value & 0x1800) >> 11

    def intrinsic_type(self):
        return self._bit(0x1000)

    def mocom(self):
        return (self.value & 0x6000) >> 14


_MP_VIRTUAL = 0x01
_MP_STATIC = 0x02
_MP_INTRO = 0x04
_MP_PURE_VIRTUAL = 0x05
_MP_PURE_INTRO = 0x06


@dataclass(frozen=True)
class FieldAttributes:
    """Attributes of a field or method."""

    value: int

    def access(self):
        """Access protection code; see :class:`Access`."""
        return self.value & 0x0003

    def _method_properties(self):
        return (self.value & 0x001C) >> 2

    def is_static(self):
        return self._method_properties() == _MP_STATIC

    def is_virtual(self):
        return self._method_properties() == _MP_VIRTUAL

    def is_pure_virtual(self):
        return self._method_properties() == _MP_PURE_VIRTUAL

    def is_intro_virtual(self):
        """Whether the method introduces a new virtual slot."""
        return self._method_properties() in (_MP_INTRO, _MP_PURE_INTRO)


@dataclass(frozen=True)
class FunctionAttributes:
    """Calling convention and function attributes, as one 16-bit word."""

    value: int

    def calling_convention(self):
        return self.value & 0xFF

    def cxx_return_udt(self):
        return self.value & 0x0100 > 0

    def is_constructor(self):
        return self.value & 0x0200 > 0

    def is_constructor_with_virtual_bases(self):
        return self.value & 0x0400 > 0


@dataclass(frozen=True)
class PointerAttributes:
    """Attributes of a pointer type."""

    value: int

    def pointer_kind(self):
        """The kind of pointer; raises ValueError for an unknown code."""
        return PointerKind(self.value & 0x1F)

    def pointer_mode(self):
        """The pointer mode; raises ValueError for an unknown code."""
        return PointerMode((self.value >> 5) & 0x7)

    def pointer_to_member(self):
        """Whether this points to a data member or member function."""
        return self.pointer_mode() in (PointerMode.MEMBER, PointerMode.MEMBER_FUNCTION)

    def is_flat_32(self):
        return self.value & 0x100 != 0

    def is_volatile(self):
        return self.value & 0x200 != 0

    def is_const(self):
        return self.value & 0x400 != 0

    def is_unaligned(self):
        return self.value & 0x800 != 0

    def is_restrict(self):
        return self.value & 0x1000 != 0

    def is_reference(self):
        """Whether this is a C++ reference rather than a pointer."""
        return self.pointer_mode() in (
            PointerMode.LVALUE_REFERENCE,
            PointerMode.RVALUE_REFERENCE,
        )

    def size(self):
        """Pointer size in bytes, inferred from the kind when not stored."""
        size = (self.value >> 13) & 0x3F
        if size:
            return size
        kind = self.pointer_kind()
        if kind in (PointerKind.NEAR32, PointerKind.FAR32):
            return 4
        if kind is PointerKind.PTR64:
            return 8
        return 0

    def is_mocom(self):
        return self.value & 0x40000 != 0