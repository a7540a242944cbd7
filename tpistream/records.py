"""Parsed type records.

Type indices are plain integers and names are the raw bytes stored in the
stream. A parsed type is one of the record classes below, or a
:class:`~tpistream.primitive.PrimitiveType`.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .attributes import (
    ClassKind,
    FieldAttributes,
    FunctionAttributes,
    PointerAttributes,
    TypeProperties,
)


@dataclass(frozen=True)
class ClassType:
    """A class, struct or interface."""

    kind: ClassKind
    count: int
    properties: TypeProperties
    fields: Optional[int]
    derived_from: Optional[int]
    vtable_shape: Optional[int]
    size: int
    name: bytes
    unique_name: Optional[bytes] = None


@dataclass(frozen=True)
class MemberType:
    """A data member of a class-like type."""

    attributes: FieldAttributes
    field_type: int
    offset: int
    name: bytes


@dataclass(frozen=True)
class MemberFunctionType:
    """The signature of a member function."""

    return_type: int
    class_type: int
    this_pointer_type: Optional[int]
    attributes: FunctionAttributes
    parameter_count: int
    argument_list: int
    this_adjustment: int


@dataclass(frozen=True)
class OverloadedMethodType:
    """A method name shared by several overloads listed in a method list."""

    count: int
    method_list: int
    name: bytes


@dataclass(frozen=True)
class MethodType:
    """A single, non-overloaded method."""

    attributes: FieldAttributes
    method_type: int
    vtable_offset: Optional[int]
    name: bytes


@dataclass(frozen=True)
class StaticMemberType:
    """A static data member."""

    attributes: FieldAttributes
    field_type: int
    name: bytes


@dataclass(frozen=True)
class NestedType:
    """A type nested inside a class-like type."""

    attributes: FieldAttributes
    nested_type: int
    name: bytes


@dataclass(frozen=True)
class BaseClassType:
    """A direct, non-virtual base class or base interface."""

    kind: ClassKind
    attributes: FieldAttributes
    base_class: int
    offset: int


@dataclass(frozen=True)
class VirtualBaseClassType:
    """A direct or indirect virtual base class."""

    direct: bool
    attributes: FieldAttributes
    base_class: int
    base_pointer: int
    base_pointer_offset: int
    virtual_base_offset: int


@dataclass(frozen=True)
class VirtualFunctionTablePointerType:
    """The virtual function table pointer of a class."""

    table: int


@dataclass(frozen=True)
class VirtualTableShapeType:
    """The shape of a virtual function table: one 4-bit descriptor per entry."""

    descriptors: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class VirtualFunctionTableType:
    """A virtual function table and the names of its entries."""

    owner: int
    base: int
    object_offset: int
    names: List[bytes] = field(default_factory=list)


@dataclass(frozen=True)
class ProcedureType:
    """The signature of a free function."""

    return_type: Optional[int]
    attributes: FunctionAttributes
    parameter_count: int
    argument_list: int


@dataclass(frozen=True)
class PointerType:
    """A pointer or reference."""

    underlying_type: int
    attributes: PointerAttributes
    containing_class: Optional[int] = None


@dataclass(frozen=True)
class ModifierType:
    """A const, volatile or unaligned qualified type."""

    underlying_type: int
    constant: bool
    volatile: bool
    unaligned: bool


@dataclass(frozen=True)
class EnumerationType:
    """An enumeration."""

    count: int
    properties: TypeProperties
    underlying_type: int
    fields: int
    name: bytes
    unique_name: Optional[bytes] = None


@dataclass(frozen=True)
class EnumerateType:
    """A single enumerator and its value."""

    attributes: FieldAttributes
    value: int
    name: bytes


@dataclass(frozen=True)
class ArrayType:
    """An array, optionally strided.

    Dimensions are byte sizes, and each higher dimension includes the lower
    ones: a ``float[4][4]`` has dimensions ``[16, 64]``.
    """

    element_type: int
    indexing_type: int
    stride: Optional[int]
    dimensions: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class UnionType:
    """A union."""

    count: int
    properties: TypeProperties
    fields: int
    size: int
    name: bytes
    unique_name: Optional[bytes] = None


@dataclass(frozen=True)
class BitfieldType:
    """A bit field of an underlying integral type."""

    underlying_type: int
    length: int
    position: int


@dataclass(frozen=True)
class FieldList:
    """The fields of a type, possibly continued in another field list."""

    fields: list = field(default_factory=list)
    continuation: Optional[int] = None


@dataclass(frozen=True)
class ArgumentList:
    """The argument types of a function."""

    arguments: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class MethodListEntry:
    """One overload in a method list."""

    attributes: FieldAttributes
    method_type: int
    vtable_offset: Optional[int] = None


@dataclass(frozen=True)
class MethodList:
    """The overloads of a method."""

    methods: List[MethodListEntry] = field(default_factory=list)


_NAMED = (
    ClassType,
    MemberType,
    OverloadedMethodType,
    StaticMemberType,
    NestedType,
    EnumerationType,
    EnumerateType,
    UnionType,
)


def type_data_name(data):
    """Return the name of a parsed type, or None if that kind has no name."""
    if isinstance(data, _NAMED):
        return data.name
    return None