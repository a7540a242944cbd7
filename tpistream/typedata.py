"""Parsing of type records from the type stream."""

from . import constants as c
from .attributes import (
    ClassKind,
    FieldAttributes,
    FunctionAttributes,
    PointerAttributes,
    TypeProperties,
)
from .buffer import ParseBuffer
from .errors import (
    PdbError,
    UnexpectedEof,
    UnexpectedNumericPrefix,
    UnimplementedFeature,
    UnimplementedTypeKind,
)
from .records import (
    ArgumentList,
    ArrayType,
    BaseClassType,
    BitfieldType,
    ClassType,
    EnumerateType,
    EnumerationType,
    FieldList,
    MemberFunctionType,
    MemberType,
    MethodList,
    MethodListEntry,
    MethodType,
    ModifierType,
    NestedType,
    OverloadedMethodType,
    PointerType,
    ProcedureType,
    StaticMemberType,
    UnionType,
    VirtualBaseClassType,
    VirtualFunctionTablePointerType,
    VirtualFunctionTableType,
    VirtualTableShapeType,
)

_U32_MAX = 0xFFFFFFFF


def _signed(value, bits):
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def parse_unsigned(buf):
    """Read an unsigned numeric leaf and return its value."""
    leaf = buf.parse_u16()
    if leaf < c.LF_NUMERIC:
        return leaf
    if leaf == c.LF_CHAR:
        return buf.parse_u8()
    if leaf == c.LF_USHORT:
        return buf.parse_u16()
    if leaf == c.LF_ULONG:
        return buf.parse_u32()
    if leaf == c.LF_UQUADWORD:
        return buf.parse_u64()
    raise UnexpectedNumericPrefix(leaf)


def parse_variant(buf):
    """Read a signed or unsigned numeric leaf and return its value."""
    leaf = buf.parse_u16()
    if leaf < c.LF_NUMERIC:
        return leaf
    if leaf == c.LF_CHAR:
        return _signed(buf.parse_u8(), 8)
    if leaf == c.LF_SHORT:
        return buf.parse_i16()
    if leaf == c.LF_USHORT:
        return buf.parse_u16()
    if leaf == c.LF_LONG:
        return buf.parse_i32()
    if leaf == c.LF_ULONG:
        return buf.parse_u32()
    if leaf == c.LF_QUADWORD:
        return buf.parse_i64()
    if leaf == c.LF_UQUADWORD:
        return buf.parse_u64()
    raise UnexpectedNumericPrefix(leaf)


def _parse_optional_type_index(buf):
    index = buf.parse_u32()
    if index in (0, 0xFFFF):
        return None
    return index


def _parse_string(leaf, buf):
    if leaf > c.LF_ST_MAX:
        return buf.parse_cstring()
    return buf.parse_u8_pascal_string()


def _parse_padding(buf):
    while not buf.is_empty() and buf.peek_u8() >= 0xF0:
        padding = buf.parse_u8()
        if padding > 0xF0:
            # the low four bits give the padding length, including this byte
            buf.take((padding & 0x0F) - 1)


_CLASS_KINDS = {
    c.LF_CLASS: ClassKind.CLASS,
    c.LF_CLASS_ST: ClassKind.CLASS,
    c.LF_STRUCTURE: ClassKind.STRUCT,
    c.LF_STRUCTURE_ST: ClassKind.STRUCT,
    c.LF_INTERFACE: ClassKind.INTERFACE,
    c.LF_CLASS2: ClassKind.CLASS,
    c.LF_STRUCTURE2: ClassKind.STRUCT,
    c.LF_INTERFACE2: ClassKind.INTERFACE,
}


def _unique_name(leaf, buf, properties):
    if properties.has_unique_name():
        return _parse_string(leaf, buf)
    return None


def _parse_class(leaf, buf):
    count = buf.parse_u16()
    properties = TypeProperties(buf.parse_u16())
    fields = _parse_optional_type_index(buf)
    derived_from = _parse_optional_type_index(buf)
    vtable_shape = _parse_optional_type_index(buf)
    size = parse_unsigned(buf)
    name = _parse_string(leaf, buf)
    return ClassType(
        _CLASS_KINDS[leaf], count, properties, fields, derived_from,
        vtable_shape, size, name, _unique_name(leaf, buf, properties),
    )


def _parse_class2(leaf, buf):
    properties = TypeProperties(buf.parse_u32() & 0xFFFF)
    fields = _parse_optional_type_index(buf)
    derived_from = _parse_optional_type_index(buf)
    vtable_shape = _parse_optional_type_index(buf)
    count = buf.parse_u16()
    size = parse_unsigned(buf)
    name = _parse_string(leaf, buf)
    return ClassType(
        _CLASS_KINDS[leaf], count, properties, fields, derived_from,
        vtable_shape, size, name, _unique_name(leaf, buf, properties),
    )


def _parse_member(leaf, buf):
    attributes = FieldAttributes(buf.parse_u16())
    field_type = buf.parse_u32()
    offset = parse_unsigned(buf)
    return MemberType(attributes, field_type, offset, _parse_string(leaf, buf))


def _parse_nested(leaf, buf):
    raw_attr = buf.parse_u16()
    if leaf not in (c.LF_NESTTYPEEX, c.LF_NESTTYPEEX_ST):
        raw_attr = 0  # the word is padding in the plain variants
    nested_type = buf.parse_u32()
    return NestedType(FieldAttributes(raw_attr), nested_type, _parse_string(leaf, buf))


def _parse_member_function(leaf, buf):
    return MemberFunctionType(
        return_type=buf.parse_u32(),
        class_type=buf.parse_u32(),
        this_pointer_type=_parse_optional_type_index(buf),
        attributes=FunctionAttributes(buf.parse_u16()),
        parameter_count=buf.parse_u16(),
        argument_list=buf.parse_u32(),
        this_adjustment=buf.parse_u32(),
    )


def _parse_overloaded_method(leaf, buf):
    count = buf.parse_u16()
    method_list = buf.parse_u32()
    return OverloadedMethodType(count, method_list, _parse_string(leaf, buf))


def _parse_one_method(leaf, buf):
    attributes = FieldAttributes(buf.parse_u16())
    method_type = buf.parse_u32()
    vtable_offset = buf.parse_u32() if attributes.is_intro_virtual() else None
    return MethodType(attributes, method_type, vtable_offset, _parse_string(leaf, buf))


def _parse_base_class(leaf, buf):
    kind = ClassKind.CLASS if leaf == c.LF_BCLASS else ClassKind.INTERFACE
    attributes = FieldAttributes(buf.parse_u16())
    base_class = buf.parse_u32()
    offset = parse_unsigned(buf) & _U32_MAX
    return BaseClassType(kind, attributes, base_class, offset)


def _parse_vfunctab(leaf, buf):
    buf.parse_u16()  # padding
    return VirtualFunctionTablePointerType(buf.parse_u32())


def _parse_static_member(leaf, buf):
    attributes = FieldAttributes(buf.parse_u16())
    field_type = buf.parse_u32()
    return StaticMemberType(attributes, field_type, _parse_string(leaf, buf))


def _parse_pointer(leaf, buf):
    underlying_type = buf.parse_u32()
    attributes = PointerAttributes(buf.parse_u32())
    containing_class = buf.parse_u32() if attributes.pointer_to_member() else None
    return PointerType(underlying_type, attributes, containing_class)


def _parse_procedure(leaf, buf):
    return ProcedureType(
        return_type=_parse_optional_type_index(buf),
        attributes=FunctionAttributes(buf.parse_u16()),
        parameter_count=buf.parse_u16(),
        argument_list=buf.parse_u32(),
    )


def _parse_modifier(leaf, buf):
    underlying_type = buf.parse_u32()
    flags = buf.parse_u16()
    return ModifierType(
        underlying_type,
        constant=bool(flags & 0x01),
        volatile=bool(flags & 0x02),
        unaligned=bool(flags & 0x04),
    )


def _parse_enumeration(leaf, buf):
    count = buf.parse_u16()
    properties = TypeProperties(buf.parse_u16())
    underlying_type = buf.parse_u32()
    fields = buf.parse_u32()
    name = _parse_string(leaf, buf)
    return EnumerationType(
        count, properties, underlying_type, fields, name,
        _unique_name(leaf, buf, properties),
    )


def _parse_enumerate(leaf, buf):
    attributes = FieldAttributes(buf.parse_u16())
    value = parse_variant(buf)
    return EnumerateType(attributes, value, _parse_string(leaf, buf))


def _parse_array(leaf, buf):
    element_type = buf.parse_u32()
    indexing_type = buf.parse_u32()
    stride = buf.parse_u32() if leaf == c.LF_STRIDED_ARRAY else None

    dimensions = []
    while True:
        dim = parse_unsigned(buf)
        if dim > _U32_MAX:
            raise UnimplementedFeature("u64 array sizes")
        dimensions.append(dim)
        if buf.is_empty():
            raise UnexpectedEof()
        if buf.peek_u8() == 0x00:
            buf.parse_u8()
            break

    _parse_padding(buf)
    if not buf.is_empty():
        raise PdbError("unexpected data after array dimensions")
    return ArrayType(element_type, indexing_type, stride, dimensions)


def _parse_union(leaf, buf):
    count = buf.parse_u16()
    properties = TypeProperties(buf.parse_u16())
    fields = buf.parse_u32()
    size = parse_unsigned(buf)
    name = _parse_string(leaf, buf)
    return UnionType(
        count, properties, fields, size, name, _unique_name(leaf, buf, properties)
    )


def _parse_union2(leaf, buf):
    properties = TypeProperties(buf.parse_u32() & 0xFFFF)
    fields = buf.parse_u32()
    count = buf.parse_u16()
    size = parse_unsigned(buf)
    name = _parse_string(leaf, buf)
    return UnionType(
        count, properties, fields, size, name, _unique_name(leaf, buf, properties)
    )


def _parse_bitfield(leaf, buf):
    underlying_type = buf.parse_u32()
    length = buf.parse_u8()
    position = buf.parse_u8()
    return BitfieldType(underlying_type, length, position)


def _parse_vtshape(leaf, buf):
    count = buf.parse_u16()
    descriptors = []
    # descriptors are packed two to a byte, low nibble first
    for _ in range((count + 1) // 2):
        desc = buf.parse_u8()
        descriptors.append(desc & 0xF)
        if len(descriptors) < count:
            descriptors.append(desc >> 4)
    return VirtualTableShapeType(descriptors)


def _parse_vftable(leaf, buf):
    owner = buf.parse_u32()
    base = buf.parse_u32()
    object_offset = parse_unsigned(buf) & _U32_MAX
    names_length = parse_unsigned(buf)
    names = []
    consumed = 0
    while consumed < names_length:
        name = buf.parse_cstring()
        consumed += len(name) + 1
        names.append(name)
    return VirtualFunctionTableType(owner, base, object_offset, names)


def _parse_virtual_base_class(leaf, buf):
    return VirtualBaseClassType(
        direct=leaf == c.LF_VBCLASS,
        attributes=FieldAttributes(buf.parse_u16()),
        base_class=buf.parse_u32(),
        base_pointer=buf.parse_u32(),
        base_pointer_offset=parse_unsigned(buf) & _U32_MAX,
        virtual_base_offset=parse_unsigned(buf) & _U32_MAX,
    )


def _parse_field_list(leaf, buf):
    fields = []
    continuation = None
    while not buf.is_empty():
        if buf.peek_u16() == c.LF_INDEX:
            buf.parse_u16()
            continuation = buf.parse_u32()
        else:
            fields.append(parse_type_data(buf))
        _parse_padding(buf)
    return FieldList(fields, continuation)


def _parse_argument_list(leaf, buf):
    count = buf.parse_u32()
    return ArgumentList([buf.parse_u32() for _ in range(count)])


def _parse_method_list(leaf, buf):
    methods = []
    while not buf.is_empty():
        attributes = FieldAttributes(buf.parse_u16())
        buf.parse_u16()  # padding
        method_type = buf.parse_u32()
        vtable_offset = buf.parse_u32() if attributes.is_intro_virtual() else None
        methods.append(MethodListEntry(attributes, method_type, vtable_offset))
    return MethodList(methods)


_PARSERS = {}
for _leaves, _parser in (
    ((c.LF_CLASS, c.LF_CLASS_ST, c.LF_STRUCTURE, c.LF_STRUCTURE_ST, c.LF_INTERFACE),
     _parse_class),
    ((c.LF_CLASS2, c.LF_STRUCTURE2, c.LF_INTERFACE2), _parse_class2),
    ((c.LF_MEMBER, c.LF_MEMBER_ST), _parse_member),
    ((c.LF_NESTTYPE, c.LF_NESTTYPE_ST, c.LF_NESTTYPEEX, c.LF_NESTTYPEEX_ST),
     _parse_nested),
    ((c.LF_MFUNCTION,), _parse_member_function),
    ((c.LF_METHOD, c.LF_METHOD_ST), _parse_overloaded_method),
    ((c.LF_ONEMETHOD, c.LF_ONEMETHOD_ST), _parse_one_method),
    ((c.LF_BCLASS, c.LF_BINTERFACE), _parse_base_class),
    ((c.LF_VFUNCTAB,), _parse_vfunctab),
    ((c.LF_STMEMBER, c.LF_STMEMBER_ST), _parse_static_member),
    ((c.LF_POINTER,), _parse_pointer),
    ((c.LF_PROCEDURE,), _parse_procedure),
    ((c.LF_MODIFIER,), _parse_modifier),
    ((c.LF_ENUM, c.LF_ENUM_ST), _parse_enumeration),
    ((c.LF_ENUMERATE, c.LF_ENUMERATE_ST), _parse_enumerate),
    ((c.LF_ARRAY, c.LF_ARRAY_ST, c.LF_STRIDED_ARRAY), _parse_array),
    ((c.LF_UNION, c.LF_UNION_ST), _parse_union),
    ((c.LF_UNION2,), _parse_union2),
    ((c.LF_BITFIELD,), _parse_bitfield),
    ((c.LF_VTSHAPE,), _parse_vtshape),
    ((c.LF_VFTABLE,), _parse_vftable),
    ((c.LF_VBCLASS, c.LF_IVBCLASS), _parse_virtual_base_class),
    ((c.LF_FIELDLIST,), _parse_field_list),
    ((c.LF_ARGLIST,), _parse_argument_list),
    ((c.LF_METHODLIST,), _parse_method_list),
):
    for _leaf in _leaves:
        _PARSERS[_leaf] = _parser
del _leaves, _parser, _leaf


def parse_type_data(buf):
    """Parse one type record, starting at its leaf kind.

    ``buf`` is a :class:`ParseBuffer`, which is advanced past the record, or
    a bytes-like object holding the record.
    """
    if not isinstance(buf, ParseBuffer):
        buf = ParseBuffer(buf)
    leaf = buf.parse_u16()
    parser = _PARSERS.get(leaf)
    if parser is None:
        raise UnimplementedTypeKind(leaf)
    return parser(leaf, buf)