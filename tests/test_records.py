import pytest

from tpistream.attributes import (
    ClassKind,
    FieldAttributes,
    FunctionAttributes,
    PointerAttributes,
    TypeProperties,
)
from tpistream.primitive import PrimitiveKind, PrimitiveType
from tpistream.records import (
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
    type_data_name,
)


def _class():
    return ClassType(
        kind=ClassKind.STRUCT,
        count=2,
        properties=TypeProperties(512),
        fields=0x1016,
        derived_from=None,
        vtable_shape=None,
        size=6,
        name=b"H_size",
        unique_name=b".?AUH_size@@",
    )


ATTR = FieldAttributes(3)

NAMED = [
    _class(),
    MemberType(ATTR, 0x74, 0, b"member"),
    OverloadedMethodType(2, 0x1001, b"overloaded"),
    StaticMemberType(ATTR, 0x74, b"static_member"),
    NestedType(ATTR, 0x1002, b"nested"),
    EnumerationType(1, TypeProperties(0), 0x74, 0x1003, b"enumeration"),
    EnumerateType(ATTR, 7, b"enumerate"),
    UnionType(1, TypeProperties(0), 0x1004, 8, b"union"),
]


@pytest.mark.parametrize("record", NAMED)
def test_named_records_report_their_name(record):
    assert type_data_name(record) == record.name


UNNAMED = [
    PrimitiveType(PrimitiveKind.VOID),
    MemberFunctionType(0x3, 0x1000, None, FunctionAttributes(0), 0, 0x1001, 0),
    MethodType(ATTR, 0x1005, None, b"method"),
    BaseClassType(ClassKind.CLASS, ATTR, 0x1006, 0),
    VirtualBaseClassType(True, ATTR, 0x1006, 0x1007, 0, 1),
    VirtualFunctionTablePointerType(0x1008),
    VirtualTableShapeType([0, 1]),
    VirtualFunctionTableType(0x1009, 0, 0, [b"f"]),
    ProcedureType(None, FunctionAttributes(0), 0, 0x1001),
    PointerType(0x74, PointerAttributes(0x1000C)),
    ModifierType(0x74, True, False, False),
    ArrayType(0x74, 0x23, None, [16, 64]),
    BitfieldType(0x74, 3, 1),
    FieldList([MemberType(ATTR, 0x74, 0, b"x")]),
    ArgumentList([0x74]),
    MethodList([MethodListEntry(ATTR, 0x1005)]),
]


@pytest.mark.parametrize("record", UNNAMED)
def test_other_records_have_no_name(record):
    assert type_data_name(record) is None


def test_records_compare_by_value():
    assert _class() == _class()
    assert _class() != MemberType(ATTR, 0x74, 0, b"H_size")


def test_unique_name_defaults_to_none():
    union = UnionType(1, TypeProperties(0), 0x1004, 8, b"u")
    assert union.unique_name is None
    enum = EnumerationType(1, TypeProperties(0), 0x74, 0x1003, b"e")
    assert enum.unique_name is None


def test_list_fields_default_to_independent_empty_lists():
    first = FieldList()
    second = FieldList()
    assert first.fields == [] and first.continuation is None
    first.fields.append(1)
    assert second.fields == []


def test_method_list_entry_vtable_offset_defaults_to_none():
    entry = MethodListEntry(ATTR, 0x1005)
    assert entry.vtable_offset is None


def test_records_are_immutable():
    record = BitfieldType(0x74, 3, 1)
    with pytest.raises(AttributeError):
        record.length = 4
    assert record.length == 3
    assert record == BitfieldType(0x74, 3, 1)