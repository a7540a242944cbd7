import pytest

from tpistream.attributes import (
    Access,
    FieldAttributes,
    FunctionAttributes,
    PointerAttributes,
    PointerKind,
    PointerMode,
    TypeProperties,
    VirtualTableShapeDescriptor,
)

_FLAG_METHODS = [
    (0x0001, "packed"),
    (0x0002, "constructors"),
    (0x0004, "overloaded_operators"),
    (0x0008, "is_nested_type"),
    (0x0010, "contains_nested_types"),
    (0x0020, "overloaded_assignment"),
    (0x0040, "overloaded_casting"),
    (0x0080, "forward_reference"),
    (0x0100, "scoped_definition"),
    (0x0200, "has_unique_name"),
    (0x0400, "sealed"),
]


@pytest.mark.parametrize("mask,name", _FLAG_METHODS)
def test_type_properties_single_flag(mask, name):
    props = TypeProperties(mask)
    assert getattr(props, name)() is True
    others = [n for m, n in _FLAG_METHODS if n != name]
    assert not any(getattr(props, n)() for n in others)


def test_type_properties_empty():
    props = TypeProperties(0)
    assert not any(getattr(props, n)() for _, n in _FLAG_METHODS)
    assert props.hfa() == 0
    assert props.mocom() == 0
    assert props.intrinsic_type() is False


def test_type_properties_unique_name_from_source_fixture():
    props = TypeProperties(512)
    assert props.has_unique_name()
    assert not props.packed()


def test_type_properties_hfa_and_intrinsic_share_bit():
    props = TypeProperties(0x1000)
    assert props.intrinsic_type()
    assert props.hfa() == 2
    assert TypeProperties(0x0800).hfa() == 1
    assert not TypeProperties(0x0800).intrinsic_type()


def test_type_properties_mocom():
    assert TypeProperties(0x4000).mocom() == 1
    assert TypeProperties(0x6000).mocom() == TypeProperties(0x4000).mocom() | 0


@pytest.mark.parametrize("access", list(Access))
def test_field_access(access):
    assert FieldAttributes(int(access)).access() == access
    assert FieldAttributes(int(access) | 0xFFFC).access() == access


def test_field_method_properties():
    assert FieldAttributes(0x01 << 2).is_virtual()
    assert FieldAttributes(0x02 << 2).is_static()
    assert FieldAttributes(0x05 << 2).is_pure_virtual()
    assert FieldAttributes(0x04 << 2).is_intro_virtual()
    assert FieldAttributes(0x06 << 2).is_intro_virtual()


@pytest.mark.parametrize("prop", [0x00, 0x01, 0x02, 0x03, 0x05, 0x07])
def test_field_not_intro_virtual(prop):
    assert not FieldAttributes(prop << 2).is_intro_virtual()


def test_field_vanilla_has_no_method_flags():
    attrs = FieldAttributes(0x0003)
    assert not (attrs.is_static() or attrs.is_virtual() or attrs.is_pure_virtual())


def test_function_attributes():
    attrs = FunctionAttributes(0x0107)
    assert attrs.calling_convention() == 0x07
    assert attrs.cxx_return_udt()
    assert not attrs.is_constructor()
    assert not attrs.is_constructor_with_virtual_bases()
    assert FunctionAttributes(0x0200).is_constructor()
    assert FunctionAttributes(0x0400).is_constructor_with_virtual_bases()


@pytest.mark.parametrize("kind", list(PointerKind))
def test_pointer_kind_roundtrip(kind):
    assert PointerAttributes(kind.value).pointer_kind() is kind


@pytest.mark.parametrize("mode", list(PointerMode))
def test_pointer_mode_roundtrip(mode):
    attrs = PointerAttributes(mode.value << 5)
    assert attrs.pointer_mode() is mode
    assert attrs.pointer_to_member() == (
        mode in (PointerMode.MEMBER, PointerMode.MEMBER_FUNCTION)
    )
    assert attrs.is_reference() == (
        mode in (PointerMode.LVALUE_REFERENCE, PointerMode.RVALUE_REFERENCE)
    )


def test_pointer_invalid_kind_and_mode():
    with pytest.raises(ValueError):
        PointerAttributes(0x1F).pointer_kind()
    with pytest.raises(ValueError):
        PointerAttributes(0x7 << 5).pointer_mode()


def test_pointer_size_inferred_from_kind():
    assert PointerAttributes(PointerKind.PTR64.value).size() == 8
    assert PointerAttributes(PointerKind.NEAR32.value).size() == 4
    assert PointerAttributes(PointerKind.FAR32.value).size() == 4
    assert PointerAttributes(PointerKind.NEAR16.value).size() == 0


def test_pointer_explicit_size_wins():
    attrs = PointerAttributes(PointerKind.PTR64.value | (4 << 13))
    assert attrs.size() == 4


_POINTER_FLAGS = {
    0x100: "is_flat_32",
    0x200: "is_volatile",
    0x400: "is_const",
    0x800: "is_unaligned",
    0x1000: "is_restrict",
    0x40000: "is_mocom",
}


@pytest.mark.parametrize("mask,name", list(_POINTER_FLAGS.items()))
def test_pointer_flags(mask, name):
    attrs = PointerAttributes(PointerKind.PTR64.value | mask)
    results = {n: getattr(attrs, n)() for n in _POINTER_FLAGS.values()}
    expected = {n: n == name for n in _POINTER_FLAGS.values()}
    assert results == expected


def test_vtable_shape_descriptor_from_nibble():
    assert VirtualTableShapeDescriptor(0x05) is VirtualTableShapeDescriptor.NEAR32
    with pytest.raises(ValueError):
        VirtualTableShapeDescriptor(0x08)


def test_attributes_equality():
    assert FieldAttributes(3) == FieldAttributes(3)
    assert PointerAttributes(0x0C) == PointerAttributes(0x0C)
    assert TypeProperties(1) != TypeProperties(2)