"""Primitive types encoded directly in type indices below 0x1000."""

import enum
from dataclasses import dataclass
from typing import Optional

from .errors import TypeNotFound

_FIRST_NON_PRIMITIVE = 0x1000


class PrimitiveKind(enum.Enum):
    """A simple type; the value is its code in the low byte of a type index."""

    NO_TYPE = 0x00
    VOID = 0x03
    HRESULT = 0x08

    CHAR = 0x10
    UCHAR = 0x20
    I8 = 0x68
    U8 = 0x69

    RCHAR = 0x70
    WCHAR = 0x71
    RCHAR16 = 0x7A
    RCHAR32 = 0x7B

    SHORT = 0x11
    USHORT = 0x21
    I16 = 0x72
    U16 = 0x73

    LONG = 0x12
    ULONG = 0x22
    I32 = 0x74
    U32 = 0x75

    QUAD = 0x13
    UQUAD = 0x23
    I64 = 0x76
    U64 = 0x77

    OCTA = 0x14
    UOCTA = 0x24
    I128 = 0x78
    U128 = 0x79

    F16 = 0x46
    F32 = 0x40
    F32PP = 0x45
    F48 = 0x44
    F64 = 0x41
    F80 = 0x42
    F128 = 0x43

    COMPLEX32 = 0x50
    COMPLEX64 = 0x51
    COMPLEX80 = 0x52
    COMPLEX128 = 0x53

    BOOL8 = 0x30
    BOOL16 = 0x31
    BOOL32 = 0x32
    BOOL64 = 0x33


class Indirection(enum.Enum):
    """Pointer mode of a primitive type; the value is its bits in a type index."""

    NEAR16 = 0x100
    FAR16 = 0x200
    HUGE16 = 0x300
    NEAR32 = 0x400
    FAR32 = 0x500
    NEAR64 = 0x600
    NEAR128 = 0x700


@dataclass(frozen=True)
class PrimitiveType:
    """A primitive type such as ``void`` or ``char *``."""

    kind: PrimitiveKind
    indirection: Optional[Indirection] = None


def type_data_for_primitive(index):
    """Decode a primitive type index into a :class:`PrimitiveType`."""
    if not 0 <= index < _FIRST_NON_PRIMITIVE:
        raise ValueError(f"type index 0x{index:x} is not a primitive type index")

    mode = index & 0xF00
    try:
        indirection = Indirection(mode) if mode else None
        kind = PrimitiveKind(index & 0xFF)
    except ValueError:
        raise TypeNotFound(index) from None

    return PrimitiveType(kind, indirection)