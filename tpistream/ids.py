"""Parsed id records: inline functions, build information and source references."""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from . import constants as c
from .buffer import ParseBuffer
from .errors import UnimplementedTypeKind


@dataclass(frozen=True)
class FunctionId:
    """A global function, usually inlined."""

    scope: Optional[int]
    function_type: int
    name: bytes


@dataclass(frozen=True)
class MemberFunctionId:
    """A member function, usually inlined."""

    parent: int
    function_type: int
    name: bytes


@dataclass(frozen=True)
class BuildInfoId:
    """Id indices of the tool, version and command line build arguments."""

    arguments: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class StringListId:
    """A list of substrings."""

    substrings: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class StringId:
    """A string, optionally built from a list of substrings."""

    substrings: Optional[int]
    name: bytes


@dataclass(frozen=True)
class LocalSourceFile:
    """A source file name given by an id index in the same module."""

    index: int


@dataclass(frozen=True)
class RemoteSourceFile:
    """A source file name in the string table of another module."""

    module: int
    string_ref: int


SourceFileRef = Union[LocalSourceFile, RemoteSourceFile]


@dataclass(frozen=True)
class UserDefinedTypeSourceId:
    """Source file and line where a user defined type is defined."""

    udt: int
    source_file: SourceFileRef
    line: int


def _parse_optional_id_index(buf):
    index = buf.parse_u32()
    return index or None


def _parse_string(leaf, buf):
    if leaf > c.LF_ST_MAX:
        return buf.parse_cstring()
    return buf.parse_u8_pascal_string()


def parse_id_data(data):
    """Parse the raw bytes of an id record, including its leaf kind."""
    buf = ParseBuffer(data)
    leaf = buf.parse_u16()

    if leaf == c.LF_FUNC_ID:
        return FunctionId(
            scope=_parse_optional_id_index(buf),
            function_type=buf.parse_u32(),
            name=_parse_string(leaf, buf),
        )
    if leaf == c.LF_MFUNC_ID:
        return MemberFunctionId(
            parent=buf.parse_u32(),
            function_type=buf.parse_u32(),
            name=_parse_string(leaf, buf),
        )
    if leaf == c.LF_BUILDINFO:
        count = buf.parse_u16()
        return BuildInfoId([buf.parse_u32() for _ in range(count)])
    if leaf == c.LF_SUBSTR_LIST:
        count = buf.parse_u32()
        return StringListId([buf.parse_u32() for _ in range(count)])
    if leaf == c.LF_STRING_ID:
        return StringId(
            substrings=_parse_optional_id_index(buf),
            name=_parse_string(leaf, buf),
        )
    if leaf in (c.LF_UDT_SRC_LINE, c.LF_UDT_MOD_SRC_LINE):
        udt = buf.parse_u32()
        file_id = buf.parse_u32()
        line = buf.parse_u32()
        if leaf == c.LF_UDT_SRC_LINE:
            source_file = LocalSourceFile(file_id)
        else:
            source_file = RemoteSourceFile(buf.parse_u16(), file_id)
        return UserDefinedTypeSourceId(udt, source_file, line)

    raise UnimplementedTypeKind(leaf)