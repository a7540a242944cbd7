# tpistream

`tpistream` decodes the type stream (TPI) and the id stream (IPI) found in
PDB debug information files. Given the raw bytes of one of these streams, it
yields the records in it: classes, members, methods, pointers, procedures,
enumerations, arrays, unions, bit fields, field lists, inline function ids,
build information and source references.

It has no dependencies beyond the standard library.

## Installing

```
pip install tpistream
```

## Reading types

Pass the bytes of a TPI stream to `tpistream.items.TypeInformation`. Iterating
over it gives `Type` items in index order; `parse()` decodes an item into one
of the record classes in `tpistream.records`.

```python
from tpistream.items import TypeInformation
from tpistream.records import ClassType, FieldList, MemberType
from tpistream.errors import UnimplementedTypeKind

info = TypeInformation(tpi_bytes)
finder = info.finder()

iterator = info.iter()
for item in iterator:
    finder.update(iterator)
    try:
        data = item.parse()
    except UnimplementedTypeKind:
        continue
    if isinstance(data, ClassType) and data.fields is not None:
        fields = finder.find(data.fields).parse()
        if isinstance(fields, FieldList):
            for field in fields.fields:
                if isinstance(field, MemberType):
                    print(data.name, field.name, field.offset)
```

Type indices are plain integers and names are the raw `bytes` stored in the
stream. `tpistream.records.type_data_name(data)` returns the name of a parsed
record, or `None` for kinds that carry no name. Attribute words are wrapped
in `TypeProperties`, `FieldAttributes`, `FunctionAttributes` and
`PointerAttributes` from `tpistream.attributes`, whose methods decode the
individual bits.

`len(info)` is the number of records stored in the stream, and `info.header`
is the parsed `tpistream.header.Header`. Primitive types such as `int` or
`char *` have indices below `0x1000` and are not stored; the finder returns a
`Type` for them whose `parse()` yields a `tpistream.primitive.PrimitiveType`
with a `PrimitiveKind` and an optional `Indirection`. A single record can
also be decoded directly with `tpistream.typedata.parse_type_data(record_bytes)`.

## Finding items by index

`ItemFinder`, obtained from `finder()`, starts empty and learns record
positions as you iterate, when you call `update(iterator)` after each step.
It remembers every eighth position and finds any item up to `max_index()`.
Asking for an index past the end of the stream raises `TypeNotFound`; asking
for one that exists but has not been reached yet raises `TypeNotIndexed`.

## Reading ids

`tpistream.items.IdInformation` works the same way over an IPI stream. Its
`Id` items parse into `FunctionId`, `MemberFunctionId`, `BuildInfoId`,
`StringListId`, `StringId` and `UserDefinedTypeSourceId` from
`tpistream.ids`; the source file of the last is a `LocalSourceFile` or a
`RemoteSourceFile`. `tpistream.ids.parse_id_data(record_bytes)` decodes a
single record. An empty stream is accepted and behaves as a table with no
items.

## Errors

Every decoding error derives from `tpistream.errors.PdbError`: for example
`UnexpectedEof` for truncated data, `TypeTooShort` for a record shorter than
two bytes, `InvalidTypeInformationHeader` for a bad stream header,
`UnimplementedTypeKind` for record kinds this package does not decode and
`UnexpectedNumericPrefix` for unknown numeric leaves. `PointerAttributes`
raises `ValueError` for a pointer kind or mode code it does not know.

## What it does not do

`tpistream` does not open PDB files. It does not read the multi-stream
container, the symbol streams, module information or line tables; you must
extract the TPI or IPI stream bytes yourself and hand them in. There is no
command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```