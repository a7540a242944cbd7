import pytest

from tpistream.errors import (
    InvalidTypeInformationHeader,
    PdbError,
    TypeNotFound,
    TypeNotIndexed,
    TypeTooShort,
    UnexpectedEof,
    UnexpectedNumericPrefix,
    UnimplementedFeature,
    UnimplementedTypeKind,
)


def test_unimplemented_type_kind_keeps_kind():
    err = UnimplementedTypeKind(0x1234)
    assert err.kind == 0x1234
    assert "0x1234" in str(err)


def test_type_not_found_keeps_index():
    err = TypeNotFound(4097)
    assert err.index == 4097
    assert "4097" in str(err)


def test_type_not_indexed_keeps_both_indices():
    err = TypeNotIndexed(5000, 4103)
    assert (err.index, err.max_index) == (5000, 4103)
    assert "5000" in str(err) and "4103" in str(err)


def test_numeric_prefix_keeps_prefix():
    err = UnexpectedNumericPrefix(0x8005)
    assert err.prefix == 0x8005
    assert "0x8005" in str(err)


def test_message_errors_keep_message():
    assert str(InvalidTypeInformationHeader("header size is impossibly small")) == (
        "header size is impossibly small"
    )
    assert str(UnimplementedFeature("u64 array sizes")) == "u64 array sizes"


@pytest.mark.parametrize(
    "err",
    [
        UnexpectedEof(),
        TypeTooShort(),
        UnimplementedTypeKind(1),
        TypeNotFound(1),
        TypeNotIndexed(1, 0),
        InvalidTypeInformationHeader("x"),
        UnimplementedFeature("x"),
        UnexpectedNumericPrefix(1),
    ],
)
def test_all_errors_are_pdb_errors(err):
    with pytest.raises(PdbError) as excinfo:
        raise err
    assert excinfo.value is err