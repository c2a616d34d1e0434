import pytest

from sfsynth.errors import (
    InvalidChunkSize,
    ParseError,
    UnexpectedMember,
    UnknownGeneratorType,
    UnknownModulatorTransform,
    UnknownSampleType,
)


def test_invalid_chunk_size_carries_kind_and_size():
    err = InvalidChunkSize("bag", 6)
    assert err.kind == "bag"
    assert err.size == 6
    assert "bag" in str(err)
    assert "6" in str(err)


@pytest.mark.parametrize(
    "cls", [UnknownGeneratorType, UnknownSampleType, UnknownModulatorTransform]
)
def test_unknown_value_errors_keep_value(cls):
    err = cls(77)
    assert err.value == 77
    with pytest.raises(ParseError) as info:
        raise err
    assert info.value.value == 77


def test_unexpected_member_keeps_section_and_chunk():
    err = UnexpectedMember("hydra", "xxxx")
    assert err.section == "hydra"
    assert err.chunk == "xxxx"
    assert "hydra" in str(err)


@pytest.mark.parametrize(
    "err",
    [
        InvalidChunkSize("preset", 1),
        UnknownGeneratorType(61),
        UnknownSampleType(3),
        UnknownModulatorTransform(1),
        UnexpectedMember("info", "abcd"),
    ],
)
def test_all_errors_are_parse_errors(err):
    with pytest.raises(ParseError) as info:
        raise err
    assert info.value is err