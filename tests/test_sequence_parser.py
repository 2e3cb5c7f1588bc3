"""Tests for ansigrid.sequence_parser.CsiParser."""

import pytest

from ansigrid.errors import MissingParameterError, SequenceTooLongError
from ansigrid.sequence_parser import CsiParser, CsiSequence, is_parameter_byte


def parse(body: bytes, **kwargs) -> CsiSequence | None:
    parser = CsiParser(**kwargs)
    result = None
    for byte in body:
        result = parser.push_byte(byte)
    return result


def test_parameters_and_command() -> None:
    assert parse(b"1;24H") == CsiSequence((1, 24), ord("H"))


def test_no_parameters() -> None:
    assert parse(b"m") == CsiSequence((), ord("m"))


def test_only_final_byte_completes() -> None:
    parser = CsiParser()
    assert parser.push_byte(ord("1")) is None
    assert parser.push_byte(ord(";")) is None
    assert parser.push_byte(ord("m")) == CsiSequence((1, None), ord("m"))
    # ready for the next sequence
    assert parser.push_byte(ord("H")) == CsiSequence((), ord("H"))


def test_private_marker() -> None:
    seq = parse(b"?25h")
    assert seq.private
    assert seq.params == (25,)


def test_spaces_are_skipped() -> None:
    assert parse(b"1 ;2 H").params == (1, 2)


class TestOmittedParameters:
    def test_leading_empty_parameter_is_none(self) -> None:
        assert parse(b";5m").params == (None, 5)

    def test_trailing_empty_parameter_is_none(self) -> None:
        assert parse(b"1;m").params == (1, None)

    def test_strict_leading(self) -> None:
        with pytest.raises(MissingParameterError) as exc:
            parse(b";5m", strict=True)
        assert exc.value.position == 0

    def test_strict_trailing(self) -> None:
        with pytest.raises(MissingParameterError) as exc:
            parse(b"1;m", strict=True)
        assert exc.value.position == 1


def test_length_limit() -> None:
    parser = CsiParser(max_length=3)
    for byte in b"123":
        parser.push_byte(byte)
    with pytest.raises(SequenceTooLongError):
        parser.push_byte(ord("4"))
    assert parser.push_byte(ord("m")) == CsiSequence((), ord("m"))


@pytest.mark.parametrize(
    ("byte", "expected"),
    [
        (b"7", True),
        (b";", True),
        (b"?", True),
        (b" ", True),
        (b"m", False),
        (b"\x1b", False),
    ],
)
def test_is_parameter_byte(byte: bytes, expected: bool) -> None:
    assert is_parameter_byte(byte[0]) is expected


def test_str() -> None:
    assert str(CsiSequence((1, None), ord("m"))) == "ESC[1;m"
    assert str(CsiSequence((25,), ord("l"), private=True)) == "ESC[?25l"
