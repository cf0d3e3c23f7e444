"""Tests for the error taxonomy."""
import pytest

from rdpfile.errors import (
    EncodingError,
    ErrorKind,
    InvalidFileError,
    InvalidStringError,
    RDPCodingError,
    UnknownError,
    ERRORS_BY_KIND,
)


def test_codes():
    assert ErrorKind.INVALID_STRING.code == 1
    assert ErrorKind.INVALID_FILE.code == 2
    assert ErrorKind.ENCODING_ERROR.code == 3
    assert ErrorKind.UNKNOWN.code == 999


def test_every_kind_has_description_and_class():
    for kind in ErrorKind:
        assert kind.description
        assert ERRORS_BY_KIND[kind].kind is kind


@pytest.mark.parametrize("cls", [InvalidFileError, InvalidStringError, EncodingError, UnknownError])
def test_errors_are_value_errors(cls):
    exc = cls()
    assert isinstance(exc, RDPCodingError)
    assert isinstance(exc, ValueError)
    assert str(exc) == exc.kind.description
    assert exc.code == exc.kind.code


def test_message_includes_detail_and_line():
    exc = InvalidFileError("unknown type tag 'x'", line_number=4)
    assert str(exc) == f"{ErrorKind.INVALID_FILE.description} unknown type tag 'x' (line 4)"
    assert exc.detail == "unknown type tag 'x'"


def test_description_does_not_depend_on_instance():
    first = InvalidStringError("a")
    second = InvalidStringError("b", line_number=9)
    assert first.kind.description == second.kind.description
