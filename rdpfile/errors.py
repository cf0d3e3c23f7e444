"""
Error taxonomy shared by the decoder and the encoder.

Every failure surfaced by :mod:`rdpfile` is an :class:`RDPCodingError`
subclass. The human-readable description and the numeric code depend only
on the :class:`ErrorKind`, so they can be looked up without an instance.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """The closed set of failure causes."""
    INVALID_STRING = "invalid_string"
    INVALID_FILE = "invalid_file"
    ENCODING_ERROR = "encoding_error"
    UNKNOWN = "unknown"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def code(self) -> int:
        return _CODES[self]


_DESCRIPTIONS: dict[ErrorKind, str] = {
    ErrorKind.INVALID_STRING: "Field value does not match the grammar of its declared type.",
    ErrorKind.INVALID_FILE: "Invalid RDP file format (expected key:type:value per line).",
    ErrorKind.ENCODING_ERROR: "Serialized document cannot be represented in the output encoding.",
    ErrorKind.UNKNOWN: "Unexpected decoding failure; the type dispatch produced no value.",
}

_CODES: dict[ErrorKind, int] = {
    ErrorKind.INVALID_STRING: 1,
    ErrorKind.INVALID_FILE: 2,
    ErrorKind.ENCODING_ERROR: 3,
    ErrorKind.UNKNOWN: 999,
}


class RDPCodingError(ValueError):
    """
    Base class for all codec failures.

    Attributes:
        kind: The failure cause.
        detail: Optional free-form context (never part of equality).
        line_number: 1-based line of the offending record, when known.
    """
    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, detail: Optional[str] = None, *, line_number: Optional[int] = None):
        self.detail = detail
        self.line_number = line_number
        super().__init__(detail or self.kind.description)

    @property
    def code(self) -> int:
        return self.kind.code

    def __str__(self) -> str:
        message = self.kind.description
        if self.detail:
            message = f"{message} {self.detail}"
        if self.line_number is not None:
            message = f"{message} (line {self.line_number})"
        return message


class InvalidFileError(RDPCodingError):
    kind = ErrorKind.INVALID_FILE


class InvalidStringError(RDPCodingError):
    kind = ErrorKind.INVALID_STRING


class EncodingError(RDPCodingError):
    kind = ErrorKind.ENCODING_ERROR


class UnknownError(RDPCodingError):
    kind = ErrorKind.UNKNOWN


ERRORS_BY_KIND: dict[ErrorKind, type[RDPCodingError]] = {
    ErrorKind.INVALID_STRING: InvalidStringError,
    ErrorKind.INVALID_FILE: InvalidFileError,
    ErrorKind.ENCODING_ERROR: EncodingError,
    ErrorKind.UNKNOWN: UnknownError,
}
