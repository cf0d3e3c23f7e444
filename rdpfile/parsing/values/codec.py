"""
Per-type parse and format rules.

Decoders take the third field of a record (``None`` when the record only has
two fields) and return an :class:`RDPValue`. They are looked up by type tag
in :data:`DECODERS`.
"""
from __future__ import annotations

import re
from typing import Callable, Optional

from rdpfile.core.hexcodec import hex_to_bytes
from rdpfile.errors import InvalidFileError, InvalidStringError, UnknownError
from rdpfile.parsing.values.model import INT64_MAX, INT64_MIN, RDPValue, ValueType

FieldDecoder = Callable[[Optional[str]], Optional[RDPValue]]

_INTEGER_LITERAL = re.compile(r"-?[0-9]+")


def decode_integer(field: Optional[str]) -> RDPValue:
    if field is None:
        raise InvalidStringError("missing integer field")
    if not _INTEGER_LITERAL.fullmatch(field):
        raise InvalidStringError("not a base-10 integer")
    number = int(field)
    if not INT64_MIN <= number <= INT64_MAX:
        raise InvalidStringError("integer out of 64-bit range")
    return RDPValue.integer(number)


def decode_string(field: Optional[str]) -> RDPValue:
    return RDPValue.string(field if field is not None else "")


def decode_binary(field: Optional[str]) -> RDPValue:
    if field is None:
        raise InvalidStringError("missing binary field")
    data = hex_to_bytes(field)
    if data is None:
        raise InvalidStringError("binary field is not an even-length hex string")
    return RDPValue.binary(data)


DECODERS: dict[str, FieldDecoder] = {
    ValueType.INT.value: decode_integer,
    ValueType.STRING.value: decode_string,
    ValueType.BINARY.value: decode_binary,
}


def decode_value(tag: str, field: Optional[str]) -> RDPValue:
    """
    Decode one field according to its type tag.

    Raises:
        InvalidFileError: ``tag`` is not a known type tag.
        InvalidStringError: ``field`` does not parse as the tagged type.
        UnknownError: the decoder returned nothing without failing.
    """
    decoder = DECODERS.get(tag)
    if decoder is None:
        raise InvalidFileError(f"unknown type tag {tag!r}")
    value = decoder(field)
    if value is None:
        raise UnknownError(f"no value produced for type tag {tag!r}")
    return value


def format_property(key: str, value: RDPValue) -> str:
    return f"{key}:{value.tag}:{value.canonical_text}"
