"""
Typed property values of an ``.rdp`` document.

A value is one of three kinds (integer, string, binary). The kind travels
with the payload, so the one-character type tag and the canonical text of a
value are always derived from what it holds and cannot disagree with it.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from rdpfile.core.hexcodec import bytes_to_hex

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

RawValue = Union[int, str, bytes]


class ValueType(str, Enum):
    """Value kinds, keyed by the type tag written in the file."""
    INT = "i"
    STRING = "s"
    BINARY = "b"


@dataclass(frozen=True)
class RDPValue:
    """
    A single decoded property value.

    Build instances with :meth:`integer`, :meth:`string` or :meth:`binary`
    (or :meth:`from_raw`); the constructor rejects payloads that do not match
    the declared ``type``.

    Attributes:
        type: The value kind.
        value: The payload: ``int``, ``str`` or ``bytes`` respectively.
    """
    type: ValueType
    value: RawValue

    def __post_init__(self) -> None:
        value_type = ValueType(self.type)
        object.__setattr__(self, "type", value_type)
        if value_type is ValueType.INT:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise TypeError(f"integer value expected, got {type(self.value).__name__}")
            if not INT64_MIN <= self.value <= INT64_MAX:
                raise ValueError(f"integer value {self.value} is outside the signed 64-bit range")
        elif value_type is ValueType.STRING:
            if not isinstance(self.value, str):
                raise TypeError(f"string value expected, got {type(self.value).__name__}")
        else:
            if not isinstance(self.value, (bytes, bytearray, memoryview)):
                raise TypeError(f"binary value expected, got {type(self.value).__name__}")
            object.__setattr__(self, "value", bytes(self.value))

    @classmethod
    def integer(cls, value: int) -> "RDPValue":
        return cls(ValueType.INT, value)

    @classmethod
    def string(cls, value: str) -> "RDPValue":
        return cls(ValueType.STRING, value)

    @classmethod
    def binary(cls, value: bytes) -> "RDPValue":
        return cls(ValueType.BINARY, value)

    @classmethod
    def from_raw(cls, raw: Any) -> Optional["RDPValue"]:
        """
        Wrap a plain Python value.

        Args:
            raw: An ``int``, ``str`` or bytes-like object.

        Returns:
            The matching ``RDPValue``, or ``None`` when ``raw`` is of any
            other type (``bool`` included) or an integer out of range.
        """
        if isinstance(raw, bool):
            return None
        if isinstance(raw, int):
            if not INT64_MIN <= raw <= INT64_MAX:
                return None
            return cls.integer(raw)
        if isinstance(raw, str):
            return cls.string(raw)
        if isinstance(raw, (bytes, bytearray, memoryview)):
            return cls.binary(bytes(raw))
        return None

    @property
    def tag(self) -> str:
        return self.type.value

    @property
    def raw(self) -> RawValue:
        return self.value

    @property
    def canonical_text(self) -> str:
        """The exact text written after the second ``:`` of the record."""
        if self.type is ValueType.INT:
            return str(self.value)
        if self.type is ValueType.STRING:
            return self.value
        return bytes_to_hex(self.value)
