"""
Value model and per-type codec for ``.rdp`` property values.
"""
from rdpfile.parsing.values.codec import (
    decode_binary,
    decode_integer,
    decode_string,
    decode_value,
    format_property,
    DECODERS,
)
from rdpfile.parsing.values.model import RDPValue, ValueType, INT64_MAX, INT64_MIN

__all__ = [
    "decode_binary",
    "decode_integer",
    "decode_string",
    "decode_value",
    "format_property",
    "DECODERS",
    "RDPValue",
    "ValueType",
    "INT64_MAX",
    "INT64_MIN",
]
