"""
Encoder for ``.rdp`` documents.

Each entry becomes one ``key:type:value`` line; lines are joined with ``\\n``
without a trailing newline and the result is written as UTF-8.
"""
from __future__ import annotations

import logging
from typing import Mapping

from rdpfile.errors import EncodingError
from rdpfile.logging import get_logger, log_event
from rdpfile.parsing.values.codec import format_property
from rdpfile.parsing.values.model import RDPValue, ValueType

OUTPUT_ENCODING = "utf-8"
LINE_SEPARATOR = "\n"

_LINE_BREAKS = ("\n", "\r")


def _is_unsafe(key: str, value: RDPValue) -> bool:
    if ":" in key or any(ch in key for ch in _LINE_BREAKS):
        return True
    return value.type is ValueType.STRING and any(ch in value.value for ch in _LINE_BREAKS)


def encode_text(document: Mapping[str, RDPValue]) -> str:
    logger = get_logger()
    lines = []
    for key, value in document.items():
        if not isinstance(value, RDPValue):
            raise TypeError(f"value for key {key!r} is {type(value).__name__}, not RDPValue")
        if _is_unsafe(key, value):
            # Still written; the record will not decode back unchanged.
            log_event(logger, "rdp_unsafe_property", {"key": key, "field": value.canonical_text}, logging.WARNING)
        lines.append(format_property(key, value))
    return LINE_SEPARATOR.join(lines)


def encode_document(document: Mapping[str, RDPValue]) -> bytes:
    """
    Serialize a document to canonical ``.rdp`` bytes.

    Args:
        document: Key -> value mapping; written in its iteration order.

    Returns:
        The UTF-8 encoded file contents.

    Raises:
        EncodingError: The text cannot be encoded (e.g. lone surrogates).
    """
    text = encode_text(document)
    try:
        return text.encode(OUTPUT_ENCODING)
    except UnicodeEncodeError as exc:
        log_event(get_logger(), "rdp_encoding_failed", {"reason": exc.reason, "position": exc.start}, logging.WARNING)
        raise EncodingError(f"{OUTPUT_ENCODING}: {exc.reason}") from exc
