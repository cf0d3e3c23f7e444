"""
Decoder for ``.rdp`` documents.

Byte input is converted to text first (UTF-16LE, UTF-8 and BOM-driven UTF-16
are tried in that order). The text is then split into records of the form
``key:type:value``; blank lines are skipped and every other line must be a
valid record, otherwise the whole decode fails.
"""
from __future__ import annotations

import logging
from typing import Iterator, Union

from rdpfile.errors import InvalidFileError, RDPCodingError, UnknownError
from rdpfile.logging import get_logger, log_event
from rdpfile.parsing.document.model import Document
from rdpfile.parsing.values.codec import decode_value
from rdpfile.parsing.values.model import RDPValue

BYTE_ORDER_MARK = "\ufeff"

# Order matters: the first encoding that yields plausible text wins.
CANDIDATE_ENCODINGS: tuple[str, ...] = ("utf-16-le", "utf-8", "utf-16")


def _could_hold_records(text: str) -> bool:
    # Any record needs a ':'; UTF-8 bytes read as UTF-16 almost never produce one.
    return ":" in text or not text.strip()


def detect_text(data: bytes) -> str:
    """
    Convert raw file contents to text.

    Args:
        data: The raw bytes of an ``.rdp`` file.

    Returns:
        The decoded text, still carrying any byte-order mark.

    Raises:
        InvalidFileError: None of the candidate encodings fits the bytes.
    """
    for encoding in CANDIDATE_ENCODINGS:
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError:
            continue
        if encoding.startswith("utf-16") and not _could_hold_records(text):
            continue
        log_event(get_logger(), "rdp_encoding_detected", {"encoding": encoding, "size": len(data)}, logging.DEBUG)
        return text
    log_event(get_logger(), "rdp_bytes_undecodable", {"size": len(data)}, logging.WARNING)
    raise InvalidFileError("input is neither UTF-16 nor UTF-8 text")


def iter_records(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, stripped_line)`` for every non-blank line."""
    if text.startswith(BYTE_ORDER_MARK):
        text = text[1:]
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    for line_number, line in enumerate(normalized.split("\n"), start=1):
        line = line.strip()
        if line:
            yield line_number, line


def decode_line(line: str) -> tuple[str, RDPValue]:
    """
    Decode a single stripped record.

    Only the first two ``:`` separate fields; later ones belong to the value.
    A record without a value field is accepted, but only string values may
    be empty that way.
    """
    parts = line.split(":", 2)
    if len(parts) not in (2, 3):
        raise InvalidFileError("expected key:type:value")
    key, tag = parts[0], parts[1]
    field = parts[2] if len(parts) == 3 else None
    return key, decode_value(tag, field)


def decode_text(text: str) -> Document:
    logger = get_logger()
    document: Document = {}
    for line_number, line in iter_records(text):
        try:
            key, value = decode_line(line)
        except RDPCodingError as exc:
            exc.line_number = line_number
            details = {
                "key": line.split(":", 1)[0],
                "line": line,
                "line_number": line_number,
                "kind": exc.kind.value,
            }
            if isinstance(exc, UnknownError):
                log_event(logger, "rdp_unknown_failure", details, logging.ERROR)
            else:
                log_event(logger, "rdp_line_rejected", details, logging.WARNING)
            raise
        document[key] = value
    return document


def decode_bytes(data: bytes) -> Document:
    return decode_text(detect_text(data))


def decode_document(data: Union[bytes, bytearray, memoryview, str]) -> Document:
    """
    Decode a whole ``.rdp`` document.

    Args:
        data: Raw file bytes, or already-decoded text.

    Returns:
        The properties in file order; a repeated key keeps its last value.

    Raises:
        InvalidFileError: Undecodable bytes, a malformed record or an
            unknown type tag.
        InvalidStringError: A value that does not parse as its type.
        UnknownError: Internal dispatch failure.
        TypeError: ``data`` is neither text nor bytes-like.
    """
    if isinstance(data, str):
        return decode_text(data)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return decode_bytes(bytes(data))
    raise TypeError(f"cannot decode {type(data).__name__}; expected bytes or str")
