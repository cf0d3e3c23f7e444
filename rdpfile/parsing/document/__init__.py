"""
Whole-document decoding and encoding.
"""
from rdpfile.parsing.document.decode import (
    decode_bytes,
    decode_document,
    decode_line,
    decode_text,
    detect_text,
    iter_records,
    CANDIDATE_ENCODINGS,
)
from rdpfile.parsing.document.encode import encode_document, encode_text, OUTPUT_ENCODING
from rdpfile.parsing.document.model import Document, to_document, to_raw

__all__ = [
    "decode_bytes",
    "decode_document",
    "decode_line",
    "decode_text",
    "detect_text",
    "iter_records",
    "CANDIDATE_ENCODINGS",
    "encode_document",
    "encode_text",
    "OUTPUT_ENCODING",
    "Document",
    "to_document",
    "to_raw",
]
