from rdpfile.errors import (
    EncodingError,
    ErrorKind,
    InvalidFileError,
    InvalidStringError,
    RDPCodingError,
    UnknownError,
)
from rdpfile.parsing.document import Document, decode_document, encode_document, to_document, to_raw
from rdpfile.parsing.values import RDPValue, ValueType
from rdpfile.config import CodecSettings, get_settings
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "Document",
    "RDPValue",
    "ValueType",
    "decode_document",
    "encode_document",
    "to_document",
    "to_raw",
    "CodecSettings",
    "get_settings",
    "ErrorKind",
    "RDPCodingError",
    "InvalidFileError",
    "InvalidStringError",
    "EncodingError",
    "UnknownError",
]

try:
    __version__ = version("rdpfile")
except PackageNotFoundError:
    __version__ = "0.0.0"
