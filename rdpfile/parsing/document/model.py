from __future__ import annotations

from typing import Any, Mapping, Union

from rdpfile.parsing.values.model import RawValue, RDPValue

# Insertion-ordered; duplicate keys keep the position of their first occurrence.
Document = dict[str, RDPValue]


def to_document(mapping: Mapping[str, Any]) -> Document:
    """
    Build a document from plain Python values.

    Args:
        mapping: Key -> ``int``, ``str``, bytes-like or ``RDPValue``.

    Returns:
        A new document in the iteration order of ``mapping``.

    Raises:
        TypeError: A value cannot be represented as an ``RDPValue``.
    """
    document: Document = {}
    for key, raw in mapping.items():
        if isinstance(raw, RDPValue):
            document[key] = raw
            continue
        value = RDPValue.from_raw(raw)
        if value is None:
            raise TypeError(f"cannot store {type(raw).__name__} under key {key!r}")
        document[key] = value
    return document


def to_raw(document: Mapping[str, RDPValue]) -> dict[str, RawValue]:
    return {key: value.raw for key, value in document.items()}
