from __future__ import annotations

import re
from typing import Optional


_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]*")


def bytes_to_hex(data: bytes) -> str:
    return data.hex().upper()


def hex_to_bytes(text: str) -> Optional[bytes]:
    # Spaces between digits are tolerated; nothing else is.
    cleaned = text.replace(" ", "")
    if len(cleaned) % 2 != 0:
        return None
    if not _HEX_DIGITS.fullmatch(cleaned):
        return None
    return bytes.fromhex(cleaned)
