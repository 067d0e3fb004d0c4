"""Bridge between code-unit sequences and Python strings."""
from __future__ import annotations

import struct
from typing import List, Optional, Sequence

from .codec import BytesLike, pack, unpack

_UTF16 = "utf-16-le"
_ERRORS = "surrogatepass"


def units_to_text(units: Sequence[int]) -> str:
    """Return the string whose UTF-16 code units are *units*.

    Escaped pairs emitted by :func:`~utf16pack.packing.codec.pack` combine
    into a single supplementary code point.  Lone surrogates in arbitrary
    input are carried through unchanged.
    """

    raw = struct.pack(f"<{len(units)}H", *(int(unit) & 0xFFFF for unit in units))
    return raw.decode(_UTF16, _ERRORS)


def text_to_units(text: str) -> List[int]:
    """Split *text* into its UTF-16 code units."""

    raw = text.encode(_UTF16, _ERRORS)
    return list(struct.unpack(f"<{len(raw) // 2}H", raw))


def code_unit_length(text: str) -> int:
    """Return the number of UTF-16 code units needed to store *text*."""

    return len(text.encode(_UTF16, _ERRORS)) // 2


def to_packed_utf16(data: BytesLike) -> str:
    return units_to_text(pack(data))


def packed_utf16_to_bytes(text: str, *, size: Optional[int] = None) -> bytes:
    return unpack(text_to_units(text), size=size)


__all__ = [
    "code_unit_length",
    "packed_utf16_to_bytes",
    "text_to_units",
    "to_packed_utf16",
    "units_to_text",
]
