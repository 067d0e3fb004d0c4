"""Byte to 16-bit code unit packing."""

from .codec import count_escaped, is_reserved, iter_unpack, pack, packed_length, unpack
from .text import (
    code_unit_length,
    packed_utf16_to_bytes,
    text_to_units,
    to_packed_utf16,
    units_to_text,
)

__all__ = [
    "code_unit_length",
    "count_escaped",
    "is_reserved",
    "iter_unpack",
    "pack",
    "packed_length",
    "packed_utf16_to_bytes",
    "text_to_units",
    "to_packed_utf16",
    "units_to_text",
    "unpack",
]
