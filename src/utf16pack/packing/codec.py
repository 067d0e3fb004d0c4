"""Packing of byte buffers into 16-bit code units and back.

Each pair of input bytes ``(b0, b1)`` becomes one code unit ``b1 << 8 | b0``.
When ``b1`` falls in ``0xD8..0xDF`` the unit would sit in the UTF-16
surrogate range, so the pair is escaped into two units instead:
``0xD800 | b0`` followed by ``0xDC00 | b1``.  The escaped units always form a
well-formed surrogate pair, which keeps the packed output valid UTF-16.

Odd-length buffers are padded with a single ``0x00`` byte.  Decoding returns
that padding byte; pass ``size`` to :func:`unpack` to trim it.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from ..exceptions import PackingError

logger = logging.getLogger(__name__)

RESERVED_MIN = 0xD8
RESERVED_MAX = 0xDF
HIGH_ESCAPE = 0xD8
LOW_ESCAPE = 0xDC
PAD_BYTE = 0x00

BytesLike = Union[bytes, bytearray, memoryview]


def is_reserved(value: int) -> bool:
    """Return ``True`` when *value* used as a high byte lands in the surrogate range."""

    return RESERVED_MIN <= value <= RESERVED_MAX


def _as_bytes(data: BytesLike) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise PackingError("data must be bytes-like")
    return bytes(data)


def _pairs(data: bytes) -> Iterator[Tuple[int, int]]:
    even = len(data) - len(data) % 2
    for i in range(0, even, 2):
        yield data[i], data[i + 1]
    if even != len(data):
        yield data[-1], PAD_BYTE


def pack(data: BytesLike) -> List[int]:
    """Pack *data* into a list of 16-bit code units."""

    payload = _as_bytes(data)
    units: List[int] = []
    for low, high in _pairs(payload):
        if is_reserved(high):
            units.append((HIGH_ESCAPE << 8) | low)
            units.append((LOW_ESCAPE << 8) | high)
        else:
            units.append((high << 8) | low)

    logger.debug("packed %d bytes into %d code units", len(payload), len(units))
    return units


def iter_unpack(units: Iterable[int]) -> Iterator[int]:
    """Yield the bytes encoded by *units*, one unit at a time.

    A direct unit yields its low byte and then its high byte, which restores
    the original pair order.  A unit whose high byte is reserved is one half
    of an escaped pair and yields only its low byte.
    """

    for unit in units:
        value = int(unit)
        low = value & 0xFF
        high = (value >> 8) & 0xFF
        yield low
        if not is_reserved(high):
            yield high


def unpack(units: Iterable[int], *, size: Optional[int] = None) -> bytes:
    """Decode *units* back into bytes.

    Args:
        units: Code units, usually produced by :func:`pack`.
        size: Optional length of the original buffer.  When given, the
            decoded bytes are truncated to it, dropping the odd-length pad.

    Raises:
        PackingError: If *size* is negative or exceeds the decoded length.
    """

    data = bytes(iter_unpack(units))
    if size is None:
        return data
    if size < 0 or size > len(data):
        raise PackingError(f"size must be between 0 and {len(data)}, got {size}")
    return data[:size]


def count_escaped(data: BytesLike) -> int:
    """Return how many byte pairs of *data* need a two-unit escape."""

    return sum(1 for _, high in _pairs(_as_bytes(data)) if is_reserved(high))


def packed_length(data: BytesLike) -> int:
    """Return ``len(pack(data))`` without building the unit list."""

    payload = _as_bytes(data)
    return (len(payload) + 1) // 2 + count_escaped(payload)


__all__ = [
    "BytesLike",
    "count_escaped",
    "is_reserved",
    "iter_unpack",
    "pack",
    "packed_length",
    "unpack",
]
