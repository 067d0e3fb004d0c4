"""Byte-stream compressors used behind the packed text wrapper.

The wrapper only depends on the :class:`ByteStreamTransform` protocol; the
concrete compressors are looked up by name through a small registry so that
new algorithms can be plugged in without touching the packing code.

Packed transport pads odd-length payloads with one ``0x00`` byte.  Every
``decompress`` therefore stops at the end of the compressed stream and
tolerates exactly that single padding byte after it.
"""

from __future__ import annotations

import logging
import zlib
from typing import Callable, Dict, List, Mapping, Protocol, Tuple

import brotli

from ..exceptions import ConfigurationError, DecompressionError
from .levels import CompressionLevel

logger = logging.getLogger(__name__)

_PADDING = (b"", b"\x00")


class ByteStreamTransform(Protocol):
    """Capability implemented by every compressor usable with the wrapper."""

    name: str

    def compress(self, data: bytes) -> bytes:
        ...

    def decompress(self, data: bytes) -> bytes:
        ...


def _check_trailing(name: str, unused: bytes) -> None:
    if unused not in _PADDING:
        raise DecompressionError(
            f"{name} stream is followed by {len(unused)} unexpected trailing bytes"
        )


class DeflateFamilyTransform:
    """DEFLATE based compression framed as gzip, zlib or raw deflate."""

    LEVELS: Mapping[CompressionLevel, int] = {
        CompressionLevel.NO_COMPRESSION: 0,
        CompressionLevel.FASTEST: 1,
        CompressionLevel.OPTIMAL: 6,
        CompressionLevel.SMALLEST_SIZE: 9,
    }

    def __init__(self, name: str, wbits: int, level: CompressionLevel = CompressionLevel.FASTEST) -> None:
        self.name = name
        self.wbits = wbits
        self.level = CompressionLevel.parse(level)

    def compress(self, data: bytes) -> bytes:
        compressor = zlib.compressobj(self.LEVELS[self.level], zlib.DEFLATED, self.wbits)
        return compressor.compress(bytes(data)) + compressor.flush()

    def decompress(self, data: bytes) -> bytes:
        decompressor = zlib.decompressobj(self.wbits)
        output = decompressor.decompress(bytes(data))
        if not decompressor.eof:
            raise DecompressionError(f"{self.name} stream is truncated")
        _check_trailing(self.name, decompressor.unused_data)
        return output

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"DeflateFamilyTransform(name={self.name!r}, wbits={self.wbits}, level={self.level.value!r})"


class BrotliTransform:
    """Brotli compression through the ``brotli`` bindings."""

    name = "Brotli"

    QUALITIES: Mapping[CompressionLevel, int] = {
        CompressionLevel.NO_COMPRESSION: 0,
        CompressionLevel.FASTEST: 1,
        CompressionLevel.OPTIMAL: 4,
        CompressionLevel.SMALLEST_SIZE: 11,
    }

    def __init__(self, level: CompressionLevel = CompressionLevel.FASTEST) -> None:
        self.level = CompressionLevel.parse(level)

    def compress(self, data: bytes) -> bytes:
        return brotli.compress(bytes(data), quality=self.QUALITIES[self.level])

    def decompress(self, data: bytes) -> bytes:
        payload = bytes(data)
        # Brotli rejects input past the end of the stream, so a trailing pad
        # byte is only fed when the stream is still incomplete without it.
        if payload.endswith(b"\x00"):
            body, tail = payload[:-1], payload[-1:]
        else:
            body, tail = payload, b""

        decompressor = brotli.Decompressor()
        try:
            output = decompressor.process(body)
        except brotli.error:
            return self._decompress_until_end(payload)
        if tail and not decompressor.is_finished():
            output += decompressor.process(tail)
        if not decompressor.is_finished():
            raise DecompressionError(f"{self.name} stream is truncated")
        return output

    def _decompress_until_end(self, payload: bytes) -> bytes:
        """Replay *payload* byte by byte to tell stray trailing data from corruption."""

        decompressor = brotli.Decompressor()
        chunks: List[bytes] = []
        for index in range(len(payload)):
            # Corruption inside the stream raises brotli.error here.
            chunks.append(decompressor.process(payload[index : index + 1]))
            if decompressor.is_finished():
                _check_trailing(self.name, payload[index + 1 :])
                return b"".join(chunks)
        raise DecompressionError(f"{self.name} stream is truncated")


TransformFactory = Callable[[CompressionLevel], ByteStreamTransform]

_REGISTRY: Dict[str, TransformFactory] = {}


def register_algorithm(key: str, factory: TransformFactory) -> None:
    """Register *factory* under the case-insensitive *key*."""

    normalised = key.strip().lower()
    if not normalised:
        raise ConfigurationError("algorithm key may not be empty")
    _REGISTRY[normalised] = factory


def available_algorithms() -> List[str]:
    return sorted(_REGISTRY)


def get_transform(key: str, level: CompressionLevel | str = CompressionLevel.FASTEST) -> ByteStreamTransform:
    """Instantiate the transform registered under *key*."""

    if not isinstance(key, str):
        raise ConfigurationError("algorithm must be a string")
    factory = _REGISTRY.get(key.strip().lower())
    if factory is None:
        choices = ", ".join(available_algorithms())
        raise ConfigurationError(f"Unknown compression algorithm {key!r} (expected one of: {choices})")
    transform = factory(CompressionLevel.parse(level))
    logger.debug("selected %s transform for key %r", transform.name, key)
    return transform


_DEFLATE_FAMILY: Tuple[Tuple[str, str, int], ...] = (
    ("gzip", "GZip", 16 + zlib.MAX_WBITS),
    ("zlib", "ZLib", zlib.MAX_WBITS),
    ("deflate", "Deflate", -zlib.MAX_WBITS),
)

for _key, _name, _wbits in _DEFLATE_FAMILY:
    register_algorithm(
        _key,
        lambda level, name=_name, wbits=_wbits: DeflateFamilyTransform(name, wbits, level),
    )
register_algorithm("brotli", BrotliTransform)


__all__ = [
    "BrotliTransform",
    "ByteStreamTransform",
    "DeflateFamilyTransform",
    "TransformFactory",
    "available_algorithms",
    "get_transform",
    "register_algorithm",
]
