"""High level API: compress text and carry it as packed UTF-16 text."""
from __future__ import annotations

import logging
from typing import Optional

from .compression import (
    ByteStreamTransform,
    CompressionCfg,
    CompressionLevel,
    CompressionResult,
    CompressionValue,
)
from .packing import packed_utf16_to_bytes, to_packed_utf16

logger = logging.getLogger(__name__)

TEXT_ENCODING = "utf-16-le"
_TEXT_ERRORS = "surrogatepass"


def _resolve_cfg(
    algorithm: str,
    level: CompressionLevel | str,
    cfg: Optional[CompressionCfg],
) -> CompressionCfg:
    if cfg is not None:
        return cfg
    return CompressionCfg(algorithm=algorithm, level=level)


def compress_bytes(
    data: bytes,
    *,
    algorithm: str = "gzip",
    level: CompressionLevel | str = CompressionLevel.FASTEST,
    cfg: Optional[CompressionCfg] = None,
) -> str:
    """Compress *data* and return the packed compressed text."""

    config = _resolve_cfg(algorithm, level, cfg)
    return _pack_compressed(config.transform(), config.level, data)


def _pack_compressed(transform: ByteStreamTransform, level: CompressionLevel, data: bytes) -> str:
    compressed = transform.compress(bytes(data))
    logger.debug(
        "%s (%s) compressed %d bytes to %d bytes",
        transform.name,
        level.value,
        len(data),
        len(compressed),
    )
    return to_packed_utf16(compressed)


def decompress_bytes(
    packed: str,
    *,
    algorithm: str = "gzip",
    cfg: Optional[CompressionCfg] = None,
) -> bytes:
    """Unpack *packed* and decompress it back to the original bytes.

    Failures reported by the compressor are propagated unchanged.
    """

    config = _resolve_cfg(algorithm, CompressionLevel.FASTEST, cfg)
    compressed = packed_utf16_to_bytes(packed)
    transform = config.transform()
    data = transform.decompress(compressed)
    logger.debug("%s decompressed %d bytes to %d bytes", transform.name, len(compressed), len(data))
    return data


def compress_text(
    value: str,
    *,
    algorithm: str = "gzip",
    level: CompressionLevel | str = CompressionLevel.FASTEST,
    cfg: Optional[CompressionCfg] = None,
) -> CompressionResult:
    """UTF-16 encode *value*, compress it and pack the result into text."""

    config = _resolve_cfg(algorithm, level, cfg)
    transform = config.transform()
    packed = _pack_compressed(transform, config.level, value.encode(TEXT_ENCODING, _TEXT_ERRORS))
    return CompressionResult(
        original=CompressionValue(value),
        result=CompressionValue(packed),
        level=config.level,
        kind=transform.name,
    )


def decompress_text(
    packed: str,
    *,
    algorithm: str = "gzip",
    cfg: Optional[CompressionCfg] = None,
) -> str:
    """Reverse :func:`compress_text`."""

    data = decompress_bytes(packed, algorithm=algorithm, cfg=cfg)
    return data.decode(TEXT_ENCODING, _TEXT_ERRORS)


def to_gzip(value: str, level: CompressionLevel | str = CompressionLevel.FASTEST) -> CompressionResult:
    return compress_text(value, algorithm="gzip", level=level)


def from_gzip(packed: str) -> str:
    return decompress_text(packed, algorithm="gzip")


def to_brotli(value: str, level: CompressionLevel | str = CompressionLevel.FASTEST) -> CompressionResult:
    return compress_text(value, algorithm="brotli", level=level)


def from_brotli(packed: str) -> str:
    return decompress_text(packed, algorithm="brotli")


__all__ = [
    "TEXT_ENCODING",
    "compress_bytes",
    "compress_text",
    "decompress_bytes",
    "decompress_text",
    "from_brotli",
    "from_gzip",
    "to_brotli",
    "to_gzip",
]
