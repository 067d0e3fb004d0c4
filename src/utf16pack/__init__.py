"""Carry binary data inside well-formed UTF-16 text."""

from .api import (
    compress_bytes,
    compress_text,
    decompress_bytes,
    decompress_text,
    from_brotli,
    from_gzip,
    to_brotli,
    to_gzip,
)
from .compression import CompressionCfg, CompressionLevel, CompressionResult, CompressionValue
from .exceptions import (
    CompressionError,
    ConfigurationError,
    DecompressionError,
    PackingError,
    Utf16PackError,
)
from .packing import iter_unpack, pack, packed_utf16_to_bytes, to_packed_utf16, unpack

__version__ = "0.1.0"

__all__ = [
    "CompressionCfg",
    "CompressionError",
    "CompressionLevel",
    "CompressionResult",
    "CompressionValue",
    "ConfigurationError",
    "DecompressionError",
    "PackingError",
    "Utf16PackError",
    "compress_bytes",
    "compress_text",
    "decompress_bytes",
    "decompress_text",
    "from_brotli",
    "from_gzip",
    "iter_unpack",
    "pack",
    "packed_utf16_to_bytes",
    "to_brotli",
    "to_gzip",
    "to_packed_utf16",
    "unpack",
]
