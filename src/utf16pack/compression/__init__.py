"""Compression wrapper building blocks."""

from .config import CompressionCfg
from .levels import CompressionLevel
from .result import CompressionResult, CompressionValue
from .transforms import (
    BrotliTransform,
    ByteStreamTransform,
    DeflateFamilyTransform,
    available_algorithms,
    get_transform,
    register_algorithm,
)

__all__ = [
    "BrotliTransform",
    "ByteStreamTransform",
    "CompressionCfg",
    "CompressionLevel",
    "CompressionResult",
    "CompressionValue",
    "DeflateFamilyTransform",
    "available_algorithms",
    "get_transform",
    "register_algorithm",
]
