"""Custom exception hierarchy for the utf16pack toolkit."""
from __future__ import annotations


class Utf16PackError(Exception):
    """Base class for all utf16pack errors."""


class ConfigurationError(Utf16PackError):
    """Raised when user-supplied configuration is invalid."""


class PackingError(Utf16PackError):
    """Raised when input falls outside the packing codec's domain."""


class CompressionError(Utf16PackError):
    """Raised when a compression transform is misused."""


class DecompressionError(CompressionError):
    """Raised when a compressed stream is truncated or followed by stray data."""


__all__ = [
    "CompressionError",
    "ConfigurationError",
    "DecompressionError",
    "PackingError",
    "Utf16PackError",
]
