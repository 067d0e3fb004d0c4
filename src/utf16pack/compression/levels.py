"""Compression level enumeration shared by every transform."""
from __future__ import annotations

from enum import Enum

from ..exceptions import ConfigurationError


class CompressionLevel(str, Enum):
    FASTEST = "fastest"
    OPTIMAL = "optimal"
    NO_COMPRESSION = "no-compression"
    SMALLEST_SIZE = "smallest-size"

    @classmethod
    def parse(cls, value: "CompressionLevel | str") -> "CompressionLevel":
        """Accept a member, its value, or its name in any case."""

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ConfigurationError("compression level must be a string")
        normalised = value.strip().lower().replace("_", "-")
        for member in cls:
            if member.value == normalised:
                return member
        choices = ", ".join(member.value for member in cls)
        raise ConfigurationError(f"Unknown compression level {value!r} (expected one of: {choices})")


__all__ = ["CompressionLevel"]
