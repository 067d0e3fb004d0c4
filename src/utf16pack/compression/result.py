"""Result records describing a compression round."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..packing.text import code_unit_length
from .levels import CompressionLevel


@dataclass(frozen=True)
class CompressionValue:
    """A text value measured in UTF-16 code units."""

    value: str

    @property
    def size(self) -> int:
        return code_unit_length(self.value)


@dataclass(frozen=True)
class CompressionResult:
    """Original text alongside its packed, compressed form."""

    original: CompressionValue
    result: CompressionValue
    level: CompressionLevel
    kind: str

    @property
    def difference(self) -> int:
        return self.original.size - self.result.size

    @property
    def ratio(self) -> float:
        """Size saving as a fraction of the original size (``0.0`` for empty input)."""

        if self.original.size == 0:
            return 0.0
        return abs(self.difference / self.original.size)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "level": self.level.value,
            "original_size": self.original.size,
            "result_size": self.result.size,
            "difference": self.difference,
            "ratio": self.ratio,
            "result": self.result.value,
        }


__all__ = ["CompressionResult", "CompressionValue"]
