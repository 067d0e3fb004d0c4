"""Validated compression configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..exceptions import ConfigurationError
from .levels import CompressionLevel
from .transforms import ByteStreamTransform, available_algorithms, get_transform

ALGORITHM_ENV = "UTF16PACK_ALGORITHM"
LEVEL_ENV = "UTF16PACK_LEVEL"

DEFAULT_ALGORITHM = "gzip"
DEFAULT_LEVEL = CompressionLevel.FASTEST


@dataclass(frozen=True)
class CompressionCfg:
    """Algorithm and level selection for the compression wrapper."""

    algorithm: str = DEFAULT_ALGORITHM
    level: CompressionLevel = DEFAULT_LEVEL

    def __post_init__(self) -> None:  # pragma: no cover - dataclass hook
        if not isinstance(self.algorithm, str):
            raise ConfigurationError("'algorithm' must be a string")
        algorithm = self.algorithm.strip().lower()
        if algorithm not in available_algorithms():
            raise ConfigurationError(f"Unsupported compression algorithm: {self.algorithm!r}")
        object.__setattr__(self, "algorithm", algorithm)
        object.__setattr__(self, "level", CompressionLevel.parse(self.level))

    def to_dict(self) -> Dict[str, Any]:
        return {"algorithm": self.algorithm, "level": self.level.value}

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "CompressionCfg":
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigurationError("compression config must be an object")
        return cls(
            algorithm=data.get("algorithm", DEFAULT_ALGORITHM),
            level=data.get("level", DEFAULT_LEVEL),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CompressionCfg":
        env = os.environ if environ is None else environ
        return cls(
            algorithm=env.get(ALGORITHM_ENV) or DEFAULT_ALGORITHM,
            level=env.get(LEVEL_ENV) or DEFAULT_LEVEL,
        )

    def transform(self) -> ByteStreamTransform:
        return get_transform(self.algorithm, self.level)


__all__ = ["ALGORITHM_ENV", "CompressionCfg", "DEFAULT_ALGORITHM", "DEFAULT_LEVEL", "LEVEL_ENV"]
