import gzip
import zlib
from typing import Optional

import brotli
import pytest

from utf16pack.compression import (
    BrotliTransform,
    CompressionLevel,
    DeflateFamilyTransform,
    available_algorithms,
    get_transform,
    register_algorithm,
)
from utf16pack.compression import transforms
from utf16pack.exceptions import ConfigurationError, DecompressionError

PAYLOAD = ("The quick brown fox jumps over the lazy dog. " * 40).encode("utf-16-le")


@pytest.mark.parametrize("algorithm", ["gzip", "zlib", "deflate", "brotli"])
@pytest.mark.parametrize("level", list(CompressionLevel))
def test_roundtrip_every_algorithm_and_level(algorithm, level):
    transform = get_transform(algorithm, level)
    compressed = transform.compress(PAYLOAD)
    assert transform.decompress(compressed) == PAYLOAD


@pytest.mark.parametrize("algorithm", ["gzip", "zlib", "deflate", "brotli"])
def test_single_padding_byte_is_tolerated(algorithm):
    transform = get_transform(algorithm)
    compressed = transform.compress(PAYLOAD)
    assert transform.decompress(compressed + b"\x00") == PAYLOAD


@pytest.mark.parametrize("algorithm", ["gzip", "zlib", "deflate", "brotli"])
@pytest.mark.parametrize("tail", [b"\x01", b"\x00\x00", b"\x01\x00"])
def test_trailing_garbage_is_rejected(algorithm, tail):
    transform = get_transform(algorithm)
    compressed = transform.compress(PAYLOAD)
    with pytest.raises(DecompressionError, match="unexpected trailing bytes"):
        transform.decompress(compressed + tail)


@pytest.mark.parametrize("algorithm", ["gzip", "zlib", "deflate", "brotli"])
def test_truncated_stream_is_rejected(algorithm):
    transform = get_transform(algorithm)
    compressed = transform.compress(PAYLOAD)
    with pytest.raises(DecompressionError):
        transform.decompress(compressed[: len(compressed) // 2])


def test_gzip_output_is_standard_gzip():
    compressed = get_transform("gzip").compress(PAYLOAD)
    assert compressed[:2] == b"\x1f\x8b"
    assert gzip.decompress(compressed) == PAYLOAD


def test_zlib_and_brotli_interoperate_with_reference_libraries():
    assert zlib.decompress(get_transform("zlib").compress(PAYLOAD)) == PAYLOAD
    assert brotli.decompress(get_transform("brotli").compress(PAYLOAD)) == PAYLOAD


def test_corrupt_input_surfaces_library_error():
    with pytest.raises(zlib.error):
        get_transform("zlib").decompress(b"\xff\xff\xff\xff")


def test_transform_names():
    assert get_transform("GZip").name == "GZip"
    assert get_transform("brotli").name == "Brotli"
    assert isinstance(get_transform("deflate"), DeflateFamilyTransform)
    assert isinstance(get_transform("brotli"), BrotliTransform)


def test_smallest_size_is_not_larger_than_no_compression():
    fast = get_transform("gzip", CompressionLevel.NO_COMPRESSION).compress(PAYLOAD)
    small = get_transform("gzip", CompressionLevel.SMALLEST_SIZE).compress(PAYLOAD)
    assert len(small) < len(fast)


def test_unknown_algorithm():
    with pytest.raises(ConfigurationError):
        get_transform("lzma")


def test_register_custom_algorithm(monkeypatch):
    monkeypatch.setattr(transforms, "_REGISTRY", dict(transforms._REGISTRY))

    class Identity:
        name = "Identity"

        def __init__(self, level):
            self.level = level

        def compress(self, data):
            return bytes(data)

        def decompress(self, data):
            return bytes(data)

    register_algorithm("Identity-Test", Identity)
    assert "identity-test" in available_algorithms()
    assert get_transform("identity-test").compress(b"abc") == b"abc"


def test_registry_is_restored_between_tests():
    assert "identity-test" not in available_algorithms()


def _brotli_stream_ending_in_zero() -> Optional[bytes]:
    for seed in range(20000):
        candidate = f"{seed:x} packed text {seed * 7919}".encode("utf-8") * 3
        if brotli.compress(candidate, quality=1).endswith(b"\x00"):
            return candidate
    return None


def test_brotli_stream_ending_in_zero_byte():
    data = _brotli_stream_ending_in_zero()
    if data is None:
        pytest.skip("no Brotli stream ending in 0x00 found")
    transform = BrotliTransform(CompressionLevel.FASTEST)
    compressed = transform.compress(data)
    assert compressed.endswith(b"\x00")

    assert transform.decompress(compressed) == data
    assert transform.decompress(compressed + b"\x00") == data
    with pytest.raises(DecompressionError):
        transform.decompress(compressed + b"\x00\x00")
    with pytest.raises(DecompressionError):
        transform.decompress(compressed[:-1])
