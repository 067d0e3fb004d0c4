import zlib

import pytest

from utf16pack import (
    CompressionCfg,
    CompressionLevel,
    compress_bytes,
    compress_text,
    decompress_bytes,
    decompress_text,
    from_brotli,
    from_gzip,
    to_brotli,
    to_gzip,
)
from utf16pack.exceptions import ConfigurationError, DecompressionError
from utf16pack.packing import packed_utf16_to_bytes, to_packed_utf16

SAMPLE = "Packed text travels through JSON fields and log lines. " * 20 + "é中\U0001F600\r\n"


@pytest.mark.parametrize("algorithm", ["gzip", "zlib", "deflate", "brotli"])
def test_text_roundtrip(algorithm):
    result = compress_text(SAMPLE, algorithm=algorithm, level=CompressionLevel.OPTIMAL)
    assert result.original.value == SAMPLE
    assert result.level is CompressionLevel.OPTIMAL
    assert decompress_text(result.result.value, algorithm=algorithm) == SAMPLE


def test_result_reports_sizes():
    result = to_gzip(SAMPLE, CompressionLevel.SMALLEST_SIZE)
    assert result.kind == "GZip"
    assert result.original.size == len(SAMPLE.encode("utf-16-le")) // 2
    assert result.result.size < result.original.size
    assert result.difference > 0
    assert 0.0 < result.ratio < 1.0


def test_shortcuts():
    assert from_gzip(to_gzip(SAMPLE).result.value) == SAMPLE
    brotli_result = to_brotli(SAMPLE)
    assert brotli_result.kind == "Brotli"
    assert from_brotli(brotli_result.result.value) == SAMPLE


def test_packed_output_is_well_formed_text():
    packed = to_brotli(SAMPLE).result.value
    packed.encode("utf-8")  # Lone surrogates would raise here.


def test_empty_text():
    result = to_gzip("")
    assert result.ratio == 0.0
    assert from_gzip(result.result.value) == ""


def test_lone_surrogates_in_source_text_survive():
    text = "broken \ud800 pair"
    assert from_gzip(to_gzip(text).result.value) == text


def test_binary_payload_roundtrip():
    data = bytes(range(256)) * 8 + b"\x01"
    packed = compress_bytes(data, algorithm="deflate")
    assert decompress_bytes(packed, algorithm="deflate") == data


def test_cfg_overrides_keywords():
    cfg = CompressionCfg(algorithm="brotli", level="smallest-size")
    result = compress_text(SAMPLE, algorithm="gzip", cfg=cfg)
    assert result.kind == "Brotli"
    assert result.level is CompressionLevel.SMALLEST_SIZE
    assert decompress_text(result.result.value, cfg=cfg) == SAMPLE


def test_unknown_algorithm_is_configuration_error():
    with pytest.raises(ConfigurationError):
        compress_text(SAMPLE, algorithm="lzma")


def test_wrong_algorithm_propagates_compressor_failure():
    packed = to_gzip(SAMPLE).result.value
    with pytest.raises(zlib.error):
        decompress_text(packed, algorithm="zlib")


def test_truncated_packed_text_fails():
    packed = to_gzip(SAMPLE).result.value
    with pytest.raises(DecompressionError):
        from_gzip(packed[: len(packed) // 2])


def test_compress_text_builds_one_transform(monkeypatch):
    calls = []
    original = CompressionCfg.transform

    def counting(self):
        calls.append(self.algorithm)
        return original(self)

    monkeypatch.setattr(CompressionCfg, "transform", counting)
    result = compress_text(SAMPLE, algorithm="brotli")
    assert result.kind == "Brotli"
    assert calls == ["brotli"]


def test_brotli_trailing_garbage_is_decompression_error():
    packed = compress_bytes(SAMPLE.encode("utf-8"), algorithm="brotli")
    compressed = packed_utf16_to_bytes(packed)
    with pytest.raises(DecompressionError):
        decompress_bytes(to_packed_utf16(compressed + b"\x07\x07\x07"), algorithm="brotli")
