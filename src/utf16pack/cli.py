"""Command line interface for utf16pack."""

from __future__ import annotations

import zlib
from typing import BinaryIO, Optional, Sequence

import brotli
import click
from rich.console import Console
from rich.table import Table

from .api import compress_text, decompress_text
from .compression import CompressionCfg, CompressionLevel, CompressionResult, available_algorithms
from .compression.config import ALGORITHM_ENV, DEFAULT_ALGORITHM, DEFAULT_LEVEL, LEVEL_ENV
from .exceptions import ConfigurationError, Utf16PackError
from .packing import packed_utf16_to_bytes, to_packed_utf16
from .utils import configure_logging
from .utils.logging import LOG_LEVEL_ENV

console = Console(stderr=True)

# Packed text is written as raw UTF-8 bytes so that CR/LF code units survive
# untouched by newline translation.
_TEXT_ENCODING = "utf-8"

_COMPRESSOR_ERRORS = (Utf16PackError, zlib.error, brotli.error)
_LEVEL_CHOICES = ", ".join(level.value for level in CompressionLevel)


def _read_text(stream: BinaryIO, label: str) -> str:
    try:
        return stream.read().decode(_TEXT_ENCODING)
    except UnicodeDecodeError as exc:
        raise click.ClickException(f"{label} is not valid UTF-8: {exc}") from exc


def _write_text(stream: BinaryIO, text: str) -> None:
    stream.write(text.encode(_TEXT_ENCODING))


def _parse_level(ctx: click.Context, param: click.Parameter, value: str) -> CompressionLevel:
    try:
        return CompressionLevel.parse(value)
    except ConfigurationError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc


def _render_result(result: CompressionResult) -> None:
    table = Table(title=f"{result.kind} ({result.level.value})")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("original size", str(result.original.size))
    table.add_row("packed size", str(result.result.size))
    table.add_row("difference", str(result.difference))
    table.add_row("ratio", f"{result.ratio:.2%}")
    console.print(table)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
    default=None,
    envvar=LOG_LEVEL_ENV,
    help="Set the log level for the CLI session.",
)
@click.version_option(package_name="utf16pack")
def cli(log_level: Optional[str]) -> None:
    """Carry binary data inside well-formed UTF-16 text."""
    configure_logging(log_level)


@cli.command()
@click.option("-i", "--in", "source", type=click.File("rb"), default="-", help="Binary input (default: stdin).")
@click.option("-o", "--out", "target", type=click.File("wb"), default="-", help="Packed text output (default: stdout).")
def pack(source: BinaryIO, target: BinaryIO) -> None:
    """Pack raw bytes into UTF-16 safe text."""
    _write_text(target, to_packed_utf16(source.read()))


@cli.command()
@click.option("-i", "--in", "source", type=click.File("rb"), default="-", help="Packed text input (default: stdin).")
@click.option("-o", "--out", "target", type=click.File("wb"), default="-", help="Binary output (default: stdout).")
@click.option("--size", type=click.IntRange(min=0), default=None, help="Original byte length, trims the odd-length pad.")
def unpack(source: BinaryIO, target: BinaryIO, size: Optional[int]) -> None:
    """Recover raw bytes from packed text."""
    packed = _read_text(source, "packed input")
    try:
        data = packed_utf16_to_bytes(packed, size=size)
    except Utf16PackError as exc:
        raise click.ClickException(str(exc)) from exc
    target.write(data)


@cli.command()
@click.option("-i", "--in", "source", type=click.File("rb"), default="-", help="UTF-8 text input (default: stdin).")
@click.option("-o", "--out", "target", type=click.File("wb"), default="-", help="Packed text output (default: stdout).")
@click.option(
    "-a",
    "--algorithm",
    default=DEFAULT_ALGORITHM,
    envvar=ALGORITHM_ENV,
    show_default=True,
    help="Compression algorithm.",
)
@click.option(
    "-l",
    "--level",
    callback=_parse_level,
    default=DEFAULT_LEVEL.value,
    envvar=LEVEL_ENV,
    show_default=True,
    help=f"Compression level ({_LEVEL_CHOICES}).",
)
@click.option("--stats/--no-stats", default=True, show_default=True, help="Print size statistics to stderr.")
def compress(source: BinaryIO, target: BinaryIO, algorithm: str, level: CompressionLevel, stats: bool) -> None:
    """Compress text and pack the compressed bytes into text."""
    value = _read_text(source, "text input")
    try:
        result = compress_text(value, cfg=CompressionCfg(algorithm=algorithm, level=level))
    except Utf16PackError as exc:
        raise click.ClickException(str(exc)) from exc
    _write_text(target, result.result.value)
    if stats:
        _render_result(result)


@cli.command()
@click.option("-i", "--in", "source", type=click.File("rb"), default="-", help="Packed text input (default: stdin).")
@click.option("-o", "--out", "target", type=click.File("wb"), default="-", help="UTF-8 text output (default: stdout).")
@click.option(
    "-a",
    "--algorithm",
    default=DEFAULT_ALGORITHM,
    envvar=ALGORITHM_ENV,
    show_default=True,
    help="Compression algorithm used when packing.",
)
def decompress(source: BinaryIO, target: BinaryIO, algorithm: str) -> None:
    """Unpack and decompress text produced by ``compress``."""
    packed = _read_text(source, "packed input")
    try:
        value = decompress_text(packed, cfg=CompressionCfg(algorithm=algorithm))
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc
    except _COMPRESSOR_ERRORS as exc:
        raise click.ClickException(f"decompression failed: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise click.ClickException(f"decompressed data is not UTF-16 text: {exc}") from exc
    _write_text(target, value)


@cli.command()
def algorithms() -> None:
    """List the registered compression algorithms."""
    for name in available_algorithms():
        click.echo(name)


def main(argv: Sequence[str] | None = None) -> int:
    try:
        cli.main(args=list(argv) if argv is not None else None, prog_name="utf16pack")
    except SystemExit as exc:
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 1
    return 0


__all__ = ["cli", "main"]
