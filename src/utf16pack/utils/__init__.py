"""Shared helpers for utf16pack."""

from .logging import configure_logging, resolve_log_level

__all__ = ["configure_logging", "resolve_log_level"]
