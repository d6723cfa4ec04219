"""Checksum engine for code-cache payloads."""

from .engine import adler32, compute

__all__ = ["adler32", "compute"]
