"""Shared file I/O helpers."""

from .files import read_cache_file, write_cache_file
from .json_io import write_json_atomic

__all__ = ["read_cache_file", "write_cache_file", "write_json_atomic"]
