"""Shared exception hierarchy for codecache."""

from __future__ import annotations

from .base import CodeCacheError
from .config import ConfigError
from .files import FileAccessError
from .layout import TruncatedBufferError

__all__ = ["CodeCacheError", "ConfigError", "FileAccessError", "TruncatedBufferError"]
