"""Configuration-related exceptions."""

from __future__ import annotations

from codecache.exceptions.base import CodeCacheError


class ConfigError(CodeCacheError, ValueError):
    """Raised when layout or tool configuration is invalid."""
