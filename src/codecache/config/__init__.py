"""Configuration loading and validation for codecache."""

from __future__ import annotations

from codecache.config.loader import apply_overrides, load_config
from codecache.config.model import CodeCacheConfig

__all__ = ["CodeCacheConfig", "apply_overrides", "load_config"]
