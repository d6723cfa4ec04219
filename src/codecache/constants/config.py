"""Configuration defaults and filenames."""

from __future__ import annotations

from codecache.constants.layout import DEFAULT_BYTE_ORDER, DEFAULT_POINTER_WIDTH

CONFIG_FILENAME: str = "codecache.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"pointer_width", "byte_order", "color"})

DEFAULT_CONFIG_POINTER_WIDTH: int = DEFAULT_POINTER_WIDTH
DEFAULT_CONFIG_BYTE_ORDER: str = DEFAULT_BYTE_ORDER
DEFAULT_CONFIG_COLOR: bool = True
