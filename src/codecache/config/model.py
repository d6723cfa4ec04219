"""Config data model for codecache."""

from __future__ import annotations

from dataclasses import dataclass

from codecache.constants.config import (
    DEFAULT_CONFIG_BYTE_ORDER,
    DEFAULT_CONFIG_COLOR,
    DEFAULT_CONFIG_POINTER_WIDTH,
)
from codecache.layout import HeaderLayout
from codecache.types import ByteOrder, PointerWidth


@dataclass(frozen=True)
class CodeCacheConfig:
    """Resolved tool config."""

    pointer_width: PointerWidth = DEFAULT_CONFIG_POINTER_WIDTH  # type: ignore[assignment]
    byte_order: ByteOrder = DEFAULT_CONFIG_BYTE_ORDER  # type: ignore[assignment]
    color: bool = DEFAULT_CONFIG_COLOR

    def layout(self) -> HeaderLayout:
        """Build the header layout for the configured target."""
        return HeaderLayout(pointer_width=self.pointer_width, byte_order=self.byte_order)
