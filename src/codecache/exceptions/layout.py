"""Header layout exceptions."""

from __future__ import annotations

from codecache.exceptions.base import CodeCacheError


class TruncatedBufferError(CodeCacheError, ValueError):
    """Raised when a buffer is too short to hold a code-cache header."""

    def __init__(self, actual: int, required: int) -> None:
        super().__init__(f"buffer is {actual} bytes, header requires {required}")
        self.actual = actual
        self.required = required
