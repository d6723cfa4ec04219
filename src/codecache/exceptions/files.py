"""File access exceptions."""

from __future__ import annotations

from pathlib import Path

from codecache.exceptions.base import CodeCacheError


class FileAccessError(CodeCacheError, OSError):
    """Raised when a cache file cannot be read or written."""

    def __init__(self, path: Path, action: str, reason: str) -> None:
        super().__init__(f"Cannot {action} {path}: {reason}")
        self.path = path
        self.action = action
