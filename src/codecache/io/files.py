"""Whole-file read and atomic write helpers for cache files."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from contextlib import suppress
from pathlib import Path

from codecache.constants.reporting import CACHE_TEMP_PREFIX, CACHE_TEMP_SUFFIX
from codecache.exceptions import FileAccessError

logger = logging.getLogger(__name__)


def read_cache_file(path: Path) -> bytes:
    """Read a cache file fully into memory."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise FileAccessError(path, "read", exc.strerror or str(exc)) from exc
    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def write_cache_file(path: Path, data: bytes) -> None:
    """Replace the file at ``path`` with ``data`` via a sibling temp file.

    Symlinks are followed so the link target is rewritten, and an existing
    file keeps its permission bits.
    """
    target = path.resolve()
    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=target.parent,
            prefix=CACHE_TEMP_PREFIX,
            suffix=CACHE_TEMP_SUFFIX,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(data)
        if target.exists():
            shutil.copymode(target, temp_name)
        os.replace(temp_name, target)
    except OSError as exc:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise FileAccessError(path, "write", exc.strerror or str(exc)) from exc
    logger.debug("Wrote %d bytes to %s", len(data), target)
