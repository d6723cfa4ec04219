"""JSON write helper with atomic persistence."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from codecache.exceptions import FileAccessError


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist JSON atomically by writing to a temp file then renaming."""
    temp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            json.dump(payload, handle, indent=2, sort_keys=True)
            handle.write("\n")
        os.replace(temp_name, path)
    except OSError as exc:
        _cleanup(temp_name)
        raise FileAccessError(path, "write", exc.strerror or str(exc)) from exc
    except Exception:
        _cleanup(temp_name)
        raise


def _cleanup(temp_name: str | None) -> None:
    if temp_name:
        with suppress(FileNotFoundError):
            Path(temp_name).unlink()
