"""Config loading and normalization for codecache."""

from __future__ import annotations

import difflib
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from codecache.config.model import CodeCacheConfig
from codecache.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_CONFIG_BYTE_ORDER,
    DEFAULT_CONFIG_COLOR,
    DEFAULT_CONFIG_POINTER_WIDTH,
)
from codecache.constants.layout import VALID_BYTE_ORDERS, VALID_POINTER_WIDTHS
from codecache.exceptions import ConfigError

logger = logging.getLogger(__name__)


def _suggest_key(key: str) -> str | None:
    """Return the closest allowed config key for a typo, if any."""
    matches = difflib.get_close_matches(key, sorted(ALLOWED_CONFIG_KEYS), n=1, cutoff=0.6)
    return matches[0] if matches else None


def load_config(root: Path, config_path: Path | None = None) -> CodeCacheConfig:
    """Load and validate config from ``codecache.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return CodeCacheConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(str(k) for k in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            suggestion = _suggest_key(key)
            hint = f" (did you mean {suggestion!r}?)" if suggestion else ""
            raise ConfigError(f"Unknown config key {key!r}{hint}")

    logger.debug("Loaded config from %s", path)
    return CodeCacheConfig(
        pointer_width=_validate_pointer_width(raw.get("pointer_width", DEFAULT_CONFIG_POINTER_WIDTH)),
        byte_order=_validate_byte_order(raw.get("byte_order", DEFAULT_CONFIG_BYTE_ORDER)),
        color=_validate_bool(raw.get("color", DEFAULT_CONFIG_COLOR), "color"),
    )


def apply_overrides(
    config: CodeCacheConfig,
    *,
    pointer_width: int | None = None,
    byte_order: str | None = None,
    color: bool | None = None,
) -> CodeCacheConfig:
    """Return ``config`` with command-line values taking precedence."""
    changes: dict[str, Any] = {}
    if pointer_width is not None:
        changes["pointer_width"] = _validate_pointer_width(pointer_width)
    if byte_order is not None:
        changes["byte_order"] = _validate_byte_order(byte_order)
    if color is not None:
        changes["color"] = color
    return replace(config, **changes) if changes else config


def _validate_pointer_width(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value not in VALID_POINTER_WIDTHS:
        raise ConfigError(f"pointer_width must be one of {sorted(VALID_POINTER_WIDTHS)}, got {value!r}")
    return value


def _validate_byte_order(value: Any) -> str:
    if not isinstance(value, str) or value.strip().lower() not in VALID_BYTE_ORDERS:
        raise ConfigError(f"byte_order must be one of {sorted(VALID_BYTE_ORDERS)}, got {value!r}")
    return value.strip().lower()


def _validate_bool(value: Any, key_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key_name} must be a boolean")
    return value
