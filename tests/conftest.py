"""Shared pytest fixtures for building code-cache buffers."""

from __future__ import annotations

import struct
from collections.abc import Callable
from typing import TypeAlias

import pytest

from codecache.layout import HeaderLayout

CacheBuilder: TypeAlias = Callable[..., bytes]


def build_cache(
    payload: bytes = b"",
    *,
    layout: HeaderLayout | None = None,
    magic_number: int = 0xC0DE0000,
    version_hash: int = 0x11111111,
    source_hash: int = 0x22222222,
    flag_hash: int = 0x33333333,
    num_reservations: int = 0,
    payload_length: int | None = None,
    checksum: int = 0,
    padding: bytes | None = None,
) -> bytes:
    """Assemble a code-cache file image for ``layout``."""
    layout = layout or HeaderLayout()
    prefix = "<" if layout.byte_order == "little" else ">"
    fields = struct.pack(
        f"{prefix}7I",
        magic_number,
        version_hash,
        source_hash,
        flag_hash,
        num_reservations,
        len(payload) if payload_length is None else payload_length,
        checksum,
    )
    pad_len = layout.header_size - layout.unaligned_size
    pad = padding if padding is not None else b"\x00" * pad_len
    assert len(pad) == pad_len
    return fields + pad + payload


@pytest.fixture()
def cache_builder() -> CacheBuilder:
    """Return the cache image builder."""
    return build_cache


@pytest.fixture()
def layout64() -> HeaderLayout:
    return HeaderLayout(pointer_width=64, byte_order="little")


@pytest.fixture()
def layout32() -> HeaderLayout:
    return HeaderLayout(pointer_width=32, byte_order="little")
