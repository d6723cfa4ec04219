"""Tests for header layout offsets and field access."""

from __future__ import annotations

import struct
from collections.abc import Callable
from typing import TypeAlias

import pytest

from codecache.constants.layout import HEADER_FIELDS
from codecache.exceptions import ConfigError, TruncatedBufferError
from codecache.layout import CacheFileHeader, HeaderLayout, read_header, write_checksum, write_field

CacheBuilder: TypeAlias = Callable[..., bytes]


@pytest.mark.parametrize(
    ("pointer_width", "alignment", "header_size"),
    [
        pytest.param(64, 8, 32, id="64-bit"),
        pytest.param(32, 4, 28, id="32-bit"),
    ],
)
def test_header_size_rounds_up_to_alignment(pointer_width: int, alignment: int, header_size: int) -> None:
    layout = HeaderLayout(pointer_width=pointer_width)  # type: ignore[arg-type]

    assert layout.pointer_alignment == alignment
    assert layout.unaligned_size == 28
    assert layout.header_size == header_size


def test_field_offsets_follow_declaration_order() -> None:
    layout = HeaderLayout()

    assert [layout.field_offset(name) for name in HEADER_FIELDS] == [0, 4, 8, 12, 16, 20, 24]


def test_field_offset_rejects_unknown_name() -> None:
    with pytest.raises(KeyError):
        HeaderLayout().field_offset("padding")


@pytest.mark.parametrize(
    ("kwargs", "match"),
    [
        pytest.param({"pointer_width": 16}, "pointer_width", id="bad-width"),
        pytest.param({"byte_order": "native"}, "byte_order", id="bad-order"),
    ],
)
def test_layout_rejects_invalid_parameters(kwargs: dict[str, object], match: str) -> None:
    with pytest.raises(ConfigError, match=match):
        HeaderLayout(**kwargs)  # type: ignore[arg-type]


def test_read_header_decodes_fields_in_order(layout64: HeaderLayout, cache_builder: CacheBuilder) -> None:
    data = cache_builder(
        b"payload",
        magic_number=0xC0DE03D8,
        version_hash=1,
        source_hash=2,
        flag_hash=3,
        num_reservations=4,
        payload_length=5,
        checksum=6,
    )

    header = read_header(data, layout64)

    assert header == CacheFileHeader(0xC0DE03D8, 1, 2, 3, 4, 5, 6)
    assert list(header.to_dict()) == list(HEADER_FIELDS)


def test_read_header_honours_big_endian(cache_builder: CacheBuilder) -> None:
    layout = HeaderLayout(byte_order="big")
    data = cache_builder(layout=layout, magic_number=0x01020304)

    assert data[:4] == b"\x01\x02\x03\x04"
    assert read_header(data, layout).magic_number == 0x01020304


def test_read_header_ignores_padding(layout64: HeaderLayout, cache_builder: CacheBuilder) -> None:
    clean = cache_builder()
    dirty = cache_builder(padding=b"\xaa\xbb\xcc\xdd")

    assert read_header(clean, layout64) == read_header(dirty, layout64)


@pytest.mark.parametrize("size", [0, 4, 27, 31])
def test_read_header_rejects_truncated_buffer(layout64: HeaderLayout, size: int) -> None:
    with pytest.raises(TruncatedBufferError) as excinfo:
        read_header(b"\x00" * size, layout64)

    assert excinfo.value.actual == size
    assert excinfo.value.required == 32


def test_32_bit_layout_accepts_28_byte_buffer(layout32: HeaderLayout, cache_builder: CacheBuilder) -> None:
    data = cache_builder(layout=layout32, checksum=9)

    assert len(data) == 28
    assert read_header(data, layout32).checksum == 9


def test_write_checksum_touches_only_checksum_bytes(layout64: HeaderLayout, cache_builder: CacheBuilder) -> None:
    original = cache_builder(b"abc", padding=b"\x01\x02\x03\x04", checksum=0xFFFFFFFF)
    buffer = bytearray(original)

    write_checksum(buffer, 0x01020304, layout64)

    assert buffer[24:28] == struct.pack("<I", 0x01020304)
    assert buffer[:24] == original[:24]
    assert buffer[28:] == original[28:]


def test_write_checksum_big_endian(cache_builder: CacheBuilder) -> None:
    layout = HeaderLayout(byte_order="big")
    buffer = bytearray(cache_builder(layout=layout))

    write_checksum(buffer, 1, layout)

    assert bytes(buffer[24:28]) == b"\x00\x00\x00\x01"


def test_write_field_masks_to_32_bits(layout64: HeaderLayout, cache_builder: CacheBuilder) -> None:
    buffer = bytearray(cache_builder())

    write_field(buffer, "flag_hash", 0x1_0000_0002, layout64)

    assert read_header(buffer, layout64).flag_hash == 2


def test_write_checksum_rejects_truncated_buffer(layout64: HeaderLayout) -> None:
    with pytest.raises(TruncatedBufferError):
        write_checksum(bytearray(20), 1, layout64)
