"""Fixed-offset access to the code-cache header.

The header is seven unsigned 32-bit fields followed by padding up to the
target's pointer alignment::

    0   magic_number
    4   version_hash
    8   source_hash
    12  flag_hash
    16  num_reservations
    20  payload_length
    24  checksum
    28  padding (64-bit targets only)

Byte order is an explicit layout parameter rather than the host order, so a
cache produced on one architecture can be inspected on another.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, fields

from codecache.constants.checksum import UINT32_MASK
from codecache.constants.layout import (
    DEFAULT_BYTE_ORDER,
    DEFAULT_POINTER_WIDTH,
    HEADER_FIELDS,
    POINTER_ALIGNMENT_BY_WIDTH,
    STRUCT_BYTE_ORDER_PREFIX,
    UINT32_SIZE,
    VALID_BYTE_ORDERS,
    VALID_POINTER_WIDTHS,
)
from codecache.exceptions import ConfigError, TruncatedBufferError
from codecache.types import ByteOrder, PointerWidth


@dataclass(frozen=True)
class CacheFileHeader:
    """Decoded header fields, in on-disk order."""

    magic_number: int
    version_hash: int
    source_hash: int
    flag_hash: int
    num_reservations: int
    payload_length: int
    checksum: int

    def to_dict(self) -> dict[str, int]:
        return {field.name: getattr(self, field.name) for field in fields(self)}


@dataclass(frozen=True)
class HeaderLayout:
    """Offsets and sizes for one target pointer width and byte order."""

    pointer_width: PointerWidth = DEFAULT_POINTER_WIDTH  # type: ignore[assignment]
    byte_order: ByteOrder = DEFAULT_BYTE_ORDER  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.pointer_width not in VALID_POINTER_WIDTHS:
            raise ConfigError(
                f"pointer_width must be one of {sorted(VALID_POINTER_WIDTHS)}, got {self.pointer_width!r}"
            )
        if self.byte_order not in VALID_BYTE_ORDERS:
            raise ConfigError(f"byte_order must be one of {sorted(VALID_BYTE_ORDERS)}, got {self.byte_order!r}")

    @property
    def pointer_alignment(self) -> int:
        return POINTER_ALIGNMENT_BY_WIDTH[self.pointer_width]

    @property
    def unaligned_size(self) -> int:
        return len(HEADER_FIELDS) * UINT32_SIZE

    @property
    def header_size(self) -> int:
        """Unaligned size rounded up to the pointer alignment."""
        mask = self.pointer_alignment - 1
        return (self.unaligned_size + mask) & ~mask

    def field_offset(self, name: str) -> int:
        """Return the byte offset of ``name``; raises ``KeyError`` for unknown fields."""
        if name not in HEADER_FIELDS:
            raise KeyError(name)
        return HEADER_FIELDS.index(name) * UINT32_SIZE

    @property
    def header_struct(self) -> struct.Struct:
        return struct.Struct(f"{STRUCT_BYTE_ORDER_PREFIX[self.byte_order]}{len(HEADER_FIELDS)}I")

    @property
    def field_struct(self) -> struct.Struct:
        return struct.Struct(f"{STRUCT_BYTE_ORDER_PREFIX[self.byte_order]}I")


def _require_header(buffer: bytes | bytearray | memoryview, layout: HeaderLayout) -> None:
    if len(buffer) < layout.header_size:
        raise TruncatedBufferError(len(buffer), layout.header_size)


def read_header(buffer: bytes | bytearray | memoryview, layout: HeaderLayout) -> CacheFileHeader:
    """Decode the header fields from the start of ``buffer``."""
    _require_header(buffer, layout)
    values = layout.header_struct.unpack_from(buffer, 0)
    return CacheFileHeader(*values)


def write_field(buffer: bytearray | memoryview, name: str, value: int, layout: HeaderLayout) -> None:
    """Overwrite the four bytes of header field ``name`` in place."""
    _require_header(buffer, layout)
    layout.field_struct.pack_into(buffer, layout.field_offset(name), value & UINT32_MASK)


def write_checksum(buffer: bytearray | memoryview, value: int, layout: HeaderLayout) -> None:
    """Overwrite the checksum field in place; no other bytes are touched."""
    write_field(buffer, "checksum", value, layout)
