"""Code-cache header layout constants.

Field order follows the V8 code serializer header (``SerializedCodeData``).
"""

from __future__ import annotations

UINT32_SIZE: int = 4

HEADER_FIELDS: tuple[str, ...] = (
    "magic_number",
    "version_hash",
    "source_hash",
    "flag_hash",
    "num_reservations",
    "payload_length",
    "checksum",
)

# Fields a freshly compiled donor cache can supply to make a foreign cache loadable.
TRANSPLANT_FIELDS: tuple[str, ...] = ("version_hash", "source_hash", "flag_hash")

POINTER_ALIGNMENT_BY_WIDTH: dict[int, int] = {
    32: 4,
    64: 8,
}
VALID_POINTER_WIDTHS: frozenset[int] = frozenset(POINTER_ALIGNMENT_BY_WIDTH)
DEFAULT_POINTER_WIDTH: int = 64

VALID_BYTE_ORDERS: frozenset[str] = frozenset({"little", "big"})
DEFAULT_BYTE_ORDER: str = "little"

STRUCT_BYTE_ORDER_PREFIX: dict[str, str] = {
    "little": "<",
    "big": ">",
}
