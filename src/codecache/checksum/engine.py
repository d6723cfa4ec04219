"""Adler-32 as computed by the V8 code serializer.

This follows zlib's ``adler32_z`` step for step, including its fast paths for
single bytes and short buffers, so results are bit-identical to the value the
engine stores in the cache header. Accumulation is strictly sequential: each
byte feeds ``a`` and the updated ``a`` feeds ``b`` before any reduction.
"""

from __future__ import annotations

from codecache.constants.checksum import ADLER_BASE, ADLER_BLOCK, ADLER_NMAX, EMPTY_CHECKSUM, UINT32_MASK


def _accumulate(a: int, b: int, data: memoryview, start: int, stop: int) -> tuple[int, int]:
    """Run the unreduced ``a += byte; b += a`` recurrence over ``data[start:stop]``."""
    for byte in data[start:stop]:
        a += byte
        b += a
    return a, b


def adler32(seed: int, data: bytes | bytearray | memoryview | None) -> int:
    """Continue an Adler-32 checksum from ``seed`` over ``data``.

    ``data=None`` models zlib's absent-buffer guard and returns 1. An empty
    buffer falls through to the short path and returns the seed's sums.
    """
    seed &= UINT32_MASK
    a = seed & 0xFFFF
    b = (seed >> 16) & 0xFFFF

    if data is None:
        return EMPTY_CHECKSUM

    view = memoryview(data).cast("B")
    length = len(view)

    if length == 1:
        a += view[0]
        if a >= ADLER_BASE:
            a -= ADLER_BASE
        b += a
        if b >= ADLER_BASE:
            b -= ADLER_BASE
        return a | (b << 16)

    if length < ADLER_BLOCK:
        a, b = _accumulate(a, b, view, 0, length)
        if a >= ADLER_BASE:
            a -= ADLER_BASE
        # At most fifteen additions, so b may hold several multiples of BASE.
        b %= ADLER_BASE
        return a | (b << 16)

    pos = 0
    remaining = length
    while remaining >= ADLER_NMAX:
        remaining -= ADLER_NMAX
        a, b = _accumulate(a, b, view, pos, pos + ADLER_NMAX)
        pos += ADLER_NMAX
        a %= ADLER_BASE
        b %= ADLER_BASE

    if remaining:
        # Whole 16-byte groups and the byte tail share one reduction.
        a, b = _accumulate(a, b, view, pos, length)
        a %= ADLER_BASE
        b %= ADLER_BASE

    return a | (b << 16)


def compute(data: bytes | bytearray | memoryview) -> int:
    """Return the checksum the serializer stores for a checksummed region.

    The serializer seeds with 0. An empty region reports the base value 1.
    """
    if len(data) == 0:
        return EMPTY_CHECKSUM
    return adler32(0, data)
