"""Adler-32 constants (zlib ``adler32.c``)."""

from __future__ import annotations

# Largest prime smaller than 65536.
ADLER_BASE: int = 65521
# Largest n such that 255n(n+1)/2 + (n+1)(BASE-1) <= 2^32-1.
ADLER_NMAX: int = 5552
ADLER_BLOCK: int = 16

# Returned for an absent buffer; also reported for an empty checksummed region.
EMPTY_CHECKSUM: int = 1

UINT32_MASK: int = 0xFFFFFFFF
