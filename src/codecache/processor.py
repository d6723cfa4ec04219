"""Validate, rehash and transplant operations over an in-memory cache file.

Every operation reads the header fresh from the buffer it is given and never
mutates that buffer. Operations that change the file return a new ``bytes``
object for the caller to persist.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from codecache.checksum import compute
from codecache.constants.layout import TRANSPLANT_FIELDS
from codecache.constants.reporting import SCHEMA_VERSION, VERDICT_MATCH, VERDICT_MISMATCH
from codecache.layout import CacheFileHeader, HeaderLayout, read_header, write_checksum, write_field
from codecache.types import JsonObject, Verdict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of comparing the stored checksum with the computed one."""

    header: CacheFileHeader
    computed_checksum: int
    verdict: Verdict
    header_size: int
    file_size: int
    layout: HeaderLayout

    @property
    def matches(self) -> bool:
        return self.verdict == VERDICT_MATCH

    def to_dict(self, path: str | None = None) -> JsonObject:
        """Serialize the report for JSON output."""
        return {
            "schema_version": SCHEMA_VERSION,
            "path": path,
            "pointer_width": self.layout.pointer_width,
            "byte_order": self.layout.byte_order,
            "header_size": self.header_size,
            "file_size": self.file_size,
            "header": self.header.to_dict(),
            "computed_checksum": self.computed_checksum,
            "checksum_hex": f"0x{self.computed_checksum:08X}",
            "verdict": self.verdict,
        }


@dataclass(frozen=True)
class RehashResult:
    """Buffer with a refreshed checksum, plus the before/after values."""

    data: bytes
    previous_checksum: int
    new_checksum: int

    @property
    def changed(self) -> bool:
        return self.previous_checksum != self.new_checksum


@dataclass(frozen=True)
class TransplantResult:
    """Buffer carrying the donor's build hashes."""

    data: bytes
    previous: dict[str, int]
    transplanted: dict[str, int]

    @property
    def changed(self) -> bool:
        return self.previous != self.transplanted


def checksummed_region(buffer: bytes | bytearray, layout: HeaderLayout) -> memoryview:
    """Return everything after the aligned header, trailing bytes included."""
    return memoryview(buffer)[layout.header_size :]


def _log_structure(header: CacheFileHeader, buffer_size: int, layout: HeaderLayout) -> None:
    payload_size = buffer_size - layout.header_size
    if header.payload_length != payload_size:
        logger.debug(
            "Declared payload length %d differs from %d bytes after the header",
            header.payload_length,
            payload_size,
        )


def validate(buffer: bytes | bytearray, layout: HeaderLayout) -> ValidationReport:
    """Compare the stored checksum against the checksummed region."""
    header = read_header(buffer, layout)
    _log_structure(header, len(buffer), layout)
    computed = compute(checksummed_region(buffer, layout))
    verdict: Verdict = VERDICT_MATCH if computed == header.checksum else VERDICT_MISMATCH
    logger.debug("Stored checksum 0x%08X, computed 0x%08X", header.checksum, computed)
    return ValidationReport(
        header=header,
        computed_checksum=computed,
        verdict=verdict,
        header_size=layout.header_size,
        file_size=len(buffer),
        layout=layout,
    )


def rehash(buffer: bytes | bytearray, layout: HeaderLayout) -> RehashResult:
    """Return a copy of ``buffer`` whose checksum field matches its payload."""
    header = read_header(buffer, layout)
    _log_structure(header, len(buffer), layout)
    computed = compute(checksummed_region(buffer, layout))
    updated = bytearray(buffer)
    write_checksum(updated, computed, layout)
    logger.debug("Checksum 0x%08X -> 0x%08X", header.checksum, computed)
    return RehashResult(data=bytes(updated), previous_checksum=header.checksum, new_checksum=computed)


def transplant_hashes(buffer: bytes | bytearray, donor: bytes | bytearray, layout: HeaderLayout) -> TransplantResult:
    """Copy the version, source and flag hashes from ``donor`` into a copy of ``buffer``.

    A cache is only accepted by an engine whose build, source text and flags
    hash to the stored values. Copying them from a cache that engine produced
    itself lets a foreign payload load. The checksum does not cover the header,
    so it stays valid.
    """
    target_header = read_header(buffer, layout)
    donor_header = read_header(donor, layout)
    updated = bytearray(buffer)
    previous: dict[str, int] = {}
    transplanted: dict[str, int] = {}
    for name in TRANSPLANT_FIELDS:
        previous[name] = getattr(target_header, name)
        transplanted[name] = getattr(donor_header, name)
        write_field(updated, name, transplanted[name], layout)
    logger.debug("Transplanted %s", ", ".join(f"{name}=0x{value:08X}" for name, value in transplanted.items()))
    return TransplantResult(data=bytes(updated), previous=previous, transplanted=transplanted)
