"""Constants for stdout formatting and JSON reports."""

from __future__ import annotations

VERDICT_MATCH: str = "Match"
VERDICT_MISMATCH: str = "Mismatch"

# Label column for key-value header lines.
HEADER_LABELS: dict[str, str] = {
    "magic_number": "Magic:",
    "version_hash": "VersionHash:",
    "source_hash": "SourceHash:",
    "flag_hash": "FlagHash:",
    "num_reservations": "NumReservations:",
    "payload_length": "PayloadLength:",
    "checksum": "Checksum:",
}
ACTUAL_CHECKSUM_LABEL: str = "Actual Checksum:"
LABEL_WIDTH: int = 17

REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"
CACHE_TEMP_PREFIX: str = ".tmp-"
CACHE_TEMP_SUFFIX: str = ".cache"

SCHEMA_VERSION: str = "1.0.0"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[31;1m"
ANSI_GREEN: str = "\033[32;1m"

VERDICT_COLORS: dict[str, str] = {
    VERDICT_MATCH: ANSI_GREEN,
    VERDICT_MISMATCH: ANSI_RED,
}
