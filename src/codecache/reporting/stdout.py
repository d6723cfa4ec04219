"""Key-value stdout reporter for code-cache operations."""

from __future__ import annotations

from codecache.constants.layout import HEADER_FIELDS
from codecache.constants.reporting import (
    ACTUAL_CHECKSUM_LABEL,
    ANSI_RESET,
    HEADER_LABELS,
    LABEL_WIDTH,
    VERDICT_COLORS,
)
from codecache.processor import RehashResult, TransplantResult, ValidationReport


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _hex(value: int) -> str:
    return f"0x{value:08X}"


def _line(label: str, value: int) -> str:
    return f"{label:<{LABEL_WIDTH}}{_hex(value)}"


class StdoutReporter:
    """Formats validation, rehash and transplant outcomes as plain text."""

    def __init__(self, *, color: bool = True, verbose: bool = False) -> None:
        self._color = color
        self._verbose = verbose

    def render_validation(self, report: ValidationReport) -> str:
        """Render header fields, computed checksum and verdict."""
        header = report.header.to_dict()
        lines = [_line(HEADER_LABELS[name], header[name]) for name in HEADER_FIELDS]
        lines.append(_line(ACTUAL_CHECKSUM_LABEL, report.computed_checksum))
        if self._verbose:
            lines.append(f"{'HeaderSize:':<{LABEL_WIDTH}}{report.header_size}")
            lines.append(f"{'FileSize:':<{LABEL_WIDTH}}{report.file_size}")
        verdict = report.verdict
        if self._color:
            verdict = _colorize(verdict, VERDICT_COLORS[report.verdict])
        lines.extend(["", f"Result: {verdict}"])
        return "\n".join(lines)

    def render_rehash(self, result: RehashResult) -> str:
        """Render the newly written checksum."""
        lines = [f"New checksum value {_hex(result.new_checksum)} written."]
        if self._verbose:
            lines.insert(0, f"Previous checksum value {_hex(result.previous_checksum)}.")
        return "\n".join(lines)

    def render_transplant(self, result: TransplantResult) -> str:
        """Render each copied hash as ``old -> new``."""
        lines = []
        for name, value in result.transplanted.items():
            label = HEADER_LABELS[name]
            lines.append(f"{label:<{LABEL_WIDTH}}{_hex(result.previous[name])} -> {_hex(value)}")
        return "\n".join(lines)
