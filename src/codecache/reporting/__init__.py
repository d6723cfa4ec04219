"""Report rendering for codecache."""

from .stdout import StdoutReporter

__all__ = ["StdoutReporter"]
