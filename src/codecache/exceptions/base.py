"""Root of the codecache exception hierarchy."""

from __future__ import annotations


class CodeCacheError(Exception):
    """Base class for all codecache errors."""
