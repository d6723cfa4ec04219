"""Code-cache header layout."""

from .header import CacheFileHeader, HeaderLayout, read_header, write_checksum, write_field

__all__ = ["CacheFileHeader", "HeaderLayout", "read_header", "write_checksum", "write_field"]
