"""Shared type aliases for codecache."""

from .common import ByteOrder, JsonObject, JsonScalar, JsonValue, PointerWidth, Verdict

__all__ = [
    "ByteOrder",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "PointerWidth",
    "Verdict",
]
