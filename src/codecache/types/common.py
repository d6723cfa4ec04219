"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

ByteOrder: TypeAlias = Literal["little", "big"]
PointerWidth: TypeAlias = Literal[32, 64]
Verdict: TypeAlias = Literal["Match", "Mismatch"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
