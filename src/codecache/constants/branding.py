"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "codecache"
CLI_DESCRIPTION: str = "\n".join(
    (
        f"{BRAND_NAME} // V8 code-cache checksum tool",
        "",
        "Validate or rewrite the Adler-32 checksum stored in a code-cache header.",
    )
)
