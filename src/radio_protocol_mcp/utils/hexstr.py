"""Hex string helpers for logging and the MCP tool surface."""

from __future__ import annotations


def parse_hex_string(text: str) -> bytes:
    """Convert ``"AB 09-01..."`` style text into bytes.

    Spaces, dashes and colons are ignored.

    Raises:
        ValueError: If the remaining text has odd length or non-hex digits.
    """
    cleaned = text.replace(" ", "").replace("-", "").replace(":", "")
    if len(cleaned) % 2 != 0:
        raise ValueError(
            f"Hex string must have an even number of characters, got {len(cleaned)}"
        )
    return bytes.fromhex(cleaned)


def to_hex_string(data: bytes, sep: str = "") -> str:
    """Render bytes as uppercase hex, e.g. ``AB020CB9`` or ``AB 02 0C B9``."""
    if not data:
        return ""
    if sep:
        return data.hex(sep).upper()
    return data.hex().upper()
