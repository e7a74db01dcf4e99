"""Additive 8-bit checksum used by every radio packet.

The checksum byte is the sum of all preceding bytes in the packet,
truncated to 8 bits.
"""

from __future__ import annotations

# Shortest packet verify_checksum() will accept: AB 02 type data checksum
MIN_COMMAND_SIZE = 5


def calculate_checksum(data: bytes) -> int:
    """Return the sum of ``data`` modulo 256 (0 for empty input)."""
    return sum(data) & 0xFF


def verify_checksum(packet: bytes) -> bool:
    """Check the trailing checksum byte of a command packet.

    Returns ``False`` for anything shorter than a standard 5-byte command.
    """
    if len(packet) < MIN_COMMAND_SIZE:
        return False
    return calculate_checksum(packet[:-1]) == packet[-1]


def validate_checksum(data: bytes) -> bool:
    """Check the trailing checksum byte of an arbitrary inbound packet.

    Looser than :func:`verify_checksum`: any buffer of at least two bytes
    (one data byte plus the checksum) is checked.
    """
    if len(data) < 2:
        return False
    return calculate_checksum(data[:-1]) == data[-1]
