"""Command frame builder and parser.

Standard command frame::

    +-------+--------+--------------+--------------+----------+
    | Start | Length | Command type | Command data | Checksum |
    | 0xAB  | 0x02   | 1 byte       | 1 byte       | 1 byte   |
    +-------+--------+--------------+--------------+----------+

- Checksum: sum of the four preceding bytes, truncated to 8 bits

Handshake frame (no checksum, trailing start byte closes the frame)::

    +-------+--------+------+-------+
    | 0xAB  | 0x01   | 0xFF | 0xAB  |
    +-------+--------+------+-------+
"""

from __future__ import annotations

from dataclasses import dataclass

from ..utils.checksum import calculate_checksum
from .constants import (
    COMMAND_PACKET_SIZE,
    COMMAND_TYPE_HANDSHAKE,
    DATA_HANDSHAKE,
    HANDSHAKE_PACKET_SIZE,
    InvalidArgument,
    MESSAGE_LENGTH_HANDSHAKE,
    MESSAGE_LENGTH_STANDARD,
    START_BYTE,
)


@dataclass(frozen=True)
class Frame:
    """A parsed command-shaped frame."""

    command_type: int
    command_data: int
    handshake: bool = False

    def __repr__(self) -> str:
        kind = "handshake, " if self.handshake else ""
        return (
            f"Frame({kind}type=0x{self.command_type:02X}, "
            f"data=0x{self.command_data:02X})"
        )


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise InvalidArgument(f"{name} must be 0-255, got {value}")


def build_frame(command_type: int, command_data: int) -> bytes:
    """Build a standard 5-byte command frame with its checksum.

    Args:
        command_type: Command-type byte (button, ack, message-type code).
        command_data: Command-specific data byte.

    Raises:
        InvalidArgument: If either value does not fit in a byte.
    """
    _check_byte("command_type", command_type)
    _check_byte("command_data", command_data)
    body = bytes([START_BYTE, MESSAGE_LENGTH_STANDARD, command_type, command_data])
    return body + bytes([calculate_checksum(body)])


def build_handshake_frame() -> bytes:
    """Build the fixed 4-byte handshake frame ``AB 01 FF AB``."""
    return bytes([START_BYTE, MESSAGE_LENGTH_HANDSHAKE, DATA_HANDSHAKE, START_BYTE])


def parse_frame(data: bytes) -> Frame | None:
    """Parse a command-shaped frame (as sent by a host, or echoed back).

    Returns:
        A ``Frame`` for a handshake or a standard frame with a valid
        checksum, otherwise ``None``.
    """
    if (
        len(data) == HANDSHAKE_PACKET_SIZE
        and data[0] == START_BYTE
        and data[1] == MESSAGE_LENGTH_HANDSHAKE
        and data[3] == START_BYTE
    ):
        return Frame(
            command_type=COMMAND_TYPE_HANDSHAKE,
            command_data=data[2],
            handshake=True,
        )

    if len(data) != COMMAND_PACKET_SIZE:
        return None

    if data[0] != START_BYTE or data[1] != MESSAGE_LENGTH_STANDARD:
        return None

    if calculate_checksum(data[:4]) != data[4]:
        return None

    return Frame(command_type=data[2], command_data=data[3])
