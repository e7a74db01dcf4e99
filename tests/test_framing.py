"""Tests for command frame building and parsing."""

import pytest

from radio_protocol_mcp.protocol.constants import (
    COMMAND_PACKET_SIZE,
    InvalidArgument,
    START_BYTE,
)
from radio_protocol_mcp.protocol.framing import (
    Frame,
    build_frame,
    build_handshake_frame,
    parse_frame,
)


def test_build_frame_size():
    """Every standard frame is exactly 5 bytes."""
    assert len(build_frame(0x0C, 0x12)) == COMMAND_PACKET_SIZE


def test_build_frame_layout():
    """Start, length, type, data, checksum."""
    frame = build_frame(0x0C, 0x14)
    assert frame[0] == START_BYTE
    assert frame[1] == 0x02
    assert frame[2] == 0x0C
    assert frame[3] == 0x14
    assert frame[4] == 0xCD


def test_build_frame_checksum_all_bytes():
    """Checksum byte matches the formula for every type/data pair."""
    for command_type in range(256):
        for command_data in range(0, 256, 17):
            frame = build_frame(command_type, command_data)
            assert frame[4] == (0xAB + 0x02 + command_type + command_data) % 256


def test_build_frame_rejects_out_of_range():
    with pytest.raises(InvalidArgument):
        build_frame(256, 0)
    with pytest.raises(InvalidArgument):
        build_frame(0x0C, -1)


def test_invalid_argument_is_value_error():
    """Callers catching ValueError also catch builder errors."""
    with pytest.raises(ValueError):
        build_frame(0x0C, 300)


def test_handshake_frame():
    assert build_handshake_frame() == bytes([0xAB, 0x01, 0xFF, 0xAB])


def test_parse_standard_frame():
    parsed = parse_frame(build_frame(0x12, 0x01))
    assert parsed == Frame(command_type=0x12, command_data=0x01)
    assert parsed.handshake is False


def test_parse_handshake_frame():
    parsed = parse_frame(build_handshake_frame())
    assert parsed is not None
    assert parsed.handshake is True
    assert parsed.command_type == 0x01
    assert parsed.command_data == 0xFF


def test_parse_bad_checksum():
    """Frames with a corrupt checksum are rejected."""
    frame = bytearray(build_frame(0x0C, 0x12))
    frame[4] ^= 0xFF
    assert parse_frame(bytes(frame)) is None


def test_parse_wrong_start_byte():
    frame = bytearray(build_frame(0x0C, 0x12))
    frame[0] = 0xAA
    assert parse_frame(bytes(frame)) is None


def test_parse_wrong_length():
    """Only 4-byte handshakes and 5-byte commands are frames."""
    assert parse_frame(b"") is None
    assert parse_frame(build_frame(0x0C, 0x12) + b"\x00") is None


def test_frame_repr():
    r = repr(Frame(command_type=0x0C, command_data=0x12))
    assert "0x0C" in r
    assert "0x12" in r


def test_frame_is_immutable():
    frame = Frame(command_type=0x0C, command_data=0x12)
    with pytest.raises(AttributeError):
        frame.command_data = 0x13
