"""Tests for command builders."""

import pytest

from radio_protocol_mcp.protocol.commands import (
    build_ack_failure_command,
    build_ack_success_command,
    build_back,
    build_button_command,
    build_channel_command,
    build_command,
    build_function_key,
    build_handshake_command,
    build_navigate_down,
    build_navigate_up_long,
    build_number_button,
    build_number_button_long,
    build_power_off,
    build_power_toggle,
    build_status_request_command,
    build_sync_request_command,
    build_volume_down,
    build_volume_up,
)
from radio_protocol_mcp.protocol.constants import (
    BUTTON_CODES,
    ButtonType,
    InvalidArgument,
    MessageType,
)
from radio_protocol_mcp.protocol.framing import parse_frame
from radio_protocol_mcp.utils.checksum import verify_checksum


def test_message_type_values():
    """Verify message-type codes."""
    assert MessageType.SYNC_REQUEST == 0x01
    assert MessageType.SYNC_RESPONSE == 0x02
    assert MessageType.STATUS_REQUEST == 0x03
    assert MessageType.STATUS_RESPONSE == 0x04
    assert MessageType.GENERAL_RESPONSE == 0x05
    assert MessageType.BUTTON_PRESS == 0x0C
    assert MessageType.CHANNEL_COMMAND == 0x0D


def test_button_table_is_complete():
    """Every button has a data byte."""
    assert set(BUTTON_CODES) == set(ButtonType)
    assert all(0 <= code <= 0xFF for code in BUTTON_CODES.values())


def test_button_codes_sample():
    assert BUTTON_CODES[ButtonType.NUMBER_0] == 0x0A
    assert BUTTON_CODES[ButtonType.NUMBER_1_LONG] == 0x35
    assert BUTTON_CODES[ButtonType.NUMBER_5_LONG] == 0x39
    assert BUTTON_CODES[ButtonType.SOS] == 0x2A
    assert BUTTON_CODES[ButtonType.SOS_LONG] == 0x2B
    assert BUTTON_CODES[ButtonType.ALARM_CLICK] == 0x31
    assert BUTTON_CODES[ButtonType.ALARM_LONG] == 0x32
    assert BUTTON_CODES[ButtonType.BLUETOOTH] == 0x1C
    assert BUTTON_CODES[ButtonType.METER_LONG] == 0x49


def test_build_command_checksum():
    """Generic commands verify and carry the expected checksum."""
    for command_type, command_data in [(0x00, 0x00), (0x0C, 0x12), (0xFF, 0xFF)]:
        packet = build_command(command_type, command_data)
        assert packet[4] == (0xAB + 0x02 + command_type + command_data) % 256
        assert verify_checksum(packet)


@pytest.mark.parametrize(
    "button, code",
    [
        (ButtonType.VOLUME_UP, 0x12),
        (ButtonType.VOLUME_DOWN, 0x13),
        (ButtonType.POWER, 0x14),
        (ButtonType.POWER_LONG, 0x45),
    ],
)
def test_button_command_data_byte(button, code):
    packet = build_button_command(button)
    assert packet[2] == 0x0C
    assert packet[3] == code
    assert verify_checksum(packet)


def test_button_command_known_bytes():
    """Byte-exact packets captured from the vendor app."""
    assert build_button_command(ButtonType.BAND) == bytes.fromhex("AB020C00B9")
    assert build_button_command(ButtonType.SUB_BAND) == bytes.fromhex("AB020C17D0")
    assert build_button_command(ButtonType.POWER_LONG) == bytes.fromhex("AB020C45FE")
    assert build_button_command(ButtonType.METER_LONG) == bytes.fromhex("AB020C4902")


def test_button_command_unknown():
    with pytest.raises(InvalidArgument):
        build_button_command("volume_up")


def test_build_handshake():
    assert build_handshake_command() == bytes([0xAB, 0x01, 0xFF, 0xAB])


def test_build_sync_request():
    packet = build_sync_request_command()
    assert packet == bytes([0xAB, 0x02, 0x01, 0x00, 0xAE])


def test_build_status_request():
    packet = build_status_request_command()
    assert packet == bytes([0xAB, 0x02, 0x03, 0x00, 0xB0])


def test_build_ack():
    assert build_ack_success_command() == bytes([0xAB, 0x02, 0x12, 0x01, 0xC0])
    assert build_ack_failure_command() == bytes([0xAB, 0x02, 0x12, 0x00, 0xBF])


def test_build_channel_command():
    parsed = parse_frame(build_channel_command(7))
    assert parsed is not None
    assert parsed.command_type == MessageType.CHANNEL_COMMAND
    assert parsed.command_data == 7


def test_channel_bounds():
    """Channel numbers outside 0-255 raise."""
    build_channel_command(0)
    build_channel_command(255)
    with pytest.raises(InvalidArgument):
        build_channel_command(256)
    with pytest.raises(InvalidArgument):
        build_channel_command(-1)


def test_number_buttons():
    assert build_number_button(0)[3] == 0x0A
    assert build_number_button(7)[3] == 0x07
    assert build_number_button_long(0)[3] == 0x3E
    assert build_number_button_long(1)[3] == 0x35


def test_number_button_bounds():
    """Digits outside 0-9 have no button."""
    with pytest.raises(InvalidArgument):
        build_number_button(10)
    with pytest.raises(InvalidArgument):
        build_number_button_long(-1)


def test_function_keys():
    assert build_function_key(1)[3] == 0x1D
    assert build_function_key(5)[3] == 0x30
    with pytest.raises(InvalidArgument):
        build_function_key(0)
    with pytest.raises(InvalidArgument):
        build_function_key(6)


def test_convenience_builders():
    assert build_volume_up()[3] == 0x12
    assert build_volume_down()[3] == 0x13
    assert build_power_toggle()[3] == 0x14
    assert build_power_off()[3] == 0x45
    assert build_navigate_down()[3] == 0x10
    assert build_navigate_up_long()[3] == 0x0F
    assert build_back()[3] == 0x0B


def test_builders_log_packets(caplog):
    """Built packets are logged at DEBUG."""
    with caplog.at_level("DEBUG", logger="radio_protocol_mcp.protocol.commands"):
        build_volume_up()
    assert "AB020C12CB" in caplog.text
