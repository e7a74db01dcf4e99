"""Tests for the MCP tool and resource functions."""

import json

from radio_protocol_mcp import server


def test_list_buttons():
    result = server.list_buttons()
    names = {b["name"]: b["code"] for b in result["buttons"]}
    assert result["count"] == len(names)
    assert names["volume_up"] == "0x12"
    assert names["power_long"] == "0x45"


def test_build_button():
    result = server.build_button("Volume-Up")
    assert result["hex"] == "AB 02 0C 12 CB"
    assert result["bytes"] == [0xAB, 0x02, 0x0C, 0x12, 0xCB]
    assert result["length"] == 5


def test_build_button_unknown():
    assert "error" in server.build_button("warp_drive")


def test_build_raw_command():
    assert server.build_raw_command(0x0C, 0x14)["hex"] == "AB 02 0C 14 CD"
    assert "error" in server.build_raw_command(0x0C, 256)


def test_build_channel():
    assert server.build_channel(1)["hex"] == "AB 02 0D 01 BB"
    assert "error" in server.build_channel(300)


def test_build_fixed_packets():
    assert server.build_handshake()["hex"] == "AB 01 FF AB"
    assert server.build_sync_request()["hex"] == "AB 02 01 00 AE"
    assert server.build_status_request()["hex"] == "AB 02 03 00 B0"
    assert server.build_ack()["hex"] == "AB 02 12 01 C0"
    assert server.build_ack(success=False)["hex"] == "AB 02 12 00 BF"


def test_checksum_tool():
    assert server.checksum("AB 02 0C 12") == {"checksum": "0xCB", "value": 0xCB}
    assert "error" in server.checksum("ABC")


def test_verify_packet_tool():
    assert server.verify_packet("AB-02-0C-12-CB")["valid"] is True
    assert server.verify_packet("AB020C12CC")["valid"] is False
    assert "error" in server.verify_packet("zz")


def test_decode_status():
    result = server.decode_packet("AB 06 1C 05 03 02 34 32 3D")
    assert result["kind"] == "status"
    assert result["label"] == "SNR"
    assert result["value"] == "42"


def test_decode_radio_state():
    result = server.decode_packet("ab 09 01 03 31 d2 01 00 00 52 00")
    assert result["kind"] == "radio_state"
    assert result["band"] == "AIR"
    assert result["display"] == "119.345 MHz"
    assert result["signal_strength"] == 5


def test_decode_device_records():
    assert server.decode_packet("ab 03 03 07 00 ff")["volume"] == 7
    lock = server.decode_packet("AB 08 01 04 4C 4F 43 4B 00")
    assert lock["kind"] == "lock_status"
    assert lock["locked"] is True
    assert "frame" not in lock


def test_decode_command_echo():
    """Command-shaped packets come back with their frame fields."""
    result = server.decode_packet("AB 02 0C 12 CB")
    assert result["kind"] == "packet"
    assert result["frame"]["command_data"] == "0x12"


def test_decode_unknown():
    result = server.decode_packet("01 02 03")
    assert result["packet_type"] == "unknown"
    assert "frame" not in result


def test_resources():
    bands = json.loads(server.resource_bands())["bands"]
    assert {"code": "0x00", "name": "FM", "decimal_places": 2} in bands
    assert {"code": "0x01", "name": "MW", "decimal_places": 0} in bands

    types = json.loads(server.resource_status_types())["status_types"]
    assert {"code": "0x05", "label": "SNR"} in types

    messages = json.loads(server.resource_message_types())
    assert {"name": "CHANNEL_COMMAND", "code": "0x0D"} in messages["message_types"]
    assert messages["signal_quality"]["3"] == "Fair"

    buttons = json.loads(server.resource_buttons())
    assert buttons["count"] == len(buttons["buttons"])
