"""MCP server entry point for the handheld radio protocol codec.

Exposes the command encoder and response decoder as tools, and the
protocol lookup tables as resources, via the official Python MCP SDK
with stdio transport. The server holds no connection or radio state;
every tool is a pure bytes-in/bytes-out (or hex-in/dict-out) call.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP

from .protocol.constants import (
    BUTTON_CODES,
    ButtonType,
    InvalidArgument,
    MessageType,
)
from .protocol.commands import (
    build_ack_failure_command,
    build_ack_success_command,
    build_button_command,
    build_channel_command,
    build_command,
    build_handshake_command,
    build_status_request_command,
    build_sync_request_command,
)
from .protocol.classifier import ResponsePacket
from .protocol.framing import parse_frame
from .protocol.parser import parse_response
from .models.radio_state import BAND_NAMES, SIGNAL_QUALITY, decimal_places
from .models.status import STATUS_LABELS
from .utils.checksum import calculate_checksum, verify_checksum
from .utils.hexstr import parse_hex_string, to_hex_string

logger = logging.getLogger(__name__)

SERVER_NAME = "radio-protocol"

mcp = FastMCP(
    SERVER_NAME,
    instructions=(
        "Encode command packets for and decode response packets from a "
        "Bluetooth handheld radio. Packets are exchanged as hex strings."
    ),
)


def _packet_result(name: str, packet: bytes) -> dict[str, Any]:
    return {
        "command": name,
        "hex": to_hex_string(packet, " "),
        "bytes": list(packet),
        "length": len(packet),
    }


def _resolve_button(name: str) -> ButtonType:
    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return ButtonType(key)
    except ValueError:
        raise InvalidArgument(
            f"Unknown button '{name}'. Use list_buttons for valid names."
        ) from None


# ─── ENCODER TOOLS ───────────────────────────────────────────────────

@mcp.tool()
def list_buttons() -> dict[str, Any]:
    """List every button name with its command data byte."""
    buttons = [
        {"name": button.value, "code": f"0x{code:02X}"}
        for button, code in BUTTON_CODES.items()
    ]
    return {"buttons": buttons, "count": len(buttons)}


@mcp.tool()
def build_button(button: str) -> dict[str, Any]:
    """Build the packet for a single button press.

    Args:
        button: Button name, e.g. 'volume_up', 'power_long', 'number_5'.
    """
    try:
        resolved = _resolve_button(button)
        return _packet_result(resolved.value, build_button_command(resolved))
    except InvalidArgument as e:
        return {"error": str(e)}


@mcp.tool()
def build_raw_command(command_type: int, command_data: int) -> dict[str, Any]:
    """Build a standard 5-byte command from raw type and data bytes.

    Args:
        command_type: Command-type byte (0-255), e.g. 12 for a button press.
        command_data: Command data byte (0-255).
    """
    try:
        return _packet_result("raw", build_command(command_type, command_data))
    except InvalidArgument as e:
        return {"error": str(e)}


@mcp.tool()
def build_channel(channel: int) -> dict[str, Any]:
    """Build a channel command selecting a memory channel.

    Args:
        channel: Channel number (0-255).
    """
    try:
        return _packet_result("channel", build_channel_command(channel))
    except InvalidArgument as e:
        return {"error": str(e)}


@mcp.tool()
def build_handshake() -> dict[str, Any]:
    """Build the 4-byte handshake sent when a session starts."""
    return _packet_result("handshake", build_handshake_command())


@mcp.tool()
def build_sync_request() -> dict[str, Any]:
    """Build a sync request packet."""
    return _packet_result("sync_request", build_sync_request_command())


@mcp.tool()
def build_status_request() -> dict[str, Any]:
    """Build a status request packet."""
    return _packet_result("status_request", build_status_request_command())


@mcp.tool()
def build_ack(success: bool = True) -> dict[str, Any]:
    """Build an acknowledgment packet.

    Args:
        success: True for a success ACK, False for a failure ACK.
    """
    if success:
        return _packet_result("ack_success", build_ack_success_command())
    return _packet_result("ack_failure", build_ack_failure_command())


# ─── DECODER TOOLS ───────────────────────────────────────────────────

@mcp.tool()
def checksum(hex_data: str) -> dict[str, Any]:
    """Compute the 8-bit additive checksum of some bytes.

    Args:
        hex_data: Bytes as hex, e.g. 'AB 02 0C 12'.
    """
    try:
        data = parse_hex_string(hex_data)
    except ValueError as e:
        return {"error": str(e)}
    value = calculate_checksum(data)
    return {"checksum": f"0x{value:02X}", "value": value}


@mcp.tool()
def verify_packet(hex_data: str) -> dict[str, Any]:
    """Check whether a command packet's last byte is a valid checksum.

    Args:
        hex_data: The full packet as hex, checksum included.
    """
    try:
        data = parse_hex_string(hex_data)
    except ValueError as e:
        return {"error": str(e)}
    return {"valid": verify_checksum(data), "length": len(data)}


@mcp.tool()
def decode_packet(hex_data: str) -> dict[str, Any]:
    """Decode a packet received from the radio.

    Status packets decode to a labeled value, ``ab0901`` packets to band,
    frequency and signal. Volume, signal strength, device info, sub-band,
    lock and recording packets decode to their own records. Anything else
    is returned classified but raw.

    Args:
        hex_data: The received packet as hex.
    """
    try:
        data = parse_hex_string(hex_data)
    except ValueError as e:
        return {"error": str(e)}

    result = parse_response(data)
    decoded = result.to_dict()
    if isinstance(result, ResponsePacket):
        frame = parse_frame(data)
        if frame is not None:
            decoded["frame"] = {
                "command_type": f"0x{frame.command_type:02X}",
                "command_data": f"0x{frame.command_data:02X}",
                "handshake": frame.handshake,
            }
    return decoded


# ─── MCP RESOURCES ───────────────────────────────────────────────────

@mcp.resource("radio://catalog/buttons")
def resource_buttons() -> str:
    """Button names and command data bytes."""
    return json.dumps(list_buttons())


@mcp.resource("radio://catalog/bands")
def resource_bands() -> str:
    """Band codes, names and displayed decimal places."""
    bands = [
        {"code": f"0x{code:02X}", "name": name, "decimal_places": decimal_places(code)}
        for code, name in BAND_NAMES.items()
    ]
    return json.dumps({"bands": bands})


@mcp.resource("radio://catalog/status-types")
def resource_status_types() -> str:
    """Status packet type codes and field labels."""
    types = [
        {"code": f"0x{code:02X}", "label": label}
        for code, label in STATUS_LABELS.items()
    ]
    return json.dumps({"status_types": types})


@mcp.resource("radio://catalog/message-types")
def resource_message_types() -> str:
    """Protocol message kinds and their codes, plus signal quality levels."""
    return json.dumps({
        "message_types": [
            {"name": m.name, "code": f"0x{m.value:02X}"} for m in MessageType
        ],
        "signal_quality": {str(k): v for k, v in SIGNAL_QUALITY.items()},
    })


# ─── ENTRY POINT ─────────────────────────────────────────────────────

def main():
    """Run the MCP server with stdio transport."""
    logging.basicConfig(level=logging.INFO)
    logger.info("Starting %s MCP server", SERVER_NAME)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
