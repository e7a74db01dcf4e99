"""High-level command builders.

Every builder returns the exact bytes to hand to the transport. Button
presses use command type ``0x0C`` with the button's data byte; sync and
status requests use their message-type code with a zero data byte.
"""

from __future__ import annotations

import logging

from ..utils.hexstr import to_hex_string
from .constants import (
    BUTTON_CODES,
    ButtonType,
    COMMAND_TYPE_ACK,
    COMMAND_TYPE_BUTTON,
    DATA_EMPTY,
    DATA_FAILURE,
    DATA_SUCCESS,
    FUNCTION_KEYS,
    InvalidArgument,
    MessageType,
    NUMBER_BUTTONS,
    NUMBER_LONG_BUTTONS,
)
from .framing import build_frame, build_handshake_frame

logger = logging.getLogger(__name__)


def _log_built(name: str, packet: bytes) -> bytes:
    logger.debug("Built %s: %s", name, to_hex_string(packet))
    return packet


def build_command(command_type: int, command_data: int) -> bytes:
    """Build a generic 5-byte command with automatic checksum.

    Args:
        command_type: Command-type byte (0-255).
        command_data: Command data byte (0-255).
    """
    return build_frame(command_type, command_data)


def build_button_command(button: ButtonType) -> bytes:
    """Build a button-press command for ``button``.

    Raises:
        InvalidArgument: If ``button`` has no entry in the button table.
    """
    try:
        code = BUTTON_CODES[button]
    except KeyError:
        raise InvalidArgument(f"Unknown button {button!r}") from None
    return _log_built(
        f"ButtonPress[{button.name}]", build_command(COMMAND_TYPE_BUTTON, code)
    )


def build_handshake_command() -> bytes:
    """Build the 4-byte handshake that opens a session with the radio."""
    return _log_built("Handshake", build_handshake_frame())


def build_sync_request_command() -> bytes:
    """Build a SyncRequest (0x01) command."""
    return _log_built(
        "SyncRequest", build_command(MessageType.SYNC_REQUEST, DATA_EMPTY)
    )


def build_status_request_command() -> bytes:
    """Build a StatusRequest (0x03) command."""
    return _log_built(
        "StatusRequest", build_command(MessageType.STATUS_REQUEST, DATA_EMPTY)
    )


def build_ack_success_command() -> bytes:
    """Build an acknowledgment reporting success."""
    return _log_built("AckSuccess", build_command(COMMAND_TYPE_ACK, DATA_SUCCESS))


def build_ack_failure_command() -> bytes:
    """Build an acknowledgment reporting failure."""
    return _log_built("AckFailure", build_command(COMMAND_TYPE_ACK, DATA_FAILURE))


def build_channel_command(channel: int) -> bytes:
    """Build a ChannelCommand (0x0D) selecting a memory channel.

    Args:
        channel: Channel number 0-255.
    """
    if not 0 <= channel <= 255:
        raise InvalidArgument(f"Channel number must be 0-255, got {channel}")
    return _log_built(
        f"ChannelCommand[{channel}]",
        build_command(MessageType.CHANNEL_COMMAND, channel),
    )


def build_number_button(number: int) -> bytes:
    """Build a short press of a keypad digit.

    Args:
        number: Digit 0-9.
    """
    if number not in NUMBER_BUTTONS:
        raise InvalidArgument(f"Invalid number: {number}")
    return build_button_command(NUMBER_BUTTONS[number])


def build_number_button_long(number: int) -> bytes:
    """Build a long press of a keypad digit (memory channel recall).

    Args:
        number: Digit 0-9.
    """
    if number not in NUMBER_LONG_BUTTONS:
        raise InvalidArgument(f"Invalid number: {number}")
    return build_button_command(NUMBER_LONG_BUTTONS[number])


def build_function_key(key: int) -> bytes:
    """Build a function-key press.

    Args:
        key: Function key 1-5.
    """
    if key not in FUNCTION_KEYS:
        raise InvalidArgument(f"Invalid function key: {key}")
    return build_button_command(FUNCTION_KEYS[key])


# ─── CONVENIENCE BUTTONS ─────────────────────────────────────────────

def build_volume_up() -> bytes:
    return build_button_command(ButtonType.VOLUME_UP)


def build_volume_down() -> bytes:
    return build_button_command(ButtonType.VOLUME_DOWN)


def build_power_toggle() -> bytes:
    return build_button_command(ButtonType.POWER)


def build_power_off() -> bytes:
    """Long press on power switches the radio off."""
    return build_button_command(ButtonType.POWER_LONG)


def build_navigate_up() -> bytes:
    return build_button_command(ButtonType.UP_SHORT)


def build_navigate_down() -> bytes:
    return build_button_command(ButtonType.DOWN_SHORT)


def build_navigate_up_long() -> bytes:
    return build_button_command(ButtonType.UP_LONG)


def build_navigate_down_long() -> bytes:
    return build_button_command(ButtonType.DOWN_LONG)


def build_back() -> bytes:
    return build_button_command(ButtonType.BACK)
