"""Protocol layer: constants, framing, command builders, and response parsing."""

from .constants import ButtonType, MessageType, InvalidArgument, BUTTON_CODES
from .framing import Frame, build_frame, parse_frame
from .commands import build_command, build_button_command, build_handshake_command
from .classifier import ResponsePacket, ResponsePacketType, classify
from .parser import (
    parse_response,
    parse_status_message,
    parse_radio_state,
    parse_volume,
    parse_signal_strength,
    parse_device_info,
    parse_sub_band_info,
    parse_lock_status,
    parse_recording_status,
)
from ..utils.checksum import calculate_checksum, verify_checksum
