"""Fixed protocol bytes, message codes and the button lookup table.

Every packet begins with the start byte ``0xAB``. The second byte is a
length/protocol marker: ``0x02`` for standard commands, ``0x01`` for the
handshake. Button presses and acknowledgments are distinguished by the
command-type byte at offset 2.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class InvalidArgument(ValueError):
    """Raised by command builders for out-of-range or unmapped arguments."""


# ─── PACKET STRUCTURE ────────────────────────────────────────────────

START_BYTE = 0xAB
MESSAGE_LENGTH_STANDARD = 0x02
MESSAGE_LENGTH_HANDSHAKE = 0x01

COMMAND_PACKET_SIZE = 5
HANDSHAKE_PACKET_SIZE = 4

# Hex command id used for signature matching: first 3 bytes, 6 chars
COMMAND_ID_LENGTH = 6

# ─── COMMAND TYPES ───────────────────────────────────────────────────

COMMAND_TYPE_HANDSHAKE = 0x01
COMMAND_TYPE_BUTTON = 0x0C
COMMAND_TYPE_ACK = 0x12
COMMAND_TYPE_STATUS = 0x1C  # marker at offset 2 of inbound status packets

# ─── DATA BYTES ──────────────────────────────────────────────────────

DATA_HANDSHAKE = 0xFF
DATA_SUCCESS = 0x01
DATA_FAILURE = 0x00
DATA_EMPTY = 0x00


class MessageType(IntEnum):
    """Protocol message kinds and their command-type codes."""

    SYNC_REQUEST = 0x01
    SYNC_RESPONSE = 0x02
    STATUS_REQUEST = 0x03
    STATUS_RESPONSE = 0x04
    GENERAL_RESPONSE = 0x05
    BUTTON_PRESS = 0x0C
    CHANNEL_COMMAND = 0x0D


class ButtonType(Enum):
    """Symbolic radio buttons. Use :data:`BUTTON_CODES` for the wire byte."""

    BAND = "band"
    SUB_BAND = "sub_band"
    BAND_LONG_PRESS = "band_long_press"
    BACK = "back"
    POINT = "point"
    FREQUENCY = "frequency"

    NUMBER_0 = "number_0"
    NUMBER_1 = "number_1"
    NUMBER_2 = "number_2"
    NUMBER_3 = "number_3"
    NUMBER_4 = "number_4"
    NUMBER_5 = "number_5"
    NUMBER_6 = "number_6"
    NUMBER_7 = "number_7"
    NUMBER_8 = "number_8"
    NUMBER_9 = "number_9"

    UP_SHORT = "up_short"
    UP_LONG = "up_long"
    DOWN_SHORT = "down_short"
    DOWN_LONG = "down_long"

    VOLUME_UP = "volume_up"
    VOLUME_DOWN = "volume_down"

    POWER = "power"
    POWER_LONG = "power_long"
    BLUETOOTH = "bluetooth"

    MUSIC = "music"
    MUSIC_LONG = "music_long"
    PLAY = "play"
    PLAY_LONG = "play_long"
    PLAY_MODE_LONG = "play_mode_long"
    STEP = "step"
    STEP_NEW = "step_new"
    CIRCLE = "circle"
    MUSIC_TYPE_CIRCLE = "music_type_circle"

    DEMODULATION = "demodulation"
    BANDWIDTH = "bandwidth"
    MOBILE_DISPLAY = "mobile_display"
    SQUELCH = "squelch"
    STEREO = "stereo"
    DE_EMPHASIS = "de_emphasis"

    PRESET = "preset"
    MEMO = "memo"
    MEMO_LONG = "memo_long"
    METER_LONG = "meter_long"

    RECORD = "record"
    RECORD_CLICK = "record_click"

    SOS = "sos"
    SOS_LONG = "sos_long"
    ALARM_CLICK = "alarm_click"
    ALARM_LONG = "alarm_long"

    FUNCTION_LONG = "function_long"
    FUNCTION_KEY_1 = "function_key_1"
    FUNCTION_KEY_2 = "function_key_2"
    FUNCTION_KEY_3 = "function_key_3"
    FUNCTION_KEY_4 = "function_key_4"
    FUNCTION_KEY_5 = "function_key_5"

    NUMBER_1_LONG = "number_1_long"
    NUMBER_2_LONG = "number_2_long"
    NUMBER_3_LONG = "number_3_long"
    NUMBER_4_LONG = "number_4_long"
    NUMBER_5_LONG = "number_5_long"
    NUMBER_6_LONG = "number_6_long"
    NUMBER_7_LONG = "number_7_long"
    NUMBER_8_LONG = "number_8_long"
    NUMBER_9_LONG = "number_9_long"
    NUMBER_0_LONG = "number_0_long"

    NUMERIC_MODE_LONG = "numeric_mode_long"
    EQUALS_LONG = "equals_long"
    MINUS_LONG = "minus_long"
    PLUS_LONG = "plus_long"
    ENTER_LONG = "enter_long"
    POINT_LONG = "point_long"
    DELETE_LONG = "delete_long"


# Button -> command data byte. Function keys 1-3 share codes with
# DEMODULATION, BANDWIDTH and STEP_NEW on the device.
BUTTON_CODES: dict[ButtonType, int] = {
    ButtonType.BAND: 0x00,
    ButtonType.NUMBER_1: 0x01,
    ButtonType.NUMBER_2: 0x02,
    ButtonType.NUMBER_3: 0x03,
    ButtonType.NUMBER_4: 0x04,
    ButtonType.NUMBER_5: 0x05,
    ButtonType.NUMBER_6: 0x06,
    ButtonType.NUMBER_7: 0x07,
    ButtonType.NUMBER_8: 0x08,
    ButtonType.NUMBER_9: 0x09,
    ButtonType.NUMBER_0: 0x0A,
    ButtonType.BACK: 0x0B,
    ButtonType.POINT: 0x0C,
    ButtonType.FREQUENCY: 0x0D,
    ButtonType.UP_SHORT: 0x0E,
    ButtonType.UP_LONG: 0x0F,
    ButtonType.DOWN_SHORT: 0x10,
    ButtonType.DOWN_LONG: 0x11,
    ButtonType.VOLUME_UP: 0x12,
    ButtonType.VOLUME_DOWN: 0x13,
    ButtonType.POWER: 0x14,
    ButtonType.SUB_BAND: 0x17,
    ButtonType.PLAY: 0x1A,
    ButtonType.STEP: 0x1B,
    ButtonType.BLUETOOTH: 0x1C,
    ButtonType.DEMODULATION: 0x1D,
    ButtonType.BANDWIDTH: 0x1E,
    ButtonType.MOBILE_DISPLAY: 0x1F,
    ButtonType.SQUELCH: 0x20,
    ButtonType.STEREO: 0x21,
    ButtonType.DE_EMPHASIS: 0x22,
    ButtonType.PRESET: 0x23,
    ButtonType.MEMO: 0x24,
    ButtonType.RECORD: 0x25,
    ButtonType.MUSIC: 0x26,
    ButtonType.CIRCLE: 0x27,
    ButtonType.MUSIC_TYPE_CIRCLE: 0x28,
    ButtonType.BAND_LONG_PRESS: 0x29,
    ButtonType.SOS: 0x2A,
    ButtonType.SOS_LONG: 0x2B,
    ButtonType.MEMO_LONG: 0x2C,
    ButtonType.RECORD_CLICK: 0x2D,
    ButtonType.STEP_NEW: 0x2E,
    ButtonType.FUNCTION_KEY_1: 0x1D,
    ButtonType.FUNCTION_KEY_2: 0x1E,
    ButtonType.FUNCTION_KEY_3: 0x2E,
    ButtonType.FUNCTION_KEY_4: 0x2F,
    ButtonType.FUNCTION_KEY_5: 0x30,
    ButtonType.ALARM_CLICK: 0x31,
    ButtonType.ALARM_LONG: 0x32,
    ButtonType.PLAY_LONG: 0x33,
    ButtonType.FUNCTION_LONG: 0x34,
    ButtonType.NUMBER_1_LONG: 0x35,
    ButtonType.NUMBER_2_LONG: 0x36,
    ButtonType.NUMBER_3_LONG: 0x37,
    ButtonType.NUMBER_4_LONG: 0x38,
    ButtonType.NUMBER_5_LONG: 0x39,
    ButtonType.NUMBER_6_LONG: 0x3A,
    ButtonType.NUMBER_7_LONG: 0x3B,
    ButtonType.NUMBER_8_LONG: 0x3C,
    ButtonType.NUMBER_9_LONG: 0x3D,
    ButtonType.NUMBER_0_LONG: 0x3E,
    ButtonType.MUSIC_LONG: 0x3F,
    ButtonType.PLAY_MODE_LONG: 0x40,
    ButtonType.NUMERIC_MODE_LONG: 0x41,
    ButtonType.EQUALS_LONG: 0x42,
    ButtonType.MINUS_LONG: 0x43,
    ButtonType.PLUS_LONG: 0x44,
    ButtonType.POWER_LONG: 0x45,
    ButtonType.ENTER_LONG: 0x46,
    ButtonType.POINT_LONG: 0x47,
    ButtonType.DELETE_LONG: 0x48,
    ButtonType.METER_LONG: 0x49,
}

NUMBER_BUTTONS: dict[int, ButtonType] = {
    0: ButtonType.NUMBER_0,
    1: ButtonType.NUMBER_1,
    2: ButtonType.NUMBER_2,
    3: ButtonType.NUMBER_3,
    4: ButtonType.NUMBER_4,
    5: ButtonType.NUMBER_5,
    6: ButtonType.NUMBER_6,
    7: ButtonType.NUMBER_7,
    8: ButtonType.NUMBER_8,
    9: ButtonType.NUMBER_9,
}

NUMBER_LONG_BUTTONS: dict[int, ButtonType] = {
    0: ButtonType.NUMBER_0_LONG,
    1: ButtonType.NUMBER_1_LONG,
    2: ButtonType.NUMBER_2_LONG,
    3: ButtonType.NUMBER_3_LONG,
    4: ButtonType.NUMBER_4_LONG,
    5: ButtonType.NUMBER_5_LONG,
    6: ButtonType.NUMBER_6_LONG,
    7: ButtonType.NUMBER_7_LONG,
    8: ButtonType.NUMBER_8_LONG,
    9: ButtonType.NUMBER_9_LONG,
}

FUNCTION_KEYS: dict[int, ButtonType] = {
    1: ButtonType.FUNCTION_KEY_1,
    2: ButtonType.FUNCTION_KEY_2,
    3: ButtonType.FUNCTION_KEY_3,
    4: ButtonType.FUNCTION_KEY_4,
    5: ButtonType.FUNCTION_KEY_5,
}
