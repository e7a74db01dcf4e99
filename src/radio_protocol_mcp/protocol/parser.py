"""Response parsing for radio packets.

Status packet::

    AB LEN 1C TYPE 03 DATALEN <DATALEN ASCII bytes> CHECKSUM

Radio-state packet (signature ``ab0901``)::

    offset 0-2  AB 09 01
    offset 3    band code
    offset 4-7  nibble-packed frequency
    offset 8    unit flag (0x01 = kHz, else MHz)
    offset 9    signal: high nibble strength 0-6, low nibble bars
    offset 10   checksum

The displayed frequency digits are spread over bytes 4-6 and read back in
the order ``lo(b6) hi(b5) lo(b5) hi(b4) lo(b4)``. Hardware captures::

    Band | Display     | B4 B5 B6 B7 B8 | Digits
    MW   | 1270 kHz    | F6 04 00 00 01 | 004F6
    FM   | 102.30 MHz  | F6 27 00 00 00 | 027F6
    AIR  | 119.345 MHz | 31 D2 01 00 00 | 1D231
    WB   | 162.400 MHz | 60 7A 02 00 00 | 27A60
    VHF  | 145.095 MHz | C7 36 02 00 00 | 236C7

Single-value packets (``ab0303`` volume, ``ab031f`` signal)::

    AB 03 03|1F VALUE ... CHECKSUM        (at least 5 bytes)

Text packets (``ab11``/``ab10`` device info, ``ab0e`` sub-band,
``ab08`` lock, ``ab0b`` recording)::

    AB CMD INDEX TEXTLEN <TEXTLEN ASCII bytes> CHECKSUM

Device info needs at least 7 bytes, the others at least 8. INDEX is the
fragment sequence, sub-band index, lock type or recording slot.

No decoder checks the trailing checksum.
"""

from __future__ import annotations

import logging

from ..models.device import (
    DeviceInfo,
    LockStatus,
    RecordingStatus,
    SignalStrength,
    SubBandInfo,
    VolumeLevel,
)
from ..models.radio_state import (
    RadioState,
    band_name,
    decimal_places,
)
from ..models.status import StatusMessage, status_label
from .classifier import (
    RADIO_STATE_SIGNATURE,
    ResponsePacketType,
    classify,
    inspect_packet,
    is_status_packet,
    signature,
)

logger = logging.getLogger(__name__)

STATUS_HEADER_SIZE = 6
MIN_STATUS_LENGTH = 7
MIN_RADIO_STATE_LENGTH = 11

MIN_VALUE_LENGTH = 5
MIN_DEVICE_INFO_LENGTH = 7
MIN_TEXT_LENGTH = 8
TEXT_HEADER_SIZE = 4

UNIT_KHZ = 0x01


def ascii_text(raw: bytes) -> str:
    """Decode ASCII, turning bytes above 0x7F into ``?``."""
    return bytes(b if b < 0x80 else 0x3F for b in raw).decode("ascii")


def parse_status_message(data: bytes) -> StatusMessage | None:
    """Parse a labeled single-field status packet.

    Returns ``None`` when ``data`` is not a well-formed status packet.
    """
    if len(data) < MIN_STATUS_LENGTH:
        logger.debug("Status packet too short (%d bytes)", len(data))
        return None
    if not is_status_packet(data):
        logger.debug("Not a status packet: %s", data[:3].hex())
        return None

    status_type = data[3]
    data_length = data[5]
    end = STATUS_HEADER_SIZE + data_length
    if end > len(data):
        logger.debug(
            "Status 0x%02X declares %d data bytes, only %d available",
            status_type, data_length, len(data) - STATUS_HEADER_SIZE,
        )
        return None

    return StatusMessage(
        type=status_type,
        label=status_label(status_type),
        value=ascii_text(data[STATUS_HEADER_SIZE:end]),
        raw_data=bytes(data),
    )


def frequency_digits(b4: int, b5: int, b6: int) -> int:
    """Reassemble the raw frequency from its nibble-packed bytes.

    Digit order lo(b6), hi(b5), lo(b5), hi(b4), lo(b4) is the same as
    reading ``b6 & 0x0F``, ``b5``, ``b4`` as one big-endian 20-bit value.
    """
    return ((b6 & 0x0F) << 16) | (b5 << 8) | b4


def parse_radio_state(data: bytes) -> RadioState | None:
    """Parse an ``ab0901`` band/frequency/signal packet.

    The ``ab090f`` frequency-input variant is recognised by the classifier
    but its layout is unknown, so it yields ``None`` here like any other
    non-matching buffer.
    """
    if len(data) < MIN_RADIO_STATE_LENGTH:
        logger.debug("Radio-state packet too short (%d bytes)", len(data))
        return None
    if signature(data) != RADIO_STATE_SIGNATURE:
        logger.debug("Not a radio-state packet: %s", signature(data))
        return None

    band_code = data[3]
    b4, b5, b6 = data[4], data[5], data[6]
    unit_flag = data[8]
    signal = data[9]

    raw_frequency = frequency_digits(b4, b5, b6)
    frequency_value = raw_frequency / 10 ** decimal_places(band_code)

    return RadioState(
        raw_hex=data.hex(),
        frequency_hex=f"{raw_frequency:05X}",
        frequency_value=frequency_value,
        unit_is_mhz=unit_flag != UNIT_KHZ,
        band_code=band_code,
        band_name=band_name(band_code),
        signal_strength=(signal >> 4) & 0x0F,
        signal_bars=signal & 0x0F,
        raw_frequency=raw_frequency,
    )


# ─── SINGLE-PACKET DEVICE RECORDS ────────────────────────────────────

def _value_byte(data: bytes, packet_type: ResponsePacketType) -> int | None:
    if classify(data) is not packet_type:
        logger.debug("Not a %s packet: %s", packet_type.value, signature(data))
        return None
    if len(data) < MIN_VALUE_LENGTH:
        logger.debug("%s packet too short (%d bytes)", packet_type.value, len(data))
        return None
    return data[3]


def _text_field(
    data: bytes, packet_type: ResponsePacketType, min_length: int
) -> tuple[int, str] | None:
    """Return ``(index, text)`` from an ``AB CMD INDEX TEXTLEN ...`` packet."""
    if classify(data) is not packet_type:
        logger.debug("Not a %s packet: %s", packet_type.value, signature(data))
        return None
    if len(data) < min_length:
        logger.debug("%s packet too short (%d bytes)", packet_type.value, len(data))
        return None

    text_length = data[3]
    end = TEXT_HEADER_SIZE + text_length
    if end > len(data):
        logger.debug(
            "%s packet declares %d text bytes, only %d available",
            packet_type.value, text_length, len(data) - TEXT_HEADER_SIZE,
        )
        return None
    return data[2], ascii_text(data[TEXT_HEADER_SIZE:end])


def parse_volume(data: bytes) -> VolumeLevel | None:
    """Parse an ``ab0303`` volume packet."""
    volume = _value_byte(data, ResponsePacketType.VOLUME)
    if volume is None:
        return None
    return VolumeLevel(volume=volume, raw_data=bytes(data))


def parse_signal_strength(data: bytes) -> SignalStrength | None:
    """Parse an ``ab031f`` signal strength packet."""
    strength = _value_byte(data, ResponsePacketType.SIGNAL)
    if strength is None:
        return None
    return SignalStrength(strength=strength, raw_data=bytes(data))


def parse_device_info(data: bytes) -> DeviceInfo | None:
    """Parse one ``ab11``/``ab10`` device information fragment.

    Fragments are not accumulated; each call decodes exactly one packet.
    """
    field = _text_field(data, ResponsePacketType.DEVICE_INFO, MIN_DEVICE_INFO_LENGTH)
    if field is None:
        return None
    sequence, text = field
    return DeviceInfo(
        command=data[1], sequence=sequence, text=text, raw_data=bytes(data)
    )


def parse_sub_band_info(data: bytes) -> SubBandInfo | None:
    """Parse an ``ab0e`` sub-band name packet."""
    field = _text_field(data, ResponsePacketType.SUB_BAND_INFO, MIN_TEXT_LENGTH)
    if field is None:
        return None
    index, name = field
    return SubBandInfo(index=index, name=name.strip(), raw_data=bytes(data))


def parse_lock_status(data: bytes) -> LockStatus | None:
    """Parse an ``ab08`` keypad lock packet."""
    field = _text_field(data, ResponsePacketType.LOCK_STATUS, MIN_TEXT_LENGTH)
    if field is None:
        return None
    lock_type, text = field
    return LockStatus(
        lock_type=lock_type,
        text=text,
        locked="LOCK" in text.upper(),
        raw_data=bytes(data),
    )


def parse_recording_status(data: bytes) -> RecordingStatus | None:
    """Parse an ``ab0b`` recording slot packet."""
    field = _text_field(data, ResponsePacketType.RECORDING_STATUS, MIN_TEXT_LENGTH)
    if field is None:
        return None
    slot, text = field
    return RecordingStatus(
        slot=slot,
        text=text,
        active="OFF" not in text.upper(),
        raw_data=bytes(data),
    )


def parse_response(data: bytes):
    """Auto-dispatch an inbound buffer to the appropriate parser.

    Returns the decoded record when a decoder matches, otherwise the
    classified ``ResponsePacket`` carrying the raw bytes.
    """
    packet = inspect_packet(data)
    parsers = {
        ResponsePacketType.STATUS: parse_status_message,
        ResponsePacketType.RADIO_STATE: parse_radio_state,
        ResponsePacketType.VOLUME: parse_volume,
        ResponsePacketType.SIGNAL: parse_signal_strength,
        ResponsePacketType.DEVICE_INFO: parse_device_info,
        ResponsePacketType.SUB_BAND_INFO: parse_sub_band_info,
        ResponsePacketType.LOCK_STATUS: parse_lock_status,
        ResponsePacketType.RECORDING_STATUS: parse_recording_status,
    }
    parser = parsers.get(packet.packet_type)
    if parser:
        result = parser(data)
        if result is not None:
            return result
        logger.debug("Malformed %s packet: %s", packet.packet_type.value, data.hex())
    return packet
