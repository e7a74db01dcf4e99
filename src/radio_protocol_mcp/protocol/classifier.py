"""Inbound packet classification.

Packets are told apart by their leading bytes. Status packets carry the
``0x1C`` marker at offset 2 whatever their length byte says; everything
else is matched on the first three (or, failing that, two) bytes rendered
as lowercase hex.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from ..utils.checksum import validate_checksum
from .constants import COMMAND_ID_LENGTH, COMMAND_TYPE_STATUS, START_BYTE

logger = logging.getLogger(__name__)


class ResponsePacketType(Enum):
    STATUS = "status"
    RADIO_STATE = "radio_state"            # ab0901
    FREQUENCY_INPUT = "frequency_input"    # ab090f, layout not characterized
    FREQUENCY_STATUS = "frequency_status"  # ab0417
    TIME = "time"                          # ab031e
    VOLUME = "volume"                      # ab0303
    SIGNAL = "signal"                      # ab031f
    DEVICE_INFO = "device_info"            # ab11 / ab10
    SUB_BAND_INFO = "sub_band_info"        # ab0e
    LOCK_STATUS = "lock_status"            # ab08
    RECORDING_STATUS = "recording_status"  # ab0b
    STATUS_SHORT = "status_short"          # ab02
    FREQ_DATA_1 = "freq_data_1"            # ab05
    FREQ_DATA_2 = "freq_data_2"            # ab06
    BATTERY = "battery"                    # ab07
    DETAILED_FREQ = "detailed_freq"        # ab09
    BANDWIDTH = "bandwidth"                # ab0d
    UNKNOWN = "unknown"


RADIO_STATE_SIGNATURE = "ab0901"
FREQUENCY_INPUT_SIGNATURE = "ab090f"

SIGNATURES_3: dict[str, ResponsePacketType] = {
    RADIO_STATE_SIGNATURE: ResponsePacketType.RADIO_STATE,
    FREQUENCY_INPUT_SIGNATURE: ResponsePacketType.FREQUENCY_INPUT,
    "ab0417": ResponsePacketType.FREQUENCY_STATUS,
    "ab031e": ResponsePacketType.TIME,
    "ab0303": ResponsePacketType.VOLUME,
    "ab031f": ResponsePacketType.SIGNAL,
}

SIGNATURES_2: dict[str, ResponsePacketType] = {
    "ab11": ResponsePacketType.DEVICE_INFO,
    "ab10": ResponsePacketType.DEVICE_INFO,
    "ab0e": ResponsePacketType.SUB_BAND_INFO,
    "ab08": ResponsePacketType.LOCK_STATUS,
    "ab0b": ResponsePacketType.RECORDING_STATUS,
    "ab02": ResponsePacketType.STATUS_SHORT,
    "ab05": ResponsePacketType.FREQ_DATA_1,
    "ab06": ResponsePacketType.FREQ_DATA_2,
    "ab07": ResponsePacketType.BATTERY,
    "ab09": ResponsePacketType.DETAILED_FREQ,
    "ab0d": ResponsePacketType.BANDWIDTH,
}


@dataclass(frozen=True)
class ResponsePacket:
    """An inbound buffer with its classification attached.

    Returned as-is for packet types no decoder handles, so callers can
    still log or inspect the raw bytes.
    """

    packet_type: ResponsePacketType
    command_id: str
    raw_data: bytes
    checksum_valid: bool

    def __repr__(self) -> str:
        return (
            f"ResponsePacket(type={self.packet_type.value}, "
            f"id={self.command_id!r}, "
            f"data={self.raw_data.hex(' ') if self.raw_data else '(empty)'})"
        )

    def to_dict(self) -> dict:
        return {
            "kind": "packet",
            "packet_type": self.packet_type.value,
            "command_id": self.command_id,
            "raw_hex": self.raw_data.hex(" "),
            "checksum_valid": self.checksum_valid,
        }


def is_status_packet(data: bytes) -> bool:
    return len(data) >= 3 and data[0] == START_BYTE and data[2] == COMMAND_TYPE_STATUS


def signature(data: bytes) -> str:
    """Lowercase hex of the first three bytes."""
    return data[: COMMAND_ID_LENGTH // 2].hex()


def classify(data: bytes) -> ResponsePacketType:
    """Decide which decoder, if any, applies to ``data``."""
    if is_status_packet(data):
        return ResponsePacketType.STATUS

    sig = signature(data)
    packet_type = SIGNATURES_3.get(sig)
    if packet_type is None:
        packet_type = SIGNATURES_2.get(sig[:4], ResponsePacketType.UNKNOWN)

    if packet_type is ResponsePacketType.UNKNOWN:
        logger.debug("Unrecognized packet signature %r", sig)
    return packet_type


def inspect_packet(data: bytes) -> ResponsePacket:
    """Classify ``data`` and wrap it in a :class:`ResponsePacket`."""
    return ResponsePacket(
        packet_type=classify(data),
        command_id=signature(data),
        raw_data=bytes(data),
        checksum_valid=validate_checksum(data),
    )
