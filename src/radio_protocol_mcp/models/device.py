"""Single-packet device records: volume, signal, info text, sub-band, lock, recording."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VolumeLevel:
    """Volume level pushed by an ``ab0303`` packet."""

    volume: int
    raw_data: bytes

    def to_dict(self) -> dict:
        return {
            "kind": "volume",
            "volume": self.volume,
            "raw_hex": self.raw_data.hex(" "),
        }


@dataclass(frozen=True)
class SignalStrength:
    """Raw signal strength byte from an ``ab031f`` packet."""

    strength: int
    raw_data: bytes

    def to_dict(self) -> dict:
        return {
            "kind": "signal",
            "strength": self.strength,
            "raw_hex": self.raw_data.hex(" "),
        }


@dataclass(frozen=True)
class DeviceInfo:
    """One fragment of the device information text.

    The radio splits version, model and contact details over several
    ``ab11`` packets, usually ending with an ``ab10``. Each packet is
    decoded on its own; ``sequence`` lets a caller stitch them together.
    """

    command: int
    sequence: int
    text: str
    raw_data: bytes

    @property
    def is_final(self) -> bool:
        return self.command == 0x10

    def to_dict(self) -> dict:
        return {
            "kind": "device_info",
            "command": f"0x{self.command:02X}",
            "sequence": self.sequence,
            "text": self.text,
            "final": self.is_final,
            "raw_hex": self.raw_data.hex(" "),
        }


@dataclass(frozen=True)
class SubBandInfo:
    index: int
    name: str
    raw_data: bytes

    def to_dict(self) -> dict:
        return {
            "kind": "sub_band",
            "index": self.index,
            "name": self.name,
            "raw_hex": self.raw_data.hex(" "),
        }


@dataclass(frozen=True)
class LockStatus:
    """Keypad lock state; ``locked`` when the text mentions LOCK."""

    lock_type: int
    text: str
    locked: bool
    raw_data: bytes

    def to_dict(self) -> dict:
        return {
            "kind": "lock_status",
            "lock_type": self.lock_type,
            "text": self.text,
            "locked": self.locked,
            "raw_hex": self.raw_data.hex(" "),
        }


@dataclass(frozen=True)
class RecordingStatus:
    """Recording slot state; active unless the text says OFF."""

    slot: int
    text: str
    active: bool
    raw_data: bytes

    def to_dict(self) -> dict:
        return {
            "kind": "recording_status",
            "slot": self.slot,
            "text": self.text,
            "active": self.active,
            "raw_hex": self.raw_data.hex(" "),
        }
