"""Single-field status update model."""

from __future__ import annotations

from dataclasses import dataclass

# Status type code -> field name. Codes missing here are still decoded
# and get a synthesized "TypeXX" label.
STATUS_LABELS: dict[int, str] = {
    0x01: "Demodulation",
    0x02: "ModulationMode",
    0x03: "BandWidth",
    0x05: "SNR",
    0x06: "FreqFractional1",
    0x07: "RSSI",
    0x08: "FreqFractional23",
    0x09: "VolumeLabel",
    0x0A: "VolumeValue",
    0x0B: "Model",
    0x0C: "Status",
    0x10: "Recording",
}


def status_label(status_type: int) -> str:
    return STATUS_LABELS.get(status_type, f"Type{status_type:02X}")


@dataclass(frozen=True)
class StatusMessage:
    """A labeled key/value status packet from the radio."""

    type: int
    label: str
    value: str
    raw_data: bytes

    def to_dict(self) -> dict:
        return {
            "kind": "status",
            "type": f"0x{self.type:02X}",
            "label": self.label,
            "value": self.value,
            "raw_hex": self.raw_data.hex(" "),
        }
