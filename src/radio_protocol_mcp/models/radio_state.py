"""Band/frequency/signal snapshot model.

One ``RadioState`` describes exactly one ``ab0901`` packet; it carries no
history and is never updated in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Band(IntEnum):
    """Band codes found at byte 3 of a radio-state packet."""

    FM = 0x00
    MW = 0x01
    SW = 0x02
    AIR = 0x03
    WB = 0x06
    VHF = 0x07


BAND_NAMES: dict[int, str] = {band.value: band.name for band in Band}

SIGNAL_QUALITY: dict[int, str] = {
    0: "No Signal",
    1: "Very Weak",
    2: "Weak",
    3: "Fair",
    4: "Good",
    5: "Very Good",
    6: "Excellent",
}

# Displayed decimal places per band; every other band shows 3
DECIMAL_PLACES: dict[int, int] = {
    Band.FM: 2,   # 102.30 MHz
    Band.MW: 0,   # 1270 kHz
}
DEFAULT_DECIMAL_PLACES = 3  # 119.345 MHz


def band_name(band_code: int) -> str:
    return BAND_NAMES.get(band_code, f"Unknown({band_code:02X})")


def decimal_places(band_code: int) -> int:
    return DECIMAL_PLACES.get(band_code, DEFAULT_DECIMAL_PLACES)


def signal_quality(strength: int) -> str:
    return SIGNAL_QUALITY.get(strength, f"Unknown({strength})")


@dataclass(frozen=True)
class RadioState:
    """Decoded ``ab0901`` radio-state packet."""

    raw_hex: str
    frequency_hex: str
    frequency_value: float
    unit_is_mhz: bool
    band_code: int
    band_name: str
    signal_strength: int
    signal_bars: int
    raw_frequency: int = 0

    @property
    def unit(self) -> str:
        return "MHz" if self.unit_is_mhz else "kHz"

    @property
    def signal_quality(self) -> str:
        return signal_quality(self.signal_strength)

    def display_frequency(self) -> str:
        """Frequency as the radio shows it, e.g. ``102.30 MHz``."""
        places = decimal_places(self.band_code)
        return f"{self.frequency_value:.{places}f} {self.unit}"

    def to_dict(self) -> dict:
        return {
            "kind": "radio_state",
            "raw_hex": self.raw_hex,
            "frequency_hex": self.frequency_hex,
            "raw_frequency": self.raw_frequency,
            "frequency": self.frequency_value,
            "display": self.display_frequency(),
            "unit_is_mhz": self.unit_is_mhz,
            "band_code": f"0x{self.band_code:02X}",
            "band": self.band_name,
            "signal_strength": self.signal_strength,
            "signal_quality": self.signal_quality,
            "signal_bars": self.signal_bars,
        }
