"""Decoded records for inbound radio packets."""

from .status import StatusMessage, STATUS_LABELS
from .radio_state import RadioState, Band, BAND_NAMES, SIGNAL_QUALITY
from .device import (
    DeviceInfo,
    LockStatus,
    RecordingStatus,
    SignalStrength,
    SubBandInfo,
    VolumeLevel,
)
