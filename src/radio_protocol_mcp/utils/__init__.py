"""Checksum and hex helpers shared by the protocol layer."""

from .checksum import calculate_checksum, verify_checksum, validate_checksum
from .hexstr import parse_hex_string, to_hex_string
