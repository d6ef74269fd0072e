"""Utility functions for Jaegerlite."""

from jaegerlite.utils.hex import (
    HEX_DIGITS,
    decode_hex,
    is_hex_digit,
    write_hex,
    write_hex_byte,
)

__all__ = [
    "HEX_DIGITS",
    "decode_hex",
    "is_hex_digit",
    "write_hex",
    "write_hex_byte",
]
