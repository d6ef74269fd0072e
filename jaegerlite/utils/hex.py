"""Hex encoding helpers for trace context fields."""

from __future__ import annotations

from typing import Tuple

from jaegerlite.errors import HexParseError

HEX_DIGITS = "0123456789abcdef"

_DECODE_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_hex_digit(ch: str) -> bool:
    """Return True if ``ch`` is a single hex digit (either case)."""
    return len(ch) == 1 and ch in _DECODE_DIGITS


def write_hex_byte(value: int, skip: bool) -> Tuple[str, bool]:
    """
    Render one byte as hex, suppressing leading zero nibbles.

    Args:
        value: Byte value (only the low 8 bits are used)
        skip: True while every nibble written so far has been zero

    Returns:
        Tuple of (rendered digits, updated skip flag)
    """
    out = ""
    hi = (value >> 4) & 0x0F
    if not skip or hi != 0:
        out += HEX_DIGITS[hi]
        skip = False
    lo = value & 0x0F
    if not skip or lo != 0:
        out += HEX_DIGITS[lo]
        skip = False
    return out, skip


def write_hex(
    value: int,
    skip: bool = True,
    not_empty: bool = True,
    width_bytes: int = 8,
) -> str:
    """
    Render an unsigned integer as lowercase hex, most significant byte first.

    Args:
        value: Unsigned integer to render
        skip: Suppress leading zero nibbles; False pads to ``2 * width_bytes`` digits
        not_empty: Emit ``"0"`` when every nibble was suppressed
        width_bytes: Number of bytes of ``value`` to render

    Returns:
        Hex string
    """
    out = []
    for b in range(width_bytes - 1, -1, -1):
        digits, skip = write_hex_byte((value >> (b * 8)) & 0xFF, skip)
        out.append(digits)
    if skip and not_empty:
        out.append("0")
    return "".join(out)


def decode_hex(text: str, bits: int = 64) -> int:
    """
    Parse a hex string into an unsigned integer of at most ``bits`` bits.

    Only hex digits are accepted: no ``0x`` prefix, sign, whitespace or
    underscores (all of which ``int(text, 16)`` would let through). The
    field may have at most ``bits / 4`` digits, leading zeros included.

    Raises:
        HexParseError: if ``text`` is empty, too long, has a non-hex
            character, or does not fit in ``bits``
    """
    if not text:
        raise HexParseError("empty hex field")
    max_digits = (bits + 3) // 4
    if len(text) > max_digits:
        raise HexParseError("hex field too long", {"field": text, "max_digits": max_digits})
    for ch in text:
        if ch not in _DECODE_DIGITS:
            raise HexParseError("invalid hex character", {"field": text, "char": ch})
    value = int(text, 16)
    if value >> bits:
        raise HexParseError("hex value too wide", {"field": text, "bits": bits})
    return value
