"""Tests for the hex encoding helpers."""

import pytest

from jaegerlite.errors import HexParseError, ValidationError
from jaegerlite.utils.hex import decode_hex, is_hex_digit, write_hex, write_hex_byte


class TestWriteHexByte:
    """Nibble-level rendering with leading-zero suppression."""

    def test_zero_byte_is_skipped_while_leading(self):
        assert write_hex_byte(0x00, True) == ("", True)

    def test_zero_byte_is_written_after_leading_digits(self):
        assert write_hex_byte(0x00, False) == ("00", False)

    def test_low_nibble_only(self):
        assert write_hex_byte(0x0F, True) == ("f", False)

    def test_high_nibble_keeps_trailing_zero(self):
        assert write_hex_byte(0xA0, True) == ("a0", False)


class TestWriteHex:
    """Full-width rendering."""

    def test_zero_renders_single_digit(self):
        assert write_hex(0) == "0"

    def test_zero_may_render_empty(self):
        assert write_hex(0, not_empty=False) == ""

    def test_leading_zeros_suppressed(self):
        assert write_hex(255) == "ff"
        assert write_hex(0x100) == "100"
        assert write_hex(0x0102030405060708) == "102030405060708"

    def test_padded(self):
        assert write_hex(1, skip=False) == "0000000000000001"
        assert write_hex(0, skip=False) == "0" * 16

    def test_max_value(self):
        assert write_hex((1 << 64) - 1) == "f" * 16

    def test_lowercase_only(self):
        assert write_hex(0xABCDEF) == "abcdef"


class TestDecodeHex:
    """Strict hex parsing."""

    def test_decodes_lower_and_upper_case(self):
        assert decode_hex("ff") == 255
        assert decode_hex("FF") == 255
        assert decode_hex("00ff") == 255

    def test_max_u64(self):
        assert decode_hex("f" * 16) == (1 << 64) - 1

    @pytest.mark.parametrize("text", ["", "0x1", "-1", "+1", " 1", "1_0", "g", "1:"])
    def test_rejects_malformed(self, text):
        with pytest.raises(HexParseError):
            decode_hex(text)

    def test_rejects_too_wide(self):
        with pytest.raises(HexParseError):
            decode_hex("1" + "0" * 16)

    def test_rejects_zero_padded_past_width(self):
        assert decode_hex("0" * 15 + "1") == 1
        with pytest.raises(HexParseError):
            decode_hex("0" * 16 + "1")
        with pytest.raises(HexParseError):
            decode_hex("001", bits=8)

    def test_byte_width(self):
        assert decode_hex("ff", bits=8) == 255
        with pytest.raises(HexParseError):
            decode_hex("100", bits=8)

    def test_parse_error_is_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            decode_hex("xyz")
        assert "invalid hex character" in str(exc_info.value)


def test_is_hex_digit():
    assert is_hex_digit("a")
    assert is_hex_digit("F")
    assert is_hex_digit("7")
    assert not is_hex_digit(":")
    assert not is_hex_digit("")
    assert not is_hex_digit("ab")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
