"""128-bit trace identifier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from jaegerlite.errors import HexParseError, ValidationError
from jaegerlite.utils.hex import decode_hex, write_hex

if TYPE_CHECKING:
    from jaegerlite.context.reader import CarrierReader

MAX_U64 = (1 << 64) - 1

# Hex digits in a 64-bit word and in a full 128-bit trace id.
U64_HEX_CHARS = 16
TRACE_ID_HEX_CHARS = 32


def check_u64(name: str, value: int) -> None:
    if not 0 <= value <= MAX_U64:
        raise ValidationError(f"{name} must be an unsigned 64-bit integer", {name: value})


@dataclass(frozen=True)
class TraceID:
    """
    Trace identifier split into two unsigned 64-bit words.

    ``high == 0`` marks a 64-bit trace id. An all-zero id is invalid.
    """

    high: int = 0
    low: int = 0

    def __post_init__(self) -> None:
        check_u64("high", self.high)
        check_u64("low", self.low)

    def is_valid(self) -> bool:
        return self.high != 0 or self.low != 0

    def to_hex(self) -> str:
        """
        Render the wire trace-id field.

        A non-zero high word is written without leading zeros and followed
        by the low word padded to 16 digits; otherwise only the low word is
        written, without leading zeros.
        """
        if self.high != 0:
            return write_hex(self.high, not_empty=False) + write_hex(self.low, skip=False)
        return write_hex(self.low)

    def to_int(self) -> int:
        return (self.high << 64) | self.low

    @classmethod
    def from_int(cls, value: int) -> "TraceID":
        if not 0 <= value < (1 << 128):
            raise ValidationError("trace id must be an unsigned 128-bit integer", {"value": value})
        return cls(high=value >> 64, low=value & MAX_U64)

    @classmethod
    def from_hex(cls, text: str) -> "TraceID":
        """
        Parse a trace-id field; the trailing 16 digits are the low word.

        Raises:
            HexParseError: if the field is longer than 32 digits or either
                word is malformed
        """
        if len(text) > TRACE_ID_HEX_CHARS:
            raise HexParseError("trace id field too long", {"field": text})
        if len(text) > U64_HEX_CHARS:
            return cls(
                high=decode_hex(text[:-U64_HEX_CHARS]),
                low=decode_hex(text[-U64_HEX_CHARS:]),
            )
        return cls(low=decode_hex(text))

    @classmethod
    def from_stream(cls, reader: "CarrierReader") -> "TraceID":
        """
        Read a trace-id field of at most 32 digits terminated by ``:``.

        Returns the invalid ``TraceID()`` if the segment is empty, malformed
        or too long.
        """
        segment = reader.read_segment(TRACE_ID_HEX_CHARS, ":")
        if not segment:
            return cls()
        return cls.from_hex(segment)

    def __str__(self) -> str:
        return self.to_hex()
