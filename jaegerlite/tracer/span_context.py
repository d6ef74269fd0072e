"""Immutable trace metadata."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from jaegerlite.errors import ValidationError
from jaegerlite.tracer.trace_id import TraceID, check_u64

SAMPLED_FLAG = 0x01
DEBUG_FLAG = 0x02


@dataclass(frozen=True)
class SpanContext:
    trace_id: TraceID = field(default_factory=TraceID)
    span_id: int = 0
    parent_id: int = 0
    flags: int = 0  # raw byte; bit 0 = sampled, bit 1 = debug

    def __post_init__(self) -> None:
        check_u64("span_id", self.span_id)
        check_u64("parent_id", self.parent_id)
        if not 0 <= self.flags <= 0xFF:
            raise ValidationError("flags must fit in one byte", {"flags": self.flags})

    def is_valid(self) -> bool:
        return self.trace_id.is_valid() and self.span_id != 0

    def is_sampled(self) -> bool:
        return bool(self.flags & SAMPLED_FLAG)

    def is_debug(self) -> bool:
        return bool(self.flags & DEBUG_FLAG)

    def with_sampled(self, sampled: bool) -> "SpanContext":
        if sampled:
            return replace(self, flags=self.flags | SAMPLED_FLAG)
        return replace(self, flags=self.flags & ~SAMPLED_FLAG & 0xFF)

    def __str__(self) -> str:
        from jaegerlite.context.codec import encode

        return encode(self)


INVALID_SPAN_CONTEXT = SpanContext()
