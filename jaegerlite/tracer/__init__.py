"""Trace identity value types."""

from jaegerlite.tracer.span_context import (
    DEBUG_FLAG,
    INVALID_SPAN_CONTEXT,
    SAMPLED_FLAG,
    SpanContext,
)
from jaegerlite.tracer.trace_id import MAX_U64, TraceID

__all__ = [
    "DEBUG_FLAG",
    "INVALID_SPAN_CONTEXT",
    "MAX_U64",
    "SAMPLED_FLAG",
    "SpanContext",
    "TraceID",
]
