"""Trace context encoding and propagation."""

from jaegerlite.context.codec import encode, extract, from_stream
from jaegerlite.context.propagators import (
    TRACE_ID_HEADER,
    JaegerPropagator,
    decode_header_value,
    extract_trace_context,
    from_otel_span_context,
    inject_trace_context,
    to_otel_span_context,
)
from jaegerlite.context.reader import CarrierReader

__all__ = [
    "CarrierReader",
    "encode",
    "extract",
    "from_stream",
    "TRACE_ID_HEADER",
    "JaegerPropagator",
    "decode_header_value",
    "inject_trace_context",
    "extract_trace_context",
    "to_otel_span_context",
    "from_otel_span_context",
]
