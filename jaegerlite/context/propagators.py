"""Trace context propagation over HTTP-style headers and OpenTelemetry carriers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Optional, Set
from urllib.parse import unquote

from opentelemetry.context import Context
from opentelemetry.propagators.textmap import (
    CarrierT,
    Getter,
    Setter,
    TextMapPropagator,
    default_getter,
    default_setter,
)
from opentelemetry.trace import NonRecordingSpan, TraceFlags, get_current_span, set_span_in_context
from opentelemetry.trace import SpanContext as OTelSpanContext

from jaegerlite.context.codec import encode, extract
from jaegerlite.tracer.span_context import SAMPLED_FLAG, SpanContext
from jaegerlite.tracer.trace_id import TraceID

if TYPE_CHECKING:
    from jaegerlite.config import JaegerliteConfig

logger = logging.getLogger(__name__)

TRACE_ID_HEADER = "uber-trace-id"


def decode_header_value(value: str) -> Optional[SpanContext]:
    """
    Decode a header value, which may be percent-encoded.

    Returns None for malformed values and for contexts without a valid
    trace id and span id.
    """
    context = extract(unquote(value))
    if not context.is_valid():
        return None
    return context


def inject_trace_context(
    headers: Dict[str, str],
    context: SpanContext,
    header_name: str = TRACE_ID_HEADER,
) -> None:
    """Write the encoded context into ``headers``."""
    headers[header_name] = encode(context)


def extract_trace_context(
    headers: Dict[str, str],
    header_name: str = TRACE_ID_HEADER,
) -> Optional[SpanContext]:
    """
    Find the trace header (case-insensitive) and decode it.

    Returns None if the header is absent or does not decode to a valid context.
    """
    wanted = header_name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return decode_header_value(value)
    return None


# Conversion helpers between the two span context types

def to_otel_span_context(context: SpanContext, is_remote: bool = True) -> OTelSpanContext:
    """Convert a SpanContext to an OTel SpanContext; only the sampled bit carries over."""
    return OTelSpanContext(
        trace_id=context.trace_id.to_int(),
        span_id=context.span_id,
        is_remote=is_remote,
        trace_flags=TraceFlags(context.flags & SAMPLED_FLAG),
    )


def from_otel_span_context(otel_context: OTelSpanContext) -> SpanContext:
    """Convert an OTel SpanContext; OTel does not track the parent id, so it is 0."""
    return SpanContext(
        trace_id=TraceID.from_int(otel_context.trace_id),
        span_id=otel_context.span_id,
        parent_id=0,
        flags=SAMPLED_FLAG if otel_context.trace_flags.sampled else 0,
    )


class JaegerPropagator(TextMapPropagator):
    """OpenTelemetry propagator for the ``trace:span:parent:flags`` header."""

    def __init__(self, header_name: str = TRACE_ID_HEADER) -> None:
        self.header_name = header_name

    @classmethod
    def from_config(cls, config: "JaegerliteConfig") -> "JaegerPropagator":
        return cls(header_name=config.propagation.trace_id_header)

    def extract(
        self,
        carrier: CarrierT,
        context: Optional[Context] = None,
        getter: Getter[CarrierT] = default_getter,
    ) -> Context:
        if context is None:
            context = Context()

        values = getter.get(carrier, self.header_name)
        if not values:
            return context

        span_context = decode_header_value(values[0])
        if span_context is None:
            logger.debug(f"Ignoring invalid {self.header_name} header: {values[0]!r}")
            return context

        span = NonRecordingSpan(to_otel_span_context(span_context))
        return set_span_in_context(span, context)

    def inject(
        self,
        carrier: CarrierT,
        context: Optional[Context] = None,
        setter: Setter[CarrierT] = default_setter,
    ) -> None:
        otel_context = get_current_span(context).get_span_context()
        if not otel_context.is_valid:
            return
        setter.set(carrier, self.header_name, encode(from_otel_span_context(otel_context)))

    @property
    def fields(self) -> Set[str]:
        return {self.header_name}
