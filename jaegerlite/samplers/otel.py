"""Adapter exposing a Jaegerlite sampler as an OpenTelemetry SDK sampler."""

from __future__ import annotations

from typing import Optional, Sequence

from opentelemetry.context import Context
from opentelemetry.sdk.trace.sampling import Decision, SamplingResult
from opentelemetry.sdk.trace.sampling import Sampler as OTelSampler
from opentelemetry.trace import Link, SpanKind, TraceState, get_current_span
from opentelemetry.util.types import Attributes

from jaegerlite.samplers.base import Sampler
from jaegerlite.tracer.trace_id import TraceID


class OTelSamplerAdapter(OTelSampler):
    """
    Wraps a Jaegerlite Sampler for use with an OTel TracerProvider.

    The span name is the operation name. Sampled spans carry the sampler
    tags as attributes. The parent's trace state is passed through.
    """

    def __init__(self, sampler: Sampler) -> None:
        self._sampler = sampler

    @property
    def sampler(self) -> Sampler:
        return self._sampler

    def should_sample(
        self,
        parent_context: Optional[Context],
        trace_id: int,
        name: str,
        kind: Optional[SpanKind] = None,
        attributes: Attributes = None,
        links: Optional[Sequence[Link]] = None,
        trace_state: Optional[TraceState] = None,
    ) -> SamplingResult:
        parent_span_context = get_current_span(parent_context).get_span_context()
        parent_trace_state = parent_span_context.trace_state if parent_span_context.is_valid else None

        status = self._sampler.is_sampled(TraceID.from_int(trace_id), name)
        if not status.sampled:
            return SamplingResult(Decision.DROP, trace_state=parent_trace_state)
        return SamplingResult(
            Decision.RECORD_AND_SAMPLE,
            attributes=status.tags,
            trace_state=parent_trace_state,
        )

    def get_description(self) -> str:
        return f"JaegerliteSampler{{{self._sampler.type().value}}}"
