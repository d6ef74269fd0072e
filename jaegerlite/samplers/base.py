"""Sampler capability shared by all sampling strategies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from jaegerlite.tracer.span_context import SpanContext
from jaegerlite.tracer.trace_id import TraceID

# Tag reported with every decision, naming the kind of sampler that made it.
SAMPLER_TYPE_TAG_KEY = "sampler.type"

SAMPLER_TYPE_PROBABILISTIC = "probabilistic"


class SamplerType(str, Enum):
    """Discriminant identifying a sampler strategy for reporting."""

    CONST = "const"
    PROBABILISTIC = "probabilistic"
    RATE_LIMITING = "ratelimiting"
    REMOTE = "remote"
    ADAPTIVE = "adaptive"
    PROBABILISTIC_CATEGORIZER = "probabilistic_categorizer"


@dataclass(frozen=True)
class SamplingStatus:
    sampled: bool
    tags: Dict[str, str] = field(default_factory=dict)


class Sampler:
    """
    Base sampler interface.

    Implementations decide from the trace id and operation name alone, so
    every service that sees the same trace reaches the same decision.
    """

    def is_sampled(self, trace_id: TraceID, operation: str) -> SamplingStatus:
        raise NotImplementedError

    def type(self) -> SamplerType:
        raise NotImplementedError

    def close(self) -> None:
        """Release held resources."""
        pass

    def sample(self, context: SpanContext, operation: str) -> Tuple[SpanContext, SamplingStatus]:
        """
        Decide for ``context`` and return it with the sampled flag updated.

        Returns:
            Tuple of (updated context, sampling status)
        """
        status = self.is_sampled(context.trace_id, operation)
        return context.with_sampled(status.sampled), status
