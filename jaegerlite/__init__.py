"""Jaegerlite: trace context codec and probabilistic sampling."""

from jaegerlite.config import JaegerliteConfig, load_config
from jaegerlite.context import (
    CarrierReader,
    JaegerPropagator,
    encode,
    extract,
    extract_trace_context,
    from_stream,
    inject_trace_context,
)
from jaegerlite.errors import ConfigError, HexParseError, JaegerliteError, ValidationError
from jaegerlite.samplers import (
    OTelSamplerAdapter,
    ProbabilisticCategorizerSampler,
    Sampler,
    SamplerType,
    SamplingStatus,
)
from jaegerlite.tracer import INVALID_SPAN_CONTEXT, SpanContext, TraceID

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CarrierReader",
    "ConfigError",
    "HexParseError",
    "INVALID_SPAN_CONTEXT",
    "JaegerliteConfig",
    "JaegerliteError",
    "JaegerPropagator",
    "OTelSamplerAdapter",
    "ProbabilisticCategorizerSampler",
    "Sampler",
    "SamplerType",
    "SamplingStatus",
    "SpanContext",
    "TraceID",
    "ValidationError",
    "encode",
    "extract",
    "extract_trace_context",
    "from_stream",
    "inject_trace_context",
    "load_config",
]
