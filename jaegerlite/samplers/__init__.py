"""Sampling strategies."""

from jaegerlite.samplers.base import (
    SAMPLER_TYPE_PROBABILISTIC,
    SAMPLER_TYPE_TAG_KEY,
    Sampler,
    SamplerType,
    SamplingStatus,
)
from jaegerlite.samplers.otel import OTelSamplerAdapter
from jaegerlite.samplers.probabilistic_categorizer import (
    DEFAULT_OPERATION,
    ProbabilisticCategorizerSampler,
    compute_sampling_boundary,
)

__all__ = [
    "SAMPLER_TYPE_PROBABILISTIC",
    "SAMPLER_TYPE_TAG_KEY",
    "Sampler",
    "SamplerType",
    "SamplingStatus",
    "OTelSamplerAdapter",
    "DEFAULT_OPERATION",
    "ProbabilisticCategorizerSampler",
    "compute_sampling_boundary",
]
