"""Probabilistic sampling with per-operation rates."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Iterable, List, Tuple

from jaegerlite.samplers.base import (
    SAMPLER_TYPE_PROBABILISTIC,
    SAMPLER_TYPE_TAG_KEY,
    Sampler,
    SamplerType,
    SamplingStatus,
)
from jaegerlite.tracer.trace_id import MAX_U64, TraceID

if TYPE_CHECKING:
    from jaegerlite.config import JaegerliteConfig

logger = logging.getLogger(__name__)

DEFAULT_OPERATION = "default"


def compute_sampling_boundary(rate: float) -> int:
    """
    Map a sampling rate to the largest low trace-id word that is sampled.

    ``round(rate * MAX_U64)`` clamped to ``[0, MAX_U64]``: 1.0 gives exactly
    ``MAX_U64`` and 0.0 gives 0. Out-of-range rates are clamped.
    """
    if not 0.0 <= rate <= 1.0:
        logger.warning(f"Sampling rate {rate} is outside [0, 1] and will be clamped")
        # NaN fails every comparison and is treated as 0
        rate = 1.0 if rate > 1.0 else 0.0
    return min(round(rate * MAX_U64), MAX_U64)


class ProbabilisticCategorizerSampler(Sampler):
    """
    Sampler choosing a rate by operation-name prefix.

    Rates are checked in configuration order and the first prefix of the
    operation name wins; the ``"default"`` entry applies when none match.
    A trace is sampled when its low word is at or below the boundary.
    With no default configured, unmatched operations are never sampled.
    """

    def __init__(self, sampling_rates: Iterable[Tuple[str, float]]) -> None:
        """
        Args:
            sampling_rates: Ordered ``(operation prefix or "default", rate)`` pairs
        """
        boundaries: List[Tuple[str, int]] = []
        default_boundary = 0
        for name, rate in sampling_rates:
            bound = compute_sampling_boundary(rate)
            if name == DEFAULT_OPERATION:
                default_boundary = bound
            else:
                boundaries.append((name, bound))
        self._boundaries: Tuple[Tuple[str, int], ...] = tuple(boundaries)
        self._default_boundary = default_boundary
        self._tags: Dict[str, str] = {SAMPLER_TYPE_TAG_KEY: SAMPLER_TYPE_PROBABILISTIC}

    @classmethod
    def from_config(cls, config: "JaegerliteConfig") -> "ProbabilisticCategorizerSampler":
        return cls(config.sampler.rate_list())

    @property
    def rates(self) -> Tuple[Tuple[str, int], ...]:
        """Configured ``(prefix, boundary)`` pairs, in match order."""
        return self._boundaries

    @property
    def default_boundary(self) -> int:
        return self._default_boundary

    def is_sampled(self, trace_id: TraceID, operation: str) -> SamplingStatus:
        for prefix, bound in self._boundaries:
            if operation.startswith(prefix):
                return SamplingStatus(bound >= trace_id.low, dict(self._tags))
        return SamplingStatus(self._default_boundary >= trace_id.low, dict(self._tags))

    def type(self) -> SamplerType:
        return SamplerType.PROBABILISTIC_CATEGORIZER

    def close(self) -> None:
        pass

    def __repr__(self) -> str:
        return (
            f"ProbabilisticCategorizerSampler(rates={list(self._boundaries)!r}, "
            f"default_boundary={self._default_boundary})"
        )
