"""Sampler configuration objects."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Maximum absolute gap allowed between the summed probabilities and 1.
PROBABILITY_TOLERANCE: float = 1e-6

# A draw at most this far above a cumulative bound still resolves to that bound. Prefix
# sums of decimal probabilities can land an ulp short (0.31 + 0.58 -> 0.8899999999999999).
BOUNDARY_SLACK: float = 1e-12


@dataclass(frozen=True)
class SamplerConfig:
    """Construction settings for a :class:`~wsampler.sampler.WeightedSampler`.

    Attributes:
        tolerance: Maximum ``|sum(probabilities) - 1|`` accepted at construction.
        seed: Seed for the default numpy-backed uniform source. Ignored when an
            explicit source is passed to ``WeightedSampler.from_config``.
    """

    tolerance: float = PROBABILITY_TOLERANCE
    seed: int | None = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.tolerance) or self.tolerance < 0.0:
            raise ValueError(f"tolerance must be a finite non-negative float, got {self.tolerance!r}")
