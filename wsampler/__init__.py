"""wsampler — weighted random choice over a finite candidate set.

Public API
----------
The usable surface is importable directly from ``wsampler``::

    from wsampler import WeightedSampler, SamplerConfig
    from wsampler.source import NumpyUniformSource, ReplaySource
    from wsampler.evaluation import assess_fit, count_draws, expected_frequencies
"""

from __future__ import annotations

# Configuration
from wsampler.config import BOUNDARY_SLACK, PROBABILITY_TOLERANCE, SamplerConfig

# Construction errors
from wsampler.errors import ConstructionError, InvalidDistribution, InvalidShape, MissingInput

# Core sampler
from wsampler.sampler import WeightedSampler

# Uniform sources
from wsampler.source import NumpyUniformSource, ReplaySource, UniformSource

__version__ = "0.1.0"

__all__ = [
    "WeightedSampler",
    "SamplerConfig",
    "PROBABILITY_TOLERANCE",
    "BOUNDARY_SLACK",
    # Errors
    "ConstructionError",
    "MissingInput",
    "InvalidShape",
    "InvalidDistribution",
    # Sources
    "UniformSource",
    "NumpyUniformSource",
    "ReplaySource",
    "__version__",
]
