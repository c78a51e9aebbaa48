"""Construction errors raised by :class:`wsampler.sampler.WeightedSampler`."""

from __future__ import annotations


class ConstructionError(ValueError):
    """Base class for all rejected sampler inputs."""


class MissingInput(ConstructionError):
    """Candidates or probabilities were not supplied."""


class InvalidShape(ConstructionError):
    """Candidates and probabilities are empty or of unequal length."""


class InvalidDistribution(ConstructionError):
    """Probabilities are not a valid probability mass function."""
