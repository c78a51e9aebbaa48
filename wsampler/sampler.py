"""Weighted random choice over a finite candidate set.

A :class:`WeightedSampler` is built once from candidates and their
probabilities.  Construction validates the distribution and precomputes the
cumulative table; each :meth:`WeightedSampler.next` call then consumes one
uniform draw from an injected source and maps it through that table.

Example::

    sampler = WeightedSampler([-3, 0, 1, 2, 5], [0.01, 0.3, 0.58, 0.1, 0.01], seed=7)
    value = sampler.next()
    sampler.resolve(0.31)  # -> 0
"""

from __future__ import annotations

import logging
import math
from typing import Any, Generic, Sequence, TypeVar

import numpy as np

from wsampler.config import BOUNDARY_SLACK, PROBABILITY_TOLERANCE, SamplerConfig
from wsampler.errors import InvalidDistribution, InvalidShape, MissingInput
from wsampler.source import NumpyUniformSource, UniformSource

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Rounding allowance on the probability total, on top of the configured tolerance.
_SUM_ROUNDING = 16 * float(np.finfo(np.float64).eps)


def _as_source(source: UniformSource | np.random.Generator | None, seed: int | None) -> UniformSource:
    """Normalise the ``source``/``seed`` pair into a :class:`UniformSource`."""
    if source is None:
        return NumpyUniformSource(seed=seed)
    if seed is not None:
        raise ValueError("pass either source or seed, not both")
    if isinstance(source, np.random.Generator):
        return NumpyUniformSource(generator=source)
    if isinstance(source, UniformSource):
        return source
    raise TypeError(
        f"source must be a UniformSource or numpy.random.Generator, got {type(source).__name__}"
    )


def _cumulative_table(probabilities: Sequence[float], tolerance: float) -> np.ndarray:
    """Validate ``probabilities`` and return their left-to-right prefix sums."""
    try:
        probs = np.asarray(probabilities, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidDistribution(f"probabilities must be real numbers: {exc}") from exc

    if not np.all(np.isfinite(probs)):
        raise InvalidDistribution("probabilities must be finite")
    negative = np.flatnonzero(probs < 0.0)
    if negative.size:
        i = int(negative[0])
        raise InvalidDistribution(f"probability at index {i} is negative ({probs[i]!r})")

    cumulative = np.cumsum(probs)
    total = float(cumulative[-1])
    if abs(total - 1.0) > tolerance + _SUM_ROUNDING:
        raise InvalidDistribution(
            f"probabilities sum to {total!r}, expected 1 within {tolerance!r}"
        )
    cumulative.flags.writeable = False
    return cumulative


class WeightedSampler(Generic[T]):
    """Draw candidates according to a fixed probability mass function.

    Attributes:
        candidates: Values the sampler may return, in construction order.
        probabilities: Probability of each candidate, positionally paired.
        cumulative: Prefix sums of ``probabilities``.
        tolerance: Accepted absolute gap between the probability total and 1.
        source: Uniform source consumed by :meth:`next`.
    """

    def __init__(
        self,
        candidates: Sequence[T],
        probabilities: Sequence[float],
        source: UniformSource | np.random.Generator | None = None,
        *,
        seed: int | None = None,
        tolerance: float = PROBABILITY_TOLERANCE,
    ) -> None:
        """Validate the distribution and build the cumulative table.

        Args:
            candidates: Values to draw from. Length must match ``probabilities``.
            probabilities: Non-negative probabilities summing to 1 within
                ``tolerance``.
            source: Uniform source for :meth:`next`. A bare numpy ``Generator``
                is wrapped; ``None`` creates a :class:`NumpyUniformSource`.
            seed: Seed for the default source. Mutually exclusive with ``source``.
            tolerance: Accepted absolute gap between the probability total and 1.

        Raises:
            MissingInput: ``candidates`` or ``probabilities`` is ``None``.
            InvalidShape: Lengths differ, are zero, or ``probabilities`` is not
                one-dimensional.
            InvalidDistribution: A probability is negative, non-finite or
                non-numeric, or the total is not 1 within ``tolerance``.
        """
        if candidates is None or probabilities is None:
            missing = [
                name
                for name, value in (("candidates", candidates), ("probabilities", probabilities))
                if value is None
            ]
            raise MissingInput(f"missing required input: {', '.join(missing)}")
        if not math.isfinite(tolerance) or tolerance < 0.0:
            raise ValueError(f"tolerance must be a finite non-negative float, got {tolerance!r}")

        values = tuple(candidates)
        if not isinstance(probabilities, np.ndarray):
            probabilities = list(probabilities)
        try:
            ndim = np.ndim(probabilities)
        except ValueError as exc:
            raise InvalidShape(f"probabilities must be a flat sequence: {exc}") from exc
        if ndim != 1:
            raise InvalidShape("probabilities must be a one-dimensional sequence")
        if len(values) == 0:
            raise InvalidShape("at least one candidate is required")
        if len(values) != len(probabilities):
            raise InvalidShape(
                f"got {len(values)} candidates but {len(probabilities)} probabilities"
            )

        self._cumulative = _cumulative_table(probabilities, tolerance)
        self._candidates: tuple[T, ...] = values
        self._probabilities: tuple[float, ...] = tuple(float(p) for p in probabilities)
        self._tolerance = tolerance
        self._source = _as_source(source, seed)

        logger.debug(
            "Built sampler over %d candidates (cumulative total %.17g)",
            len(values),
            self._cumulative[-1],
        )

    @classmethod
    def from_config(
        cls,
        candidates: Sequence[T],
        probabilities: Sequence[float],
        config: SamplerConfig,
        source: UniformSource | np.random.Generator | None = None,
    ) -> "WeightedSampler[T]":
        """Build a sampler using the tolerance and seed from ``config``.

        An explicit ``source`` takes precedence over ``config.seed``.
        """
        seed = config.seed if source is None else None
        return cls(candidates, probabilities, source, seed=seed, tolerance=config.tolerance)

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------

    def next(self) -> T:
        """Return one candidate, consuming a single draw from the source."""
        u = self._source.uniform()
        if u == 1.0 and not self._source.closed_upper:
            logger.debug(
                "%s returned 1.0 outside its declared [0, 1) interval", type(self._source).__name__
            )
        return self.resolve(u)

    def resolve(self, u: float) -> T:
        """Return the candidate whose cumulative range covers ``u``.

        Picks the first index whose cumulative bound is ``>= u`` (within
        ``BOUNDARY_SLACK``), so bounds are inclusive on the upper side. If
        rounding left the final bound below ``u``, the last candidate is
        returned.

        Args:
            u: Draw in ``[0, 1]``.

        Raises:
            ValueError: ``u`` is NaN or outside ``[0, 1]``.
        """
        if not 0.0 <= u <= 1.0:
            raise ValueError(f"u must lie in [0, 1], got {u!r}")
        target = u - BOUNDARY_SLACK
        # Slack never reaches below 0, so only u == 0 can land on a leading zero-width range.
        if target <= 0.0:
            target = u
        idx = int(np.searchsorted(self._cumulative, target, side="left"))
        if idx == len(self._candidates):
            logger.debug(
                "Draw %.17g above final cumulative bound %.17g; saturating to last candidate",
                u,
                self._cumulative[-1],
            )
            idx -= 1
        return self._candidates[idx]

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def candidates(self) -> tuple[T, ...]:
        return self._candidates

    @property
    def probabilities(self) -> tuple[float, ...]:
        return self._probabilities

    @property
    def cumulative(self) -> tuple[float, ...]:
        return tuple(float(c) for c in self._cumulative)

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def source(self) -> UniformSource:
        return self._source

    def __len__(self) -> int:
        return len(self._candidates)

    def __repr__(self) -> str:
        pairs: list[Any] = list(zip(self._candidates, self._probabilities))
        return f"{type(self).__name__}({pairs!r})"
