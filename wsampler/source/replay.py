"""Deterministic source that replays a fixed list of draws."""

from __future__ import annotations

import itertools
from typing import Sequence

from wsampler.source.base import UniformSource


class ReplaySource(UniformSource):
    """Cycle through caller-supplied draws, e.g. to pin ``next()`` in tests."""

    closed_upper = True

    def __init__(self, values: Sequence[float]) -> None:
        """Initialize the source.

        Args:
            values: Draws to return in order, repeating once exhausted. Each
                must lie in ``[0, 1]``.
        """
        draws = [float(v) for v in values]
        if not draws:
            raise ValueError("values must contain at least one draw")
        for v in draws:
            if not 0.0 <= v <= 1.0:
                raise ValueError(f"replayed draws must lie in [0, 1], got {v!r}")
        self.values: tuple[float, ...] = tuple(draws)
        self._cycle = itertools.cycle(self.values)

    def uniform(self) -> float:
        return next(self._cycle)
