"""numpy-backed uniform source."""

from __future__ import annotations

import numpy as np

from wsampler.source.base import UniformSource


class NumpyUniformSource(UniformSource):
    """Uniform draws in ``[0, 1)`` from a :class:`numpy.random.Generator`.

    A generator is not safe for concurrent use; give each thread its own source.
    """

    def __init__(
        self,
        seed: int | None = None,
        generator: np.random.Generator | None = None,
    ) -> None:
        """Initialize the source.

        Args:
            seed: Random seed for reproducibility.
            generator: Existing generator to draw from. Mutually exclusive with
                ``seed``.
        """
        if generator is not None and seed is not None:
            raise ValueError("pass either seed or generator, not both")
        self._rng = generator if generator is not None else np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        return self._rng

    def uniform(self) -> float:
        return float(self._rng.random())
