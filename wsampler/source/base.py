"""Uniform random source interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class UniformSource(ABC):
    """Base interface for suppliers of uniform draws.

    Implementations return values in ``[0, 1)``; sources that may also return
    exactly ``1.0`` set ``closed_upper`` to ``True``. The sampler logs a debug
    record when a source declared half-open returns ``1.0``.
    """

    closed_upper: bool = False

    @abstractmethod
    def uniform(self) -> float:
        """Return one uniform draw."""
