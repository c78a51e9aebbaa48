"""Uniform random sources."""

from wsampler.source.base import UniformSource
from wsampler.source.numpy_source import NumpyUniformSource
from wsampler.source.replay import ReplaySource

__all__ = [
    "UniformSource",
    "NumpyUniformSource",
    "ReplaySource",
]
