"""Interface-level tests for the public wsampler surface."""

from __future__ import annotations

import pytest

import wsampler
from wsampler import SamplerConfig, WeightedSampler
from wsampler.source import ReplaySource


def test_public_names_importable() -> None:
    for name in wsampler.__all__:
        assert getattr(wsampler, name) is not None


def test_version_string() -> None:
    assert wsampler.__version__ == "0.1.0"


def test_sampler_len_matches_candidates() -> None:
    sampler = WeightedSampler([1, 2, 3], [0.2, 0.3, 0.5], ReplaySource([0.5]))
    assert len(sampler) == 3


def test_sampler_config_defaults() -> None:
    config = SamplerConfig()
    assert config.tolerance == wsampler.PROBABILITY_TOLERANCE
    assert config.seed is None


def test_sampler_config_rejects_bad_tolerance() -> None:
    with pytest.raises(ValueError):
        SamplerConfig(tolerance=-1.0)
    with pytest.raises(ValueError):
        SamplerConfig(tolerance=float("nan"))
