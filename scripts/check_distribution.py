#!/usr/bin/env python
"""
Draw from a weighted sampler and check the observed frequencies.

Builds a sampler from the given values and probabilities, draws repeatedly,
and reports per-value frequencies plus a chi-square goodness-of-fit test.
Exits 0 if the fit passes, 1 if it fails, 2 if the inputs are rejected.

Usage:
    python scripts/check_distribution.py
    python scripts/check_distribution.py --values=a,b,c --value-type str \
        --probabilities 0.2,0.5,0.3 --draws 100000 --seed 3
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from wsampler import PROBABILITY_TOLERANCE, ConstructionError, SamplerConfig, WeightedSampler
from wsampler.evaluation import assess_fit, count_draws, expected_frequencies

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

_VALUE_TYPES = {"int": int, "float": float, "str": str}


def _split(raw: str, cast) -> list:
    return [cast(item.strip()) for item in raw.split(",") if item.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Check a weighted sampler's output frequencies")
    parser.add_argument("--values", type=str, default="-3,0,1,2,5")
    parser.add_argument("--probabilities", type=str, default="0.01,0.3,0.58,0.1,0.01")
    parser.add_argument("--value-type", choices=sorted(_VALUE_TYPES), default="int")
    parser.add_argument("--draws", type=int, default=1_000_000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--tolerance", type=float, default=PROBABILITY_TOLERANCE)
    parser.add_argument("--max-deviation", type=float, default=0.001)
    parser.add_argument("--alpha", type=float, default=0.01)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        values = _split(args.values, _VALUE_TYPES[args.value_type])
        probabilities = _split(args.probabilities, float)
        if args.draws <= 0:
            raise ValueError("--draws must be positive")
        config = SamplerConfig(tolerance=args.tolerance, seed=args.seed)
        sampler = WeightedSampler.from_config(values, probabilities, config)
    except (ConstructionError, ValueError) as e:
        logger.error("Invalid input: %s", e)
        return 2

    logger.info("=" * 70)
    logger.info("Weighted sampler check")
    logger.info("Candidates: %d | Draws: %d | Seed: %s", len(sampler), args.draws, args.seed)
    logger.info("=" * 70)

    start = time.time()
    counts = count_draws((sampler.next() for _ in range(args.draws)), sampler.candidates)
    report = assess_fit(counts, expected_frequencies(sampler.candidates, sampler.probabilities))
    elapsed = time.time() - start

    for value, count, obs, exp in zip(
        report.values, report.counts, report.observed, report.expected
    ):
        logger.info("  %10r: %9d draws  observed %.5f  expected %.5f", value, count, obs, exp)
    logger.info("Max |observed - expected|: %.6f (limit %.6f)", report.max_abs_deviation, args.max_deviation)
    logger.info("Chi-square: %.4f  p-value: %.4g (alpha %.4g)", report.chi2_statistic, report.p_value, args.alpha)
    logger.info("Drew %d samples in %.2fs", report.n_draws, elapsed)

    if report.passes(args.max_deviation, args.alpha):
        logger.info("✓ Fit passes")
        return 0
    logger.error("✗ Fit fails")
    return 1


if __name__ == "__main__":
    sys.exit(main())
