"""Goodness-of-fit helpers for checking a sampler against its distribution.

These functions depend only on ``numpy`` and ``scipy``; ``report_frame``
additionally needs ``pandas`` (install ``wsampler[analysis]``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Sequence

import numpy as np
from scipy.stats import chisquare


@dataclass
class FitReport:
    """Observed-versus-expected summary for a batch of draws.

    Attributes:
        n_draws: Number of draws tallied.
        values: Distinct candidate values, in first-seen candidate order.
        counts: Observed count per value, aligned with ``values``.
        expected: Expected probability per value, aligned with ``values``.
        max_abs_deviation: Largest ``|observed frequency - expected|``.
        chi2_statistic: Pearson chi-square statistic.
        p_value: Chi-square p-value (``0.0`` if a zero-probability value was drawn).
    """

    n_draws: int
    values: list[Any]
    counts: list[int]
    expected: list[float]
    max_abs_deviation: float
    chi2_statistic: float
    p_value: float
    observed: list[float] = field(init=False)

    def __post_init__(self) -> None:
        self.observed = [c / self.n_draws for c in self.counts]

    def passes(self, max_deviation: float, alpha: float) -> bool:
        """Return True if the deviation bound holds and chi-square does not reject."""
        return self.max_abs_deviation <= max_deviation and self.p_value > alpha


def expected_frequencies(
    candidates: Sequence[Hashable], probabilities: Sequence[float]
) -> dict[Hashable, float]:
    """Merge probabilities per distinct candidate value, normalised to sum to 1."""
    if len(candidates) != len(probabilities):
        raise ValueError("candidates and probabilities must have the same length")
    merged: dict[Hashable, float] = {}
    for value, p in zip(candidates, probabilities):
        merged[value] = merged.get(value, 0.0) + float(p)
    total = sum(merged.values())
    if total <= 0.0:
        raise ValueError("probabilities must have a positive total")
    return {value: p / total for value, p in merged.items()}


def count_draws(draws: Iterable[Hashable], values: Iterable[Hashable]) -> dict[Hashable, int]:
    """Tally ``draws`` per value, rejecting anything outside ``values``."""
    counts: dict[Hashable, int] = {v: 0 for v in values}
    for d in draws:
        if d not in counts:
            raise ValueError(f"draw {d!r} is not one of the candidate values")
        counts[d] += 1
    return counts


def assess_fit(counts: dict[Hashable, int], expected: dict[Hashable, float]) -> FitReport:
    """Compare observed ``counts`` with ``expected`` probabilities.

    Args:
        counts: Mapping of value to observed count, e.g. from :func:`count_draws`.
        expected: Mapping of value to expected probability, e.g. from
            :func:`expected_frequencies`.

    Returns:
        A :class:`FitReport`.
    """
    values = list(expected)
    obs = np.asarray([counts.get(v, 0) for v in values], dtype=np.float64)
    exp_p = np.asarray([expected[v] for v in values], dtype=np.float64)
    n_draws = int(obs.sum())
    if n_draws == 0:
        raise ValueError("cannot assess fit without draws")

    deviation = float(np.max(np.abs(obs / n_draws - exp_p)))

    # Zero-probability cells carry no chi-square term; a hit in one is a reject.
    support = exp_p > 0.0
    if np.any(obs[~support] > 0):
        statistic, p_value = float("inf"), 0.0
    elif np.count_nonzero(support) < 2:
        statistic, p_value = 0.0, 1.0
    else:
        exp_counts = exp_p[support] / exp_p[support].sum() * n_draws
        result = chisquare(obs[support], f_exp=exp_counts)
        statistic, p_value = float(result.statistic), float(result.pvalue)

    return FitReport(
        n_draws=n_draws,
        values=values,
        counts=[int(c) for c in obs],
        expected=[float(p) for p in exp_p],
        max_abs_deviation=deviation,
        chi2_statistic=statistic,
        p_value=p_value,
    )


def report_frame(report: FitReport) -> Any:
    """Convert a :class:`FitReport` into a per-value table.

    Requires ``pandas`` (install ``wsampler[analysis]``).

    Returns:
        ``pandas.DataFrame`` with columns ``value``, ``count``, ``observed``,
        ``expected`` and ``abs_deviation``.
    """
    try:
        import pandas as pd
    except ImportError as exc:  # pragma: no cover
        raise ImportError(
            "report_frame requires pandas. Install it with: pip install pandas"
        ) from exc

    rows: list[dict[str, Any]] = []
    for value, count, obs, exp in zip(
        report.values, report.counts, report.observed, report.expected
    ):
        rows.append(
            {
                "value": value,
                "count": count,
                "observed": obs,
                "expected": exp,
                "abs_deviation": abs(obs - exp),
            }
        )
    return pd.DataFrame(rows)
