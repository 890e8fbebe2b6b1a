"""Fitness and convergence statistics."""

from __future__ import annotations

from typing import Any

import numpy as np

from phrase.schema import score_candidate


def compute_fitness(candidate: str, target: str) -> float:
    """Fraction of target positions matched by candidate, in [0, 1]."""
    if not target:
        return 0.0
    return score_candidate(candidate, target) / len(target)


def is_monotonic(scores: list[int]) -> bool:
    """True if no score is lower than the one before it."""
    return all(b >= a for a, b in zip(scores, scores[1:]))


def summarize_runs(results: list[dict[str, Any]]) -> dict[str, Any]:
    """
    Aggregate evolve_phrase results: convergence rate and generations-to-convergence
    statistics over the runs that converged.
    """
    n_runs = len(results)
    gens = [r["generations"] for r in results if r.get("converged")]
    summary: dict[str, Any] = {
        "n_runs": n_runs,
        "n_converged": len(gens),
        "convergence_rate": len(gens) / n_runs if n_runs else 0.0,
    }
    if not gens:
        summary.update(
            {
                "mean_generations": None,
                "std_generations": None,
                "median_generations": None,
                "min_generations": None,
                "max_generations": None,
                "ci95_generations": None,
            }
        )
        return summary

    arr = np.asarray(gens, dtype=float)
    summary.update(
        {
            "mean_generations": float(np.mean(arr)),
            "std_generations": float(np.std(arr)) if len(arr) > 1 else 0.0,
            "median_generations": float(np.median(arr)),
            "min_generations": int(np.min(arr)),
            "max_generations": int(np.max(arr)),
            "ci95_generations": confidence_interval_95(gens),
        }
    )
    return summary


def confidence_interval_95(values: list[float]) -> tuple[float, float]:
    """Return (lower, upper) 95% CI for mean."""
    if len(values) < 2:
        return (float(values[0]), float(values[0])) if values else (0.0, 0.0)
    n = len(values)
    mean = np.mean(values)
    se = np.std(values, ddof=1) / (n ** 0.5)
    # Approximate 1.96 for 95%
    margin = 1.96 * se
    return (float(mean - margin), float(mean + margin))
