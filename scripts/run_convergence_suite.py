"""Multi-run convergence suite: how many generations a phrase takes across seeds."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from eval.metrics import summarize_runs
from eval.run_evolution import evolve_phrase
from phrase.schema import (
    DEFAULT_CHAR_SET,
    DEFAULT_MUTATION_RATE,
    DEFAULT_POPULATION_SIZE,
    ConfigurationError,
)


def run_convergence_suite(
    phrase: str,
    num_runs: int = 10,
    char_set: str = DEFAULT_CHAR_SET,
    iterations: int = DEFAULT_POPULATION_SIZE,
    mutation_rate: int = DEFAULT_MUTATION_RATE,
    base_seed: int = 0,
    max_generations: Optional[int] = 10000,
    plot_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Run independent evolutions with different seeds to assess convergence.

    Args:
        phrase: Target phrase
        num_runs: Number of independent runs
        char_set: Approved characters
        iterations: Variants per generation
        mutation_rate: Percent chance of mutation per character
        base_seed: Starting seed (run i uses base_seed + i)
        max_generations: Per-run generation cap (None = unbounded)
        plot_path: Optional PNG path for a generations histogram

    Returns:
        Dictionary with config, per-run results (without histories) and summary
    """
    print(f"Starting convergence suite with {num_runs} runs")
    print(f"Each run: {iterations} variants/generation, {mutation_rate}% mutation")

    run_results: List[Dict[str, Any]] = []
    for run_id in range(num_runs):
        run_seed = base_seed + run_id
        result = evolve_phrase(
            phrase=phrase,
            char_set=char_set,
            iterations=iterations,
            mutation_rate=mutation_rate,
            seed=run_seed,
            max_generations=max_generations,
            verbose=False,
        )
        status = "converged" if result["converged"] else "capped"
        print(
            f"Run {run_id + 1}/{num_runs} (seed {run_seed}): {status} after "
            f"{result['generations']} generations ({result['score']}/{result['length']})"
        )
        result.pop("history", None)
        result["run_id"] = run_id
        run_results.append(result)

    summary = summarize_runs(run_results)
    if summary["n_converged"]:
        print(
            f"Converged {summary['n_converged']}/{num_runs}: "
            f"mean {summary['mean_generations']:.1f} generations "
            f"(median {summary['median_generations']:.1f}, "
            f"range {summary['min_generations']}-{summary['max_generations']})"
        )
    else:
        print(f"No run converged within {max_generations} generations")

    if plot_path:
        from eval.plots import plot_generations_histogram

        out = plot_generations_histogram(run_results, plot_path)
        print(f"Saved histogram to {out}")

    return {
        "config": {
            "phrase": phrase,
            "num_runs": num_runs,
            "char_set": char_set,
            "iterations": iterations,
            "mutation_rate": mutation_rate,
            "base_seed": base_seed,
            "max_generations": max_generations,
        },
        "runs": run_results,
        "summary": summary,
    }


def main() -> int:
    import argparse

    p = argparse.ArgumentParser(description="Weasel convergence suite")
    p.add_argument("-p", "--phrase", type=str, required=True)
    p.add_argument("-c", "--char-set", type=str, default=DEFAULT_CHAR_SET)
    p.add_argument("-i", "--iterations", type=int, default=DEFAULT_POPULATION_SIZE)
    p.add_argument("-m", "--mutation-rate", type=int, default=DEFAULT_MUTATION_RATE)
    p.add_argument("--runs", type=int, default=10)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--max-generations", type=int, default=10000)
    p.add_argument("--plot", type=str, default=None)
    args = p.parse_args()

    try:
        run_convergence_suite(
            phrase=args.phrase,
            num_runs=args.runs,
            char_set=args.char_set,
            iterations=args.iterations,
            mutation_rate=args.mutation_rate,
            base_seed=args.seed,
            max_generations=args.max_generations,
            plot_path=args.plot,
        )
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
