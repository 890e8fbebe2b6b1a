"""Generate figures: per-run convergence curves and generations-to-converge histograms."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np


def plot_convergence(
    history: list[dict[str, Any]],
    output_path: str | Path,
    length: int | None = None,
) -> Path:
    """Plot best score (and population mean score) per generation from an evolve_phrase history."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    gens = [h["generation"] for h in history]
    best = [h["score"] for h in history]
    mean_pts = [(h["generation"], h["mean_score"]) for h in history if h.get("mean_score") is not None]

    fig, ax = plt.subplots()
    ax.step(gens, best, where="post", label="best score")
    if mean_pts:
        mx, my = zip(*mean_pts)
        ax.plot(mx, my, alpha=0.6, label="population mean")
    if length is not None:
        ax.axhline(length, color="grey", linestyle="--", linewidth=1, label="target length")
    ax.set_xlabel("Generation")
    ax.set_ylabel("Matching characters")
    ax.set_title("Convergence: best score per generation")
    ax.legend()
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path


def plot_generations_histogram(
    results: list[dict[str, Any]],
    output_path: str | Path,
) -> Path:
    """Histogram of generations needed to converge across runs."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    gens = np.asarray([r["generations"] for r in results if r.get("converged")], dtype=float)

    fig, ax = plt.subplots()
    if gens.size:
        ax.hist(gens, bins=min(20, max(1, gens.size)), alpha=0.8)
        ax.axvline(float(np.mean(gens)), color="red", linestyle="--", label=f"mean {np.mean(gens):.1f}")
        ax.legend()
    ax.set_xlabel("Generations to converge")
    ax.set_ylabel("Runs")
    ax.set_title(f"Convergence across {len(results)} runs")
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
