"""Evaluation: metrics, evolution driver, plots."""

from eval.metrics import (
    compute_fitness,
    is_monotonic,
    summarize_runs,
)

__all__ = [
    "compute_fitness",
    "is_monotonic",
    "summarize_runs",
]
