"""Create a generation's variants from the current best candidate."""

from __future__ import annotations

import random

from phrase.mutation import mutate_candidate
from phrase.schema import score_candidate


def create_variants(
    parent: str,
    char_set: tuple[str, ...],
    mutation_rate: int,
    population_size: int,
    rng: random.Random | None = None,
) -> list[str]:
    """Create exactly population_size independent mutations of parent, in generation order."""
    rng = rng or random.Random()
    return [
        mutate_candidate(parent, char_set, mutation_rate, rng)
        for _ in range(population_size)
    ]


def score_variants(variants: list[str], target: str) -> list[int]:
    """Score each variant against target."""
    return [score_candidate(v, target) for v in variants]
