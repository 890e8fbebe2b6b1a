"""Random per-character mutation of a candidate string."""

from __future__ import annotations

import random


def mutate_candidate(
    candidate: str,
    char_set: tuple[str, ...],
    mutation_rate: int,
    rng: random.Random | None = None,
) -> str:
    """
    Copy candidate character by character; each position is replaced by a
    uniform draw from char_set with probability mutation_rate / 100.
    Returns a new string of the same length.
    """
    if not char_set:
        raise ValueError("Couldn't get random character to mutate string")
    rng = rng or random.Random()
    n = len(char_set)
    out: list[str] = []
    for c in candidate:
        # Roll in [0, 100): rate 100 always mutates
        if rng.randrange(100) < mutation_rate:
            out.append(char_set[rng.randrange(n)])
        else:
            out.append(c)
    return "".join(out)


def mutated_positions(parent: str, child: str) -> list[int]:
    """Indices where child differs from parent (equal-length strings)."""
    return [i for i, (a, b) in enumerate(zip(parent, child)) if a != b]
