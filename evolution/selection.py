"""Best-variant selection over a scored population."""

from __future__ import annotations


def select_best(variants: list[str], scores: list[int]) -> int:
    """
    Return the index of the highest-scoring variant.
    Among equal maxima the first generated wins.
    """
    if not variants:
        raise ValueError("cannot select from an empty population")
    if len(variants) != len(scores):
        raise ValueError("variants and scores must have the same length")
    best_idx = 0
    for i in range(1, len(scores)):
        # Strict comparison keeps the earliest maximum
        if scores[i] > scores[best_idx]:
            best_idx = i
    return best_idx


def select_improvement(
    current_score: int,
    variants: list[str],
    scores: list[int],
) -> int | None:
    """
    Index of the generation's best variant if it beats current_score strictly,
    otherwise None (the incumbent is kept).
    """
    idx = select_best(variants, scores)
    if scores[idx] > current_score:
        return idx
    return None
