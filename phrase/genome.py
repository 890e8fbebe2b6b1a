"""Candidate genome: character-set normalisation and random candidates."""

from __future__ import annotations

import random
from typing import Iterable

from phrase.schema import DEFAULT_CHAR_SET


def normalize_char_set(char_set: Iterable[str] | None) -> tuple[str, ...]:
    """
    Return char_set as a tuple of unique characters.
    Strings and sequences keep first-appearance order; sets are sorted so the
    order never depends on hash seeding.
    """
    if char_set is None:
        char_set = DEFAULT_CHAR_SET
    if isinstance(char_set, (set, frozenset)):
        return tuple(sorted(char_set))
    return tuple(dict.fromkeys(char_set))


def random_candidate(
    length: int,
    char_set: tuple[str, ...],
    rng: random.Random | None = None,
) -> str:
    """Generate a candidate of the given length, each character drawn uniformly from char_set."""
    if not char_set:
        raise ValueError("Couldn't pick character from an empty char set")
    rng = rng or random.Random()
    n = len(char_set)
    return "".join(char_set[rng.randrange(n)] for _ in range(length))


def is_valid_candidate(candidate: str, length: int, char_set: Iterable[str]) -> bool:
    """True if candidate has the expected length and uses only char_set characters."""
    allowed = set(char_set)
    return len(candidate) == length and all(c in allowed for c in candidate)
