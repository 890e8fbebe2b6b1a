"""Character-set constants, configuration validation, and candidate scoring."""

from __future__ import annotations

from typing import Any, Iterable

# Default approved character set
DEFAULT_CHAR_SET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ abcdefghijklmnopqrstuvwxyz!?."

DEFAULT_POPULATION_SIZE = 100
DEFAULT_MUTATION_RATE = 5

# Bounds for parameters (for validation)
MIN_POPULATION_SIZE = 1
MUTATION_RATE_BOUNDS = (1, 100)


class ConfigurationError(ValueError):
    """Raised when an evolver is built from an invalid configuration."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "invalid configuration")


def validate_config(
    target: str,
    char_set: Iterable[str],
    population_size: Any,
    mutation_rate: Any,
) -> tuple[bool, list[str]]:
    """
    Validate evolver configuration. Returns (valid, list of error messages).
    Reachability of the target is not checked here.
    """
    errors: list[str] = []

    if not isinstance(target, str):
        errors.append("target must be a string")
    elif len(target) == 0:
        errors.append("target cannot be empty")

    if isinstance(char_set, str):
        chars = list(char_set)
    else:
        try:
            chars = list(char_set)
        except TypeError:
            chars = None
            errors.append("char_set must be a string or collection of characters")
    if chars is not None:
        if len(chars) == 0:
            errors.append("char_set cannot be empty")
        elif any(not isinstance(c, str) or len(c) != 1 for c in chars):
            errors.append("char_set entries must be single characters")

    # bool is an int subclass; reject it explicitly
    if not isinstance(population_size, int) or isinstance(population_size, bool):
        errors.append("population_size must be an int")
    elif population_size < MIN_POPULATION_SIZE:
        errors.append(
            f"Iterations value should be >= {MIN_POPULATION_SIZE}, not {population_size}"
        )

    lo, hi = MUTATION_RATE_BOUNDS
    if not isinstance(mutation_rate, int) or isinstance(mutation_rate, bool):
        errors.append("mutation_rate must be an int")
    elif mutation_rate < lo or mutation_rate > hi:
        errors.append(
            f"Mutation value should be within [{lo}-{hi}], not {mutation_rate}"
        )

    return len(errors) == 0, errors


def score_candidate(candidate: str, target: str) -> int:
    """Count positions where candidate and target hold the same character."""
    return sum(1 for a, b in zip(candidate, target) if a == b)


def unreachable_chars(target: str, char_set: Iterable[str]) -> list[str]:
    """Characters of target that can never be produced from char_set, in order."""
    allowed = set(char_set)
    missing: list[str] = []
    for c in target:
        if c not in allowed and c not in missing:
            missing.append(c)
    return missing
