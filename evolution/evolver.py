"""Weasel evolver: holds the current best candidate and advances one generation per step.

Each generation mutates the current best into a population of variants,
scores them against the target phrase, and keeps the best variant only when
it strictly improves on the incumbent, so the reported best never regresses.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Optional

from evolution.reproduction import create_variants, score_variants
from evolution.selection import select_improvement
from phrase.genome import is_valid_candidate, normalize_char_set, random_candidate
from phrase.schema import (
    ConfigurationError,
    score_candidate,
    unreachable_chars,
    validate_config,
)


@dataclass(frozen=True)
class StepResult:
    """Outcome of one generation."""

    best: str
    score: int
    converged: bool
    generation: int
    improved: bool = False
    mean_score: Optional[float] = None


class Evolver:
    """Drives the Weasel generation/selection/mutation loop for one target phrase."""

    def __init__(
        self,
        target: str,
        char_set: Iterable[str],
        population_size: int,
        mutation_rate: int,
        seed: int | None = None,
        rng: random.Random | None = None,
        initial: str | None = None,
    ):
        """
        Initialize evolver state.

        Args:
            target: Phrase to converge on (non-empty)
            char_set: Allowed characters for the initial candidate and mutations
            population_size: Variants generated per step, >= 1
            mutation_rate: Percent chance per character of mutation, in [1, 100]
            seed: Seed for the default random.Random (ignored if rng is given)
            rng: Random source providing randrange(n); overrides seed
            initial: Optional starting candidate instead of a random one

        Raises:
            ConfigurationError: if any constraint is violated
        """
        try:
            chars = normalize_char_set(char_set) if char_set is not None else ()
        except TypeError:
            raise ConfigurationError(
                ["char_set must be a string or collection of characters"]
            ) from None
        valid, errors = validate_config(target, chars, population_size, mutation_rate)
        if not valid:
            raise ConfigurationError(errors)

        self._target = target
        self._char_set = chars
        self._population_size = population_size
        self._mutation_rate = mutation_rate
        self.rng = rng if rng is not None else random.Random(seed)

        if initial is None:
            initial = random_candidate(len(target), chars, self.rng)
        elif not is_valid_candidate(initial, len(target), chars):
            raise ConfigurationError(
                [
                    f"initial candidate must be {len(target)} characters drawn from char_set, "
                    f"got {initial!r}"
                ]
            )

        # State tracking
        self._initial = initial
        self._best = initial
        self._score = score_candidate(initial, target)
        self._generation = 0

    @property
    def target(self) -> str:
        return self._target

    @property
    def char_set(self) -> tuple[str, ...]:
        return self._char_set

    @property
    def population_size(self) -> int:
        return self._population_size

    @property
    def mutation_rate(self) -> int:
        return self._mutation_rate

    @property
    def initial(self) -> str:
        return self._initial

    @property
    def best(self) -> str:
        return self._best

    @property
    def score(self) -> int:
        return self._score

    @property
    def generation(self) -> int:
        """Number of completed steps."""
        return self._generation

    @property
    def length(self) -> int:
        return len(self._target)

    def is_converged(self) -> bool:
        return self._best == self._target

    def step(self) -> StepResult:
        """
        Advance one generation.

        Generates population_size variants of the current best, keeps the
        first highest-scoring one if it beats the current score, and reports
        the (possibly unchanged) best. Once converged, returns the converged
        state without drawing randomness or advancing the generation count.

        Returns:
            StepResult for this generation
        """
        if self.is_converged():
            return StepResult(
                best=self._best,
                score=self._score,
                converged=True,
                generation=self._generation,
            )

        variants = create_variants(
            self._best,
            self._char_set,
            self._mutation_rate,
            self._population_size,
            self.rng,
        )
        scores = score_variants(variants, self._target)
        idx = select_improvement(self._score, variants, scores)
        if idx is not None:
            self._best = variants[idx]
            self._score = scores[idx]

        self._generation += 1
        return StepResult(
            best=self._best,
            score=self._score,
            converged=self.is_converged(),
            generation=self._generation,
            improved=idx is not None,
            mean_score=sum(scores) / len(scores),
        )

    def unreachable_positions(self) -> list[int]:
        """Target positions whose character is not in char_set (convergence impossible if non-empty)."""
        allowed = set(self._char_set)
        return [i for i, c in enumerate(self._target) if c not in allowed]

    def unreachable_chars(self) -> list[str]:
        return unreachable_chars(self._target, self._char_set)

    def get_state_summary(self) -> dict[str, object]:
        """
        Get summary of current evolver state.

        Returns:
            Dictionary with state information
        """
        return {
            "target": self._target,
            "best": self._best,
            "score": self._score,
            "length": self.length,
            "generation": self._generation,
            "converged": self.is_converged(),
            "population_size": self._population_size,
            "mutation_rate": self._mutation_rate,
        }
