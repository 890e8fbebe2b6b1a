"""Run the Weasel evolver until the target phrase is reached (or a generation cap)."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Any

import yaml

from env_config import get_config_path
from evolution.evolver import Evolver
from phrase.mutation import mutated_positions
from phrase.schema import (
    DEFAULT_CHAR_SET,
    DEFAULT_MUTATION_RATE,
    DEFAULT_POPULATION_SIZE,
    ConfigurationError,
)


def _default_config() -> dict[str, Any]:
    return {
        "phrase": None,
        "char_set": DEFAULT_CHAR_SET,
        "iterations": DEFAULT_POPULATION_SIZE,
        "mutation_rate": DEFAULT_MUTATION_RATE,
        "seed": None,
        "max_generations": None,
    }


def load_evolution_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Load the `weasel` section of a YAML config, filling missing keys with defaults.
    Without an explicit path, uses WEASEL_CONFIG or the bundled default and falls
    back to built-in defaults when that file does not exist. An explicit path
    must exist.
    """
    cfg = _default_config()
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError([f"{path}: config file not found"])
    else:
        path = get_config_path()
        if not path.exists():
            return cfg
    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError([f"{path}: invalid YAML ({e})"]) from e

    if not isinstance(raw, dict):
        raise ConfigurationError([f"{path}: top level must be a mapping"])
    section = raw.get("weasel", {}) or {}
    if not isinstance(section, dict):
        raise ConfigurationError([f"{path}: 'weasel' section must be a mapping"])
    unknown = sorted(set(section) - set(cfg))
    if unknown:
        raise ConfigurationError([f"{path}: unknown keys in 'weasel': {', '.join(unknown)}"])
    for k, v in section.items():
        if v is not None:
            cfg[k] = v
    return cfg


def evolve_phrase(
    phrase: str,
    char_set: str = DEFAULT_CHAR_SET,
    iterations: int = DEFAULT_POPULATION_SIZE,
    mutation_rate: int = DEFAULT_MUTATION_RATE,
    seed: int | None = None,
    max_generations: int | None = None,
    verbose: bool = True,
    rng: random.Random | None = None,
    initial: str | None = None,
    record_history: bool = False,
) -> dict[str, Any]:
    """
    Evolve towards phrase, printing `Start: <initial>` and `Gen <n>: <best>` per step.

    Args:
        phrase: Target phrase
        char_set: Approved characters
        iterations: Variants per generation
        mutation_rate: Percent chance of mutation per character
        seed: Random seed (ignored when rng is given)
        max_generations: Stop after this many steps even if not converged (None = unbounded)
        verbose: Whether to print progress lines
        rng: Optional random source
        initial: Optional starting candidate
        record_history: Keep one entry per generation in the returned history (used by --plot)

    Returns:
        Dictionary with convergence flag, generation count, final best and history (empty unless record_history)
    """
    evolver = Evolver(
        target=phrase,
        char_set=char_set,
        population_size=iterations,
        mutation_rate=mutation_rate,
        seed=seed,
        rng=rng,
        initial=initial,
    )

    if verbose:
        print(f"Start: {evolver.best}")

    history: list[dict[str, Any]] = []
    if record_history:
        history.append(
            {
                "generation": 0,
                "best": evolver.best,
                "score": evolver.score,
                "mean_score": None,
                "improved": False,
                "n_changed": 0,
            }
        )

    while not evolver.is_converged():
        if max_generations is not None and evolver.generation >= max_generations:
            break
        previous = evolver.best
        result = evolver.step()
        if verbose:
            print(f"Gen {result.generation - 1}: {result.best}")
        if record_history:
            history.append(
                {
                    "generation": result.generation,
                    "best": result.best,
                    "score": result.score,
                    "mean_score": result.mean_score,
                    "improved": result.improved,
                    "n_changed": len(mutated_positions(previous, result.best)),
                }
            )


    return {
        "phrase": phrase,
        "initial": evolver.initial,
        "best": evolver.best,
        "score": evolver.score,
        "length": evolver.length,
        "converged": evolver.is_converged(),
        "generations": evolver.generation,
        "seed": seed,
        "unreachable_chars": evolver.unreachable_chars(),
        "history": history,
    }
