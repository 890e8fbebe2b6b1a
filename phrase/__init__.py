"""Candidate phrase schema, generation, mutation, and config model."""

from phrase.schema import (
    DEFAULT_CHAR_SET,
    ConfigurationError,
    score_candidate,
    validate_config,
)
from phrase.genome import normalize_char_set, random_candidate
from phrase.mutation import mutate_candidate
from phrase.models import WeaselConfig

__all__ = [
    "DEFAULT_CHAR_SET",
    "ConfigurationError",
    "score_candidate",
    "validate_config",
    "normalize_char_set",
    "random_candidate",
    "mutate_candidate",
    "WeaselConfig",
]
