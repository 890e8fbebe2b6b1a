"""Pydantic model for a Weasel run configuration (CLI / YAML validation)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from phrase.schema import (
    DEFAULT_CHAR_SET,
    DEFAULT_MUTATION_RATE,
    DEFAULT_POPULATION_SIZE,
)


class WeaselConfig(BaseModel):
    """
    Run configuration. Use model_validate(dict) on merged CLI/YAML values;
    model_dump() matches the keyword arguments of evolve_phrase.
    """

    phrase: str = Field(min_length=1, description="Target phrase to evolve towards")
    char_set: str = Field(default=DEFAULT_CHAR_SET, min_length=1)
    iterations: int = Field(default=DEFAULT_POPULATION_SIZE, ge=1, description="Variants per generation")
    mutation_rate: int = Field(default=DEFAULT_MUTATION_RATE, ge=1, le=100, description="Percent per character")
    seed: int | None = None
    max_generations: int | None = Field(default=None, ge=1)

    @field_validator("iterations", "mutation_rate", mode="before")
    @classmethod
    def reject_bool(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError("must be an integer, not a boolean")
        return v


def format_validation_error(exc: Exception) -> list[str]:
    """
    Turn a pydantic ValidationError into CLI-style messages, matching the
    wording of the range checks in phrase.schema.validate_config.
    """
    messages: list[str] = []
    for err in getattr(exc, "errors", lambda: [])():
        field = err.get("loc", ("?",))[0]
        value = err.get("input")
        if field == "mutation_rate" and isinstance(value, int) and not isinstance(value, bool):
            messages.append(f"Mutation value should be within [1-100], not {value}")
        elif field == "iterations" and isinstance(value, int) and not isinstance(value, bool):
            messages.append(f"Iterations value should be >= 1, not {value}")
        else:
            messages.append(f"{field}: {err.get('msg', 'invalid value')}")
    return messages or [str(exc)]

