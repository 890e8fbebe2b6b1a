"""Evolutionary search: selection, reproduction, and the Weasel evolver."""

from evolution.selection import select_best
from evolution.reproduction import create_variants
from evolution.evolver import Evolver, StepResult

__all__ = ["select_best", "create_variants", "Evolver", "StepResult"]
