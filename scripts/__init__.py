"""Weasel scripts package initialization."""

from .run_convergence_suite import run_convergence_suite
