"""Interactive polynomial calculator."""

from .prompts import InvalidInputError, Prompter, read_polynomial, read_polynomial_restricted
from .sessions import run_factor_ring, run_polynomial

__all__ = [
    "InvalidInputError",
    "Prompter",
    "read_polynomial",
    "read_polynomial_restricted",
    "run_factor_ring",
    "run_polynomial",
]
