"""Modular integers, polynomials and quotient rings."""

from .errors import AlgebraError, ModulusMismatchError, NotInvertibleError
from .factor_ring import FactorRingElement
from .irreducibility import is_irreducible
from .modint import ModInt, is_prime, modint
from .polynomial import Polynomial, divide_coefficients

__all__ = [
    "AlgebraError",
    "FactorRingElement",
    "ModInt",
    "ModulusMismatchError",
    "NotInvertibleError",
    "Polynomial",
    "divide_coefficients",
    "is_irreducible",
    "is_prime",
    "modint",
]
