"""Irreducibility test for polynomials over Z_p."""

import itertools

from .modint import ModInt
from .polynomial import Polynomial


def is_irreducible(poly: Polynomial) -> bool:
    """
    Decide whether ``poly`` is irreducible over its field Z_p.

    Constants and the zero polynomial are not irreducible; linear
    polynomials always are. Otherwise every monic polynomial of degree
    1..deg/2 is tried as a divisor, so the cost grows as p^(deg/2).
    """
    kind = poly.kind
    if not (isinstance(kind, type) and issubclass(kind, ModInt) and kind.MOD is not None):
        raise TypeError("Irreducibility is only decided for polynomials over Z_p")

    degree = poly.degree()
    if degree <= 0:
        return False
    if degree == 1:
        return True

    for d in range(1, degree // 2 + 1):
        for lower in itertools.product(range(kind.MOD), repeat=d):
            candidate = Polynomial([*lower, 1], kind)
            if (poly % candidate).is_zero():
                return False
    return True
