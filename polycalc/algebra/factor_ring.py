#!/usr/bin/env python3
"""
Elements of the quotient ring F[x]/(f(x)).

With an irreducible modulus f over Z_p the quotient ring is the field
extension of degree deg(f); every nonzero element is then invertible.
"""

from typing import Tuple

from .errors import ModulusMismatchError, NotInvertibleError
from .polynomial import Polynomial, divide_coefficients


class FactorRingElement:
    """A polynomial reduced modulo ``mod_poly``."""

    __slots__ = ("poly", "mod_poly")

    def __init__(self, poly: Polynomial, mod_poly: Polynomial):
        self.mod_poly = mod_poly
        self.poly = poly % mod_poly

    def _check_same_ring(self, other: "FactorRingElement", operation: str) -> None:
        if self.mod_poly != other.mod_poly:
            raise ModulusMismatchError(
                f"Different moduli in the quotient ring during {operation}"
            )

    def __add__(self, other: "FactorRingElement") -> "FactorRingElement":
        if not isinstance(other, FactorRingElement):
            return NotImplemented
        self._check_same_ring(other, "addition")
        return FactorRingElement(self.poly + other.poly, self.mod_poly)

    def __sub__(self, other: "FactorRingElement") -> "FactorRingElement":
        if not isinstance(other, FactorRingElement):
            return NotImplemented
        self._check_same_ring(other, "subtraction")
        return FactorRingElement(self.poly - other.poly, self.mod_poly)

    def __mul__(self, other: "FactorRingElement") -> "FactorRingElement":
        if not isinstance(other, FactorRingElement):
            return NotImplemented
        self._check_same_ring(other, "multiplication")
        return FactorRingElement(self.poly * other.poly, self.mod_poly)

    def __truediv__(self, other: "FactorRingElement") -> "FactorRingElement":
        if not isinstance(other, FactorRingElement):
            return NotImplemented
        self._check_same_ring(other, "division")
        return self * other.inv()

    @staticmethod
    def extended_gcd(
        a: Polynomial, b: Polynomial
    ) -> Tuple[Polynomial, Polynomial, Polynomial]:
        """Extended Euclid: return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
        if b.is_zero():
            return a, Polynomial.constant(a.one), Polynomial((), a.kind)
        q, r = a.divmod(b)
        g, x, y = FactorRingElement.extended_gcd(b, r)
        return g, y, x - q * y

    def inv(self) -> "FactorRingElement":
        """
        Multiplicative inverse in the quotient ring.

        Raises:
            NotInvertibleError: if gcd(poly, mod_poly) is not a nonzero constant.
        """
        g, x, _ = self.extended_gcd(self.poly, self.mod_poly)
        if g.degree() != 0:
            raise NotInvertibleError("The inverse element does not exist in this quotient ring.")
        inv_g = divide_coefficients(g.one, g.coeffs[0])
        return FactorRingElement(x * Polynomial.constant(inv_g), self.mod_poly)

    def pow(self, exponent: int) -> "FactorRingElement":
        """Raise to an integer power; negative exponents invert first."""
        if exponent < 0:
            return self.inv().pow(-exponent)
        result = FactorRingElement(Polynomial.constant(self.mod_poly.one), self.mod_poly)
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __eq__(self, other):
        if not isinstance(other, FactorRingElement):
            return NotImplemented
        return self.mod_poly == other.mod_poly and self.poly == other.poly

    def __hash__(self):
        return hash((self.poly, self.mod_poly))

    def __repr__(self):
        return f"FactorRingElement({self.poly!r}, {self.mod_poly!r})"

    def __str__(self):
        return str(self.poly)
