#!/usr/bin/env python3
"""
Integers modulo a prime P.

``modint(p)`` returns the residue class type for ``p``; instances hold a
value in ``[0, p)`` and support full field arithmetic. The inverse is
computed with Fermat's little theorem, so ``p`` must be prime.
"""

import numbers
from functools import lru_cache
from typing import Optional, Type

from .errors import ModulusMismatchError


class ModInt:
    """A residue modulo ``MOD``. Use :func:`modint` to obtain a concrete type."""

    __slots__ = ("value",)

    MOD: Optional[int] = None

    def __init__(self, v=0):
        if self.MOD is None:
            raise TypeError("ModInt has no modulus; create a type with modint(p)")
        if isinstance(v, ModInt):
            v = self._coerce(v)
        elif not isinstance(v, numbers.Integral):
            raise TypeError(f"Residue must be an integer, got {type(v).__name__}")
        self.value = int(v) % self.MOD

    def _coerce(self, other) -> int:
        """Residue of ``other`` in this ring, or NotImplemented for foreign types."""
        if isinstance(other, ModInt):
            if other.MOD != self.MOD:
                raise ModulusMismatchError(
                    f"Cannot combine residues modulo {self.MOD} and {other.MOD}"
                )
            return other.value
        if isinstance(other, int):
            return other % self.MOD
        return NotImplemented

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return type(self)(self.value + value)

    __radd__ = __add__

    def __sub__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return type(self)(self.value - value)

    def __rsub__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return type(self)(value - self.value)

    def __mul__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return type(self)(self.value * value)

    __rmul__ = __mul__

    def __truediv__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self * type(self)(value).inv()

    def __rtruediv__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return type(self)(value) * self.inv()

    def __neg__(self):
        return type(self)(-self.value)

    def __pos__(self):
        return self

    def pow(self, exp: int) -> "ModInt":
        """Raise to an integer power; negative exponents use the inverse."""
        if exp < 0:
            return self.inv().pow(-exp)
        return type(self)(pow(self.value, exp, self.MOD))

    def __pow__(self, exp):
        if not isinstance(exp, int):
            return NotImplemented
        return self.pow(exp)

    def inv(self) -> "ModInt":
        """Multiplicative inverse, ``value ** (MOD - 2)``."""
        if self.value == 0:
            raise ZeroDivisionError(f"0 has no inverse modulo {self.MOD}")
        return self.pow(self.MOD - 2)

    # ------------------------------------------------------------------
    # Comparison and conversion
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if isinstance(other, ModInt):
            return self.MOD == other.MOD and self.value == other.value
        if isinstance(other, int):
            # ints in [0, MOD) only
            return self.value == other
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __bool__(self):
        return self.value != 0

    def __int__(self):
        return self.value

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"{type(self).__name__}({self.value})"


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    d = 3
    while d * d <= n:
        if n % d == 0:
            return False
        d += 2
    return True


def modint(p: int) -> Type[ModInt]:
    """Return the residue class type ``Z_p``; the same type for the same ``p``."""
    if not isinstance(p, int) or isinstance(p, bool):
        raise TypeError(f"Modulus must be an integer, got {type(p).__name__}")
    if not is_prime(p):
        raise ValueError(f"Modulus must be a prime number, got {p}")
    return _residue_class(p)


@lru_cache(maxsize=None)
def _residue_class(p: int) -> Type[ModInt]:
    return type(f"Z{p}", (ModInt,), {"__slots__": (), "MOD": p})
