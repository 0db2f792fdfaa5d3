#!/usr/bin/env python3
"""
Polynomials of the form sum(a_i * x^i) over any coefficient type.

Provides:
- arithmetic (+, -, *, /, %);
- division with remainder;
- exponentiation by squaring and Horner evaluation;
- human-readable formatting.

Coefficients only need ``+ - * /`` and comparison with ``0``; ints, floats,
fractions and ModInt residues all work. Every result is normalized, i.e.
trailing zero coefficients are dropped.
"""

import numbers
from fractions import Fraction
from typing import Iterable, Optional, Tuple

from .modint import ModInt


def divide_coefficients(a, b):
    """Divide two coefficients, keeping integer arithmetic exact."""
    if isinstance(a, int) and isinstance(b, int):
        if b == 0:
            raise ZeroDivisionError("Division by zero coefficient")
        return a // b if a % b == 0 else Fraction(a, b)
    return a / b


def _infer_kind(coeffs) -> type:
    """Coefficient type of a sequence: the first non-int type, else int."""
    for c in coeffs:
        if type(c) not in (int, bool):
            return type(c)
    return int


def _is_scalar(value) -> bool:
    return isinstance(value, (numbers.Number, ModInt))


class Polynomial:
    """
    A normalized polynomial; ``coeffs[i]`` is the coefficient of ``x^i``.

    The zero polynomial has no coefficients and degree -1. ``kind`` records
    the coefficient type so that, for example, the zero polynomial over
    ``Z_5`` still yields ``Z_5`` zeros.
    """

    __slots__ = ("coeffs", "kind")

    def __init__(self, coeffs: Iterable = (), kind: Optional[type] = None):
        coeffs = list(coeffs)
        if kind is None:
            kind = _infer_kind(coeffs)
        coeffs = [c if isinstance(c, kind) else kind(c) for c in coeffs]
        while coeffs and coeffs[-1] == 0:
            coeffs.pop()
        self.coeffs: Tuple = tuple(coeffs)
        self.kind = kind

    @classmethod
    def constant(cls, value) -> "Polynomial":
        return cls([value])

    @classmethod
    def _make(cls, coeffs, fallback_kind: type) -> "Polynomial":
        """Build a result, inferring its kind unless it came out empty."""
        coeffs = list(coeffs)
        kind = _infer_kind(coeffs)
        if kind is int and fallback_kind is not int:
            kind = fallback_kind
        return cls(coeffs, kind if kind is not int else None)

    @property
    def zero(self):
        return self.kind(0)

    @property
    def one(self):
        return self.kind(1)

    def degree(self) -> int:
        """Degree of the polynomial; -1 for the zero polynomial."""
        return len(self.coeffs) - 1

    def is_zero(self) -> bool:
        return not self.coeffs

    def leading_coefficient(self):
        return self.coeffs[-1] if self.coeffs else self.zero

    def __getitem__(self, idx: int):
        """Coefficient of ``x^idx``; zero outside the stored range."""
        if idx < 0 or idx >= len(self.coeffs):
            return self.zero
        return self.coeffs[idx]

    def _coerce(self, other) -> Optional["Polynomial"]:
        if isinstance(other, Polynomial):
            return other
        if _is_scalar(other):
            return Polynomial.constant(other)
        return None

    def _result_kind(self, other: "Polynomial") -> type:
        return self.kind if self.kind is not int else other.kind

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        size = max(len(self.coeffs), len(other.coeffs))
        return Polynomial._make(
            (self[i] + other[i] for i in range(size)), self._result_kind(other)
        )

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        size = max(len(self.coeffs), len(other.coeffs))
        return Polynomial._make(
            (self[i] - other[i] for i in range(size)), self._result_kind(other)
        )

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __neg__(self):
        return Polynomial._make((-c for c in self.coeffs), self.kind)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        kind = self._result_kind(other)
        if not self.coeffs or not other.coeffs:
            return Polynomial((), kind)
        result = [kind(0)] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            for j, b in enumerate(other.coeffs):
                result[i + j] = result[i + j] + a * b
        return Polynomial._make(result, kind)

    __rmul__ = __mul__

    def divmod(self, divisor: "Polynomial") -> Tuple["Polynomial", "Polynomial"]:
        """
        Division with remainder.

        Returns ``(quotient, remainder)`` such that
        ``self == divisor * quotient + remainder`` and
        ``remainder.degree() < divisor.degree()``.

        Raises:
            ZeroDivisionError: when dividing by the zero polynomial.
        """
        divisor = self._coerce(divisor)
        if divisor is None:
            raise TypeError("Polynomial can only be divided by a polynomial or scalar")
        if not divisor.coeffs:
            raise ZeroDivisionError("Division by zero polynomial")

        kind = self._result_kind(divisor)
        remainder = list(self.coeffs)
        divisor_degree = divisor.degree()
        lead = divisor.coeffs[-1]
        quotient = [kind(0)] * max(0, len(remainder) - divisor_degree)

        while remainder and len(remainder) - 1 >= divisor_degree:
            diff = len(remainder) - 1 - divisor_degree
            factor = divide_coefficients(remainder[-1], lead)
            quotient[diff] = factor
            for i, c in enumerate(divisor.coeffs[:-1]):
                remainder[diff + i] = remainder[diff + i] - factor * c
            # leading term cancels
            remainder.pop()
            while remainder and remainder[-1] == 0:
                remainder.pop()

        return Polynomial._make(quotient, kind), Polynomial._make(remainder, kind)

    def __divmod__(self, divisor):
        return self.divmod(divisor)

    def __truediv__(self, divisor):
        return self.divmod(divisor)[0]

    def __floordiv__(self, divisor):
        return self.divmod(divisor)[0]

    def __mod__(self, divisor):
        return self.divmod(divisor)[1]

    def pow(self, exponent: int) -> "Polynomial":
        """Raise to a non-negative integer power by repeated squaring."""
        if exponent < 0:
            raise ValueError("Polynomial exponent must be non-negative")
        result = Polynomial.constant(self.one)
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

    def evaluate(self, x):
        """Value of the polynomial at ``x`` by Horner's rule."""
        result = self.zero * x
        for c in reversed(self.coeffs):
            result = result * x + c
        return result

    __call__ = evaluate

    # ------------------------------------------------------------------
    # Comparison and formatting
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.coeffs == other.coeffs

    def __hash__(self):
        return hash(self.coeffs)

    def __repr__(self):
        return f"Polynomial({list(self.coeffs)!r})"

    def __str__(self):
        """Highest power first, e.g. ``3*x^2 + 2*x + 1``."""
        terms = []
        for i in range(self.degree(), -1, -1):
            c = self.coeffs[i]
            if c == 0:
                continue
            if i == 0:
                terms.append(str(c))
                continue
            term = "" if c == 1 else f"{c}*"
            term += "x"
            if i > 1:
                term += f"^{i}"
            terms.append(term)
        return " + ".join(terms) if terms else "0"
