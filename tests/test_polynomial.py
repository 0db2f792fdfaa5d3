"""
Tests for polynomial arithmetic.

Covers normalization, addition, subtraction, multiplication, division with
remainder, exponentiation, evaluation and formatting, over integer, float,
rational and Z_p coefficients.
"""

from fractions import Fraction

import pytest

from polycalc.algebra import Polynomial, modint

Z5 = modint(5)


class TestPolynomialBasics:
    """Construction, degree and coefficient access."""

    def test_normalization_drops_trailing_zeros(self):
        """Leading (highest power) zeros are removed."""
        p = Polynomial([1, 2, 0, 0])
        assert p.coeffs == (1, 2)
        assert p.degree() == 1

    def test_zero_polynomial(self):
        """The zero polynomial has no coefficients and degree -1."""
        assert Polynomial([]).degree() == -1
        assert Polynomial([0, 0]).degree() == -1
        assert Polynomial([0]).is_zero()

    def test_constant(self):
        """Constants have degree 0."""
        assert Polynomial.constant(7).degree() == 0
        assert Polynomial.constant(0).degree() == -1

    def test_index_out_of_range_is_zero(self):
        """Coefficients outside the stored range read as zero."""
        p = Polynomial([1, 2])
        assert p[0] == 1
        assert p[5] == 0
        assert p[-1] == 0

    def test_kind_is_kept_for_zero_polynomial(self):
        """A zero polynomial over Z_5 still yields Z_5 zeros."""
        p = Polynomial([0, 0], Z5)
        assert p.kind is Z5
        assert p[0].value == 0

    def test_coefficients_converted_to_kind(self):
        """Ints mixed with residues are converted to the field."""
        p = Polynomial([Z5(2), 0, 6])
        assert all(isinstance(c, Z5) for c in p.coeffs)
        assert p[2].value == 1

    def test_non_integral_coefficients_rejected_over_z5(self):
        """1/2 is not silently truncated to a residue."""
        with pytest.raises(TypeError):
            Polynomial([Fraction(1, 2)], Z5)


class TestPolynomialEquality:
    """Equality and hashing."""

    def test_equal_polynomials_hash_equal(self):
        """Equal polynomials land in the same set slot."""
        pairs = [
            (Polynomial([1, 2]), Polynomial([1, 2, 0])),
            (Polynomial([Z5(1), Z5(2)]), Polynomial([1, 2])),
            (Polynomial([1.0, 2.0]), Polynomial([1, 2])),
            (Polynomial([Fraction(2, 2)]), Polynomial([1])),
        ]
        for a, b in pairs:
            assert a == b
            assert hash(a) == hash(b)
            assert len({a, b}) == 1

    def test_non_canonical_coefficients_differ(self):
        """A residue equals only its canonical int coefficient."""
        assert Polynomial([Z5(1)]) != Polynomial([6])
        assert len({Polynomial([Z5(1)]), Polynomial([6])}) == 2

    def test_not_equal_to_scalars(self):
        """A constant polynomial is not the scalar itself."""
        assert Polynomial([2]) != 2
        assert Polynomial.constant(2) == Polynomial([2])


class TestPolynomialAddition:
    """Addition of polynomials."""

    def test_regular_polynomials(self):
        """(1 + 2x) + (3 + 4x) = 4 + 6x."""
        result = Polynomial([1, 2]) + Polynomial([3, 4])
        assert result.coeffs == (4, 6)

    def test_different_degrees(self):
        """(1 + 2x + 3x^2) + (4 + 5x) = 5 + 7x + 3x^2."""
        result = Polynomial([1, 2, 3]) + Polynomial([4, 5])
        assert result.coeffs == (5, 7, 3)

    def test_cancellation_normalizes(self):
        """(1 + 2x) + (3 - 2x) = 4."""
        result = Polynomial([1, 2]) + Polynomial([3, -2])
        assert result.degree() == 0
        assert result[0] == 4

    def test_with_zero(self):
        """p + 0 = p."""
        p = Polynomial([1, 2, 3])
        assert p + Polynomial([]) == p

    def test_float_coefficients(self):
        """(1 + 2x) + (3 + 4x) with doubles."""
        result = Polynomial([1.0, 2.0]) + Polynomial([3.0, 4.0])
        assert result.coeffs == pytest.approx((4.0, 6.0))

    def test_in_place(self):
        """+= rebinds to the sum."""
        p = Polynomial([1])
        p += Polynomial([0, 1])
        assert p.coeffs == (1, 1)

    def test_scalar(self):
        """Scalars act as constant polynomials."""
        assert (Polynomial([1, 1]) + 2).coeffs == (3, 1)
        assert (2 + Polynomial([1, 1])).coeffs == (3, 1)

    def test_over_z5(self):
        """(3 + 4x) + (2 + x) = 0 over Z_5."""
        result = Polynomial([3, 4], Z5) + Polynomial([2, 1], Z5)
        assert result.is_zero()


class TestPolynomialSubtraction:
    """Subtraction of polynomials."""

    def test_regular_polynomials(self):
        """(5 + 7x + 3x^2) - (1 + 2x) = 4 + 5x + 3x^2."""
        result = Polynomial([5, 7, 3]) - Polynomial([1, 2])
        assert result.coeffs == (4, 5, 3)

    def test_equal_polynomials(self):
        """p - p = 0."""
        p = Polynomial([1, 2, 3])
        assert (p - p).degree() == -1

    def test_from_zero(self):
        """0 - (1 + 2x) = -1 - 2x."""
        result = Polynomial([]) - Polynomial([1, 2])
        assert result.coeffs == (-1, -2)

    def test_reflected_scalar(self):
        """1 - x = 1 + (-1)x."""
        assert (1 - Polynomial([0, 1])).coeffs == (1, -1)

    def test_negation(self):
        """-p flips every sign."""
        assert (-Polynomial([1, -2])).coeffs == (-1, 2)

    def test_over_z5(self):
        """(3 + 4x) - (2 + x) = 1 + 3x over Z_5."""
        result = Polynomial([3, 4], Z5) - Polynomial([2, 1], Z5)
        assert [c.value for c in result.coeffs] == [1, 3]


class TestPolynomialMultiplication:
    """Multiplication of polynomials."""

    def test_regular_polynomials(self):
        """(1 + 2x)(3 + 4x) = 3 + 10x + 8x^2."""
        result = Polynomial([1, 2]) * Polynomial([3, 4])
        assert result.coeffs == (3, 10, 8)

    def test_by_zero(self):
        """p * 0 = 0."""
        assert (Polynomial([1, 2]) * Polynomial([])).is_zero()

    def test_by_constant(self):
        """(1 + 2x) * 3 = 3 + 6x."""
        assert (Polynomial([1, 2]) * Polynomial.constant(3)).coeffs == (3, 6)
        assert (3 * Polynomial([1, 2])).coeffs == (3, 6)

    def test_difference_of_squares(self):
        """(x - 1)(x + 1) = x^2 - 1."""
        result = Polynomial([-1, 1]) * Polynomial([1, 1])
        assert result.coeffs == (-1, 0, 1)

    def test_over_z5_wraps(self):
        """(3 + 4x)(2 + x) = 1 + x + 4x^2 over Z_5."""
        result = Polynomial([3, 4], Z5) * Polynomial([2, 1], Z5)
        assert [c.value for c in result.coeffs] == [1, 1, 4]


class TestPolynomialDivision:
    """Division with remainder."""

    def test_regular_polynomials(self):
        """(x^2 - 4) / (x - 2) = x + 2, remainder 0."""
        quotient, remainder = Polynomial([-4, 0, 1]).divmod(Polynomial([-2, 1]))
        assert quotient.degree() == 1
        assert quotient[0] == 2
        assert quotient[1] == 1
        assert remainder.degree() == -1
        assert remainder.coeffs == ()

    def test_division_with_remainder(self):
        """(1 + x + x^2) / (1 + x) = x, remainder 1."""
        quotient, remainder = Polynomial([1, 1, 1]).divmod(Polynomial([1, 1]))
        assert quotient.coeffs == (0, 1)
        assert remainder.degree() == 0
        assert remainder[0] == 1

    def test_division_by_higher_degree(self):
        """Quotient is 0 and the dividend is the remainder."""
        dividend = Polynomial([1, 2])
        quotient, remainder = dividend.divmod(Polynomial([3, 4, 5]))
        assert quotient.degree() == -1
        assert remainder == dividend

    def test_division_by_zero(self):
        """Dividing by the zero polynomial raises."""
        with pytest.raises(ZeroDivisionError, match="Division by zero polynomial"):
            Polynomial([1, 2, 3]).divmod(Polynomial([]))

    def test_zero_divided_by_polynomial(self):
        """0 / p = 0 remainder 0."""
        quotient, remainder = Polynomial([]).divmod(Polynomial([1, 2]))
        assert quotient.is_zero()
        assert remainder.is_zero()

    def test_operators(self):
        """/ gives the quotient and % the remainder."""
        assert (Polynomial([-4, 0, 1]) / Polynomial([-2, 1])).coeffs == (2, 1)
        assert (Polynomial([1, 1, 1]) % Polynomial([1, 1])).coeffs == (1,)
        assert divmod(Polynomial([1, 1, 1]), Polynomial([1, 1]))[1].coeffs == (1,)

    def test_inexact_integer_division_is_rational(self):
        """(1 + x) / 2x gives the rational quotient 1/2."""
        quotient, remainder = Polynomial([1, 1]).divmod(Polynomial([0, 2]))
        assert quotient.coeffs == (Fraction(1, 2),)
        assert remainder.coeffs == (1,)

    def test_division_identity_over_z5(self):
        """a == b * q + r and deg r < deg b over Z_5."""
        a = Polynomial([1, 2, 3, 4, 1], Z5)
        b = Polynomial([2, 0, 3], Z5)
        q, r = a.divmod(b)
        assert b * q + r == a
        assert r.degree() < b.degree()
        assert q.kind is Z5 and r.kind is Z5


class TestPolynomialPowerAndEvaluation:
    """Exponentiation and Horner evaluation."""

    def test_power(self):
        """(1 + x)^3 = 1 + 3x + 3x^2 + x^3."""
        assert Polynomial([1, 1]).pow(3).coeffs == (1, 3, 3, 1)
        assert (Polynomial([1, 1]) ** 2).coeffs == (1, 2, 1)

    def test_power_zero_is_one(self):
        """p^0 = 1, keeping the coefficient field."""
        result = Polynomial([3, 4], Z5).pow(0)
        assert result.degree() == 0
        assert result[0] == Z5(1)

    def test_negative_power_rejected(self):
        """Polynomials have no negative powers."""
        with pytest.raises(ValueError):
            Polynomial([1, 1]).pow(-1)

    def test_evaluate(self):
        """3x^2 + 2x + 1 at x = 2 is 17."""
        p = Polynomial([1, 2, 3])
        assert p.evaluate(2) == 17
        assert p(0) == 1

    def test_evaluate_over_z5(self):
        """x^2 + 2 at x = 1 is 3 in Z_5; zero polynomial evaluates to 0."""
        assert Polynomial([2, 0, 1], Z5).evaluate(Z5(1)) == Z5(3)
        assert Polynomial([], Z5).evaluate(Z5(4)) == Z5(0)


class TestPolynomialFormatting:
    """Human-readable output."""

    def test_full_polynomial(self):
        """Highest power first with explicit coefficients."""
        assert str(Polynomial([1, 2, 3])) == "3*x^2 + 2*x + 1"

    def test_unit_coefficients_and_gaps(self):
        """Coefficient 1 is omitted and zero terms are skipped."""
        assert str(Polynomial([2, 0, 1])) == "x^2 + 2"
        assert str(Polynomial([0, 1])) == "x"

    def test_zero(self):
        """The zero polynomial prints as 0."""
        assert str(Polynomial([])) == "0"

    def test_negative_coefficients(self):
        """Negative coefficients are printed as they are."""
        assert str(Polynomial([-4, 0, 1])) == "x^2 + -4"

    def test_over_z5(self):
        """Residues print as their value."""
        assert str(Polynomial([3, 4], Z5)) == "4*x + 3"
