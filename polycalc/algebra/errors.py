"""Exceptions raised by the algebra package."""


class AlgebraError(ArithmeticError):
    """Base class for algebraic failures that are not plain division by zero."""


class ModulusMismatchError(AlgebraError):
    """Operands live in different rings (different prime or polynomial modulus)."""


class NotInvertibleError(AlgebraError):
    """An element has no multiplicative inverse in its ring."""
