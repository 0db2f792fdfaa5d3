#!/usr/bin/env python3
"""
Interactive calculator sessions.

Each session reads its operands from the prompter, offers a numbered menu
and prints one result. Arithmetic failures are reported inline; input
failures (EOF, non-numeric tokens) propagate to the caller.
"""

from ..algebra import (
    AlgebraError,
    FactorRingElement,
    is_irreducible,
    modint,
)
from .prompts import Prompter, read_polynomial, read_polynomial_restricted

FACTOR_RING_MENU = (
    "\nChoose operation:\n"
    "1. A + B\n"
    "2. A - B\n"
    "3. A * B\n"
    "4. A / B\n"
    "5. Inverse element A\n"
    "6. A^n (exponentiation)\n"
    "Your choice: "
)

POLYNOMIAL_MENU = (
    "\nChoose operation:\n"
    "1. A + B\n"
    "2. A - B\n"
    "3. A * B\n"
    "4. A / B (quotient and remainder)\n"
    "5. A^n (exponentiation)\n"
    "6. A(x) (evaluation)\n"
    "Your choice: "
)


def run_factor_ring(p: int, prompter: Prompter):
    """Quotient ring session over Z_p[x]/(f(x)). Returns the result or None."""
    field = modint(p)
    prompter.write(f"\nFactor ring operations over field Z{p}:\n")

    while True:
        prompter.write("Enter the polynomial f(x) (coefficients as constant term first):\n")
        f = read_polynomial(prompter, field)
        if is_irreducible(f):
            break
        prompter.write(
            f"The polynomial f(x) is reducible over Z{p}. "
            "Please enter an irreducible polynomial.\n"
        )

    n = f.degree()
    prompter.write(f"\nYou entered a polynomial f(x) = {f} degree {n}.\n")

    prompter.write("\nEnter the first element of the quotient ring:\n")
    a = read_polynomial_restricted(prompter, field, n)
    prompter.write("Enter the second element of the quotient ring:\n")
    b = read_polynomial_restricted(prompter, field, n)

    elem1 = FactorRingElement(a, f)
    elem2 = FactorRingElement(b, f)
    prompter.write(f"\nElement A = {elem1}\n")
    prompter.write(f"Element B = {elem2}\n")

    op = prompter.read_int(FACTOR_RING_MENU)
    result = None
    if op == 1:
        result = elem1 + elem2
        prompter.write(f"\nA + B = {result}\n")
    elif op == 2:
        result = elem1 - elem2
        prompter.write(f"\nA - B = {result}\n")
    elif op == 3:
        result = elem1 * elem2
        prompter.write(f"\nA * B = {result}\n")
    elif op == 4:
        try:
            result = elem1 / elem2
            prompter.write(f"\nA / B = {result}\n")
        except AlgebraError as e:
            prompter.write(f"\nDivision error: {e}\n")
    elif op == 5:
        try:
            result = elem1.inv()
            prompter.write(f"\nInverse element A = {result}\n")
        except AlgebraError as e:
            prompter.write(f"\nError when calculating the inverse element: {e}\n")
    elif op == 6:
        exponent = prompter.read_int("Enter a non-negative integer power: ")
        try:
            result = elem1.pow(exponent)
            prompter.write(f"\nA^{exponent} = {result}\n")
        except AlgebraError as e:
            prompter.write(f"\nError when calculating the power: {e}\n")
    else:
        prompter.write("\nUnknown operation!\n")
    return result


def run_polynomial(p: int, prompter: Prompter):
    """Plain polynomial arithmetic over Z_p. Returns the result or None."""
    field = modint(p)
    prompter.write(f"\nPolynomial operations over field Z{p}:\n")

    prompter.write("Enter the first polynomial A:\n")
    a = read_polynomial(prompter, field)
    prompter.write("Enter the second polynomial B:\n")
    b = read_polynomial(prompter, field)
    prompter.write(f"\nA = {a}\n")
    prompter.write(f"B = {b}\n")

    op = prompter.read_int(POLYNOMIAL_MENU)
    result = None
    if op == 1:
        result = a + b
        prompter.write(f"\nA + B = {result}\n")
    elif op == 2:
        result = a - b
        prompter.write(f"\nA - B = {result}\n")
    elif op == 3:
        result = a * b
        prompter.write(f"\nA * B = {result}\n")
    elif op == 4:
        try:
            result = a.divmod(b)
            prompter.write(f"\nA / B = {result[0]}\nA % B = {result[1]}\n")
        except ZeroDivisionError as e:
            prompter.write(f"\nDivision error: {e}\n")
    elif op == 5:
        exponent = prompter.read_int("Enter a non-negative integer power: ")
        if exponent < 0:
            prompter.write("\nError: the power must be non-negative.\n")
        else:
            result = a.pow(exponent)
            prompter.write(f"\nA^{exponent} = {result}\n")
    elif op == 6:
        x = field(prompter.read_int("Enter the point x: "))
        result = a.evaluate(x)
        prompter.write(f"\nA({x}) = {result}\n")
    else:
        prompter.write("\nUnknown operation!\n")
    return result
