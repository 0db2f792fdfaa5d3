"""Console input helpers for the interactive calculator."""

import sys
from typing import List, Optional, TextIO, Type

from ..algebra import ModInt, Polynomial


class InvalidInputError(ValueError):
    """The user typed something that is not the expected number."""


class Prompter:
    """
    Reads whitespace-separated integers and writes prompts.

    Like a stream extraction, several numbers may be given on one line; each
    read takes the next pending token before asking for more input.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._pending: List[str] = []

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def read_int(self, prompt: Optional[str] = None) -> int:
        if prompt:
            self.write(prompt)
        while not self._pending:
            line = self.stdin.readline()
            if not line:
                raise EOFError("Input ended while waiting for a number")
            self._pending = line.split()
        token = self._pending.pop(0)
        try:
            return int(token)
        except ValueError:
            raise InvalidInputError(f"Expected an integer, got {token!r}") from None


def _read_coefficients(prompter: Prompter, field: Type[ModInt], count: int) -> Polynomial:
    prompter.write("Enter the coefficients (constant term first): ")
    coeffs = [prompter.read_int() for _ in range(count)]
    return Polynomial(coeffs, field)


def read_polynomial(prompter: Prompter, field: Type[ModInt]) -> Polynomial:
    """Read a coefficient count, then that many coefficients."""
    count = prompter.read_int("Enter the number of coefficients: ")
    if count < 0:
        raise InvalidInputError("The number of coefficients cannot be negative")
    return _read_coefficients(prompter, field, count)


def read_polynomial_restricted(
    prompter: Prompter, field: Type[ModInt], max_coeffs: int
) -> Polynomial:
    """Like read_polynomial, re-asking until at most ``max_coeffs`` are requested."""
    while True:
        count = prompter.read_int(f"Enter the number of coefficients (max {max_coeffs}): ")
        if count > max_coeffs:
            prompter.write(
                f"Error: the number of coefficients should not exceed {max_coeffs}.\n"
            )
            continue
        if count < 0:
            raise InvalidInputError("The number of coefficients cannot be negative")
        return _read_coefficients(prompter, field, count)
