#!/usr/bin/env python3
"""
Main entry point for the interactive polynomial calculator.

Usage:
    polycalc ring [--prime P]    quotient ring Z_P[x]/(f(x))
    polycalc poly [--prime P]    polynomial arithmetic over Z_P
"""

import sys
import argparse

from .algebra import modint
from .calculator import InvalidInputError, Prompter, run_factor_ring, run_polynomial

DEFAULT_PRIME = 5

SESSIONS = {
    "ring": run_factor_ring,
    "poly": run_polynomial,
}


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Polynomial calculator over Z_P")
    parser.add_argument('mode', choices=sorted(SESSIONS), help='Calculator session to run')
    parser.add_argument(
        '--prime', '-p', type=int, default=DEFAULT_PRIME,
        help=f'Prime modulus of the coefficient field (default: {DEFAULT_PRIME})',
    )
    return parser.parse_args(argv)


def main(argv=None, stdin=None, stdout=None):
    """Main entry point for the calculator."""
    args = parse_args(argv)

    try:
        modint(args.prime)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    prompter = Prompter(stdin, stdout)
    try:
        SESSIONS[args.mode](args.prime, prompter)
    except (EOFError, InvalidInputError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
