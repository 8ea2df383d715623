"""Small integer helpers and a demonstration command."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def add(a: int, b: int) -> int:
    """Return the sum of ``a`` and ``b``."""
    return a + b


def multiply(a: int, b: int) -> int:
    """Return the product of ``a`` and ``b``."""
    return a * b


def factorial(n: int) -> int:
    """Return ``n!``; any ``n`` of 1 or less gives 1."""
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Print a short demonstration of the helpers."""
    del argv
    a, b = 5, 3
    out = sys.stdout
    out.write("Math Utils Example\n")
    out.write("==================\n\n")
    out.write(f"Addition: {a} + {b} = {add(a, b)}\n")
    out.write(f"Multiplication: {a} * {b} = {multiply(a, b)}\n")
    out.write(f"Factorial of {a} = {factorial(a)}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())