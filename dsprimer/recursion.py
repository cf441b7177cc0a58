"""Recursive definitions of factorial and the Fibonacci numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from functools import lru_cache


def factorial(n: int) -> int:
    """Return n! for n >= 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return 1
    return n * factorial(n - 1)


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n <= 2:
        return 1
    return _fib(n - 1) + _fib(n - 2)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, counting fibonacci(1) == fibonacci(2) == 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    for k in range(3, n, 500):
        _fib(k)  # warm the cache in steps to keep recursion shallow
    return _fib(n)


def main(argv: Sequence[str] | None = None) -> int:
    """Read n from the arguments or standard input; print n! and fib(n)."""
    args = sys.argv[1:] if argv is None else list(argv)
    text = args[0] if args else sys.stdin.readline()
    n = int(text.strip())
    print(factorial(n))
    print(fibonacci(n))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())