"""Fibonacci magnitudes: F(1) = F(2) = 1, F(k) = F(k-1) + F(k-2)."""

from __future__ import annotations


def generate(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers starting ``[1, 1, 2, 3, 5, ...]``.

    Raises ValueError when ``n <= 0``.
    """
    if n <= 0:
        raise ValueError(f"n must be greater than 0, got: {n}")

    if n == 1:
        return [1]

    fib = [1, 1]
    for i in range(2, n):
        fib.append(fib[i - 1] + fib[i - 2])
    return fib
