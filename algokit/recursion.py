"""Factorial and Fibonacci, computed iteratively, recursively and by generator."""

from __future__ import annotations

from itertools import islice
from typing import Iterator

_FIB_CACHE = {1: 1, 2: 1}


def factorial_iterative(n: int) -> int:
    """Return ``n!`` by multiplication; 1 for ``n`` below 1."""
    result = 1
    for factor in range(1, n + 1):
        result *= factor
    return result


def factorial_recursive(n: int) -> int:
    """Return ``n!`` recursively; defined for ``n`` of 2 and more."""
    if n < 2:
        raise ValueError("recursive factorial needs n >= 2")
    if n == 2:
        return 2
    return n * factorial_recursive(n - 1)


def fibonacci_list(n: int) -> int:
    """Return the ``n``-th Fibonacci number by growing a list of all of them."""
    if n < 0:
        raise ValueError("n must not be negative")
    sequence = [0, 1]
    for _ in range(1, n):
        sequence.append(sequence[-1] + sequence[-2])
    return sequence[n]


def fibonacci_pair(n: int) -> int:
    """Return the ``n``-th Fibonacci number keeping only the last two; 1 for ``n`` below 2."""
    previous, current = 0, 1
    for _ in range(1, n):
        previous, current = current, previous + current
    return current


def fibonacci_sequence() -> Iterator[int]:
    """Yield the Fibonacci numbers from the second one on: 1, 2, 3, 5, ..."""
    previous, current = 0, 1
    while True:
        previous, current = current, previous + current
        yield current


def fibonacci_closure(n: int) -> int:
    """Return the ``n``-th Fibonacci number drawn from the generator; 0 for ``n`` below 2."""
    if n < 2:
        return 0
    return next(islice(fibonacci_sequence(), n - 2, None))


def fibonacci_recursive(n: int) -> int:
    """Return the ``n``-th Fibonacci number recursively with a shared cache."""
    if n < 1:
        raise ValueError("recursive fibonacci needs n >= 1")
    if n not in _FIB_CACHE:
        _FIB_CACHE[n] = fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)
    return _FIB_CACHE[n]