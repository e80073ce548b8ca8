"""Lazy enumeration of k-subsets in lexicographic order."""
from __future__ import annotations

from itertools import islice
from math import comb
from typing import Iterable, Iterator, List, Tuple, TypeVar

T = TypeVar("T")

Subset = Tuple[int, ...]


def combinations(n: int, k: int) -> Iterator[Subset]:
    """Yield every strictly increasing ``k``-tuple of indices in ``[0, n)``.

    Order is lexicographic starting at ``(0, 1, ..., k-1)``. Each call returns
    an independent generator.
    """

    if n < 0 or k < 0:
        raise ValueError(f"n and k must be non-negative, got n={n}, k={k}")
    if k > n:
        raise ValueError(f"Subset size {k} exceeds universe size {n}")

    indices = list(range(k))
    while True:
        yield tuple(indices)
        # rightmost slot not yet at its ceiling n - k + slot
        i = k - 1
        while i >= 0 and indices[i] == i + n - k:
            i -= 1
        if i < 0:
            return
        indices[i] += 1
        for j in range(i + 1, k):
            indices[j] = indices[j - 1] + 1


def count_combinations(n: int, k: int) -> int:
    return comb(n, k)


def chunked(items: Iterable[T], size: int) -> Iterator[List[T]]:
    """Split ``items`` into contiguous ordered batches of at most ``size`` elements."""

    if size < 1:
        raise ValueError("Chunk size must be positive")
    iterator = iter(items)
    while True:
        batch = list(islice(iterator, size))
        if not batch:
            return
        yield batch


__all__ = ["Subset", "combinations", "count_combinations", "chunked"]
