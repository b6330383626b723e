"""Combination generation.

Enumerates every group of 2..max_size values, smallest groups first. Within
a group size, groups follow the lexicographic order of their index tuples,
so for [X, Y, Z] and max_size 3 the order is:

    (X, Y), (X, Z), (Y, Z), (X, Y, Z)

Members of a group always keep their order from the input list.
"""

import math
from collections.abc import Iterator, Sequence
from typing import Callable, TypeVar


T = TypeVar("T")
U = TypeVar("U")

MIN_GROUP_SIZE = 2


def next_combination(indices: tuple[int, ...], n: int) -> tuple[int, ...] | None:
    """Return the k-combination of range(n) following `indices`, or None.

    Finds the rightmost index that can still move right, bumps it, and
    packs every index after it directly behind it.
    """
    k = len(indices)
    for position in range(k - 1, -1, -1):
        if indices[position] < n - k + position:
            start = indices[position] + 1
            return indices[:position] + tuple(range(start, start + k - position))
    return None


class IndexCombinations:
    """Restartable iterable over the k-combinations of range(n).

    Every iteration starts again from (0, 1, ..., k-1). When k > n there
    is nothing to yield.
    """

    def __init__(self, n: int, k: int) -> None:
        self.n = n
        self.k = k

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        if self.k < 1 or self.k > self.n:
            return
        indices: tuple[int, ...] | None = tuple(range(self.k))
        while indices is not None:
            yield indices
            indices = next_combination(indices, self.n)

    def __len__(self) -> int:
        if self.k < 1 or self.k > self.n:
            return 0
        return math.comb(self.n, self.k)

    def __repr__(self) -> str:
        return f"IndexCombinations(n={self.n}, k={self.k})"


def iter_combinations(values: Sequence[T], max_size: int) -> Iterator[tuple[T, ...]]:
    """Lazily yield every group of 2..max_size values in generation order."""
    for k in range(MIN_GROUP_SIZE, max_size + 1):
        for indices in IndexCombinations(len(values), k):
            yield tuple(values[i] for i in indices)


def create_combinations(
    values: Sequence[T],
    max_size: int,
    transform: Callable[[tuple[T, ...]], U],
) -> list[U]:
    """Apply `transform` to every group of 2..max_size values.

    Arguments aren't validated: fewer than two values simply gives an empty
    list, and sizes above len(values) contribute nothing.

    Args:
        values: Values to combine, in their preferred order
        max_size: Largest group size to generate
        transform: Called once per group, in generation order

    Returns:
        Transformed groups, smallest groups first
    """
    return [transform(group) for group in iter_combinations(values, max_size)]


def count_combinations(n: int, max_size: int) -> int:
    """Number of groups create_combinations produces for n values."""
    return sum(
        len(IndexCombinations(n, k)) for k in range(MIN_GROUP_SIZE, max_size + 1)
    )
