"""Combination generation for herocombiner."""

from .generator import (
    MIN_GROUP_SIZE,
    IndexCombinations,
    next_combination,
    iter_combinations,
    create_combinations,
    count_combinations,
)

__all__ = [
    "MIN_GROUP_SIZE",
    "IndexCombinations",
    "next_combination",
    "iter_combinations",
    "create_combinations",
    "count_combinations",
]
