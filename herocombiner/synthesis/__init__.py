"""Descriptor synthesis for hero combinations."""

from .combiner import (
    FILE_EXTENSION,
    combined_name,
    describe_combination,
    combine_heroes,
)

__all__ = [
    "FILE_EXTENSION",
    "combined_name",
    "describe_combination",
    "combine_heroes",
]
