"""Descriptor parsing.

grammar.py holds the per-field line scans; reader.py reads files from disk,
concurrently when there are several.
"""

from .grammar import (
    find_schema_header,
    find_name,
    find_coloured_name,
    find_skills,
    parse_hero,
)
from .reader import parse_file, parse_file_async, parse_files

__all__ = [
    # Grammar
    "find_schema_header",
    "find_name",
    "find_coloured_name",
    "find_skills",
    "parse_hero",
    # Files
    "parse_file",
    "parse_file_async",
    "parse_files",
]
