"""CLI commands for herocombiner."""

from . import (
    combine,
    inspect,
    config,
)

__all__ = [
    "combine",
    "inspect",
    "config",
]
