"""Command-line interface for herocombiner."""

from .app import app

__all__ = ["app"]
