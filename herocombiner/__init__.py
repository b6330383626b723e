"""Herocombiner: generate every combination of a set of hero descriptors."""

__version__ = "0.1.0"
