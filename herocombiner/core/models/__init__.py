"""Data models for herocombiner.

This package contains all Pydantic models used across the system:
- hero.py: Parsed hero descriptors and synthesized combinations
- pipeline.py: Pipeline status and run summaries
"""

from .hero import Hero, SynthesizedHero
from .pipeline import PipelineStatus, PipelineResult

__all__ = [
    # Heroes
    "Hero",
    "SynthesizedHero",
    # Pipeline
    "PipelineStatus",
    "PipelineResult",
]
