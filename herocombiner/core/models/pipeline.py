"""Pipeline status and result models."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class PipelineStatus(str, Enum):
    """Lifecycle of a combination run."""

    IDLE = "idle"
    RUNNING = "running"
    FAILED = "failed"


class PipelineResult(BaseModel):
    """Summary of a completed combination run."""

    hero_count: int
    max_size: int
    file_names: list[str] = Field(default_factory=list)
    archive_path: Path | None = None
    archive_size: int = 0

    @property
    def combination_count(self) -> int:
        return len(self.file_names)
