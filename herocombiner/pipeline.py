"""End-to-end combination pipeline.

    validate -> parse files -> combine -> pack archive -> save

The pipeline owns its status: RUNNING while a run is in progress, back to
IDLE once the archive is written, FAILED if anything raised.
"""

import asyncio
import logging
from pathlib import Path
from typing import Callable

from .archive import ArchiveAssembler, save_archive
from .combinations import MIN_GROUP_SIZE, count_combinations, create_combinations
from .core.exceptions import InvalidInputError
from .core.models import Hero, PipelineResult, PipelineStatus, SynthesizedHero
from .parser import parse_files
from .synthesis import combine_heroes


logger = logging.getLogger(__name__)

# Called with each new status
StatusCallback = Callable[[PipelineStatus], None]


def validate_request(file_count: int, max_size: int) -> None:
    """Reject runs the generator can't do anything useful with.

    Raises:
        InvalidInputError: Fewer than two files, or max_size below two
    """
    if file_count < MIN_GROUP_SIZE:
        raise InvalidInputError(f"Invalid number of files, has to be >= {MIN_GROUP_SIZE}")
    if max_size < MIN_GROUP_SIZE:
        raise InvalidInputError(f"Invalid max combinations, has to be >= {MIN_GROUP_SIZE}")


def synthesize_all(heroes: list[Hero], max_size: int) -> list[SynthesizedHero]:
    """Synthesize a descriptor for every group of 2..max_size heroes."""
    return create_combinations(heroes, max_size, combine_heroes)


def build_archive(descriptors: list[SynthesizedHero], compression: str = "deflated") -> bytes:
    assembler = ArchiveAssembler(compression=compression)
    for descriptor in descriptors:
        assembler.add_text(descriptor.file_name, descriptor.content)
    return assembler.to_bytes()


class CombinationPipeline:
    """Runs one batch of hero combinations at a time.

    Args:
        compression: Zip compression method name
        on_status: Optional callback notified on every status change
    """

    def __init__(
        self,
        compression: str = "deflated",
        on_status: StatusCallback | None = None,
    ) -> None:
        self.compression = compression
        self._on_status = on_status
        self._status = PipelineStatus.IDLE

    @property
    def status(self) -> PipelineStatus:
        return self._status

    def _set_status(self, status: PipelineStatus) -> None:
        self._status = status
        logger.debug(f"[Pipeline] Status -> {status.value}")
        if self._on_status:
            self._on_status(status)

    async def run_async(
        self,
        paths: list[Path | str],
        max_size: int,
        output: Path | str | None = None,
    ) -> PipelineResult:
        """Parse, combine and pack `paths`.

        Validation happens before the status changes, so a rejected request
        leaves the pipeline IDLE.

        Args:
            paths: Descriptor files, at least two
            max_size: Largest group size, at least two
            output: Archive path; when None, nothing is written

        Returns:
            PipelineResult describing the run

        Raises:
            InvalidInputError: If the request is rejected
            OSError: If a file can't be read or the archive can't be written
        """
        validate_request(len(paths), max_size)

        self._set_status(PipelineStatus.RUNNING)
        try:
            heroes = await parse_files(paths)
            expected = count_combinations(len(heroes), max_size)
            logger.info(
                f"[Pipeline] Combining {len(heroes)} heroes up to size {max_size} "
                f"({expected} combinations)"
            )
            descriptors = synthesize_all(heroes, max_size)

            archive_path = None
            archive_size = 0
            if output is not None:
                data = build_archive(descriptors, self.compression)
                archive_path = save_archive(data, output)
                archive_size = len(data)
        except Exception:
            self._set_status(PipelineStatus.FAILED)
            raise

        self._set_status(PipelineStatus.IDLE)
        return PipelineResult(
            hero_count=len(heroes),
            max_size=max_size,
            file_names=[d.file_name for d in descriptors],
            archive_path=archive_path,
            archive_size=archive_size,
        )

    def run(
        self,
        paths: list[Path | str],
        max_size: int,
        output: Path | str | None = None,
    ) -> PipelineResult:
        """Synchronous wrapper around run_async."""
        return asyncio.run(self.run_async(paths, max_size, output))
