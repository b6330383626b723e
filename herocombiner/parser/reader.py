"""Reading descriptor files from disk."""

import asyncio
import logging
from pathlib import Path

from ..core.models import Hero
from .grammar import parse_hero


logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


def parse_file(path: Path | str, encoding: str = DEFAULT_ENCODING) -> Hero:
    """Read one descriptor file and parse it.

    Raises:
        OSError: If the file can't be read
    """
    path = Path(path)
    text = path.read_text(encoding=encoding)
    return parse_hero(text, source=str(path))


async def parse_file_async(path: Path | str, encoding: str = DEFAULT_ENCODING) -> Hero:
    """Async version of parse_file; the read runs in a worker thread."""
    return await asyncio.to_thread(parse_file, path, encoding)


async def parse_files(
    paths: list[Path | str],
    encoding: str = DEFAULT_ENCODING,
) -> list[Hero]:
    """Parse many descriptor files concurrently.

    Each file is an independent task. The returned list follows the order
    of `paths` and is only available once every file has been parsed.

    Args:
        paths: Descriptor files to read
        encoding: Text encoding of the files

    Returns:
        One Hero per path, in input order
    """
    logger.info(f"[Parser] Parsing {len(paths)} files")
    heroes = await asyncio.gather(*(parse_file_async(p, encoding) for p in paths))
    return list(heroes)
