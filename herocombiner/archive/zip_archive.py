"""Zip packaging for synthesized descriptors."""

import io
import logging
import zipfile
from pathlib import Path


logger = logging.getLogger(__name__)

DEFAULT_ARCHIVE_NAME = "combinations.zip"

COMPRESSION_METHODS = {
    "deflated": zipfile.ZIP_DEFLATED,
    "stored": zipfile.ZIP_STORED,
}


class ArchiveAssembler:
    """Collects named text entries and packs them into one zip.

    Adding a name twice replaces the earlier entry.

    Args:
        compression: Key of COMPRESSION_METHODS
    """

    def __init__(self, compression: str = "deflated") -> None:
        if compression not in COMPRESSION_METHODS:
            raise ValueError(
                f"Unknown compression '{compression}'. "
                f"Expected one of: {', '.join(COMPRESSION_METHODS)}"
            )
        self.compression = compression
        self._entries: dict[str, str] = {}

    def add_text(self, name: str, content: str) -> None:
        if name in self._entries:
            logger.warning(f"[Archive] Duplicate entry '{name}', keeping the newer one")
        self._entries[name] = content

    @property
    def names(self) -> list[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def to_bytes(self) -> bytes:
        """Build the zip container in memory."""
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", COMPRESSION_METHODS[self.compression]) as zf:
            for name, content in self._entries.items():
                zf.writestr(name, content.encode("utf-8"))
        data = buffer.getvalue()
        logger.info(f"[Archive] Packed {len(self._entries)} entries ({len(data)} bytes)")
        return data


def save_archive(data: bytes, path: Path | str) -> Path:
    """Write archive bytes to `path`, creating parent directories.

    An existing file at `path` is replaced.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.info(f"[Archive] Wrote {path}")
    return path
