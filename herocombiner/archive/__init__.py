"""Archive packaging and delivery."""

from .zip_archive import (
    DEFAULT_ARCHIVE_NAME,
    COMPRESSION_METHODS,
    ArchiveAssembler,
    save_archive,
)

__all__ = [
    "DEFAULT_ARCHIVE_NAME",
    "COMPRESSION_METHODS",
    "ArchiveAssembler",
    "save_archive",
]
