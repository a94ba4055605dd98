"""I/O layer - Data access for persistence and file operations."""

from .catalog_repository import CatalogRepository, CatalogWriteError, ConfigurationError
from .chapter_enumerator import FilesystemChapterEnumerator
from .manifest_reader import ManifestReader

__all__ = [
    "CatalogRepository",
    "CatalogWriteError",
    "ConfigurationError",
    "FilesystemChapterEnumerator",
    "ManifestReader",
]
