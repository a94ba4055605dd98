"""
Manga Catalog - keeps a work's chapter catalog in sync with its repository.

This package reconciles on every run:
- Chapter folders currently on disk
- The work configuration (metadata, locked chapters)
- The previously persisted catalog (views, upload dates, lock history)
"""

__version__ = "0.1.0"

# Make key components available at package level
from manga_catalog.core import Catalog, ChapterRecord, WorkConfig
from manga_catalog.coordinators import CatalogGenerator, CatalogReconciler

__all__ = [
    "Catalog",
    "ChapterRecord",
    "WorkConfig",
    "CatalogGenerator",
    "CatalogReconciler",
]
