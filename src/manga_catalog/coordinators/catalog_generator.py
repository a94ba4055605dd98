"""Catalog Generator - runs one load, reconcile, persist pass."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from manga_catalog.core import Catalog
from manga_catalog.io import CatalogRepository, FilesystemChapterEnumerator

from .catalog_assembler import CatalogAssembler
from .catalog_reconciler import CatalogReconciler


@dataclass
class GenerationReport:
    """Outcome of a successful run, used for the summary."""

    catalog: Catalog
    catalog_path: Path
    first_time: bool
    has_chapter_changes: bool
    pruned: List[str] = field(default_factory=list)

    @property
    def total_chapters(self) -> int:
        return len(self.catalog.chapters)

    @property
    def locked_chapters(self) -> int:
        return sum(1 for record in self.catalog.chapters.values() if record.locked)

    @property
    def unlocked_chapters(self) -> int:
        return self.total_chapters - self.locked_chapters

    @property
    def special_chapters(self) -> int:
        return sum(1 for record in self.catalog.chapters.values() if record.is_special)

    def summary_lines(self) -> List[str]:
        lines = [
            f"Total chapters: {self.total_chapters}",
            f"Locked chapters: {self.locked_chapters}",
            f"Unlocked chapters: {self.unlocked_chapters}",
        ]
        if self.special_chapters:
            lines.append(f"Oneshot chapters: {self.special_chapters}")
        lines += [
            f"Total work views: {self.catalog.work.views}",
            f"Total chapter views: {self.catalog.total_chapter_views}",
            f"Last updated: {self.catalog.last_updated}",
            f"Last chapter update: {self.catalog.last_chapter_update}",
            f"Type: {self.catalog.work.type}",
        ]
        if self.pruned:
            lines.append(f"Removed locked chapters: {', '.join(self.pruned)}")
        if self.first_time:
            lines.append("First-time generation: all views started at 0")
        elif self.has_chapter_changes:
            lines.append("Chapter changes detected")
        return lines


class CatalogGenerator:
    """Orchestrates a catalog run.

    Responsibilities:
    - Load configuration (fatal on failure) and the previous catalog
    - Snapshot chapter folders on disk
    - Reconcile and assemble the new catalog
    - Persist it in a single write

    Nothing is written unless every step before the write succeeded.
    """

    def __init__(
        self,
        repository: CatalogRepository,
        enumerator: FilesystemChapterEnumerator,
        reconciler: CatalogReconciler,
        assembler: CatalogAssembler,
    ):
        if repository is None:
            raise ValueError("CatalogRepository must not be None")
        if enumerator is None:
            raise ValueError("FilesystemChapterEnumerator must not be None")
        if reconciler is None:
            raise ValueError("CatalogReconciler must not be None")
        if assembler is None:
            raise ValueError("CatalogAssembler must not be None")

        self.repository = repository
        self.enumerator = enumerator
        self.reconciler = reconciler
        self.assembler = assembler

    def generate(self) -> GenerationReport:
        """
        Produce and persist the new catalog.

        Returns:
            GenerationReport describing the written catalog.

        Raises:
            ConfigurationError: If the configuration cannot be loaded.
            CatalogWriteError: If the new catalog cannot be written.
        """
        config = self.repository.load_config()
        previous = self.repository.load_previous()

        first_time = previous is None
        if first_time:
            print("First-time generation - creating new catalog, all views start at 0")
        else:
            print("Updating existing catalog")

        identities = self.enumerator.list_candidate_identities()
        reconciled = self.reconciler.reconcile(identities, config, previous)
        catalog = self.assembler.assemble(config, reconciled, previous)

        has_chapter_changes = (
            previous is not None and len(previous.chapters) != len(catalog.chapters)
        )

        catalog_path = self.repository.save(catalog)

        return GenerationReport(
            catalog=catalog,
            catalog_path=catalog_path,
            first_time=first_time,
            has_chapter_changes=has_chapter_changes,
            pruned=reconciled.pruned,
        )
