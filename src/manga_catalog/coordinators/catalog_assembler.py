"""Catalog Assembler - wraps reconciled chapters with work metadata."""

from typing import Callable, Optional

from manga_catalog.core import Catalog, WorkConfig, WorkInfo
from manga_catalog.services import now_timestamp

from .catalog_reconciler import ReconcileResult


class CatalogAssembler:
    """Builds the document that gets persisted at the end of a run."""

    def __init__(self, clock: Callable[[], str] = now_timestamp):
        self.clock = clock

    def assemble(
        self,
        config: WorkConfig,
        reconciled: ReconcileResult,
        previous: Optional[Catalog],
    ) -> Catalog:
        """
        Combine configuration metadata and reconciled chapters.

        The aggregate view counter belongs to the view-counting jobs, so it is
        copied from the previous catalog; only a first run seeds it from the
        configuration.
        """
        if previous is not None:
            views = previous.work.views
        else:
            views = config.views or 0

        end_chapter = None
        if config.is_ended:
            if config.end_chapter:
                end_chapter = config.end_chapter
                print(f"Status: END - endChapter: {end_chapter}")
            else:
                print("Warning: Status is END but endChapter is not set in the configuration")

        work = WorkInfo(
            title=config.title,
            repo_url=config.repo_url,
            alternative_title=config.alternative_title,
            cover=config.cover,
            description=config.description,
            author=config.author,
            artist=config.artist,
            genre=config.genre,
            status=config.status,
            views=views,
            links=config.links,
            image_prefix=config.image_prefix,
            image_format=config.image_format,
            locked_chapters=list(config.locked_chapters),
            type=config.type,
            end_chapter=end_chapter,
        )

        return Catalog(
            work=work,
            chapters=dict(reconciled.chapters),
            last_updated=self.clock(),
            last_chapter_update=reconciled.last_chapter_update,
        )
