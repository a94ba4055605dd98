"""Catalog entity - the persisted document describing a work and its chapters."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .chapter_record import ChapterRecord


@dataclass
class WorkInfo:
    """Work-level metadata as written to the catalog."""

    title: str
    repo_url: str
    alternative_title: Optional[str] = None
    cover: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None
    artist: Optional[str] = None
    genre: Any = None
    status: Optional[str] = None
    views: int = 0
    links: Any = None
    image_prefix: str = "Image"
    image_format: str = "jpg"
    locked_chapters: List[str] = field(default_factory=list)
    type: str = "manga"
    end_chapter: Any = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "title": self.title,
            "alternativeTitle": self.alternative_title,
            "cover": self.cover,
            "description": self.description,
            "author": self.author,
            "artist": self.artist,
            "genre": self.genre,
            "status": self.status,
            "views": self.views,
            "links": self.links,
            "repoUrl": self.repo_url,
            "imagePrefix": self.image_prefix,
            "imageFormat": self.image_format,
            "lockedChapters": list(self.locked_chapters),
            "type": self.type,
        }
        if self.end_chapter is not None:
            data["endChapter"] = self.end_chapter
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkInfo":
        locked = data.get("lockedChapters")
        views = data.get("views") or 0
        return cls(
            title=data.get("title", ""),
            repo_url=data.get("repoUrl", ""),
            alternative_title=data.get("alternativeTitle"),
            cover=data.get("cover"),
            description=data.get("description"),
            author=data.get("author"),
            artist=data.get("artist"),
            genre=data.get("genre"),
            status=data.get("status"),
            views=views if isinstance(views, int) else 0,
            links=data.get("links"),
            image_prefix=data.get("imagePrefix") or "Image",
            image_format=data.get("imageFormat") or "jpg",
            locked_chapters=list(locked) if isinstance(locked, list) else [],
            type=data.get("type") or "manga",
            end_chapter=data.get("endChapter"),
        )


@dataclass
class Catalog:
    """The whole persisted catalog.

    Chapters are keyed by identity; ``to_dict`` writes them in sort-key order
    so the special chapter always comes first.
    """

    work: WorkInfo
    chapters: Dict[str, ChapterRecord] = field(default_factory=dict)
    last_updated: str = ""
    last_chapter_update: str = ""

    def sorted_chapters(self) -> List[ChapterRecord]:
        return sorted(self.chapters.values(), key=lambda record: record.sort_key)

    @property
    def total_chapter_views(self) -> int:
        return sum(record.view_count for record in self.chapters.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "work": self.work.to_dict(),
            "chapters": {record.identity: record.to_dict() for record in self.sorted_chapters()},
            "lastUpdated": self.last_updated,
            "lastChapterUpdate": self.last_chapter_update,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Catalog":
        """Rebuild a catalog from a persisted document.

        Older documents keep the work section under ``manga`` instead of
        ``work``; both are accepted.

        Raises:
            ValueError: If the document has no work section or its chapters
                are not an object.
        """
        if not isinstance(data, dict):
            raise ValueError("Catalog must be a JSON object")

        work_data = data.get("work") or data.get("manga")
        if not isinstance(work_data, dict):
            raise ValueError("Catalog has no work section")

        chapters_data = data.get("chapters") or {}
        if not isinstance(chapters_data, dict):
            raise ValueError("Catalog chapters must be a JSON object")

        chapters = {
            str(identity): ChapterRecord.from_dict(str(identity), entry)
            for identity, entry in chapters_data.items()
            if isinstance(entry, dict)
        }
        return cls(
            work=WorkInfo.from_dict(work_data),
            chapters=chapters,
            last_updated=_text(data.get("lastUpdated")),
            last_chapter_update=_text(data.get("lastChapterUpdate")),
        )


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""
