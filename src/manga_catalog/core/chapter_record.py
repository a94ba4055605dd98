"""ChapterRecord entity - one chapter entry in the catalog."""

from dataclasses import dataclass
from typing import Any, Dict

from .chapter_identity import is_valid_identity, resolve_identity


def _json_number(value: float):
    """Integral ranks are written as ints ("chapter": 3, not 3.0)."""
    if float(value).is_integer():
        return int(value)
    return value


@dataclass
class ChapterRecord:
    """Represents a single chapter as reconciled for the current run.

    ``storage_exists`` is computed per run and never persisted.
    """

    identity: str
    title: str
    rank: float
    upload_timestamp: str
    page_count: int = 0
    locked: bool = False
    view_count: int = 0
    storage_exists: bool = False

    @property
    def is_special(self) -> bool:
        return resolve_identity(self.identity).is_special

    @property
    def sort_key(self) -> float:
        return resolve_identity(self.identity).sort_key

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted chapter shape."""
        return {
            "title": self.title,
            "chapter": _json_number(self.rank),
            "folder": self.identity,
            "uploadDate": self.upload_timestamp,
            "totalPages": self.page_count,
            "pages": self.page_count,
            "locked": self.locked,
            "views": self.view_count,
        }

    @classmethod
    def from_dict(cls, identity: str, data: Dict[str, Any]) -> "ChapterRecord":
        """Rebuild a record from a previously persisted catalog entry.

        Missing fields fall back to derived or zero values.
        """
        if is_valid_identity(identity):
            resolved = resolve_identity(identity)
            default_title, default_rank = resolved.title, resolved.rank
        else:
            default_title, default_rank = identity, 0

        page_count = data.get("totalPages", data.get("pages", 0))
        views = data.get("views") or 0
        upload = data.get("uploadDate")
        return cls(
            identity=identity,
            title=data.get("title") or default_title,
            rank=data.get("chapter", default_rank),
            upload_timestamp=upload if isinstance(upload, str) else "",
            page_count=page_count if isinstance(page_count, int) else 0,
            locked=bool(data.get("locked", False)),
            view_count=views if isinstance(views, int) else 0,
        )
