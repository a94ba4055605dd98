"""WorkConfig entity - the static configuration of a work."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .chapter_identity import identity_key

TERMINAL_STATUS = "END"


@dataclass(frozen=True)
class WorkConfig:
    """Read-only configuration loaded from ``manga-config.json``.

    Attributes:
        locked_chapters: Identities forced into the locked state, whether or
            not a folder exists for them.
        views: Initial aggregate view count, only used on the first run.
        end_chapter: Final chapter marker, only meaningful when the status
            is the terminal value.
    """

    title: str
    repo_owner: str
    repo_name: str
    alternative_title: Optional[str] = None
    cover: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None
    artist: Optional[str] = None
    genre: Any = None
    status: Optional[str] = None
    views: Optional[int] = None
    links: Any = None
    image_prefix: str = "Image"
    image_format: str = "jpg"
    locked_chapters: List[str] = field(default_factory=list)
    type: str = "manga"
    end_chapter: Any = None

    @property
    def repo_url(self) -> str:
        return f"https://raw.githubusercontent.com/{self.repo_owner}/{self.repo_name}/main/"

    @property
    def is_ended(self) -> bool:
        return self.status == TERMINAL_STATUS

    def is_locked(self, identity: str) -> bool:
        """Lock state is decided only by membership in the configured list.

        Any spelling of the oneshot matches any other.
        """
        key = identity_key(identity)
        return any(identity_key(locked) == key for locked in self.locked_chapters)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkConfig":
        """Build a config from the parsed JSON document.

        Raises:
            ValueError: If the document is not an object or lockedChapters
                is not a list.
        """
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a JSON object")

        locked = data.get("lockedChapters") or []
        if not isinstance(locked, list):
            raise ValueError("lockedChapters must be a list of chapter identities")

        return cls(
            title=data.get("title", ""),
            repo_owner=data.get("repoOwner", ""),
            repo_name=data.get("repoName", ""),
            alternative_title=data.get("alternativeTitle"),
            cover=data.get("cover"),
            description=data.get("description"),
            author=data.get("author"),
            artist=data.get("artist"),
            genre=data.get("genre"),
            status=data.get("status"),
            views=data.get("views"),
            links=data.get("links"),
            image_prefix=data.get("imagePrefix") or "Image",
            image_format=data.get("imageFormat") or "jpg",
            locked_chapters=[str(identity) for identity in locked],
            type=data.get("type") or "manga",
            end_chapter=data.get("endChapter"),
        )
