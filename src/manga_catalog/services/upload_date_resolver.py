"""Upload Date Resolver - decides when a chapter was first published."""

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional

from manga_catalog.io.manifest_reader import MANIFEST_FILENAME
from manga_catalog.services.history_log import HistoryLog, HistoryLogError
from manga_catalog.services.timestamps import now_timestamp, to_canonical


@dataclass(frozen=True)
class DateAttempt:
    """One link in the fallback chain: a named, fallible lookup."""

    source: str
    lookup: Callable[[], Optional[str]]


class UploadDateResolver:
    """Resolves a chapter's upload timestamp from the best available signal.

    Attempts, in order, first non-empty result wins:
    1. earliest history entry for the chapter's manifest (unlocked only)
    2. earliest history entry for the chapter folder
    3. the folder's modification time
    4. the current time

    A failing attempt is reported and skipped; nothing is raised.
    """

    def __init__(
        self,
        root: Path,
        history_log: HistoryLog,
        clock: Callable[[], str] = now_timestamp,
    ):
        if history_log is None:
            raise ValueError("HistoryLog must not be None")
        self.root = Path(root)
        self.history_log = history_log
        self.clock = clock

    def resolve_upload_date(self, identity: str, is_locked: bool) -> str:
        """Return the canonical upload timestamp for a chapter folder.

        Args:
            identity: Chapter folder name.
            is_locked: Locked chapters skip the manifest history, since their
                manifest is not published yet.

        Returns:
            Zone-qualified ISO-8601 timestamp.
        """
        for attempt in self._attempts(identity, is_locked):
            try:
                value = attempt.lookup()
                if value:
                    return to_canonical(value)
            except (HistoryLogError, OSError, ValueError) as e:
                print(f"Warning: {attempt.source} lookup failed for {identity}: {e}")

        print(f"Warning: Could not get upload date for {identity}, using current date")
        return self.clock()

    def _attempts(self, identity: str, is_locked: bool) -> List[DateAttempt]:
        attempts = []
        if not is_locked:
            manifest_path = f"{identity}/{MANIFEST_FILENAME}"
            attempts.append(
                DateAttempt("manifest history", lambda: self.history_log.earliest_change(manifest_path))
            )
        attempts.append(DateAttempt("folder history", lambda: self.history_log.earliest_change(identity)))
        attempts.append(DateAttempt("folder mtime", lambda: self._folder_mtime(identity)))
        return attempts

    def _folder_mtime(self, identity: str) -> str:
        stats = (self.root / identity).stat()
        return datetime.fromtimestamp(stats.st_mtime, tz=timezone.utc).isoformat()
