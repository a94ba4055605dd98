"""Catalog Reconciler - merges disk state, configuration and the previous catalog."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Set

from manga_catalog.core import (
    Catalog,
    ChapterRecord,
    WorkConfig,
    chapter_sort_key,
    identity_key,
    is_valid_identity,
    resolve_identity,
)
from manga_catalog.io import ManifestReader
from manga_catalog.services import UploadDateResolver, now_timestamp, parse_timestamp

_UNPARSABLE = datetime.min.replace(tzinfo=timezone.utc)


@dataclass
class ReconcileResult:
    """New chapter map plus the values derived from it."""

    chapters: Dict[str, ChapterRecord]
    last_chapter_update: str
    pruned: List[str] = field(default_factory=list)


class CatalogReconciler:
    """Decides, for every chapter identity, what the new catalog says about it.

    Rules:
    - The working set is every folder on disk plus every configured locked
      identity, minus stale locks (locked before, folder gone, no longer
      configured as locked).
    - A chapter is locked if and only if it is in the configured locked list.
      The previous record's ``locked`` flag is never read for this.
    - Locked chapters without a folder keep their previous upload date;
      chapters with a folder get one from the upload date resolver.
    - View counts are carried over from the previous record, or start at 0.

    Every lookup degrades to a default (0 pages, current time) instead of
    failing the run.
    """

    def __init__(
        self,
        manifest_reader: ManifestReader,
        upload_date_resolver: UploadDateResolver,
        clock: Callable[[], str] = now_timestamp,
    ):
        if manifest_reader is None:
            raise ValueError("ManifestReader must not be None")
        if upload_date_resolver is None:
            raise ValueError("UploadDateResolver must not be None")

        self.manifest_reader = manifest_reader
        self.upload_date_resolver = upload_date_resolver
        self.clock = clock

    def reconcile(
        self,
        identities: Sequence[str],
        config: WorkConfig,
        previous: Optional[Catalog],
    ) -> ReconcileResult:
        """
        Build the new chapter map.

        Args:
            identities: Chapter folders currently on disk.
            config: Current work configuration.
            previous: Catalog from the previous run, None on the first run.

        Returns:
            ReconcileResult with chapters keyed by identity in chapter order.
        """
        # Keyed by identity_key so every spelling of the oneshot is one chapter;
        # the on-disk spelling wins over the configured one.
        on_disk = {identity_key(identity): identity for identity in identities}
        locked = self._configured_locks(config)
        previous_chapters = previous.chapters if previous is not None else {}
        previous_by_key = {identity_key(identity): record for identity, record in previous_chapters.items()}

        pruned = self.find_stale_locks(previous_chapters, set(on_disk), set(locked))
        if pruned:
            print(f"Auto-removing deleted locked chapters: {', '.join(pruned)}")

        pruned_keys = {identity_key(identity) for identity in pruned}
        spelling = dict(locked)
        spelling.update(on_disk)
        working_set = set(spelling) - pruned_keys

        chapters: Dict[str, ChapterRecord] = {}
        for key in sorted(working_set, key=chapter_sort_key):
            identity = spelling[key]
            chapters[identity] = self._resolve_chapter(
                identity,
                storage_exists=key in on_disk,
                is_locked=key in locked,
                previous_record=previous_by_key.get(key),
            )

        return ReconcileResult(
            chapters=chapters,
            last_chapter_update=self.latest_upload(chapters.values()),
            pruned=pruned,
        )

    @staticmethod
    def find_stale_locks(
        previous_chapters: Mapping[str, ChapterRecord],
        on_disk: Set[str],
        locked: Set[str],
    ) -> List[str]:
        """Identities locked in the previous catalog whose folder and lock entry are both gone.

        ``on_disk`` and ``locked`` hold identity keys (see ``identity_key``).
        """
        return [
            identity
            for identity, record in previous_chapters.items()
            if record.locked
            and identity_key(identity) not in on_disk
            and identity_key(identity) not in locked
        ]

    def latest_upload(self, records: Iterable[ChapterRecord]) -> str:
        """Most recent upload timestamp, or the current time when there are no chapters."""
        records = list(records)
        if not records:
            print("Warning: No chapters found, using current date")
            return self.clock()

        latest = max(records, key=lambda record: _instant(record.upload_timestamp))
        print(f"Last chapter update: {latest.upload_timestamp} (chapter {latest.identity})")
        return latest.upload_timestamp

    def _resolve_chapter(
        self,
        identity: str,
        storage_exists: bool,
        is_locked: bool,
        previous_record: Optional[ChapterRecord],
    ) -> ChapterRecord:
        resolved = resolve_identity(identity)
        page_count = self.manifest_reader.get_page_count(identity) if storage_exists else 0

        if is_locked and not storage_exists:
            if previous_record is not None and previous_record.upload_timestamp:
                upload_timestamp = previous_record.upload_timestamp
            else:
                upload_timestamp = self.clock()
                print(f"New locked chapter {identity}: {upload_timestamp}")
        elif storage_exists:
            upload_timestamp = self.upload_date_resolver.resolve_upload_date(identity, is_locked)
        else:
            upload_timestamp = self.clock()

        view_count = previous_record.view_count if previous_record is not None else 0

        record = ChapterRecord(
            identity=identity,
            title=resolved.title,
            rank=resolved.rank,
            upload_timestamp=upload_timestamp,
            page_count=page_count,
            locked=is_locked,
            view_count=view_count,
            storage_exists=storage_exists,
        )
        state = "locked" if is_locked else "open"
        print(f"[{state}] {identity} - {page_count} pages - {upload_timestamp.split('T')[0]} - {view_count} views")
        return record

    @staticmethod
    def _configured_locks(config: WorkConfig) -> Dict[str, str]:
        """Valid configured locks as identity key -> configured spelling."""
        locked: Dict[str, str] = {}
        for identity in config.locked_chapters:
            if is_valid_identity(identity):
                locked.setdefault(identity_key(identity), identity)
            else:
                print(f"Warning: Ignoring invalid locked chapter identity {identity!r}")
        return locked


def _instant(timestamp: str) -> datetime:
    try:
        return parse_timestamp(timestamp)
    except ValueError:
        return _UNPARSABLE
