"""Chapter Enumerator - lists chapter folders currently on disk."""

from pathlib import Path
from typing import List

from manga_catalog.core import chapter_sort_key, is_special_identity, is_valid_identity


class FilesystemChapterEnumerator:
    """Snapshots the chapter folders directly under a work root."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def list_candidate_identities(self) -> List[str]:
        """
        List chapter identities present on disk.

        Hidden entries and folders that are not a chapter number or the
        special chapter are skipped. Only one folder may stand for the
        special chapter; further case variants are ignored.

        Returns:
            Identities sorted by chapter order (special chapter first).
            Empty if the root cannot be read.
        """
        try:
            names = sorted(entry.name for entry in self.root.iterdir() if entry.is_dir())
        except OSError as e:
            print(f"Warning: Could not read chapter folders in {self.root}: {e}")
            return []

        identities = []
        special_seen = None
        for name in names:
            if name.startswith(".") or not is_valid_identity(name):
                continue
            if is_special_identity(name):
                if special_seen is not None:
                    print(f"Warning: Ignoring folder {name}, special chapter already found in {special_seen}")
                    continue
                special_seen = name
            identities.append(name)

        identities.sort(key=chapter_sort_key)
        print(f"Found {len(identities)} chapter folders")
        if special_seen is not None:
            print("  Oneshot detected")
        return identities
