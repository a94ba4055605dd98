"""Manifest Reader - page counts from per-chapter manifest.json files."""

import json
from pathlib import Path
from typing import Any, Optional

MANIFEST_FILENAME = "manifest.json"

# Accepted in this order; the first positive count wins, then the pages list.
PAGE_COUNT_FIELDS = ("total_pages", "totalPages")


class ManifestReader:
    """Reads chapter manifests under a work root."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def load_manifest(self, identity: str) -> Optional[dict]:
        """
        Parse a chapter's manifest.

        Returns:
            The manifest object, or None if missing or unreadable.
        """
        manifest_path = self.root / identity / MANIFEST_FILENAME
        if not manifest_path.exists():
            return None

        try:
            data = json.loads(manifest_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            print(f"Warning: Could not read manifest in {identity}: {e}")
            return None

        if not isinstance(data, dict):
            print(f"Warning: Manifest in {identity} is not a JSON object")
            return None
        return data

    def get_page_count(self, identity: str) -> int:
        """Page count for a chapter; 0 when the manifest is missing or malformed."""
        manifest = self.load_manifest(identity)
        if manifest is None:
            print(f"  {identity}: No manifest.json found")
            return 0

        count = self._count_from_manifest(manifest)
        print(f"  {identity}: {count} pages (from manifest)")
        return count

    @staticmethod
    def _count_from_manifest(manifest: dict) -> int:
        for field_name in PAGE_COUNT_FIELDS:
            count = _as_page_count(manifest.get(field_name))
            if count:
                return count

        pages = manifest.get("pages")
        if isinstance(pages, list):
            return len(pages)
        return 0


def _as_page_count(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float) and value.is_integer():
        return max(int(value), 0)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return 0
