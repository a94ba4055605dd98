"""Chapter identity resolution - classifies chapter folder names."""

import re
from dataclasses import dataclass

SPECIAL_IDENTITY = "oneshot"
SPECIAL_TITLE = "Oneshot"

_NUMERIC_IDENTITY = re.compile(r"^\d+(\.\d+)?$")


@dataclass(frozen=True)
class ChapterIdentity:
    """A chapter identifier together with its derived ordering and display values.

    Attributes:
        raw: The identifier exactly as it appears on disk or in configuration.
        is_special: True for the single unnumbered release.
        sort_key: -1 for the special chapter, the parsed number otherwise.
        rank: Ordinal stored in the catalog (0 for the special chapter).
        title: Display title.
    """

    raw: str
    is_special: bool
    sort_key: float
    rank: float
    title: str


def is_special_identity(raw: str) -> bool:
    """Returns True if the identifier names the unnumbered release."""
    return raw.lower() == SPECIAL_IDENTITY


def is_numeric_identity(raw: str) -> bool:
    return bool(_NUMERIC_IDENTITY.fullmatch(raw))


def is_valid_identity(raw: str) -> bool:
    """Returns True if the identifier can be cataloged as a chapter."""
    return is_special_identity(raw) or is_numeric_identity(raw)


def identity_key(raw: str) -> str:
    """Key under which two spellings of the same chapter compare equal."""
    if is_special_identity(raw):
        return SPECIAL_IDENTITY
    return raw


def chapter_sort_key(raw: str) -> float:
    """Sort key that places the special chapter before every numbered one."""
    if is_special_identity(raw):
        return -1
    return float(raw)


def resolve_identity(raw: str) -> ChapterIdentity:
    """Derive ordering and display values for a chapter identifier.

    The raw string is kept for the title so "3.00" and "3" stay distinct.
    """
    if is_special_identity(raw):
        return ChapterIdentity(raw=raw, is_special=True, sort_key=-1, rank=0, title=SPECIAL_TITLE)

    number = float(raw)
    return ChapterIdentity(
        raw=raw,
        is_special=False,
        sort_key=number,
        rank=number,
        title=f"Chapter {raw}",
    )
