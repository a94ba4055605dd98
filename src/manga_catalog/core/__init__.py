"""Domain layer - Pure entities describing a work and its chapters."""

from .catalog import Catalog, WorkInfo
from .chapter_identity import (
    SPECIAL_IDENTITY,
    ChapterIdentity,
    chapter_sort_key,
    identity_key,
    is_special_identity,
    is_valid_identity,
    resolve_identity,
)
from .chapter_record import ChapterRecord
from .work_config import TERMINAL_STATUS, WorkConfig

__all__ = [
    "Catalog",
    "WorkInfo",
    "ChapterIdentity",
    "ChapterRecord",
    "WorkConfig",
    "SPECIAL_IDENTITY",
    "TERMINAL_STATUS",
    "chapter_sort_key",
    "identity_key",
    "is_special_identity",
    "is_valid_identity",
    "resolve_identity",
]
