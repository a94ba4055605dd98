"""Services layer - timestamps, history lookups and settings."""

from manga_catalog.services.history_log import GitHistoryLog, HistoryLog, HistoryLogError
from manga_catalog.services.settings_manager import SettingsManager
from manga_catalog.services.timestamps import (
	WIB,
	format_timestamp,
	now_timestamp,
	parse_timestamp,
	to_canonical,
)
from manga_catalog.services.upload_date_resolver import DateAttempt, UploadDateResolver

__all__ = [
	"HistoryLog",
	"GitHistoryLog",
	"HistoryLogError",
	"SettingsManager",
	"UploadDateResolver",
	"DateAttempt",
	"WIB",
	"format_timestamp",
	"now_timestamp",
	"parse_timestamp",
	"to_canonical",
]
