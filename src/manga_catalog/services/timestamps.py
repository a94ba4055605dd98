"""Canonical timestamps - every date in the catalog is written in UTC+7 (WIB)."""

from datetime import datetime, timedelta, timezone
from typing import Union

WIB = timezone(timedelta(hours=7), "WIB")


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as ``YYYY-MM-DDTHH:MM:SS+07:00``.

    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(WIB).replace(microsecond=0).isoformat()


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 string into an aware datetime.

    Raises:
        ValueError: If the string is not ISO-8601.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    moment = datetime.fromisoformat(text)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def to_canonical(value: Union[str, datetime]) -> str:
    """Convert an ISO string or datetime to the canonical zone."""
    if isinstance(value, datetime):
        return format_timestamp(value)
    return format_timestamp(parse_timestamp(value))


def now_timestamp() -> str:
    """Current wall-clock time in the canonical zone."""
    return format_timestamp(datetime.now(WIB))
