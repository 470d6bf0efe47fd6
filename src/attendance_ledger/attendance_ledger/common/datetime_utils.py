from __future__ import annotations

import re
from datetime import date, datetime

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_iso_date(value: str) -> date:
    """Parse a zero-padded YYYY-MM-DD string into date.

    ``date.fromisoformat`` alone also takes the basic form (``20250301``) on
    newer interpreters, so the shape is checked first.
    """
    if not _ISO_DATE.fullmatch(value):
        raise ValueError(f"not a YYYY-MM-DD date: {value!r}")
    return date.fromisoformat(value)


def now_local() -> datetime:
    """Current local time, truncated to whole seconds to match DATETIME columns.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().replace(microsecond=0)


def format_date(value: date | None) -> str | None:
    return value.isoformat() if value else None


def format_datetime(value: datetime | None) -> str | None:
    return value.isoformat(timespec="seconds") if value else None
