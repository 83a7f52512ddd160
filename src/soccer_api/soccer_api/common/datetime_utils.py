from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse an ISO-8601 date (YYYY-MM-DD) or datetime string into a date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        pass
    # datetime.fromisoformat() only understands a trailing "Z" from 3.11 on.
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value).date()


def format_iso_date(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)
