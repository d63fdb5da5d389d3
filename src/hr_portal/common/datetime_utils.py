from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch it easily.
    """
    return datetime.now(timezone.utc)


def now_iso() -> str:
    """ISO-8601 timestamp with millisecond precision and a trailing Z."""
    return now_utc().isoformat(timespec="milliseconds").replace("+00:00", "Z")


def today_iso() -> str:
    return now_utc().date().isoformat()
