"""Calendar date helpers for entries created without an explicit date."""
from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo


def today_iso(tz_name: Optional[str] = None) -> str:
    """Return today's date as YYYY-MM-DD.

    Uses the server's local zone unless ``tz_name`` names an IANA zone.
    """
    if tz_name:
        now = datetime.now(tz=ZoneInfo(tz_name))
    else:
        now = datetime.now().astimezone()
    return now.date().isoformat()


def make_clock(tz_name: Optional[str] = None) -> Callable[[], str]:
    def clock() -> str:
        return today_iso(tz_name)

    return clock
