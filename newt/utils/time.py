"""UTC time helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def unix_seconds(time_func: Callable[[], datetime] = utc_now) -> int:
    """Return whole Unix seconds for the instant produced by ``time_func``."""
    return int(time_func().timestamp())
