from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytz


def get_timezone(tz_name: str) -> pytz.BaseTzInfo:
    return pytz.timezone(tz_name)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def hours_before(now: datetime, hours: int) -> datetime:
    return now - timedelta(hours=hours)


def pretty_day_header(tz_name: str, now: datetime | None = None) -> str:
    tz = get_timezone(tz_name)
    now = (now or utc_now()).astimezone(tz)
    # Example: Mon 3 Nov
    return f"{now.strftime('%a')} {now.day} {now.strftime('%b')}"


def pretty_time(dt: datetime, tz_name: str) -> str:
    tz = get_timezone(tz_name)
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt.astimezone(tz).strftime("%H:%M")
