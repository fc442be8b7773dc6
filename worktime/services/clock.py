from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

IST = timezone(timedelta(hours=5, minutes=30), "IST")
CLOCK_TIME_FORMAT = "%I:%M:%S %p"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _normalize_ts(ts_utc: datetime) -> datetime:
    if ts_utc.tzinfo is None:
        return ts_utc.replace(tzinfo=timezone.utc)
    return ts_utc.astimezone(timezone.utc)


def local_date(ts_utc: datetime) -> date:
    return _normalize_ts(ts_utc).astimezone(IST).date()


def today_date_str(now_utc: datetime) -> str:
    return local_date(now_utc).isoformat()


def format_clock_time(ts_utc: datetime | None) -> str | None:
    """Render an instant as IST wall-clock time, e.g. ``09:05:03 AM``."""
    if ts_utc is None:
        return None
    return _normalize_ts(ts_utc).astimezone(IST).strftime(CLOCK_TIME_FORMAT)
