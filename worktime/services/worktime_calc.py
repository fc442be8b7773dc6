from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import IntEnum
from typing import Any, Iterable

from worktime.errors import InvalidTargetError
from worktime.schemas import PunchEvent

SECONDS_PER_HOUR = 3600
DEFAULT_TARGET_HOURS = 8
MAX_PRODUCTIVE_HOURS = 24


class PunchStatus(IntEnum):
    IN = 0
    OUT = 1


@dataclass(slots=True)
class Interval:
    in_time: datetime
    location: str
    out_time: datetime | None = None

    @property
    def is_open(self) -> bool:
        return self.out_time is None


@dataclass(frozen=True)
class WorkedTime:
    completed_seconds: int
    running_seconds: int

    @property
    def total_seconds(self) -> int:
        return self.completed_seconds + self.running_seconds


def _whole_seconds(delta: timedelta) -> int:
    # int() truncates toward zero, dropping sub-second remainders.
    return int(delta.total_seconds())


def pair_punches(events: Iterable[PunchEvent], *, default_location: str) -> list[Interval]:
    """Fold punch events into in/out intervals in chronological order.

    Events are sorted by timestamp first (stable, so ties keep input order).
    Only the most recently opened interval can be closed: an IN that arrives
    while another interval is open leaves the earlier one open for good, and
    an OUT with nothing open is dropped.
    """
    intervals: list[Interval] = []
    current: Interval | None = None

    for event in sorted(events, key=lambda item: item.timestamp):
        if event.punch_status == PunchStatus.IN:
            current = Interval(
                in_time=event.timestamp,
                location=event.premise_name or default_location,
            )
            intervals.append(current)
        elif event.punch_status == PunchStatus.OUT and current is not None:
            current.out_time = event.timestamp
            current = None

    return intervals


def accumulate_worked(intervals: list[Interval], now_utc: datetime) -> WorkedTime:
    """Sum closed spans, plus the running span of the last open interval.

    Earlier open intervals contribute nothing: they have no close time and
    are not treated as ongoing.
    """
    completed_seconds = 0
    last_open_in: datetime | None = None

    for interval in intervals:
        if interval.out_time is not None:
            completed_seconds += _whole_seconds(interval.out_time - interval.in_time)
        else:
            last_open_in = interval.in_time

    running_seconds = 0
    if last_open_in is not None:
        running_seconds = max(0, _whole_seconds(now_utc - last_open_in))

    return WorkedTime(completed_seconds=completed_seconds, running_seconds=running_seconds)


def remaining_seconds(target_seconds: int, worked_seconds: int) -> int:
    return max(target_seconds - worked_seconds, 0)


def parse_productive_hours(raw: Any) -> float:
    if isinstance(raw, bool) or raw is None:
        raise InvalidTargetError()
    if isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError as exc:
            raise InvalidTargetError() from exc
    elif isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError as exc:
            raise InvalidTargetError() from exc
    else:
        raise InvalidTargetError()

    if not math.isfinite(value) or value <= 0:
        raise InvalidTargetError()
    if value > MAX_PRODUCTIVE_HOURS:
        raise InvalidTargetError(f"productiveHours must not exceed {MAX_PRODUCTIVE_HOURS}")
    return value


def resolve_target_seconds(
    *,
    shift_effective_duration: float | None,
    productive_hours: float | None = None,
    default_hours: float = DEFAULT_TARGET_HOURS,
) -> int:
    if productive_hours is not None:
        hours = productive_hours
    else:
        hours = shift_effective_duration or default_hours
    return int(hours * SECONDS_PER_HOUR)


def format_duration(total_seconds: int, *, with_seconds: bool = False) -> str:
    safe_seconds = max(0, int(total_seconds))
    hours = safe_seconds // SECONDS_PER_HOUR
    minutes = (safe_seconds % SECONDS_PER_HOUR) // 60
    if with_seconds:
        seconds = safe_seconds % 60
        return f"{hours}h {minutes}m {seconds}s"
    return f"{hours}h {minutes}m"


def projected_leave_time(now_utc: datetime, remaining: int) -> datetime:
    if remaining <= 0:
        return now_utc
    return now_utc + timedelta(seconds=remaining)
