from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterable

from worktime.errors import InvalidTargetError
from worktime.schemas import AttendanceRequest, AttendanceSummaryResponse, DayRecord, InOutPairRead
from worktime.settings import get_settings
from worktime.services.clock import format_clock_time, today_date_str, utcnow
from worktime.services.upstream import fetch_day_records, require_token
from worktime.services.worktime_calc import (
    Interval,
    accumulate_worked,
    format_duration,
    pair_punches,
    parse_productive_hours,
    projected_leave_time,
    remaining_seconds,
    resolve_target_seconds,
)

logger = logging.getLogger("worktime.attendance")


def select_today_record(records: Iterable[dict[str, Any]], today: str) -> DayRecord | None:
    for raw in records:
        attendance_date = raw.get("attendanceDate") if isinstance(raw, dict) else None
        if isinstance(attendance_date, str) and today in attendance_date:
            return DayRecord.model_validate(raw)
    return None


def _resolve_productive_hours(payload: AttendanceRequest) -> float | None:
    if payload.has_productive_hours:
        return parse_productive_hours(payload.productive_hours)
    if get_settings().require_productive_hours:
        raise InvalidTargetError("productiveHours is required")
    return None


def _to_pair_read(interval: Interval) -> InOutPairRead:
    return InOutPairRead(
        in_time=format_clock_time(interval.in_time),
        out_time=format_clock_time(interval.out_time),
        is_missing=interval.is_open,
        location=interval.location,
    )


def summarize_day(
    record: DayRecord,
    *,
    now_utc: datetime,
    productive_hours: float | None = None,
) -> AttendanceSummaryResponse:
    settings = get_settings()
    with_seconds = productive_hours is not None

    intervals = pair_punches(record.entries, default_location=settings.default_location)
    worked = accumulate_worked(intervals, now_utc)
    target_seconds = resolve_target_seconds(
        shift_effective_duration=record.shift_effective_duration,
        productive_hours=productive_hours,
        default_hours=settings.default_target_hours,
    )
    remaining = remaining_seconds(target_seconds, worked.total_seconds)

    return AttendanceSummaryResponse(
        worked=format_duration(worked.total_seconds, with_seconds=with_seconds),
        remaining=format_duration(remaining, with_seconds=with_seconds),
        leave_time=format_clock_time(projected_leave_time(now_utc, remaining)),
        in_out_list=[_to_pair_read(interval) for interval in intervals],
    )


def build_attendance_summary(payload: AttendanceRequest) -> AttendanceSummaryResponse | None:
    """Fetch today's punches for the token and summarize them.

    Returns ``None`` when the upstream has no record for today (IST).
    """
    token = require_token(payload.token)
    productive_hours = _resolve_productive_hours(payload)
    records = fetch_day_records(token)

    now_utc = utcnow()
    today = today_date_str(now_utc)
    record = select_today_record(records, today)
    if record is None:
        logger.info(
            "attendance_no_record_today",
            extra={"today": today, "record_count": len(records)},
        )
        return None

    summary = summarize_day(record, now_utc=now_utc, productive_hours=productive_hours)
    logger.info(
        "attendance_summary_built",
        extra={
            "today": today,
            "pair_count": len(summary.in_out_list),
            "open_pairs": sum(1 for pair in summary.in_out_list if pair.is_missing),
            "with_seconds": productive_hours is not None,
        },
    )
    return summary
