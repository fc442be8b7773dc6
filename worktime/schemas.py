from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PunchEvent(BaseModel):
    timestamp: datetime
    punch_status: int | None = Field(default=None, alias="punchStatus")
    premise_name: str | None = Field(default=None, alias="premiseName")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("timestamp")
    @classmethod
    def _normalize_timestamp(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class DayRecord(BaseModel):
    attendance_date: str | None = Field(default=None, alias="attendanceDate")
    shift_effective_duration: float | None = Field(default=None, alias="shiftEffectiveDuration")
    time_entries: list[PunchEvent] | None = Field(default=None, alias="timeEntries")
    original_time_entries: list[PunchEvent] | None = Field(default=None, alias="originalTimeEntries")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def entries(self) -> list[PunchEvent]:
        # An explicit empty timeEntries list wins over the fallback.
        if self.time_entries is not None:
            return self.time_entries
        return self.original_time_entries or []


class AttendanceRequest(BaseModel):
    token: str | None = None
    productive_hours: Any = Field(default=None, alias="productiveHours")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def has_productive_hours(self) -> bool:
        return "productive_hours" in self.model_fields_set


class InOutPairRead(BaseModel):
    in_time: str | None = Field(alias="in")
    out_time: str | None = Field(alias="out")
    is_missing: bool = Field(alias="isMissing")
    location: str

    model_config = ConfigDict(populate_by_name=True)


class AttendanceSummaryResponse(BaseModel):
    worked: str
    remaining: str
    leave_time: str = Field(alias="leaveTime")
    in_out_list: list[InOutPairRead] = Field(default_factory=list, alias="inOutList")

    model_config = ConfigDict(populate_by_name=True)


class NoRecordResponse(BaseModel):
    error: str = "No attendance record found for today."


class HealthResponse(BaseModel):
    status: str
    upstream_url: str
