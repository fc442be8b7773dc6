from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from worktime.schemas import AttendanceRequest, AttendanceSummaryResponse, NoRecordResponse
from worktime.services.attendance import build_attendance_summary

router = APIRouter(tags=["attendance"])


@router.post("/attendance", response_model=AttendanceSummaryResponse)
def attendance_summary(
    payload: AttendanceRequest,
    request: Request,
) -> AttendanceSummaryResponse | JSONResponse:
    request.state.with_seconds = payload.has_productive_hours
    summary = build_attendance_summary(payload)
    if summary is None:
        request.state.no_record = True
        return JSONResponse(content=NoRecordResponse().model_dump())
    return summary
