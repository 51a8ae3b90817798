"""
Event and attendance API routes
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.clock import get_clock
from app.core.db import get_db
from app.schemas.event import EventCreate
from app.schemas.attendance import IssueRequest
from app.services.event_service import EventService
from app.services.attendance_service import AttendanceService
from app.utils.security import get_caller, rate_limit_check, get_client_ip
from app.utils.responses import success_response, not_found_error, rate_limit_error

router = APIRouter()

@router.post("/events")
async def create_event(
    event_data: EventCreate,
    db: Session = Depends(get_db),
    clock = Depends(get_clock),
    caller: str = Depends(get_caller)
):
    """Create a new event organized by the caller"""
    event_id = EventService.create_event(
        db,
        clock,
        caller=caller,
        name=event_data.name,
        date=event_data.date,
        max_attendees=event_data.max_attendees
    )

    return success_response(
        message="Event created successfully",
        data={"event_id": event_id},
        status_code=201
    )

@router.get("/events/count")
async def get_event_count(
    request: Request,
    db: Session = Depends(get_db)
):
    """Number of events ever created"""
    if not rate_limit_check(get_client_ip(request)):
        raise rate_limit_error()

    return success_response(
        message="Event count retrieved",
        data={"count": EventService.get_event_count(db)}
    )

@router.get("/events/{event_id}")
async def get_event(
    event_id: int,
    request: Request,
    db: Session = Depends(get_db)
):
    """Get event details"""
    if not rate_limit_check(get_client_ip(request)):
        raise rate_limit_error()

    event = EventService.get_event(db, event_id)
    if not event:
        raise not_found_error("Event")

    return success_response(
        message="Event details retrieved",
        data=event.model_dump()
    )

@router.post("/events/{event_id}/close")
async def close_event(
    event_id: int,
    db: Session = Depends(get_db),
    caller: str = Depends(get_caller)
):
    """Close an event so no further attendance can be issued"""
    closed = EventService.close_event(db, caller=caller, event_id=event_id)

    return success_response(
        message="Event closed",
        data={"closed": closed}
    )

@router.post("/events/{event_id}/attendance")
async def issue_attendance(
    event_id: int,
    issue_data: IssueRequest,
    db: Session = Depends(get_db),
    clock = Depends(get_clock),
    caller: str = Depends(get_caller)
):
    """Issue an attendance token to an attendee"""
    token_id = AttendanceService.issue_attendance(
        db,
        clock,
        caller=caller,
        event_id=event_id,
        attendee=issue_data.attendee
    )

    return success_response(
        message="Attendance token issued",
        data={"token_id": token_id},
        status_code=201
    )

@router.get("/events/{event_id}/attendance/{attendee}")
async def get_attendance_record(
    event_id: int,
    attendee: str,
    request: Request,
    db: Session = Depends(get_db)
):
    """Get the attendance record for an attendee, or null"""
    if not rate_limit_check(get_client_ip(request)):
        raise rate_limit_error()

    record = AttendanceService.get_attendance_record(db, event_id, attendee)

    return success_response(
        message="Attendance record retrieved",
        data=record.model_dump() if record else None
    )

@router.get("/events/{event_id}/attendees/{attendee}/attended")
async def has_attended(
    event_id: int,
    attendee: str,
    request: Request,
    db: Session = Depends(get_db)
):
    """Whether the attendee was ever issued a token for the event"""
    if not rate_limit_check(get_client_ip(request)):
        raise rate_limit_error()

    return success_response(
        message="Attendance checked",
        data={"attended": AttendanceService.has_attended(db, event_id, attendee)}
    )
