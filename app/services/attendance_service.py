"""
Attendance issuance: minting one token per attendee per event
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.schemas.attendance import AttendanceRecordView
from app.services.errors import (
    AlreadyAttended,
    EventClosed,
    EventNotFound,
    MaxAttendeesReached,
    NotAuthorized,
)
from app.services.repositories import AttendanceRepo, EventRepo, StateRepo, TokenRepo

logger = logging.getLogger(__name__)

class AttendanceService:
    """Service for issuing attendance tokens and querying issuance state"""
    
    @staticmethod
    def issue_attendance(
        db: Session,
        clock,
        caller: str,
        event_id: int,
        attendee: str
    ) -> int:
        """Mint an attendance token for attendee and return the token id.
        
        Checks run in a fixed order and the first failure wins: event
        exists, caller organizes it (and is not issuing to themselves),
        event is open, attendee has no record yet, capacity remains.
        """
        event = EventRepo.get_by_id(db, event_id)
        if not event:
            raise EventNotFound(f"Event {event_id} not found")
        
        if event.organizer != caller:
            raise NotAuthorized("Only the organizer can issue attendance for this event")
        
        # Organizers can never be their own attendee
        if attendee == caller:
            raise NotAuthorized("Organizer cannot issue attendance to themselves")
        
        if not event.is_active:
            raise EventClosed(f"Event {event_id} is closed")
        
        if AttendanceRepo.get(db, event_id, attendee):
            raise AlreadyAttended(f"{attendee} already attended event {event_id}")
        
        if event.issued_count >= event.max_attendees:
            raise MaxAttendeesReached(f"Event {event_id} is full")
        
        state = StateRepo.get_or_create(db)
        token_id = state.last_token_id + 1
        
        TokenRepo.create(db, token_id=token_id, owner=attendee, event_id=event_id)
        AttendanceRepo.create(
            db,
            event_id=event_id,
            attendee=attendee,
            token_id=token_id,
            issued_at=clock.now()
        )
        event.issued_count += 1
        state.last_token_id = token_id
        db.commit()
        
        logger.info(f"Token {token_id} issued to {attendee} for event {event_id} ({event.issued_count}/{event.max_attendees})")
        return token_id
    
    @staticmethod
    def get_attendance_record(db: Session, event_id: int, attendee: str) -> Optional[AttendanceRecordView]:
        record = AttendanceRepo.get(db, event_id, attendee)
        if not record:
            return None
        return AttendanceRecordView.model_validate(record)
    
    @staticmethod
    def has_attended(db: Session, event_id: int, attendee: str) -> bool:
        return AttendanceRepo.get(db, event_id, attendee) is not None
    
    @staticmethod
    def get_event_for_token(db: Session, token_id: int) -> Optional[int]:
        token = TokenRepo.get_by_id(db, token_id)
        return token.event_id if token else None
    
    @staticmethod
    def get_total_nfts(db: Session) -> int:
        return StateRepo.last_token_id(db)
