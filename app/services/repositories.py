"""
Repository layer abstracting storage for the registry tables.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.models import AttendanceRecord, Event, RegistryState, Token


STATE_ROW_ID = 1

# Largest integer a store column can hold (signed 64-bit)
MAX_UINT = 2 ** 63 - 1


def in_range(value: int) -> bool:
    return 0 <= value <= MAX_UINT


# -------- Registry state --------

class StateRepo:
    @staticmethod
    def get(db: Session) -> Optional[RegistryState]:
        return db.query(RegistryState).filter(RegistryState.id == STATE_ROW_ID).first()

    @staticmethod
    def get_or_create(db: Session) -> RegistryState:
        state = StateRepo.get(db)
        if state is None:
            state = RegistryState(
                id=STATE_ROW_ID,
                last_event_id=0,
                last_token_id=0,
                base_uri=settings.DEFAULT_BASE_URI,
            )
            db.add(state)
            db.flush()
        return state

    @staticmethod
    def last_event_id(db: Session) -> int:
        state = StateRepo.get(db)
        return state.last_event_id if state else 0

    @staticmethod
    def last_token_id(db: Session) -> int:
        state = StateRepo.get(db)
        return state.last_token_id if state else 0

    @staticmethod
    def base_uri(db: Session) -> str:
        state = StateRepo.get(db)
        return state.base_uri if state else settings.DEFAULT_BASE_URI


# -------- Event repository --------

class EventRepo:
    @staticmethod
    def get_by_id(db: Session, event_id: int) -> Optional[Event]:
        if not in_range(event_id):
            return None
        return db.query(Event).filter(Event.id == event_id).first()

    @staticmethod
    def create(db: Session, event_id: int, name: str, organizer: str, date: int, max_attendees: int) -> Event:
        event = Event(
            id=event_id,
            name=name,
            organizer=organizer,
            date=date,
            max_attendees=max_attendees,
            issued_count=0,
            is_active=True,
        )
        db.add(event)
        return event


# -------- Token repository --------

class TokenRepo:
    @staticmethod
    def get_by_id(db: Session, token_id: int) -> Optional[Token]:
        if not in_range(token_id):
            return None
        return db.query(Token).filter(Token.id == token_id).first()

    @staticmethod
    def create(db: Session, token_id: int, owner: str, event_id: int) -> Token:
        token = Token(id=token_id, owner=owner, event_id=event_id)
        db.add(token)
        return token


# -------- Attendance repository --------

class AttendanceRepo:
    @staticmethod
    def get(db: Session, event_id: int, attendee: str) -> Optional[AttendanceRecord]:
        if not in_range(event_id):
            return None
        return db.query(AttendanceRecord).filter(
            AttendanceRecord.event_id == event_id,
            AttendanceRecord.attendee == attendee
        ).first()

    @staticmethod
    def create(db: Session, event_id: int, attendee: str, token_id: int, issued_at: int) -> AttendanceRecord:
        record = AttendanceRecord(
            event_id=event_id,
            attendee=attendee,
            token_id=token_id,
            issued_at=issued_at,
        )
        db.add(record)
        return record
