"""
Event registry: creation, closing and event queries
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.schemas.event import EventView
from app.services.errors import EventNotFound, InvalidEventData, NotAuthorized
from app.services.repositories import EventRepo, StateRepo, in_range

logger = logging.getLogger(__name__)

class EventService:
    """Service for event lifecycle operations"""
    
    @staticmethod
    def create_event(
        db: Session,
        clock,
        caller: str,
        name: str,
        date: int,
        max_attendees: int
    ) -> int:
        """Create an event organized by the caller and return its id"""
        if not name or len(name) > settings.MAX_EVENT_NAME_LENGTH:
            raise InvalidEventData("Event name must be 1 to %d characters" % settings.MAX_EVENT_NAME_LENGTH)
        
        if not in_range(date) or not in_range(max_attendees):
            raise InvalidEventData("Event date and capacity must be unsigned integers the registry can store")
        
        if date <= clock.now():
            raise InvalidEventData("Event date must be in the future")
        
        if max_attendees < 1:
            raise InvalidEventData("Event must allow at least one attendee")
        
        state = StateRepo.get_or_create(db)
        event_id = state.last_event_id + 1
        
        EventRepo.create(
            db,
            event_id=event_id,
            name=name,
            organizer=caller,
            date=date,
            max_attendees=max_attendees
        )
        state.last_event_id = event_id
        db.commit()
        
        logger.info(f"Event {event_id} created by {caller} with capacity {max_attendees}")
        return event_id
    
    @staticmethod
    def close_event(db: Session, caller: str, event_id: int) -> bool:
        """Close an event; closing an already closed event still succeeds"""
        event = EventRepo.get_by_id(db, event_id)
        if not event:
            raise EventNotFound(f"Event {event_id} not found")
        
        if event.organizer != caller:
            raise NotAuthorized("Only the organizer can close this event")
        
        event.is_active = False
        db.commit()
        
        logger.info(f"Event {event_id} closed by {caller}")
        return True
    
    @staticmethod
    def get_event(db: Session, event_id: int) -> Optional[EventView]:
        event = EventRepo.get_by_id(db, event_id)
        if not event:
            return None
        return EventView.model_validate(event)
    
    @staticmethod
    def get_event_count(db: Session) -> int:
        return StateRepo.last_event_id(db)
