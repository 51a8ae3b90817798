"""
Tests for event creation, closing and event queries
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.clock import ManualClock
from app.core.config import settings
from app.core.db import Base
from app.models import Event
from app.services.errors import EventNotFound, InvalidEventData, NotAuthorized
from app.services.event_service import EventService

# Test database setup
SQLALCHEMY_DATABASE_URL = "sqlite:///./test_event_registry.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

ORGANIZER = "wallet_1"
OTHER = "wallet_2"

@pytest.fixture
def db_session():
    """Create test database session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)

@pytest.fixture
def clock():
    return ManualClock(start=1000)

def test_event_ids_are_sequential(db_session, clock):
    """Event ids start at 1 and increase by one per creation"""
    ids = [
        EventService.create_event(db_session, clock, ORGANIZER, f"Event {i}", clock.now() + 100, 5)
        for i in range(3)
    ]
    
    assert ids == [1, 2, 3]
    assert EventService.get_event_count(db_session) == 3

def test_event_count_starts_at_zero(db_session):
    assert EventService.get_event_count(db_session) == 0

def test_created_event_fields(db_session, clock):
    """New events belong to their creator and start open and empty"""
    event_id = EventService.create_event(db_session, clock, ORGANIZER, "Conf", 1100, 3)
    
    event = EventService.get_event(db_session, event_id)
    assert event is not None
    assert event.id == 1
    assert event.name == "Conf"
    assert event.organizer == ORGANIZER
    assert event.date == 1100
    assert event.max_attendees == 3
    assert event.issued_count == 0
    assert event.is_active is True

def test_duplicate_names_allowed(db_session, clock):
    first = EventService.create_event(db_session, clock, ORGANIZER, "Meetup", 2000, 1)
    second = EventService.create_event(db_session, clock, OTHER, "Meetup", 2000, 1)
    
    assert (first, second) == (1, 2)

def test_get_missing_event_returns_none(db_session):
    assert EventService.get_event(db_session, 42) is None

@pytest.mark.parametrize("name,date_offset,max_attendees", [
    ("", 100, 10),
    ("X", -1, 10),
    ("X", 0, 10),
    ("X", 100, 0),
    ("X", 100, -5),
])
def test_invalid_event_data_rejected(db_session, clock, name, date_offset, max_attendees):
    """Empty name, non-future date and zero capacity are rejected"""
    with pytest.raises(InvalidEventData):
        EventService.create_event(db_session, clock, ORGANIZER, name, clock.now() + date_offset, max_attendees)
    
    assert EventService.get_event_count(db_session) == 0
    assert db_session.query(Event).count() == 0

def test_name_length_limit(db_session, clock):
    limit = settings.MAX_EVENT_NAME_LENGTH
    
    event_id = EventService.create_event(db_session, clock, ORGANIZER, "a" * limit, 2000, 1)
    assert event_id == 1
    
    with pytest.raises(InvalidEventData):
        EventService.create_event(db_session, clock, ORGANIZER, "a" * (limit + 1), 2000, 1)

def test_failed_creation_does_not_consume_id(db_session, clock):
    EventService.create_event(db_session, clock, ORGANIZER, "First", 2000, 1)
    with pytest.raises(InvalidEventData):
        EventService.create_event(db_session, clock, ORGANIZER, "", 2000, 1)
    
    assert EventService.create_event(db_session, clock, ORGANIZER, "Second", 2000, 1) == 2

def test_date_must_stay_ahead_of_clock(db_session, clock):
    """A date valid now becomes invalid once the clock reaches it"""
    clock.advance(500)
    
    with pytest.raises(InvalidEventData):
        EventService.create_event(db_session, clock, ORGANIZER, "Late", 1500, 1)
    
    assert EventService.create_event(db_session, clock, ORGANIZER, "On time", 1501, 1) == 1

def test_close_event_by_organizer(db_session, clock):
    event_id = EventService.create_event(db_session, clock, ORGANIZER, "Conf", 2000, 3)
    
    assert EventService.close_event(db_session, ORGANIZER, event_id) is True
    assert EventService.get_event(db_session, event_id).is_active is False

def test_close_event_is_idempotent(db_session, clock):
    event_id = EventService.create_event(db_session, clock, ORGANIZER, "Conf", 2000, 3)
    
    assert EventService.close_event(db_session, ORGANIZER, event_id) is True
    assert EventService.close_event(db_session, ORGANIZER, event_id) is True
    assert EventService.get_event(db_session, event_id).is_active is False

def test_close_event_requires_organizer(db_session, clock):
    event_id = EventService.create_event(db_session, clock, ORGANIZER, "Conf", 2000, 3)
    
    with pytest.raises(NotAuthorized):
        EventService.close_event(db_session, OTHER, event_id)
    
    assert EventService.get_event(db_session, event_id).is_active is True

def test_close_missing_event(db_session):
    with pytest.raises(EventNotFound):
        EventService.close_event(db_session, ORGANIZER, 7)

@pytest.mark.parametrize("date,max_attendees", [
    (2 ** 64, 10),
    (2000, 2 ** 64),
    (2000, 2 ** 63),
])
def test_unstorable_integers_rejected(db_session, clock, date, max_attendees):
    """Dates and capacities beyond the store's integer range are invalid data"""
    with pytest.raises(InvalidEventData):
        EventService.create_event(db_session, clock, ORGANIZER, "Huge", date, max_attendees)
    
    assert EventService.get_event_count(db_session) == 0

def test_out_of_range_event_id_is_unknown(db_session):
    assert EventService.get_event(db_session, 99999999999999999999) is None
    assert EventService.get_event(db_session, -1) is None
    
    with pytest.raises(EventNotFound):
        EventService.close_event(db_session, ORGANIZER, 2 ** 64)
