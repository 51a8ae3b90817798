"""
Event-related Pydantic schemas
"""

from pydantic import BaseModel

class EventCreate(BaseModel):
    """Schema for creating an event"""
    name: str
    date: int
    max_attendees: int

class EventView(BaseModel):
    """Event as seen by readers"""
    id: int
    name: str
    organizer: str
    date: int
    max_attendees: int
    issued_count: int
    is_active: bool
    
    class Config:
        from_attributes = True
