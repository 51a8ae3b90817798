"""
Event model
"""

from sqlalchemy import Column, Integer, String, Boolean, CheckConstraint
from sqlalchemy.orm import relationship

from app.core.db import Base

class Event(Base):
    __tablename__ = "events"
    
    # Assigned from registry_state.last_event_id, never autoincremented
    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    organizer = Column(String(255), nullable=False, index=True)
    date = Column(Integer, nullable=False)
    max_attendees = Column(Integer, nullable=False)
    issued_count = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    
    # Relationships
    tokens = relationship("Token", back_populates="event")
    attendance_records = relationship("AttendanceRecord", back_populates="event")
    
    __table_args__ = (
        CheckConstraint("max_attendees >= 1", name="check_max_attendees_positive"),
        CheckConstraint("issued_count <= max_attendees", name="check_issued_lte_max"),
    )
    
    def __repr__(self) -> str:
        return f"<Event(id={self.id}, name={self.name}, issued={self.issued_count}/{self.max_attendees})>"
