"""
Attendance record model
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from app.core.db import Base

class AttendanceRecord(Base):
    __tablename__ = "attendance_records"
    
    event_id = Column(Integer, ForeignKey("events.id"), primary_key=True)
    attendee = Column(String(255), primary_key=True)
    token_id = Column(Integer, ForeignKey("tokens.id"), nullable=False, unique=True)
    issued_at = Column(Integer, nullable=False)
    
    # Relationships
    event = relationship("Event", back_populates="attendance_records")
    
