"""
Attendance token model
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from app.core.db import Base

class Token(Base):
    __tablename__ = "tokens"
    
    id = Column(Integer, primary_key=True, autoincrement=False)
    owner = Column(String(255), nullable=False, index=True)
    # Set once at issuance, transfers never touch it
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False)
    
    # Relationships
    event = relationship("Event", back_populates="tokens")
