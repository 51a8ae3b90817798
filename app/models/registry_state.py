"""
Singleton row holding the registry's sequence counters and base URI
"""

from sqlalchemy import Column, Integer, String

from app.core.db import Base

class RegistryState(Base):
    __tablename__ = "registry_state"
    
    id = Column(Integer, primary_key=True)
    last_event_id = Column(Integer, nullable=False, default=0)
    last_token_id = Column(Integer, nullable=False, default=0)
    base_uri = Column(String(256), nullable=False)
