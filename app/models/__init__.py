"""
Database models package
"""

from .event import Event
from .token import Token
from .attendance import AttendanceRecord
from .registry_state import RegistryState

__all__ = ["Event", "Token", "AttendanceRecord", "RegistryState"]
