"""
Pydantic schemas package
"""

from .common import *
from .event import *
from .attendance import *
from .token import *

__all__ = [
    "StandardResponse",
    "ErrorResponse",
    "EventCreate",
    "EventView",
    "IssueRequest",
    "AttendanceRecordView",
    "TransferRequest",
    "BaseUriUpdate",
]
