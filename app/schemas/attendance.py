"""
Attendance-related Pydantic schemas
"""

from pydantic import BaseModel

class IssueRequest(BaseModel):
    """Schema for issuing an attendance token"""
    attendee: str

class AttendanceRecordView(BaseModel):
    """Permanent proof of issuance for an (event, attendee) pair"""
    token_id: int
    issued_at: int
    
    class Config:
        from_attributes = True
