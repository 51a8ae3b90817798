"""
Token and metadata Pydantic schemas
"""

from pydantic import BaseModel

class TransferRequest(BaseModel):
    """Schema for transferring a token"""
    sender: str
    recipient: str

class BaseUriUpdate(BaseModel):
    """Schema for replacing the metadata base URI"""
    uri: str
