"""
Response envelopes shared by all routers
"""
from pydantic import BaseModel
from typing import Optional


class MessageResponse(BaseModel):
    """Plain acknowledgement"""
    success: bool = True
    message: Optional[str] = None


class CreatedResponse(MessageResponse):
    """Acknowledgement for an insert, carrying the new row id"""
    id: int
