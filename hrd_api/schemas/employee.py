"""
Employee schemas
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date

STATUS_PATTERN = "^(Active|Inactive)$"


class EmployeeBase(BaseModel):
    """Base employee schema"""
    name: str = Field(..., min_length=1, max_length=100)
    position: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, ge=0, le=150)
    email: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    address: Optional[str] = Field(None, max_length=255)
    contract_end_date: Optional[date] = None
    status: str = Field(default="Active", pattern=STATUS_PATTERN)
    division_id: Optional[int] = 1


class EmployeeCreate(EmployeeBase):
    """Schema for creating employee"""
    pass


class EmployeeUpdate(EmployeeBase):
    """Schema for updating employee (full replace of every field)"""
    pass


class EmployeeStatusUpdate(BaseModel):
    """Schema for the status-only update"""
    status: str = Field(..., pattern=STATUS_PATTERN)


class EmployeeResponse(BaseModel):
    """Schema for employee response (stored rows are returned as they are)"""
    id: int
    name: str
    position: Optional[str] = None
    age: Optional[int] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    contract_end_date: Optional[date] = None
    status: Optional[str] = None
    division_id: Optional[int] = None

    # Joined from divisions, null when the division no longer exists
    division_name: Optional[str] = None
    division_color: Optional[str] = None
    division_icon: Optional[str] = None

    class Config:
        from_attributes = True


class EmployeeEnvelope(BaseModel):
    success: bool = True
    data: EmployeeResponse


class EmployeeListEnvelope(BaseModel):
    success: bool = True
    data: List[EmployeeResponse]
