"""
Division schemas
"""
from pydantic import BaseModel, Field
from typing import Optional, List


class DivisionBase(BaseModel):
    """Base division schema"""
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    color: str = Field(default="#3b82f6", max_length=20)
    icon: str = Field(default="business", max_length=50)


class DivisionCreate(DivisionBase):
    """Schema for creating division"""
    pass


class DivisionUpdate(BaseModel):
    """Schema for updating division"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    color: Optional[str] = Field(None, max_length=20)
    icon: Optional[str] = Field(None, max_length=50)


class DivisionResponse(BaseModel):
    """Schema for division response"""
    id: int
    name: str
    description: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None
    employee_count: int = 0

    class Config:
        from_attributes = True


class DivisionEnvelope(BaseModel):
    success: bool = True
    data: DivisionResponse


class DivisionListEnvelope(BaseModel):
    success: bool = True
    data: List[DivisionResponse]
