"""
Division model
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from hrd_api.database import Base


class Division(Base):
    """Division (department) model"""
    __tablename__ = "divisions"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False, index=True)
    description = Column(String(500))
    color = Column(String(20), default="#3b82f6")
    icon = Column(String(50), default="business")  # Ionicons name
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    # employee_count is never stored, see routers/divisions.py
    employees = relationship("Employee", back_populates="division", passive_deletes=True)
