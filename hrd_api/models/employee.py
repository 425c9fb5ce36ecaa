"""
Employee model
"""
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from hrd_api.database import Base


EMPLOYEE_STATUSES = ("Active", "Inactive")


class Employee(Base):
    """Employee model"""
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    position = Column(String(100))
    age = Column(Integer)
    email = Column(String(100))
    phone = Column(String(30))
    address = Column(String(255))
    contract_end_date = Column(Date, index=True)
    status = Column(String(20), nullable=False, default="Active")  # 'Active', 'Inactive'
    division_id = Column(
        Integer,
        ForeignKey("divisions.id", ondelete="SET NULL"),
        nullable=True,
        default=1,
        index=True
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    division = relationship("Division", back_populates="employees")
