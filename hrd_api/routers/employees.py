"""
Employees management router
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from hrd_api.database import get_db
from hrd_api.schemas.common import CreatedResponse, MessageResponse
from hrd_api.schemas.employee import (
    EmployeeCreate, EmployeeUpdate, EmployeeStatusUpdate,
    EmployeeResponse, EmployeeEnvelope, EmployeeListEnvelope
)
from hrd_api.models.division import Division
from hrd_api.models.employee import Employee

router = APIRouter(prefix="/employees", tags=["Employees"])


def _employees_with_division(db: Session):
    """Employees left-joined with their division (null fields if it is gone)"""
    return (
        db.query(
            Employee,
            Division.name.label("division_name"),
            Division.color.label("division_color"),
            Division.icon.label("division_icon")
        )
        .outerjoin(Division, Employee.division_id == Division.id)
    )


def _to_response(row) -> EmployeeResponse:
    employee, division_name, division_color, division_icon = row
    employee_data = EmployeeResponse.model_validate(employee)
    employee_data.division_name = division_name
    employee_data.division_color = division_color
    employee_data.division_icon = division_icon
    return employee_data


def _list_employees(db: Session, division_id: Optional[int] = None) -> EmployeeListEnvelope:
    query = _employees_with_division(db)
    if division_id is not None:
        query = query.filter(Employee.division_id == division_id)
    rows = query.order_by(Employee.id).all()
    return EmployeeListEnvelope(data=[_to_response(row) for row in rows])


def _not_found():
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Employee not found"
    )


@router.get("", response_model=EmployeeListEnvelope)
def list_employees(
    division: Optional[int] = Query(None, description="Only employees of this division"),
    db: Session = Depends(get_db)
):
    """
    List all employees, optionally filtered by division
    """
    return _list_employees(db, division)


@router.get("/division/{division_id}", response_model=EmployeeListEnvelope)
def list_division_employees(
    division_id: int,
    db: Session = Depends(get_db)
):
    """
    List employees of one division
    """
    return _list_employees(db, division_id)


@router.get("/{employee_id}", response_model=EmployeeEnvelope)
def get_employee(
    employee_id: int,
    db: Session = Depends(get_db)
):
    """
    Get employee by ID
    """
    row = _employees_with_division(db).filter(Employee.id == employee_id).first()
    if not row:
        raise _not_found()
    return EmployeeEnvelope(data=_to_response(row))


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_employee(
    employee_data: EmployeeCreate,
    db: Session = Depends(get_db)
):
    """
    Create new employee
    """
    new_employee = Employee(**employee_data.model_dump())
    db.add(new_employee)
    db.commit()
    db.refresh(new_employee)

    return CreatedResponse(message="Employee created successfully", id=new_employee.id)


@router.put("/{employee_id}", response_model=MessageResponse)
def update_employee(
    employee_id: int,
    employee_data: EmployeeUpdate,
    db: Session = Depends(get_db)
):
    """
    Replace every field of an employee
    """
    updated = (
        db.query(Employee)
        .filter(Employee.id == employee_id)
        .update(employee_data.model_dump(), synchronize_session=False)
    )
    if not updated:
        raise _not_found()
    db.commit()

    return MessageResponse(message="Employee updated successfully")


@router.put("/{employee_id}/status", response_model=MessageResponse)
def update_employee_status(
    employee_id: int,
    status_data: EmployeeStatusUpdate,
    db: Session = Depends(get_db)
):
    """
    Toggle an employee between Active and Inactive
    """
    updated = (
        db.query(Employee)
        .filter(Employee.id == employee_id)
        .update({Employee.status: status_data.status}, synchronize_session=False)
    )
    if not updated:
        raise _not_found()
    db.commit()

    return MessageResponse(message=f"Employee status set to {status_data.status}")


@router.delete("/{employee_id}", response_model=MessageResponse)
def delete_employee(
    employee_id: int,
    db: Session = Depends(get_db)
):
    """
    Delete employee
    """
    deleted = (
        db.query(Employee)
        .filter(Employee.id == employee_id)
        .delete(synchronize_session=False)
    )
    if not deleted:
        raise _not_found()
    db.commit()

    return MessageResponse(message="Employee deleted successfully")
