"""
Divisions management router
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import and_, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from hrd_api.database import get_db
from hrd_api.schemas.common import CreatedResponse, MessageResponse
from hrd_api.schemas.division import (
    DivisionCreate, DivisionUpdate, DivisionResponse, DivisionEnvelope, DivisionListEnvelope
)
from hrd_api.models.division import Division
from hrd_api.models.employee import Employee

router = APIRouter(prefix="/divisions", tags=["Divisions"])


def _divisions_with_counts(db: Session):
    """Divisions left-joined with their live count of active employees"""
    return (
        db.query(Division, func.count(Employee.id).label("employee_count"))
        .outerjoin(
            Employee,
            and_(Employee.division_id == Division.id, Employee.status == "Active")
        )
        .group_by(Division.id)
    )


def _to_response(division: Division, employee_count: int) -> DivisionResponse:
    division_data = DivisionResponse.model_validate(division)
    division_data.employee_count = employee_count or 0
    return division_data


def _ensure_name_available(db: Session, name: str):
    existing = db.query(Division).filter(Division.name == name).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Division name already exists"
        )


def _commit_division(db: Session):
    """Commit, reporting a unique-name race as 400 instead of a database error"""
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Division name already exists"
        )


@router.get("", response_model=DivisionListEnvelope)
def list_divisions(db: Session = Depends(get_db)):
    """
    List all divisions with their employee counts
    """
    rows = _divisions_with_counts(db).order_by(Division.id).all()
    return DivisionListEnvelope(data=[_to_response(division, count) for division, count in rows])


@router.get("/{division_id}", response_model=DivisionEnvelope)
def get_division(
    division_id: int,
    db: Session = Depends(get_db)
):
    """
    Get division by ID
    """
    row = _divisions_with_counts(db).filter(Division.id == division_id).first()
    if not row:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Division not found"
        )
    division, count = row
    return DivisionEnvelope(data=_to_response(division, count))


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_division(
    division_data: DivisionCreate,
    db: Session = Depends(get_db)
):
    """
    Create new division
    """
    _ensure_name_available(db, division_data.name)

    new_division = Division(**division_data.model_dump())
    db.add(new_division)
    _commit_division(db)
    db.refresh(new_division)

    return CreatedResponse(message="Division created successfully", id=new_division.id)


@router.put("/{division_id}", response_model=MessageResponse)
def update_division(
    division_id: int,
    division_data: DivisionUpdate,
    db: Session = Depends(get_db)
):
    """
    Update division (only the fields that were sent)
    """
    division = db.query(Division).filter(Division.id == division_id).first()
    if not division:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Division not found"
        )

    update_data = division_data.model_dump(exclude_unset=True)
    if "name" in update_data:
        if not update_data["name"]:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="name is required"
            )
        if update_data["name"] != division.name:
            _ensure_name_available(db, update_data["name"])

    for field, value in update_data.items():
        # An explicit null clears the description; color and icon keep their value
        if value is None and field != "description":
            continue
        setattr(division, field, value)

    _commit_division(db)

    return MessageResponse(message="Division updated successfully")


@router.delete("/{division_id}", response_model=MessageResponse)
def delete_division(
    division_id: int,
    db: Session = Depends(get_db)
):
    """
    Delete division

    Employees of the division are left in place; their division fields
    read as null afterwards.
    """
    deleted = (
        db.query(Division)
        .filter(Division.id == division_id)
        .delete(synchronize_session=False)
    )
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Division not found"
        )
    db.commit()

    return MessageResponse(message="Division deleted successfully")
