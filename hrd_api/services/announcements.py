"""
Contract-expiry announcements
"""
from datetime import date, timedelta
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from hrd_api.models.division import Division
from hrd_api.models.employee import Employee

URGENT_DAYS = 7
WARNING_DAYS = 14
ANNOUNCEMENT_WINDOW_DAYS = 30


def classify_contract(days_left: int) -> str:
    """Bucket remaining contract days into an announcement level"""
    if days_left < 0:
        return "expired"
    if days_left <= URGENT_DAYS:
        return "urgent"
    if days_left <= WARNING_DAYS:
        return "warning"
    return "normal"


def describe_contract(name: str, days_left: int) -> str:
    if days_left < 0:
        return f"Contract of {name} expired {-days_left} day(s) ago"
    if days_left == 0:
        return f"Contract of {name} ends today"
    return f"Contract of {name} ends in {days_left} day(s)"


def get_contract_announcements(db: Session, today: Optional[date] = None) -> List[Dict[str, Any]]:
    """
    Active employees whose contract ends within the announcement window

    Already expired contracts are always included. Results are ordered by
    contract end date, soonest (or longest expired) first.

    Args:
        db: Database session
        today: Reference date (defaults to the current date)

    Returns:
        List of announcement dictionaries
    """
    today = today or date.today()
    horizon = today + timedelta(days=ANNOUNCEMENT_WINDOW_DAYS)

    rows = (
        db.query(Employee, Division.name.label("division_name"))
        .outerjoin(Division, Employee.division_id == Division.id)
        .filter(
            Employee.status == "Active",
            Employee.contract_end_date.isnot(None),
            Employee.contract_end_date <= horizon
        )
        .order_by(Employee.contract_end_date.asc(), Employee.id.asc())
        .all()
    )

    result = []
    for employee, division_name in rows:
        days_left = (employee.contract_end_date - today).days
        result.append({
            "id": employee.id,
            "name": employee.name,
            "position": employee.position,
            "division_id": employee.division_id,
            "division_name": division_name,
            "contract_end_date": employee.contract_end_date,
            "days_left": days_left,
            "level": classify_contract(days_left),
            "message": describe_contract(employee.name, days_left),
        })

    return result
