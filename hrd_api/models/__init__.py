"""
Database models
"""
from hrd_api.models.user import User
from hrd_api.models.division import Division
from hrd_api.models.employee import Employee, EMPLOYEE_STATUSES

__all__ = [
    "User",
    "Division",
    "Employee",
    "EMPLOYEE_STATUSES",
]
