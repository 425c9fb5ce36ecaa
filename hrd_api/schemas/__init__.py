"""
Pydantic schemas
"""
from hrd_api.schemas.common import MessageResponse, CreatedResponse
from hrd_api.schemas.user import (
    UserResponse, UserLogin, LoginResponse, UserEnvelope,
    UsernameUpdate, PasswordUpdate, TokenData
)
from hrd_api.schemas.division import (
    DivisionBase, DivisionCreate, DivisionUpdate, DivisionResponse,
    DivisionEnvelope, DivisionListEnvelope
)
from hrd_api.schemas.employee import (
    EmployeeBase, EmployeeCreate, EmployeeUpdate, EmployeeStatusUpdate,
    EmployeeResponse, EmployeeEnvelope, EmployeeListEnvelope
)
from hrd_api.schemas.statistics import (
    ContractAnnouncement, ContractAnnouncementListEnvelope,
    DashboardStats, DashboardStatsEnvelope
)

__all__ = [
    # Common
    "MessageResponse", "CreatedResponse",
    # User
    "UserResponse", "UserLogin", "LoginResponse", "UserEnvelope",
    "UsernameUpdate", "PasswordUpdate", "TokenData",
    # Division
    "DivisionBase", "DivisionCreate", "DivisionUpdate", "DivisionResponse",
    "DivisionEnvelope", "DivisionListEnvelope",
    # Employee
    "EmployeeBase", "EmployeeCreate", "EmployeeUpdate", "EmployeeStatusUpdate",
    "EmployeeResponse", "EmployeeEnvelope", "EmployeeListEnvelope",
    # Statistics
    "ContractAnnouncement", "ContractAnnouncementListEnvelope",
    "DashboardStats", "DashboardStatsEnvelope",
]
