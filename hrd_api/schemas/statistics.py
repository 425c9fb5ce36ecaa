"""
Announcement and dashboard statistics schemas
"""
from pydantic import BaseModel
from typing import Optional, List
from datetime import date


class ContractAnnouncement(BaseModel):
    """One contract-expiry announcement"""
    id: int
    name: str
    position: Optional[str] = None
    division_id: Optional[int] = None
    division_name: Optional[str] = None
    contract_end_date: date
    days_left: int
    level: str  # 'expired', 'urgent', 'warning', 'normal'
    message: str


class ContractAnnouncementListEnvelope(BaseModel):
    success: bool = True
    data: List[ContractAnnouncement]


class DashboardStats(BaseModel):
    """Dashboard counters (camelCase on the wire)"""
    totalEmployees: int = 0
    totalDivisions: int = 0
    contractsEndingSoon: int = 0
    expiredContracts: int = 0


class DashboardStatsEnvelope(BaseModel):
    success: bool = True
    data: DashboardStats
