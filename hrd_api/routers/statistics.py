"""
Statistics router
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from hrd_api.database import get_db
from hrd_api.schemas.statistics import DashboardStats, DashboardStatsEnvelope
from hrd_api.services.statistics import statistics_service

router = APIRouter(prefix="/statistics", tags=["Statistics"])


@router.get("/dashboard", response_model=DashboardStatsEnvelope)
async def get_dashboard_statistics(db: Session = Depends(get_db)):
    """
    Get dashboard counters

    Counters that fail are reported as 0 instead of failing the request
    """
    stats = await statistics_service.get_dashboard_stats(db)
    return DashboardStatsEnvelope(data=DashboardStats(**stats))
