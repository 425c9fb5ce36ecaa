"""
Announcements router
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from hrd_api.database import get_db
from hrd_api.schemas.statistics import ContractAnnouncement, ContractAnnouncementListEnvelope
from hrd_api.services.announcements import get_contract_announcements

router = APIRouter(prefix="/announcements", tags=["Announcements"])


@router.get("/contracts", response_model=ContractAnnouncementListEnvelope)
def list_contract_announcements(db: Session = Depends(get_db)):
    """
    Contracts that expired or end within the next 30 days
    """
    announcements = get_contract_announcements(db)
    return ContractAnnouncementListEnvelope(
        data=[ContractAnnouncement(**item) for item in announcements]
    )
