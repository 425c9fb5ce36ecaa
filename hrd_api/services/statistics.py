"""
Statistics Service
"""
import asyncio
import logging
from datetime import date, timedelta
from typing import Callable, Dict, Optional
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from hrd_api.models.division import Division
from hrd_api.models.employee import Employee
from hrd_api.services.announcements import ANNOUNCEMENT_WINDOW_DAYS

logger = logging.getLogger(__name__)


class StatisticsService:
    """Dashboard counters"""

    async def get_dashboard_stats(self, db: Session, today: Optional[date] = None) -> Dict[str, int]:
        """
        Run the dashboard counters concurrently and join the results

        Each counter runs in a worker thread on its own session drawn from
        the engine behind ``db``. A counter that fails is reported as 0.

        Args:
            db: Request session (only its engine is used)
            today: Reference date for the contract counters

        Returns:
            Dictionary keyed by the camelCase counter names
        """
        today = today or date.today()
        session_factory = sessionmaker(autocommit=False, autoflush=False, bind=db.get_bind())

        counters = {
            "totalEmployees": self._count_active_employees,
            "totalDivisions": self._count_divisions,
            "contractsEndingSoon": self._count_contracts_ending_soon,
            "expiredContracts": self._count_expired_contracts,
        }

        results = await asyncio.gather(*(
            run_in_threadpool(self._run_counter, session_factory, name, counter, today)
            for name, counter in counters.items()
        ))
        return dict(zip(counters.keys(), results))

    def _run_counter(self, session_factory: sessionmaker, name: str,
                     counter: Callable[[Session, date], int], today: date) -> int:
        db = session_factory()
        try:
            return counter(db, today)
        except SQLAlchemyError as e:
            logger.error(f"Dashboard counter '{name}' failed: {e}")
            return 0
        finally:
            db.close()

    def _count_active_employees(self, db: Session, today: date) -> int:
        return db.query(Employee).filter(Employee.status == "Active").count()

    def _count_divisions(self, db: Session, today: date) -> int:
        return db.query(Division).count()

    def _count_contracts_ending_soon(self, db: Session, today: date) -> int:
        horizon = today + timedelta(days=ANNOUNCEMENT_WINDOW_DAYS)
        return db.query(Employee).filter(
            Employee.status == "Active",
            Employee.contract_end_date >= today,
            Employee.contract_end_date <= horizon
        ).count()

    def _count_expired_contracts(self, db: Session, today: date) -> int:
        return db.query(Employee).filter(
            Employee.status == "Active",
            Employee.contract_end_date < today
        ).count()


# Singleton instance
statistics_service = StatisticsService()
