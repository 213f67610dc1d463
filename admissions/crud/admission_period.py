"""
Admission period CRUD
"""
from datetime import date, datetime, timezone
from typing import Optional
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.models.admission_period import AdmissionPeriod
from .base import CRUDBase, NO_SYNC


class CRUDAdmissionPeriod(CRUDBase[AdmissionPeriod]):
    """Admission period operations"""
    
    async def is_active(self, db: AsyncSession, today: Optional[date] = None) -> bool:
        """Whether some period covers ``today`` (UTC date by default)"""
        today = today or datetime.now(timezone.utc).date()
        result = await db.execute(
            select(self.model.id)
            .where(self.model.start_date <= today, self.model.end_date >= today)
            .limit(1)
        )
        return result.scalar_one_or_none() is not None
    
    async def delete_all(self, db: AsyncSession) -> None:
        await db.execute(delete(self.model), execution_options=NO_SYNC)
        await db.flush()


admission_period_crud = CRUDAdmissionPeriod(AdmissionPeriod)
