"""
Status CRUD
"""
from typing import List
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.models.status import Status, StatusValue
from .base import CRUDBase, NO_SYNC


class CRUDStatus(CRUDBase[Status]):
    """Status operations"""
    
    async def create_pending(self, db: AsyncSession, committee_ids: List[int]) -> List[Status]:
        """Insert one Pending status per committee, in the given order"""
        statuses = [
            Status(committee_id=committee_id, value=StatusValue.PENDING.value)
            for committee_id in committee_ids
        ]
        db.add_all(statuses)
        await db.flush()
        return statuses
    
    async def delete_all(self, db: AsyncSession) -> None:
        await db.execute(delete(self.model), execution_options=NO_SYNC)
        await db.flush()


status_crud = CRUDStatus(Status)
