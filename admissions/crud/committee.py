"""
Committee CRUD
"""
from typing import List
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.models.committee import Committee
from .base import CRUDBase, NO_SYNC


class CRUDCommittee(CRUDBase[Committee]):
    """Committee lookups"""
    
    async def get_many(self, db: AsyncSession, ids: List[int]) -> List[Committee]:
        """Committees with the given ids, in no particular order"""
        result = await db.execute(
            select(self.model).where(self.model.id.in_(ids))
        )
        return list(result.scalars().all())
    
    async def close_all(self, db: AsyncSession) -> None:
        """Stop every committee from accepting admissions"""
        await db.execute(
            update(self.model).values(accepts_admissions=False),
            execution_options=NO_SYNC,
        )
        await db.flush()


committee_crud = CRUDCommittee(Committee)
