"""
User CRUD
"""
from typing import Optional, Set
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.models.user import User, CommitteeMembership
from .base import CRUDBase, NO_SYNC


class CRUDUser(CRUDBase[User]):
    """User and membership operations"""
    
    async def exists(self, db: AsyncSession, user_id: int) -> bool:
        result = await db.execute(
            select(self.model.id).where(self.model.id == user_id)
        )
        return result.scalar_one_or_none() is not None
    
    async def get_committee_ids(self, db: AsyncSession, user_id: int) -> Optional[Set[int]]:
        """Committee ids of the user, or None when the user does not exist"""
        if not await self.exists(db, user_id):
            return None
        result = await db.execute(
            select(CommitteeMembership.committee_id)
            .where(CommitteeMembership.user_id == user_id)
        )
        return set(result.scalars().all())
    
    async def delete_all_except(self, db: AsyncSession, user_id: int) -> None:
        """Delete every user (and their memberships) other than ``user_id``"""
        await db.execute(
            delete(CommitteeMembership).where(CommitteeMembership.user_id != user_id),
            execution_options=NO_SYNC,
        )
        await db.execute(
            delete(self.model).where(self.model.id != user_id),
            execution_options=NO_SYNC,
        )
        await db.flush()


user_crud = CRUDUser(User)
