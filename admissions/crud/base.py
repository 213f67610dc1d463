"""
CRUD base class

Works directly on SQLModel objects
"""
from typing import Generic, TypeVar, Type, Optional, Any
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

ModelType = TypeVar("ModelType", bound=SQLModel)

# bulk statements skip in-session synchronisation
NO_SYNC = {"synchronize_session": False}


class CRUDBase(Generic[ModelType]):
    """Shared lookups"""
    
    def __init__(self, model: Type[ModelType]):
        self.model = model
    
    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """Fetch one row by primary key"""
        result = await db.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()
    
    async def count(self, db: AsyncSession) -> int:
        """Total row count"""
        result = await db.execute(
            select(func.count()).select_from(self.model)
        )
        return result.scalar() or 0
