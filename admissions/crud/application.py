"""
Application CRUD

Executes list queries built by ApplicationQueryBuilder and persists new
applications together with their committee/status associations
"""
from typing import List, Optional, Tuple
from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from admissions.models.application import (
    Application,
    ApplicationCommitteeLink,
    ApplicationStatusLink,
)
from admissions.models.status import Status
from .base import CRUDBase, NO_SYNC


def with_relations(stmt: Select) -> Select:
    """Load committees and statuses, overwriting objects already in the session"""
    return stmt.options(
        selectinload(Application.committee_links).selectinload(ApplicationCommitteeLink.committee),
        selectinload(Application.status_links)
        .selectinload(ApplicationStatusLink.status)
        .selectinload(Status.committee),
    ).execution_options(populate_existing=True)


class CRUDApplication(CRUDBase[Application]):
    """Application operations"""

    async def get_detail(self, db: AsyncSession, id: str) -> Optional[Application]:
        """Application with committees and statuses loaded"""
        result = await db.execute(
            with_relations(select(self.model).where(self.model.id == id))
        )
        return result.scalar_one_or_none()

    async def run_query(self, db: AsyncSession, stmt: Select) -> Tuple[List[Application], int]:
        """
        Execute a list statement

        Returns the windowed applications and the total number of matches.
        The total is only known when the window is non-empty.
        """
        result = await db.execute(with_relations(stmt))
        rows = result.all()
        if not rows:
            return [], 0
        return [row[0] for row in rows], rows[0].total

    async def create_with_statuses(
        self,
        db: AsyncSession,
        *,
        application: Application,
        committee_ids: List[int],
        statuses: List[Status],
    ) -> Application:
        """
        Persist an application addressed to ``committee_ids``

        ``statuses`` must already be flushed and be in the same order as
        ``committee_ids``.
        """
        application.search_name = application.name.casefold()
        db.add(application)
        await db.flush()
        db.add_all(
            ApplicationCommitteeLink(
                application_id=application.id,
                committee_id=committee_id,
                position=position,
            )
            for position, committee_id in enumerate(committee_ids)
        )
        db.add_all(
            ApplicationStatusLink(
                application_id=application.id,
                status_id=status.id,
                position=position,
            )
            for position, status in enumerate(statuses)
        )
        await db.flush()
        return await self.get_detail(db, application.id)

    async def delete_all(self, db: AsyncSession) -> None:
        """Delete every application and its associations"""
        await db.execute(delete(ApplicationCommitteeLink), execution_options=NO_SYNC)
        await db.execute(delete(ApplicationStatusLink), execution_options=NO_SYNC)
        await db.execute(delete(self.model), execution_options=NO_SYNC)
        await db.flush()


application_crud = CRUDApplication(Application)
