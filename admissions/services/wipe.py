"""
Admission data wipe

Resets the service for a new admission round. Each step is its own
statement; a failure part way leaves the earlier steps applied.
"""
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.core.config import settings
from admissions.core.exceptions import ForbiddenException
from admissions.crud import (
    admission_period_crud,
    application_crud,
    committee_crud,
    status_crud,
    user_crud,
)
from .membership import resolve_committee_ids


async def wipe_admission_data(db: AsyncSession, user_id: int) -> None:
    """Delete applications, statuses, other users and periods; close every committee"""
    committee_ids = await resolve_committee_ids(db, user_id)
    if settings.main_board_id not in committee_ids:
        raise ForbiddenException("You do not have access to this resource")

    logger.warning(f"Admission data wipe requested by user {user_id}")
    await application_crud.delete_all(db)
    await status_crud.delete_all(db)
    await user_crud.delete_all_except(db, user_id)
    await admission_period_crud.delete_all(db)
    await committee_crud.close_all(db)
    logger.warning("Admission data wiped")
