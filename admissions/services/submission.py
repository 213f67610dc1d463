"""
Application submission

Statuses are written before the application that references them; if the
status insert fails no application is written.
"""
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.core.exceptions import (
    BadRequestException,
    ForbiddenException,
    InternalException,
)
from admissions.crud import (
    admission_period_crud,
    application_crud,
    committee_crud,
    status_crud,
)
from admissions.models import Application, ApplicationCreate, ApplicationDetail, to_detail


async def submit_application(db: AsyncSession, data: ApplicationCreate) -> ApplicationDetail:
    if not await admission_period_crud.is_active(db):
        raise ForbiddenException("Admission period is not active")

    committees = await committee_crud.get_many(db, data.committees)
    if len(committees) != len(data.committees):
        raise BadRequestException("A committee the application was sent to does not exist")
    if any(not committee.accepts_admissions for committee in committees):
        raise BadRequestException("A committee the application was sent to is closed")

    try:
        statuses = await status_crud.create_pending(db, data.committees)
    except SQLAlchemyError:
        logger.exception("Status insert failed")
        raise InternalException("Something went wrong creating statuses")

    application = Application.model_validate(data.model_dump(exclude={"committees"}))
    try:
        application = await application_crud.create_with_statuses(
            db,
            application=application,
            committee_ids=data.committees,
            statuses=statuses,
        )
    except SQLAlchemyError:
        logger.exception("Application insert failed")
        raise InternalException("Unable to save application")

    logger.info(f"Application {application.id} submitted to committees {data.committees}")
    return to_detail(application)
