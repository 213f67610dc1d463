"""
Application listing and lookup

request -> caller role -> list query -> repository -> redaction -> response
"""
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.core.exceptions import InternalException, NotFoundException
from admissions.crud import application_crud
from admissions.models import (
    ApplicationDetail,
    ApplicationListResponse,
    PaginationMeta,
    to_detail,
    to_list_item,
)
from .pagination import paginate
from .query_builder import ApplicationQuery, ApplicationQueryBuilder
from .visibility import (
    CallerRole,
    authorize_application,
    redact_application,
    require_membership,
)


async def list_applications(
    db: AsyncSession,
    role: CallerRole,
    query: ApplicationQuery,
) -> ApplicationListResponse:
    """Applications visible to ``role`` that match ``query``, one page at a time"""
    require_membership(role)

    builder = ApplicationQueryBuilder(role, query)
    try:
        applications, total = await application_crud.run_query(db, builder.build())
    except SQLAlchemyError:
        logger.exception("Application list query failed")
        raise InternalException("Something went wrong retrieving applications")

    if not applications:
        return ApplicationListResponse(
            applications=[],
            pagination=PaginationMeta(current_page=1, number_of_pages=0),
        )

    items = []
    for application in applications:
        item = to_list_item(application)
        committees, statuses = redact_application(role, item.committees, item.statuses)
        items.append(item.model_copy(update={"committees": committees, "statuses": statuses}))

    window = paginate(total, query.page, builder.page_size)
    return ApplicationListResponse(
        applications=items,
        pagination=PaginationMeta(
            current_page=window.current_page,
            number_of_pages=window.number_of_pages,
        ),
    )


async def get_application(
    db: AsyncSession,
    role: CallerRole,
    application_id: str,
) -> ApplicationDetail:
    """One application, redacted for ``role``"""
    require_membership(role)

    try:
        application = await application_crud.get_detail(db, application_id)
    except SQLAlchemyError:
        logger.exception(f"Application lookup failed: {application_id}")
        raise InternalException("Something went wrong retrieving the application")
    if application is None:
        raise NotFoundException("Could not find application")

    return authorize_application(role, to_detail(application))
