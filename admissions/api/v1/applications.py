"""
Application API routes
"""
from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, Query
from pydantic import Field
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.api.deps import get_caller_role, get_current_user_id
from admissions.core.database import get_db
from admissions.core.response import success_response, MessageResponse
from admissions.models import (
    ApplicationCreate,
    ApplicationDetailResponse,
    ApplicationListResponse,
    MAX_ID,
    StatusValue,
)
from admissions.services.applications import get_application, list_applications
from admissions.services.query_builder import ApplicationQuery, SortType
from admissions.services.submission import submit_application
from admissions.services.visibility import CallerRole
from admissions.services.wipe import wipe_admission_data

router = APIRouter()


@router.get("", summary="List applications", response_model=ApplicationListResponse)
async def get_applications(
    page: Optional[int] = Query(None, ge=0, le=MAX_ID, description="Page number, 1-based"),
    name: Optional[str] = Query(None, max_length=100, description="Applicant name contains"),
    committee: Optional[List[Annotated[int, Field(ge=0, le=MAX_ID)]]] = Query(
        None, description="Addressed committee id(s)"
    ),
    status: Optional[StatusValue] = Query(None, description="Status value"),
    sort: Optional[SortType] = Query(None, description="Sort key"),
    role: CallerRole = Depends(get_caller_role),
    db: AsyncSession = Depends(get_db),
):
    """
    List applications visible to the caller, with filtering, sorting and
    pagination
    """
    query = ApplicationQuery(
        name=name,
        committee_ids=committee or [],
        status=status,
        sort=sort,
        page=page or None,
    )
    return await list_applications(db, role, query)


@router.post("", summary="Submit an application", response_model=ApplicationDetailResponse)
async def create_application(
    data: ApplicationCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Submit an application to one or more committees
    """
    application = await submit_application(db, data)
    return ApplicationDetailResponse(application=application)


@router.delete("/wipe", summary="Wipe admission data", response_model=MessageResponse)
async def wipe_applications(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Delete all admission data; Main Board only
    """
    await wipe_admission_data(db, user_id)
    return success_response(message="Admission data successfully wiped")


@router.get("/{application_id}", summary="Get an application", response_model=ApplicationDetailResponse)
async def get_application_detail(
    application_id: str,
    role: CallerRole = Depends(get_caller_role),
    db: AsyncSession = Depends(get_db),
):
    """
    One application, redacted for the caller
    """
    application = await get_application(db, role, application_id)
    return ApplicationDetailResponse(application=application)
