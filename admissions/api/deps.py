"""
Shared route dependencies

Caller identity comes from the ``X-Member-Number`` header set by the
authentication layer in front of this service
"""
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.core.database import get_db
from admissions.core.exceptions import UnauthorizedException
from admissions.models import MAX_ID
from admissions.services.membership import resolve_committee_ids
from admissions.services.visibility import CallerRole, build_caller_role


def get_current_user_id(
    x_member_number: Optional[str] = Header(None, description="Authenticated membership number"),
) -> int:
    """Membership number of the caller"""
    if not x_member_number or not x_member_number.strip().isdecimal():
        raise UnauthorizedException()
    try:
        user_id = int(x_member_number)
    except ValueError:
        raise UnauthorizedException()
    if user_id > MAX_ID:
        raise UnauthorizedException()
    return user_id


async def get_caller_role(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> CallerRole:
    """Caller's visibility role"""
    committee_ids = await resolve_committee_ids(db, user_id)
    return build_caller_role(committee_ids)
