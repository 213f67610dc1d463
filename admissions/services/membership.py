"""
Membership resolver

Maps an authenticated membership number to the committees the user is in
"""
from typing import Set

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from admissions.core.exceptions import InternalException, NotFoundException
from admissions.crud import user_crud


async def resolve_committee_ids(db: AsyncSession, user_id: int) -> Set[int]:
    """
    Committee ids of ``user_id``

    Raises NotFoundException when the user does not exist and
    InternalException when the lookup itself fails. An empty set means the
    user is in no committee.
    """
    try:
        committee_ids = await user_crud.get_committee_ids(db, user_id)
    except SQLAlchemyError:
        logger.exception(f"Membership lookup failed for user {user_id}")
        raise InternalException("Something went wrong when trying to find user")

    if committee_ids is None:
        raise NotFoundException("Could not find user")
    return committee_ids
