"""
Application list query builder

Turns the caller's role and the list filters into one SELECT. Stages are
applied in a fixed order:

1. scope        - applications the caller's role may see
2. name         - case-insensitive substring on the applicant name
3. statuses     - status/committee predicates over the joined statuses
4. committees   - committee rows are loaded with the result
5. sort         - only when a sort key is given, no tie-breaker
6. pagination   - window plus total match count in the same statement

The committees and statuses of each row are loaded eagerly by the
relationships on Application; the status value is dropped later by the list
projection.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from loguru import logger
from sqlalchemy import Select, func, select

from admissions.core.config import settings
from admissions.models import (
    Application,
    ApplicationCommitteeLink,
    ApplicationStatusLink,
    Status,
    StatusValue,
)
from .pagination import page_offset
from .visibility import CallerRole, RoleKind


class SortType(str, Enum):
    """Sort keys accepted by the list endpoint"""
    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"
    DATE_ASC = "date_asc"
    DATE_DESC = "date_desc"


def sort_clause(sort: SortType):
    """ORDER BY expression for a sort key"""
    if sort is SortType.NAME_ASC:
        return Application.name.asc()
    if sort is SortType.NAME_DESC:
        return Application.name.desc()
    if sort is SortType.DATE_ASC:
        return Application.submitted_date.asc()
    return Application.submitted_date.desc()


@dataclass
class ApplicationQuery:
    """Filters of one list request"""
    name: Optional[str] = None
    committee_ids: List[int] = field(default_factory=list)
    status: Optional[StatusValue] = None
    sort: Optional[SortType] = None
    page: Optional[int] = None


def addressed_to(committee_ids):
    """Application has an addressed committee in ``committee_ids``"""
    return (
        select(ApplicationCommitteeLink.application_id)
        .where(
            ApplicationCommitteeLink.application_id == Application.id,
            ApplicationCommitteeLink.committee_id.in_(committee_ids),
        )
        .exists()
    )


def addressed_beyond(committee_id: int):
    """Application has an addressed committee other than ``committee_id``"""
    return (
        select(ApplicationCommitteeLink.application_id)
        .where(
            ApplicationCommitteeLink.application_id == Application.id,
            ApplicationCommitteeLink.committee_id != committee_id,
        )
        .exists()
    )


def has_status(*conditions):
    """
    One status of the application satisfies every condition

    All conditions are evaluated against the same status row, so committee
    and value filters combine per status rather than per application.
    """
    return (
        select(ApplicationStatusLink.application_id)
        .join(Status, Status.id == ApplicationStatusLink.status_id)
        .where(ApplicationStatusLink.application_id == Application.id, *conditions)
        .exists()
    )


class ApplicationQueryBuilder:
    """Builds the list SELECT for one caller and one set of filters"""

    def __init__(
        self,
        role: CallerRole,
        query: ApplicationQuery,
        page_size: Optional[int] = None,
    ):
        self.role = role
        self.query = query
        self.page_size = page_size or settings.applications_page_size
        self.applied_stages: List[str] = []

    def scope_stage(self, stmt: Select) -> Select:
        if self.role.kind is RoleKind.ELECTION_COMMITTEE:
            return stmt
        self.applied_stages.append("scope")
        if self.role.kind is RoleKind.MAIN_BOARD:
            # hide applications addressed to the Main Board alone
            return stmt.where(addressed_beyond(self.role.main_board_id))
        return stmt.where(addressed_to(self.role.committee_ids))

    def name_stage(self, stmt: Select) -> Select:
        if not self.query.name:
            return stmt
        self.applied_stages.append("name")
        return stmt.where(
            Application.search_name.contains(self.query.name.casefold(), autoescape=True)
        )

    def status_stage(self, stmt: Select) -> Select:
        status = self.query.status
        committee_ids = self.query.committee_ids
        if status and committee_ids:
            self.applied_stages.append("status_for_committee")
            return stmt.where(
                has_status(
                    Status.committee_id.in_(committee_ids),
                    Status.value == status.value,
                )
            )
        if status:
            self.applied_stages.append("status")
            return stmt.where(has_status(Status.value == status.value))
        if committee_ids:
            self.applied_stages.append("committee")
            return stmt.where(addressed_to(committee_ids))
        return stmt

    def sort_stage(self, stmt: Select) -> Select:
        if not self.query.sort:
            return stmt
        self.applied_stages.append("sort")
        return stmt.order_by(sort_clause(self.query.sort))

    def pagination_stage(self, stmt: Select) -> Select:
        self.applied_stages.append("pagination")
        return stmt.offset(page_offset(self.query.page, self.page_size)).limit(self.page_size)

    def build(self) -> Select:
        """
        Assemble the statement

        Rows are ``(Application, total)`` where ``total`` is the number of
        matches before the window was applied.
        """
        self.applied_stages = []
        stmt = select(Application, func.count().over().label("total"))
        stmt = self.scope_stage(stmt)
        stmt = self.name_stage(stmt)
        stmt = self.status_stage(stmt)
        stmt = self.sort_stage(stmt)
        stmt = self.pagination_stage(stmt)
        logger.debug(f"Application query stages: {self.applied_stages}")
        return stmt
