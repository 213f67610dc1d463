"""
Application model

An application is addressed to an ordered list of committees and holds one
status per addressed committee. Both orderings live in association tables
with a ``position`` column so the list order survives the round trip.

Relationships:
- N:M -> Committee (through application_committees)
- 1:N -> Status (through application_statuses)
"""
from datetime import datetime
from typing import List, Optional, TYPE_CHECKING
from pydantic import field_validator
from sqlmodel import SQLModel, Field, Relationship

from .base import MAX_ID, SQLModelBase, IDMixin, as_utc, utc_now
from .committee import CommitteeBrief
from .status import StatusBrief, StatusDetail

if TYPE_CHECKING:
    from .committee import Committee
    from .status import Status


# ==================== Association tables ====================

class ApplicationCommitteeLink(SQLModel, table=True):
    """Addressed committee at a given position"""
    __tablename__ = "application_committees"

    application_id: str = Field(foreign_key="applications.id", primary_key=True, max_length=36)
    committee_id: int = Field(foreign_key="committees.id", primary_key=True, index=True)
    position: int = Field(0, ge=0)

    committee: Optional["Committee"] = Relationship(
        sa_relationship_kwargs={"lazy": "selectin"}
    )


class ApplicationStatusLink(SQLModel, table=True):
    """Status at a given position"""
    __tablename__ = "application_statuses"

    application_id: str = Field(foreign_key="applications.id", primary_key=True, max_length=36)
    status_id: str = Field(foreign_key="statuses.id", primary_key=True, max_length=36, index=True)
    position: int = Field(0, ge=0)

    status: Optional["Status"] = Relationship(
        sa_relationship_kwargs={"lazy": "selectin"}
    )


# ==================== Base fields ====================

class ApplicationBase(SQLModelBase):
    """Applicant-supplied fields"""
    name: str = Field(..., min_length=1, max_length=100, index=True, description="Applicant name")
    email: str = Field(..., min_length=3, max_length=254, description="Applicant email")
    phone_number: str = Field(..., min_length=4, max_length=20, description="Applicant phone number")
    text: str = Field("", max_length=5000, description="Motivation text")

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        if "@" not in v:
            raise ValueError("email must contain '@'")
        return v


# ==================== Table ====================

class Application(ApplicationBase, IDMixin, table=True):
    """Application table"""
    __tablename__ = "applications"

    submitted_date: datetime = Field(default_factory=utc_now, index=True, description="Submission time")
    search_name: str = Field("", index=True, description="Casefolded name used by the name filter")

    committee_links: List[ApplicationCommitteeLink] = Relationship(
        sa_relationship_kwargs={
            "lazy": "selectin",
            "order_by": "ApplicationCommitteeLink.position",
            "cascade": "all, delete-orphan",
        }
    )
    status_links: List[ApplicationStatusLink] = Relationship(
        sa_relationship_kwargs={
            "lazy": "selectin",
            "order_by": "ApplicationStatusLink.position",
            "cascade": "all, delete-orphan",
        }
    )

    @property
    def committees(self) -> List["Committee"]:
        return [link.committee for link in self.committee_links]

    @property
    def statuses(self) -> List["Status"]:
        return [link.status for link in self.status_links]

    def __repr__(self) -> str:
        return f"<Application(id={self.id}, name={self.name})>"


# ==================== Requests ====================

class ApplicationCreate(ApplicationBase):
    """Submit an application"""
    committees: List[int] = Field(..., description="Ids of the addressed committees")

    @field_validator("committees")
    @classmethod
    def check_committees(cls, v: List[int]) -> List[int]:
        if not v:
            raise ValueError("at least one committee is required")
        if len(set(v)) != len(v):
            raise ValueError("committees must not contain duplicates")
        if any(c < 0 or c > MAX_ID for c in v):
            raise ValueError(f"committee ids must be between 0 and {MAX_ID}")
        return v


# ==================== Responses ====================

class ApplicationListItem(SQLModelBase):
    """Application in the list view"""
    id: str
    name: str
    submitted_date: datetime
    committees: List[CommitteeBrief] = []
    statuses: List[StatusBrief] = []


class ApplicationDetail(SQLModelBase):
    """Application in the detail view"""
    id: str
    name: str
    email: str
    phone_number: str
    text: str
    submitted_date: datetime
    committees: List[CommitteeBrief] = []
    statuses: List[StatusDetail] = []


class PaginationMeta(SQLModelBase):
    """Pagination block of the list response"""
    current_page: int = Field(..., alias="currentPage")
    number_of_pages: int = Field(..., alias="numberOfPages")


class ApplicationListResponse(SQLModelBase):
    """List response"""
    applications: List[ApplicationListItem]
    pagination: PaginationMeta


class ApplicationDetailResponse(SQLModelBase):
    """Detail response"""
    application: ApplicationDetail


def to_list_item(application: Application) -> ApplicationListItem:
    """Project an application onto the list view"""
    return ApplicationListItem(
        id=application.id,
        name=application.name,
        submitted_date=as_utc(application.submitted_date),
        committees=[
            CommitteeBrief(id=c.id, name=c.name, slug=c.slug)
            for c in application.committees
        ],
        statuses=[StatusBrief(committee=s.committee_id) for s in application.statuses],
    )


def to_detail(application: Application) -> ApplicationDetail:
    """Project an application onto the detail view"""
    return ApplicationDetail(
        id=application.id,
        name=application.name,
        email=application.email,
        phone_number=application.phone_number,
        text=application.text,
        submitted_date=as_utc(application.submitted_date),
        committees=[
            CommitteeBrief(id=c.id, name=c.name, slug=c.slug)
            for c in application.committees
        ],
        statuses=[
            StatusDetail(
                id=s.id,
                committee=s.committee_id,
                committee_name=s.committee.name if s.committee else None,
                value=s.value,
            )
            for s in application.statuses
        ],
    )
