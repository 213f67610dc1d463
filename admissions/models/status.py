"""
Status model

One status per (application, addressed committee); the status carries its
committee so it can be matched without relying on list positions
"""
from enum import Enum
from typing import Optional, TYPE_CHECKING
from sqlmodel import Field, Relationship

from .base import SQLModelBase, IDMixin

if TYPE_CHECKING:
    from .committee import Committee


class StatusValue(str, Enum):
    """Admission status of an application at one committee"""
    PENDING = "Pending"
    INVITED_TO_INTERVIEW = "Invited to interview"
    INTERVIEW_DECLINED = "Interview declined"
    INTERVIEW_COMPLETED = "Interview completed"
    OFFER_GIVEN = "Offer given"
    OFFER_DECLINED = "Offer declined"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"


class Status(IDMixin, table=True):
    """Status table"""
    __tablename__ = "statuses"
    
    committee_id: int = Field(foreign_key="committees.id", index=True, description="Owning committee")
    value: str = Field(default=StatusValue.PENDING.value, max_length=40, index=True, description="Status value")
    
    committee: Optional["Committee"] = Relationship(
        sa_relationship_kwargs={"lazy": "selectin"}
    )
    
    def __repr__(self) -> str:
        return f"<Status(id={self.id}, committee_id={self.committee_id}, value={self.value})>"


class StatusBrief(SQLModelBase):
    """Status in the application list; the value is left out"""
    committee: int


class StatusDetail(SQLModelBase):
    """Status in the application detail view"""
    id: str
    committee: int
    committee_name: Optional[str] = None
    value: StatusValue
