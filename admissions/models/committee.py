"""
Committee model

Committees are pre-provisioned; two of them (Election Committee and Main
Board) get special visibility rules, see admissions.services.visibility
"""
from sqlmodel import Field

from .base import SQLModelBase


class CommitteeBase(SQLModelBase):
    """Committee fields"""
    name: str = Field(..., min_length=1, max_length=100, description="Committee name")
    slug: str = Field(..., min_length=1, max_length=100, unique=True, description="URL slug")
    accepts_admissions: bool = Field(False, description="Whether the committee is open for applications")


class Committee(CommitteeBase, table=True):
    """Committee table"""
    __tablename__ = "committees"
    
    id: int = Field(primary_key=True, sa_column_kwargs={"autoincrement": False}, description="Committee number")
    
    def __repr__(self) -> str:
        return f"<Committee(id={self.id}, slug={self.slug})>"


class CommitteeBrief(SQLModelBase):
    """Committee as embedded in application responses"""
    id: int
    name: str
    slug: str
