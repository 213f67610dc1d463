"""
User model

Users are identified by their membership number and belong to committees
"""
from enum import Enum
from typing import List, Optional
from sqlmodel import Field, Relationship

from .base import SQLModelBase


class MembershipType(str, Enum):
    """Role of a user within a committee"""
    LEADER = "leader"
    DEPUTY_LEADER = "deputy_leader"
    CASHIER = "cashier"
    BOARD_MEMBER = "board_member"
    DEPUTY_BOARD_MEMBER = "deputy_board_member"
    VOLUNTEER = "volunteer"
    MEMBER = "member"


class CommitteeMembership(SQLModelBase, table=True):
    """User ↔ committee membership"""
    __tablename__ = "committee_memberships"
    
    user_id: int = Field(foreign_key="users.id", primary_key=True)
    committee_id: int = Field(foreign_key="committees.id", primary_key=True, index=True)
    type: str = Field(default=MembershipType.MEMBER.value, max_length=30)


class User(SQLModelBase, table=True):
    """User table"""
    __tablename__ = "users"
    
    id: int = Field(primary_key=True, sa_column_kwargs={"autoincrement": False}, description="Membership number")
    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    email: Optional[str] = Field(None, max_length=254)
    
    committees: List[CommitteeMembership] = Relationship(
        sa_relationship_kwargs={"lazy": "selectin", "cascade": "all, delete-orphan"}
    )
    
    def __repr__(self) -> str:
        return f"<User(id={self.id})>"
