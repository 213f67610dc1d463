"""
SQLModel models

Tables and API schemas share one definition per entity
"""
from .base import MAX_ID, SQLModelBase, IDMixin
from .committee import Committee, CommitteeBrief
from .status import Status, StatusValue, StatusBrief, StatusDetail
from .user import User, CommitteeMembership, MembershipType
from .admission_period import AdmissionPeriod
from .application import (
    Application, ApplicationCommitteeLink, ApplicationStatusLink,
    ApplicationCreate, ApplicationListItem, ApplicationDetail,
    PaginationMeta, ApplicationListResponse, ApplicationDetailResponse,
    to_list_item, to_detail,
)

__all__ = [
    # Base
    "MAX_ID",
    "SQLModelBase",
    "IDMixin",
    # Committee
    "Committee",
    "CommitteeBrief",
    # Status
    "Status",
    "StatusValue",
    "StatusBrief",
    "StatusDetail",
    # User
    "User",
    "CommitteeMembership",
    "MembershipType",
    # Admission period
    "AdmissionPeriod",
    # Application
    "Application",
    "ApplicationCommitteeLink",
    "ApplicationStatusLink",
    "ApplicationCreate",
    "ApplicationListItem",
    "ApplicationDetail",
    "PaginationMeta",
    "ApplicationListResponse",
    "ApplicationDetailResponse",
    "to_list_item",
    "to_detail",
]
