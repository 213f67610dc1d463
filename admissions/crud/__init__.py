"""
CRUD modules
"""
from .committee import committee_crud
from .status import status_crud
from .user import user_crud
from .admission_period import admission_period_crud
from .application import application_crud

__all__ = [
    "committee_crud",
    "status_crud",
    "user_crud",
    "admission_period_crud",
    "application_crud",
]
