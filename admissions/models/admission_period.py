"""
Admission period model
"""
from datetime import date
from typing import Optional
from sqlmodel import Field

from .base import SQLModelBase


class AdmissionPeriod(SQLModelBase, table=True):
    """Window during which applications may be submitted; both ends inclusive"""
    __tablename__ = "admission_periods"
    
    id: Optional[int] = Field(default=None, primary_key=True)
    start_date: date = Field(..., description="First day of the period")
    end_date: date = Field(..., description="Last day of the period")
