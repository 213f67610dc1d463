"""
SQLModel base classes

Shared configuration and mixins
"""
import uuid
from datetime import datetime, timezone
from sqlmodel import SQLModel, Field


# Largest integer id accepted from clients
MAX_ID = 2**31 - 1


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """SQLite drops the offset on read; stored times are always UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLModelBase(SQLModel):
    """
    Base configuration
    
    Every schema class should inherit from this
    """
    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
        "str_strip_whitespace": True,
    }


class IDMixin(SQLModel):
    """UUID primary key mixin for table models"""
    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True,
        max_length=36,
        description="Primary key"
    )
