"""
API v1 routes
"""
from . import applications

__all__ = [
    "applications",
]
