"""
API routes
"""
from fastapi import APIRouter

from .v1 import applications

# Root router
api_router = APIRouter()

api_router.include_router(
    applications.router,
    prefix="/applications",
    tags=["Applications"]
)
