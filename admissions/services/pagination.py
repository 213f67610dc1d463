"""
Pagination

Page windows over a fixed page size. ``current_page`` is 0 when the caller
did not ask for a page, which is distinct from asking for page 1.
"""
import math
from dataclasses import dataclass
from typing import Optional

from admissions.core.config import settings


@dataclass(frozen=True)
class PageWindow:
    """Slice of a result set plus the metadata returned to the client"""
    offset: int
    limit: int
    current_page: int
    number_of_pages: int


def page_offset(requested_page: Optional[int], page_size: Optional[int] = None) -> int:
    """Index of the first item on ``requested_page`` (1-based)"""
    size = page_size or settings.applications_page_size
    if not requested_page:
        return 0
    return (requested_page - 1) * size


def paginate(
    total_count: int,
    requested_page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> PageWindow:
    size = page_size or settings.applications_page_size
    return PageWindow(
        offset=page_offset(requested_page, size),
        limit=size,
        current_page=requested_page or 0,
        number_of_pages=math.ceil(total_count / size),
    )
