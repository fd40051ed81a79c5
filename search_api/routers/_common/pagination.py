"""
Pagination dependencies for all routers.

The router is where page input is validated: FastAPI rejects a page outside
0..Limits.MAX_PAGE or a size outside 1..Limits.MAX_PAGE_SIZE with 422 before
a PageRequest is built.

Usage:
    from search_api.routers._common.pagination import get_page_request

    @router.get("/members")
    def list_members(
        request: PageRequest = Depends(get_page_request),
        db: Session = Depends(get_db),
    ):
        return repo.search_page(condition, request).to_dict()
"""

from fastapi import Query

from search_api.repositories.paging import PageRequest
from shared.config.constants import Limits


def get_page_request(
    page: int = Query(
        default=Limits.DEFAULT_PAGE,
        ge=0,
        le=Limits.MAX_PAGE,
        description="0-based page index",
    ),
    size: int = Query(
        default=Limits.DEFAULT_PAGE_SIZE,
        ge=1,
        le=Limits.MAX_PAGE_SIZE,
        description="Maximum number of items per page",
    ),
) -> PageRequest:
    """FastAPI dependency for pagination."""
    return PageRequest.of(page, size)

