"""
Member search endpoints.

Thin router that delegates to MemberRepository:
- /api/v1/members: every matching member
- /api/v2/members: one page, content and count always queried
- /api/v3/members: one page, count query skipped when the total is known
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from search_api.repositories import (
    MemberRepository,
    MemberSearchCondition,
    PageRequest,
    get_member_repository,
)
from search_api.routers._common import get_page_request
from shared.config.constants import Limits
from shared.infrastructure.db import get_db
from shared.utils.exceptions import MemberNotFoundError
from shared.utils.schemas import MemberOutput, MemberTeamDto, MemberTeamPage


router = APIRouter(prefix="/api", tags=["members"])


def get_search_condition(
    username: str | None = Query(default=None, max_length=Limits.MAX_USERNAME_LENGTH),
    team_name: str | None = Query(default=None, max_length=Limits.MAX_TEAM_NAME_LENGTH),
    age_goe: int | None = Query(
        default=None,
        ge=Limits.MIN_AGE,
        le=Limits.MAX_AGE,
        description="Minimum age (inclusive)",
    ),
    age_loe: int | None = Query(
        default=None,
        ge=Limits.MIN_AGE,
        le=Limits.MAX_AGE,
        description="Maximum age (inclusive)",
    ),
) -> MemberSearchCondition:
    """FastAPI dependency building the search condition from query parameters."""
    return MemberSearchCondition(
        username=username,
        team_name=team_name,
        age_goe=age_goe,
        age_loe=age_loe,
    )


def _get_repository(db: Session = Depends(get_db)) -> MemberRepository:
    return get_member_repository(db)


@router.get("/v1/members", response_model=list[MemberTeamDto])
def search_members(
    condition: MemberSearchCondition = Depends(get_search_condition),
    repo: MemberRepository = Depends(_get_repository),
) -> list[MemberTeamDto]:
    """Every member matching the condition. Absent or blank fields are ignored."""
    return repo.search(condition)


@router.get("/v2/members", response_model=MemberTeamPage)
def search_members_page(
    condition: MemberSearchCondition = Depends(get_search_condition),
    page_request: PageRequest = Depends(get_page_request),
    repo: MemberRepository = Depends(_get_repository),
):
    """One page of matching members with the total from a count query."""
    return repo.search_page(condition, page_request).to_dict()


@router.get("/v3/members", response_model=MemberTeamPage)
def search_members_page_optimized(
    condition: MemberSearchCondition = Depends(get_search_condition),
    page_request: PageRequest = Depends(get_page_request),
    repo: MemberRepository = Depends(_get_repository),
):
    """
    One page of matching members.
    The count query is skipped when the first page is not full.
    """
    return repo.search_page_optimized_count(condition, page_request).to_dict()


@router.get("/members/{member_id}", response_model=MemberOutput)
def get_member(
    member_id: int,
    repo: MemberRepository = Depends(_get_repository),
) -> MemberOutput:
    member = repo.find_by_id(member_id)
    if member is None:
        raise MemberNotFoundError(member_id)
    return MemberOutput.model_validate(member)
