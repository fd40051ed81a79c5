"""
Repository Pattern implementation.
Centralizes data access and query building on top of SQLAlchemy.

Usage:
    from search_api.repositories import (
        MemberSearchCondition,
        PageRequest,
        get_member_repository,
    )

    repo = get_member_repository(db)
    rows = repo.search(MemberSearchCondition(team_name="teamA", age_goe=20))
    page = repo.search_page_optimized_count(MemberSearchCondition(), PageRequest.of(0, 20))
"""

from .base import BaseRepository
from .paging import Page, PageRequest, get_page
from .predicates import PredicateBuilder, has_text, where_all
from .member import (
    MemberRepository,
    MemberSearchCondition,
    get_member_repository,
)
from .team import TeamRepository

__all__ = [
    # Base
    "BaseRepository",
    # Paging
    "Page",
    "PageRequest",
    "get_page",
    # Predicates
    "PredicateBuilder",
    "has_text",
    "where_all",
    # Member
    "MemberRepository",
    "MemberSearchCondition",
    "get_member_repository",
    # Team
    "TeamRepository",
]
