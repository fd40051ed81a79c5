"""
Member Repository - member search, projections and bulk operations.

Every search left-joins the team so members without a team are returned
with empty team columns. Search conditions are optional: an absent or blank
field adds no clause.
"""

from dataclasses import dataclass
from typing import Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session, aliased

from search_api.models import Member, Team
from shared.config.logging import get_logger
from shared.config.settings import settings
from shared.utils.schemas import MemberDto, MemberTeamDto, UserDto
from .base import BaseRepository
from .paging import Page, PageRequest
from .predicates import Clause, PredicateBuilder, has_text, where_all

logger = get_logger(__name__)


@dataclass
class MemberSearchCondition:
    """Optional member search fields. ``None`` or blank means unconstrained."""

    username: str | None = None
    team_name: str | None = None
    age_goe: int | None = None  # inclusive lower bound
    age_loe: int | None = None  # inclusive upper bound


# =============================================================================
# Optional clauses
# =============================================================================


def username_eq(username: str | None) -> Clause:
    return Member.username == username if has_text(username) else None


def team_name_eq(team_name: str | None) -> Clause:
    return Team.name == team_name if has_text(team_name) else None


def age_goe(age: int | None) -> Clause:
    return Member.age >= age if age is not None else None


def age_loe(age: int | None) -> Clause:
    return Member.age <= age if age is not None else None


def age_eq(age: int | None) -> Clause:
    return Member.age == age if age is not None else None


def member_search_clauses(condition: MemberSearchCondition) -> list[Clause]:
    """One entry per condition field, in a fixed order. Absent fields yield ``None``."""
    return [
        username_eq(condition.username),
        team_name_eq(condition.team_name),
        age_goe(condition.age_goe),
        age_loe(condition.age_loe),
    ]


class MemberRepository(BaseRepository[Member]):
    """
    Repository for Member entities.

    Search operations:
    - search: every matching row
    - search_page: page + total, always counting
    - search_page_optimized_count: page + total, counting only when needed
    """

    @property
    def model(self) -> type[Member]:
        return Member

    # =========================================================================
    # Search
    # =========================================================================

    def _member_team_query(self, condition: MemberSearchCondition) -> Select:
        """Projection onto MemberTeamDto with the condition applied, ordered by member id."""
        query = (
            select(
                Member.id.label("member_id"),
                Member.username,
                Member.age,
                Team.id.label("team_id"),
                Team.name.label("team_name"),
            )
            .select_from(Member)
            .outerjoin(Member.team)
        )
        return where_all(query, *member_search_clauses(condition)).order_by(Member.id)

    def _member_count_query(self, condition: MemberSearchCondition) -> Select:
        return self._count_query(*member_search_clauses(condition), join=Member.team)

    def search(self, condition: MemberSearchCondition) -> list[MemberTeamDto]:
        """Find every member matching ``condition``."""
        result = self._fetch_dtos(self._member_team_query(condition), MemberTeamDto)
        logger.debug("Member search", condition=condition, rows=len(result))
        return result

    def search_page(
        self,
        condition: MemberSearchCondition,
        request: PageRequest,
    ) -> Page[MemberTeamDto]:
        """
        Find one page of members matching ``condition``.
        Content and total are always both queried.
        """
        return self._fetch_page_with_count(
            self._member_team_query(condition),
            self._member_count_query(condition),
            request,
            MemberTeamDto,
        )

    def search_page_optimized_count(
        self,
        condition: MemberSearchCondition,
        request: PageRequest,
    ) -> Page[MemberTeamDto]:
        """
        Find one page of members matching ``condition``.
        The count query only runs when the total cannot be inferred from the page.
        """
        return self._fetch_page(
            self._member_team_query(condition),
            self._member_count_query(condition),
            request,
            MemberTeamDto,
        )

    def search_by_builder(self, username: str | None, age: int | None) -> Sequence[Member]:
        """Find members by exact username and exact age, both optional."""
        builder = PredicateBuilder()
        builder.and_(username_eq(username))
        builder.and_(age_eq(age))

        query = select(Member).where(builder.build()).order_by(Member.id)
        return self._db.execute(query).scalars().all()

    def find_by_username(self, username: str) -> Sequence[Member]:
        query = select(Member).where(Member.username == username).order_by(Member.id)
        return self._db.execute(query).scalars().all()

    # =========================================================================
    # Projections
    # =========================================================================

    def find_usernames(self) -> list[str]:
        return self._fetch_scalars(select(Member.username).order_by(Member.id))

    def find_username_age_pairs(self) -> list[tuple[str, int]]:
        return self._fetch_tuples(select(Member.username, Member.age).order_by(Member.id))

    def find_member_dtos(self) -> list[MemberDto]:
        return self._fetch_dtos(
            select(Member.username, Member.age).order_by(Member.id),
            MemberDto,
        )

    def find_user_dtos(self) -> list[UserDto]:
        """
        Username exposed as ``name``, and ``age`` replaced by the oldest
        member's age through a scalar subquery.
        """
        member_sub = aliased(Member, name="member_sub")
        max_age = select(func.max(member_sub.age)).scalar_subquery()

        query = select(
            Member.username.label("name"),
            max_age.label("age"),
        ).order_by(Member.id)
        return self._fetch_dtos(query, UserDto)

    # =========================================================================
    # SQL functions
    # =========================================================================

    def find_usernames_replaced(self, old: str, new: str) -> list[str]:
        """Usernames with every ``old`` substring replaced by ``new`` (SQL ``replace``)."""
        query = select(func.replace(Member.username, old, new)).order_by(Member.id)
        return self._fetch_scalars(query)

    def find_lowercase_usernames(self) -> list[str]:
        """Usernames that are already lower case (SQL ``lower``)."""
        query = (
            select(Member.username)
            .where(Member.username == func.lower(Member.username))
            .order_by(Member.id)
        )
        return self._fetch_scalars(query)

    # =========================================================================
    # Bulk operations
    # =========================================================================

    def bulk_rename_younger_than(self, age: int, new_username: str) -> int:
        """Set ``username`` of every member younger than ``age``. Returns affected rows."""
        return self._bulk_update({Member.username: new_username}, Member.age < age)

    def bulk_add_age(self, delta: int) -> int:
        """Add ``delta`` to every member's age. Returns affected rows."""
        return self._bulk_update({Member.age: Member.age + delta})

    def bulk_delete_older_than(self, age: int) -> int:
        """Delete every member older than ``age``. Returns affected rows."""
        return self._bulk_delete(Member.age > age)


def get_member_repository(db: Session) -> MemberRepository:
    """Factory function for dependency injection."""
    return MemberRepository(db, derive_last_page_total=settings.page_derive_last_page_total)
