"""
Shared Pydantic schemas used across the application.

Projection DTOs are built straight from query rows: column labels in the
SELECT match the field names below.
"""

from pydantic import BaseModel, ConfigDict


# =============================================================================
# Projection DTOs
# =============================================================================


class MemberTeamDto(BaseModel):
    """Flat member + team row. Team fields are empty for members without a team."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    member_id: int
    username: str
    age: int
    team_id: int | None = None
    team_name: str | None = None


class MemberDto(BaseModel):
    """Username and age of a member."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    username: str
    age: int


class UserDto(BaseModel):
    """Projection whose field names differ from the member columns."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    name: str
    age: int


# =============================================================================
# Response Schemas
# =============================================================================


class MemberOutput(BaseModel):
    """Single member entity."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    age: int
    team_id: int | None = None


class PageOutput(BaseModel):
    """Page metadata returned with every paginated response."""

    page: int
    size: int
    offset: int
    total_elements: int
    total_pages: int
    number_of_elements: int
    has_next: bool
    has_previous: bool
    is_first: bool
    is_last: bool


class MemberTeamPage(BaseModel):
    """Paginated member search response."""

    content: list[MemberTeamDto]
    pagination: PageOutput
