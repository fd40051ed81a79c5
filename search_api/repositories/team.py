"""
Team Repository - Data access for teams.
"""

from sqlalchemy import select

from search_api.models import Team
from .base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """Repository for Team entities."""

    @property
    def model(self) -> type[Team]:
        return Team

    def find_by_name(self, name: str) -> Team | None:
        return self._db.scalar(select(Team).where(Team.name == name).order_by(Team.id).limit(1))
