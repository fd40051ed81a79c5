"""
Member model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shared.config.constants import Limits
from .base import Base, IdType

if TYPE_CHECKING:
    from .team import Team


class Member(Base):
    """
    A member, optionally belonging to one team.

    The team is left-joined in every search so members without a team are
    still returned (with empty team columns).
    """

    __tablename__ = "member"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(Limits.MAX_USERNAME_LENGTH), nullable=False, index=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    team_id: Mapped[Optional[int]] = mapped_column(
        IdType, ForeignKey("team.id", ondelete="SET NULL"), nullable=True, index=True
    )

    team: Mapped[Optional["Team"]] = relationship(back_populates="members")

    def __init__(self, username: str, age: int = 0, team: Team | None = None, **kwargs):
        super().__init__(username=username, age=age, **kwargs)
        if team is not None:
            self.change_team(team)

    def change_team(self, team: Team) -> None:
        """Move this member to ``team``. back_populates updates both member lists."""
        self.team = team

    def __repr__(self) -> str:
        return f"<Member(id={self.id}, username={self.username!r}, age={self.age})>"
