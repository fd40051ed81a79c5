"""
Team model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shared.config.constants import Limits
from .base import Base, IdType

if TYPE_CHECKING:
    from .member import Member


class Team(Base):
    """A named group of members."""

    __tablename__ = "team"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(Limits.MAX_TEAM_NAME_LENGTH), nullable=False, index=True)

    members: Mapped[list["Member"]] = relationship(back_populates="team")

    def __init__(self, name: str, **kwargs):
        super().__init__(name=name, **kwargs)

    def __repr__(self) -> str:
        return f"<Team(id={self.id}, name={self.name!r})>"
