"""
SQLAlchemy ORM Models Package.

- base: Base class and id column type
- team: Team
- member: Member
"""

from .base import Base
from .team import Team
from .member import Member

__all__ = [
    "Base",
    "Team",
    "Member",
]
