"""
Seed data for development.
Creates teamA/teamB and 100 members: member{i} aged i, even i in teamA.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from search_api.models import Member, Team
from shared.config.constants import SampleData
from shared.config.logging import get_logger
from shared.infrastructure.db import safe_commit

logger = get_logger(__name__)


def seed(db: Session) -> None:
    """
    Insert the sample teams and members.
    Idempotent: does nothing when a member already exists.
    """
    if db.scalar(select(Member.id).limit(1)):
        logger.info("Sample data already seeded, skipping")
        return

    team_a = Team(SampleData.TEAM_A)
    team_b = Team(SampleData.TEAM_B)
    db.add_all([team_a, team_b])

    for i in range(SampleData.MEMBER_COUNT):
        team = team_a if i % 2 == 0 else team_b
        db.add(Member(f"{SampleData.USERNAME_PREFIX}{i}", i, team))

    safe_commit(db)
    logger.info("Sample data seeded", teams=2, members=SampleData.MEMBER_COUNT)
