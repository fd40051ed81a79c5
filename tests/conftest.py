"""
Pytest configuration and fixtures for the member search tests.
"""

import os

# Application settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SEED_SAMPLE_DATA", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from search_api.main import app
from search_api.models import Base, Member, Team
from search_api.repositories import MemberRepository, TeamRepository
from shared.infrastructure.db import get_db


# SQLite in-memory database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class StatementRecorder:
    """Collects every SQL statement sent to the test engine."""

    def __init__(self):
        self.statements: list[str] = []

    def __call__(self, conn, cursor, statement, parameters, context, executemany):
        self.statements.append(statement)

    @property
    def selects(self) -> list[str]:
        return [s for s in self.statements if s.lstrip().upper().startswith("SELECT")]

    @property
    def count_queries(self) -> list[str]:
        return [s for s in self.selects if "count(" in s.lower()]

    def clear(self) -> None:
        self.statements.clear()


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Uses SQLite in-memory for isolation.
    """
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database session override.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def seed_teams(db_session):
    """Create teamA and teamB."""
    team_a = Team("teamA")
    team_b = Team("teamB")
    db_session.add_all([team_a, team_b])
    db_session.commit()
    return {"teamA": team_a, "teamB": team_b}


@pytest.fixture
def seed_members(db_session, seed_teams):
    """
    Four members aged 10, 20, 30 and 40.
    member1 and member2 belong to teamA, member3 and member4 to teamB.
    """
    members = [
        Member("member1", 10, seed_teams["teamA"]),
        Member("member2", 20, seed_teams["teamA"]),
        Member("member3", 30, seed_teams["teamB"]),
        Member("member4", 40, seed_teams["teamB"]),
    ]
    db_session.add_all(members)
    db_session.commit()
    for member in members:
        db_session.refresh(member)
    return {member.username: member for member in members}


@pytest.fixture
def member_repository(db_session):
    return MemberRepository(db_session)


@pytest.fixture
def team_repository(db_session):
    return TeamRepository(db_session)


@pytest.fixture
def sql_recorder(seed_members):
    """
    Record SQL statements issued after the sample members are committed.
    """
    recorder = StatementRecorder()
    event.listen(engine, "before_cursor_execute", recorder)
    try:
        yield recorder
    finally:
        event.remove(engine, "before_cursor_execute", recorder)
