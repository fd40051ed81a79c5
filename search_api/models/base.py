"""
Base class for all SQLAlchemy ORM models.
"""

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase


# SQLite only auto-increments INTEGER PRIMARY KEY columns
IdType = BigInteger().with_variant(Integer(), "sqlite")


class Base(DeclarativeBase):
    """Base class for all models."""

    pass
