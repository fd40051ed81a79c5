"""
Centralized constants for the member search application.

Usage:
    from shared.config.constants import Limits, SampleData

    size = min(size, Limits.MAX_PAGE_SIZE)
"""

from typing import Final


# =============================================================================
# Validation Limits
# =============================================================================


class Limits:
    """Validation limits."""

    # String lengths
    MAX_USERNAME_LENGTH: Final[int] = 64
    MAX_TEAM_NAME_LENGTH: Final[int] = 64

    # Pagination defaults
    DEFAULT_PAGE_SIZE: Final[int] = 20
    MAX_PAGE_SIZE: Final[int] = 200
    DEFAULT_PAGE: Final[int] = 0
    # (MAX_PAGE + 1) * MAX_PAGE_SIZE stays far below a signed 64-bit OFFSET
    MAX_PAGE: Final[int] = 1_000_000

    # Age search bounds
    MIN_AGE: Final[int] = 0
    MAX_AGE: Final[int] = 200


# =============================================================================
# Sample Data
# =============================================================================


class SampleData:
    """Sample data inserted at startup when seeding is enabled."""

    TEAM_A: Final[str] = "teamA"
    TEAM_B: Final[str] = "teamB"
    MEMBER_COUNT: Final[int] = 100
    USERNAME_PREFIX: Final[str] = "member"
