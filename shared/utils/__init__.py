"""
Utilities module: Exceptions, schemas.
"""

from shared.utils.exceptions import (
    AppException,
    NotFoundError,
    MemberNotFoundError,
)

__all__ = [
    "AppException",
    "NotFoundError",
    "MemberNotFoundError",
]
