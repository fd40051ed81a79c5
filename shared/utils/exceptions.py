"""
Centralized HTTP exceptions for consistent error handling.

Query errors raised by SQLAlchemy are never wrapped here: they reach the
caller unchanged. These types only cover conditions the API itself detects.

Usage:
    from shared.utils.exceptions import NotFoundError, MemberNotFoundError

    raise NotFoundError("Team", team_id)
    raise MemberNotFoundError(member_id)
"""

from typing import Any

from fastapi import HTTPException, status

from shared.config.logging import get_logger

logger = get_logger(__name__)


class AppException(HTTPException):
    """
    Base exception with automatic logging.

    All custom exceptions should inherit from this class
    to ensure consistent logging and response format.
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        log_level: str = "warning",
        headers: dict[str, str] | None = None,
        **log_context: Any,
    ):
        log_fn = getattr(logger, log_level, logger.warning)
        log_fn(detail, status_code=status_code, **log_context)

        super().__init__(status_code=status_code, detail=detail, headers=headers)


# =============================================================================
# 404 Not Found Errors
# =============================================================================


class NotFoundError(AppException):
    """
    Entity not found error (404).

    Usage:
        raise NotFoundError("Team", 3)
        raise NotFoundError("Member", member_id, username=username)
    """

    def __init__(self, entity: str, entity_id: int | str | None = None, **log_context: Any):
        if entity_id is not None:
            detail = f"{entity} with ID {entity_id} not found"
        else:
            detail = f"{entity} not found"

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            log_level="warning",
            entity=entity,
            entity_id=entity_id,
            **log_context,
        )


class MemberNotFoundError(NotFoundError):
    """Member not found."""

    def __init__(self, member_id: int | None = None, **log_context: Any):
        super().__init__("Member", member_id, **log_context)
