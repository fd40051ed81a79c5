"""
API routers.
"""

from .members import router as members_router

__all__ = ["members_router"]
