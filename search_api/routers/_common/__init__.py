"""
Common utilities shared across routers.
"""

from .pagination import get_page_request

__all__ = [
    "get_page_request",
]
