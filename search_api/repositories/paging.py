"""
Page requests, pages, and total-count assembly.

``get_page`` decides whether a dedicated count query is needed for a page
whose content has already been fetched:

- first page, under-full (offset 0, fewer rows than the page size): the
  content is everything, so total = len(content);
- under-full later page (opt-in with ``derive_last_page_total``): this is the
  last page, so total = offset + len(content);
- anything else: ``count_fn()`` is called.

Usage:
    request = PageRequest.of(page=0, size=20)
    content = fetch(offset=request.offset, limit=request.size)
    page = get_page(content, request, lambda: count())
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from shared.config.logging import get_logger, log_duration

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """
    A 0-based page index and a page size.

    No validation happens here: callers (the router dependency) reject
    negative pages and non-positive sizes before building a request.
    """

    page: int
    size: int

    @classmethod
    def of(cls, page: int, size: int) -> "PageRequest":
        return cls(page=page, size=size)

    @property
    def offset(self) -> int:
        return self.page * self.size

    def next(self) -> "PageRequest":
        return PageRequest(self.page + 1, self.size)

    def previous_or_first(self) -> "PageRequest":
        return PageRequest(max(0, self.page - 1), self.size)


@dataclass
class Page(Generic[T]):
    """One page of results plus the total number of matching rows."""

    content: list[T]
    request: PageRequest
    total: int

    @property
    def number(self) -> int:
        return self.request.page

    @property
    def size(self) -> int:
        return self.request.size

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def total_pages(self) -> int:
        if self.request.size <= 0:
            return 1
        return (self.total + self.request.size - 1) // self.request.size

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    def to_dict(self) -> dict[str, Any]:
        """Convert to response dictionary."""
        return {
            "content": self.content,
            "pagination": {
                "page": self.number,
                "size": self.size,
                "offset": self.request.offset,
                "total_elements": self.total,
                "total_pages": self.total_pages,
                "number_of_elements": self.number_of_elements,
                "has_next": self.has_next,
                "has_previous": self.has_previous,
                "is_first": self.is_first,
                "is_last": self.is_last,
            },
        }


def get_page(
    content: Sequence[T],
    request: PageRequest,
    count_fn: Callable[[], int],
    derive_last_page_total: bool = False,
) -> Page[T]:
    """
    Build a page, calling ``count_fn`` only when the total cannot be inferred.

    Args:
        content: Rows already fetched for ``request``
        request: Page request the content was fetched with
        count_fn: Runs the count query over the same filtered relation
        derive_last_page_total: Infer the total from an under-full page at
            any offset, not only on the first page

    Returns:
        Page whose total always equals the unbounded match count
    """
    content = list(content)
    offset = request.offset

    if offset == 0 and len(content) < request.size:
        logger.debug("Count query skipped: first page is under-full", content_size=len(content))
        return Page(content, request, len(content))

    if derive_last_page_total and content and len(content) < request.size:
        logger.debug(
            "Count query skipped: last page is under-full",
            offset=offset,
            content_size=len(content),
        )
        return Page(content, request, offset + len(content))

    with log_duration(
        logger, "Count query executed", offset=offset, content_size=len(content)
    ) as data:
        total = count_fn()
        data["total"] = total
    return Page(content, request, total)
