"""
Base Repository implementation.

Provides the narrow query interface the concrete repositories are written
against: fetch rows, project rows into DTOs, bound by page, count, and run
bulk UPDATE/DELETE statements. The Session is the pluggable engine behind it.
Errors raised by SQLAlchemy propagate unchanged.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Sequence, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.orm import Session

from shared.config.logging import get_logger
from .paging import Page, PageRequest, get_page
from .predicates import Clause, present

logger = get_logger(__name__)

ModelT = TypeVar("ModelT")
DtoT = TypeVar("DtoT", bound=BaseModel)


class BaseRepository(ABC, Generic[ModelT]):
    """
    Abstract base repository with common operations.

    Subclasses must implement:
    - model: Return the SQLAlchemy model class

    The repository never commits. The caller owns the transaction.
    """

    def __init__(self, db: Session, derive_last_page_total: bool = False):
        self._db = db
        self._derive_last_page_total = derive_last_page_total

    @property
    @abstractmethod
    def model(self) -> type[ModelT]:
        """Return the SQLAlchemy model class."""
        ...

    # =========================================================================
    # Entity access
    # =========================================================================

    def find_by_id(self, entity_id: int) -> ModelT | None:
        return self._db.get(self.model, entity_id)

    def find_all(self) -> Sequence[ModelT]:
        query = select(self.model).order_by(self.model.id)
        return self._db.execute(query).scalars().all()

    def save(self, entity: ModelT) -> ModelT:
        """
        Save entity (insert or update).

        Args:
            entity: Entity to save

        Returns:
            Saved entity with its generated ID
        """
        self._db.add(entity)
        self._db.flush()
        self._db.refresh(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        self._db.delete(entity)
        self._db.flush()

    # =========================================================================
    # Query execution
    # =========================================================================

    def _fetch_scalars(self, query: Select) -> list[Any]:
        return list(self._db.execute(query).scalars().all())

    def _fetch_tuples(self, query: Select) -> list[tuple]:
        return [tuple(row) for row in self._db.execute(query).all()]

    def _fetch_dtos(self, query: Select, dto: type[DtoT]) -> list[DtoT]:
        """
        Project each row into ``dto``.
        Column labels in ``query`` must match the DTO field names.
        """
        return [dto.model_validate(dict(row._mapping)) for row in self._db.execute(query)]

    def _fetch_count(self, count_query: Select) -> int:
        return self._db.scalar(count_query) or 0

    def _count_query(self, *clauses: Clause, join: Any = None) -> Select:
        """
        COUNT over the filtered relation.
        No ordering and no projection. ``join`` is outer-joined whenever it is
        given, even when no clause references it.
        """
        query = select(func.count(self.model.id)).select_from(self.model)
        if join is not None:
            query = query.outerjoin(join)
        conditions = present(*clauses)
        if conditions:
            query = query.where(*conditions)
        return query

    # =========================================================================
    # Pagination
    # =========================================================================

    def _fetch_page(
        self,
        content_query: Select,
        count_query: Select,
        request: PageRequest,
        dto: type[DtoT],
    ) -> Page[DtoT]:
        """
        Fetch one page and skip the count query when the total can be inferred.
        """
        content = self._fetch_dtos(
            content_query.offset(request.offset).limit(request.size), dto
        )
        return get_page(
            content,
            request,
            lambda: self._fetch_count(count_query),
            derive_last_page_total=self._derive_last_page_total,
        )

    def _fetch_page_with_count(
        self,
        content_query: Select,
        count_query: Select,
        request: PageRequest,
        dto: type[DtoT],
    ) -> Page[DtoT]:
        """
        Always count, then fetch the page.
        The content query is skipped when nothing matches.
        """
        total = self._fetch_count(count_query)
        if total == 0:
            return Page([], request, 0)

        content = self._fetch_dtos(
            content_query.offset(request.offset).limit(request.size), dto
        )
        return Page(content, request, total)

    # =========================================================================
    # Bulk operations
    # =========================================================================

    def _bulk_update(self, values: dict[Any, Any], *clauses: Clause) -> int:
        """
        Single UPDATE over every matching row.

        Pending changes are flushed first and every loaded entity is expired
        afterwards, so later reads see the database state instead of stale
        identity-map values.
        """
        self._db.flush()
        statement = update(self.model).values(values)
        conditions = present(*clauses)
        if conditions:
            statement = statement.where(*conditions)
        result = self._db.execute(
            statement, execution_options={"synchronize_session": False}
        )
        self._db.expire_all()
        logger.info("Bulk update executed", model=self.model.__name__, rows=result.rowcount)
        return result.rowcount

    def _bulk_delete(self, *clauses: Clause) -> int:
        """Single DELETE over every matching row. Same session handling as ``_bulk_update``."""
        self._db.flush()
        statement = delete(self.model)
        conditions = present(*clauses)
        if conditions:
            statement = statement.where(*conditions)
        result = self._db.execute(
            statement, execution_options={"synchronize_session": False}
        )
        self._db.expire_all()
        logger.info("Bulk delete executed", model=self.model.__name__, rows=result.rowcount)
        return result.rowcount
