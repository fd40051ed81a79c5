"""
Optional predicate composition.

A search condition is a set of optional fields. Each field maps to a
function returning either a SQLAlchemy boolean clause or ``None`` when the
field is absent. The clauses are folded into a single WHERE that drops the
``None`` entries, so an all-absent condition matches every row.

Usage:
    clauses = [username_clause, age_clause]  # some may be None
    query = where_all(select(Member), *clauses)

    builder = PredicateBuilder()
    builder.and_(Member.username == "member1" if username else None)
    query = select(Member).where(builder.build())
"""

from typing import Optional

from sqlalchemy import ColumnElement, Select, and_, true


Clause = Optional[ColumnElement[bool]]


def has_text(value: str | None) -> bool:
    """True when ``value`` contains at least one non-whitespace character."""
    return value is not None and bool(value.strip())


def present(*clauses: Clause) -> list[ColumnElement[bool]]:
    """Keep the clauses that are not ``None``, in their original order."""
    return [clause for clause in clauses if clause is not None]


def where_all(query: Select, *clauses: Clause) -> Select:
    """
    AND every present clause into ``query``.

    With no present clause the query is returned unchanged.
    """
    conditions = present(*clauses)
    if not conditions:
        return query
    return query.where(*conditions)


class PredicateBuilder:
    """
    Mutable conjunction of optional clauses.

    The alternative to passing a list of clauses to ``where_all``: callers
    add clauses one by one, ``None`` is ignored, and ``build()`` returns the
    conjunction (``true()`` when empty).
    """

    def __init__(self, initial: Clause = None):
        self._clauses: list[ColumnElement[bool]] = present(initial)

    def and_(self, clause: Clause) -> "PredicateBuilder":
        if clause is not None:
            self._clauses.append(clause)
        return self

    def has_value(self) -> bool:
        return bool(self._clauses)

    def build(self) -> ColumnElement[bool]:
        if not self._clauses:
            return true()
        if len(self._clauses) == 1:
            return self._clauses[0]
        return and_(*self._clauses)

    def __len__(self) -> int:
        return len(self._clauses)
