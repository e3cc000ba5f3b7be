"""Builder pattern: a fluent SQL query builder.

The builder collects the parts of a query step by step and produces an
immutable `Query` only when `build()` is called.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import PatternError


class IncompleteQueryError(PatternError):
    """Raised when building a query that has no table."""

    def __init__(self) -> None:
        super().__init__("A query needs a table: call from_() before build().")


@dataclass(frozen=True)
class Query:
    """An immutable SELECT statement produced by `QueryBuilder`."""

    table: str
    columns: tuple[str, ...] = ("*",)
    conditions: tuple[str, ...] = ()
    ordering: tuple[str, ...] = ()
    limit: int | None = None

    def to_sql(self) -> str:
        sql = f"SELECT {', '.join(self.columns)} FROM {self.table}"
        if self.conditions:
            sql += " WHERE " + " AND ".join(self.conditions)
        if self.ordering:
            sql += " ORDER BY " + ", ".join(self.ordering)
        if self.limit is not None:
            sql += f" LIMIT {self.limit}"
        return sql


class QueryBuilder:
    """Fluent, step-by-step construction of a `Query`.

    Every step returns the builder so calls chain. Only `from_` is mandatory;
    `select` defaults to ``*``. Conditions are joined with ``AND``.

    Example:
        ```py
        QueryBuilder().select("id").from_("posts").where("draft = 0").build()
        ```
    """

    def __init__(self) -> None:
        self._table: str | None = None
        self._columns: list[str] = []
        self._conditions: list[str] = []
        self._ordering: list[str] = []
        self._limit: int | None = None

    def select(self, *columns: str) -> QueryBuilder:
        self._columns.extend(columns)
        return self

    def from_(self, table: str) -> QueryBuilder:
        self._table = table
        return self

    def where(self, condition: str) -> QueryBuilder:
        self._conditions.append(condition)
        return self

    def order_by(self, column: str, descending: bool = False) -> QueryBuilder:
        self._ordering.append(f"{column} DESC" if descending else column)
        return self

    def limit(self, count: int) -> QueryBuilder:
        if count < 0:
            raise ValueError(f"Limit must be non-negative, got {count}")
        self._limit = count
        return self

    def build(self) -> Query:
        """Return the finished query.

        Raises:
            IncompleteQueryError: If no table was set.
        """
        if self._table is None:
            raise IncompleteQueryError
        return Query(
            table=self._table,
            columns=tuple(self._columns) or ("*",),
            conditions=tuple(self._conditions),
            ordering=tuple(self._ordering),
            limit=self._limit,
        )


def demo() -> list[str]:
    query = (
        QueryBuilder()
        .select("title", "date")
        .from_("posts")
        .where("author = 'ada'")
        .where("published = 1")
        .order_by("date", descending=True)
        .limit(5)
        .build()
    )
    return [query.to_sql(), QueryBuilder().from_("patterns").build().to_sql()]
