"""Common table expressions: ``WITH <name> AS (<select>), ... <statement>``."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from litequery.builder._delete import DeleteBuilder
from litequery.builder._insert import InsertBuilder
from litequery.builder._select import SelectBuilder
from litequery.exceptions import SQLBuilderError

if TYPE_CHECKING:
    from litequery.builder._base import QueryBuilder

__all__ = ("WithBuilder", "WithQuery")


@dataclass
class WithQuery:
    """A named SELECT to be rendered inside a WITH prefix.

    The builder is rendered when the outer statement is rendered; its arguments
    are bound ahead of the outer statement's, in declaration order.
    """

    name: str
    query: SelectBuilder


class WithBuilder:
    """Holds the CTE list until the primary statement is chosen.

    Example:
        ```python
        adults = WithQuery("adults", select("id", "name").from_("users").where("age >= ?").args(18))
        sql, args = with_(adults).select("name").from_("adults").limit(5).build()
        # ("WITH adults AS (SELECT id, name FROM users WHERE age >= ?) SELECT name FROM adults LIMIT ?", [18, 5])
        ```
    """

    __slots__ = ("_queries",)

    def __init__(self, *queries: WithQuery) -> None:
        if not queries:
            msg = "with_() requires at least one WithQuery."
            raise SQLBuilderError(msg)
        seen: set[str] = set()
        for cte in queries:
            if not isinstance(cte.query, SelectBuilder):
                msg = f"CTE {cte.name!r} must wrap a SELECT builder, got {type(cte.query).__name__}."
                raise SQLBuilderError(msg)
            if cte.name in seen:
                msg = f"CTE with alias {cte.name!r} already exists."
                raise SQLBuilderError(msg)
            seen.add(cte.name)
        self._queries = list(queries)

    def _attach(self, builder: "QueryBuilder") -> None:
        builder._ctes = list(self._queries)

    def select(self, *columns: str) -> SelectBuilder:
        builder = SelectBuilder(*columns)
        self._attach(builder)
        return builder

    def insert_into(self, table: str) -> InsertBuilder:
        builder = InsertBuilder(table)
        self._attach(builder)
        return builder

    def delete_from(self, table: str) -> DeleteBuilder:
        builder = DeleteBuilder(table)
        self._attach(builder)
        return builder
