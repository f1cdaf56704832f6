"""SELECT statement builder.

Clauses are emitted in a fixed order whatever order they are configured in::

    SELECT, FROM, JOIN..., WHERE, GROUP BY, HAVING, ORDER BY, LIMIT, OFFSET,
    INDEX BY / NOT INDEX, REINDEX

Joins accumulate in call order; every other clause keeps its last value.
"""

from typing import ClassVar

from typing_extensions import Self

from litequery.builder._base import QueryBuilder
from litequery.builder.mixins import (
    ArgumentBindingMixin,
    HavingClauseMixin,
    JoinClauseMixin,
    LimitOffsetClauseMixin,
    OrderByClauseMixin,
    WhereClauseMixin,
)

__all__ = ("SelectBuilder",)


class SelectBuilder(
    WhereClauseMixin,
    HavingClauseMixin,
    ArgumentBindingMixin,
    JoinClauseMixin,
    OrderByClauseMixin,
    LimitOffsetClauseMixin,
    QueryBuilder,
):
    """Builder for SELECT statements.

    Predicates are raw SQL; values go through ``args`` (for WHERE/HAVING) or are
    bound automatically (LIMIT/OFFSET).

    Example:
        ```python
        sql, args = (
            select("name", "age")
            .from_("users")
            .left_join("teams", "users.team_id = teams.id")
            .where("age > ?")
            .args(18)
            .order_by("name")
            .limit(10)
            .build()
        )
        ```

    Without ``from_`` the statement is just the projection, which is handy for
    scalar subqueries such as ``select("(SELECT COUNT(*) FROM t) AS n")``.
    """

    __slots__ = ("_columns", "_distinct")

    clause_order: ClassVar[tuple[str, ...]] = (
        "select",
        "from",
        "join",
        "where",
        "group_by",
        "having",
        "order_by",
        "limit",
        "offset",
        "index",
        "reindex",
    )

    def __init__(self, *columns: str) -> None:
        super().__init__()
        self._columns = list(columns) or ["*"]
        self._distinct = False
        self._set_select_fragment()

    def _set_select_fragment(self) -> None:
        keyword = "SELECT DISTINCT" if self._distinct else "SELECT"
        self._set_fragment("select", f"{keyword} {', '.join(self._columns)}")

    def distinct(self) -> Self:
        self._distinct = True
        self._set_select_fragment()
        return self

    def from_(self, table: str) -> Self:
        """Set ``FROM <table>``. ``table`` may carry an alias, e.g. ``"users u"``."""
        self._set_fragment("from", f"FROM {table}")
        return self

    def group_by(self, *columns: str) -> Self:
        if not columns:
            self._raise_sql_builder_error("group_by() requires at least one column.")
        self._set_fragment("group_by", f"GROUP BY {', '.join(columns)}")
        return self

    def index_by(self, name: str) -> Self:
        """Set ``INDEX BY <name>``; replaces a previous ``not_index()``."""
        self._set_fragment("index", f"INDEX BY {name}")
        return self

    def not_index(self) -> Self:
        """Set ``NOT INDEX``; replaces a previous ``index_by()``."""
        self._set_fragment("index", "NOT INDEX")
        return self

    def reindex(self, name: str) -> Self:
        self._set_fragment("reindex", f"REINDEX {name}")
        return self
