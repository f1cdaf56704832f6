"""DELETE statement builder."""

from typing import ClassVar

from litequery.builder._base import QueryBuilder
from litequery.builder.mixins import ArgumentBindingMixin, ReturningClauseMixin, WhereClauseMixin

__all__ = ("DeleteBuilder",)


class DeleteBuilder(WhereClauseMixin, ArgumentBindingMixin, ReturningClauseMixin, QueryBuilder):
    """Builder for DELETE statements.

    Example:
        ```python
        sql, args = delete_from("users").where("id = ?").args(42).build()
        # ("DELETE FROM users WHERE id = ?", [42])
        ```
    """

    __slots__ = ("_table",)

    clause_order: ClassVar[tuple[str, ...]] = ("delete", "where", "returning")

    def __init__(self, table: str) -> None:
        super().__init__()
        self._table = table
        self._set_fragment("delete", f"DELETE FROM {table}")
