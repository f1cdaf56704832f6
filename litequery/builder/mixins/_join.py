from typing import TYPE_CHECKING, cast

from mypy_extensions import trait
from typing_extensions import Self

if TYPE_CHECKING:
    from litequery.builder.protocols import BuilderProtocol

__all__ = ("JoinClauseMixin",)

_JOIN_KEYWORDS = {
    "INNER": "JOIN",
    "LEFT": "LEFT JOIN",
    "RIGHT": "RIGHT JOIN",
    "FULL": "FULL JOIN",
}


@trait
class JoinClauseMixin:
    """Mixin providing JOIN clause methods for SELECT builders.

    Joins accumulate: each call appends one more join, in call order.
    """

    __slots__ = ()

    def join(self, table: str, on: str, join_type: str = "INNER") -> Self:
        """Append ``<KIND> JOIN <table> ON <on>``.

        Args:
            table: Table (optionally with alias) to join.
            on: Raw join predicate.
            join_type: One of INNER, LEFT, RIGHT or FULL. INNER renders as a plain ``JOIN``.

        Raises:
            SQLBuilderError: If ``join_type`` is not supported.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        keyword = _JOIN_KEYWORDS.get(join_type.upper())
        if keyword is None:
            builder._raise_sql_builder_error(f"Unsupported join type: {join_type}")
        builder._append_fragment("join", f"{keyword} {table} ON {on}")
        return self

    def left_join(self, table: str, on: str) -> Self:
        return self.join(table, on, "LEFT")

    def right_join(self, table: str, on: str) -> Self:
        return self.join(table, on, "RIGHT")

    def full_join(self, table: str, on: str) -> Self:
        return self.join(table, on, "FULL")

    def cross_join(self, table: str) -> Self:
        """Append ``CROSS JOIN <table>``; cross joins take no predicate."""
        builder = cast("BuilderProtocol", self)
        builder._append_fragment("join", f"CROSS JOIN {table}")
        return self
