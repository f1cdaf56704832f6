"""INSERT statement builder and its ON CONFLICT resolution chain.

Conflict resolution is expressed as a small typestate chain, one class per step::

    InsertBuilder.on_conflict(...)   -> ConflictBuilder
    ConflictBuilder.do()             -> ConflictActionBuilder
    ConflictActionBuilder.nothing()  -> InsertBuilder
    ConflictActionBuilder.update(..) -> ConflictUpdateBuilder
    ConflictUpdateBuilder.set(...)   -> InsertBuilder

so ``set`` cannot be reached without ``update``, and ``do`` cannot be chained twice.
"""

from collections.abc import Sequence
from typing import Any, ClassVar

from typing_extensions import Self

from litequery.builder._base import PLACEHOLDER, QueryBuilder, SafeQuery, placeholders
from litequery.builder.column import Field
from litequery.builder.mixins import ReturningClauseMixin
from litequery.exceptions import SQLBuilderError

__all__ = ("ConflictActionBuilder", "ConflictBuilder", "ConflictUpdateBuilder", "InsertBuilder")


class InsertBuilder(ReturningClauseMixin, QueryBuilder):
    """Builder for INSERT statements.

    Every value is bound: one ``?`` is emitted per value and the value is
    appended to the arguments in the same position.

    Example:
        ```python
        sql, args = insert_into("users").columns("name", "age").values("alice", 30).build()
        # ("INSERT INTO users (name, age) VALUES (?, ?)", ["alice", 30])
        ```
    """

    __slots__ = ("_columns", "_conflict_generation", "_conflict_step", "_rows", "_table")

    clause_order: ClassVar[tuple[str, ...]] = ("conflict", "returning")

    def __init__(self, table: str) -> None:
        super().__init__()
        self._table = table
        self._columns: list[str] = []
        self._rows: list[list[Any]] = []
        self._conflict_generation = 0
        self._conflict_step: str | None = None

    def columns(self, *names: str) -> Self:
        """Set the target column list, replacing any earlier one."""
        self._columns = list(names)
        return self

    def values(self, *values: Any) -> Self:
        """Add one row of values. Each call adds another row to the VALUES list.

        Raises:
            SQLBuilderError: If no values are given.

        Returns:
            The current builder instance for method chaining.
        """
        if not values:
            self._raise_sql_builder_error("values() requires at least one value.")
        self._rows.append(list(values))
        return self

    def on_conflict(self, *targets: str) -> "ConflictBuilder":
        """Declare ``ON CONFLICT (<targets>)`` and start choosing how to resolve it.

        A later ``on_conflict`` replaces this one; handles returned by earlier calls
        become stale and raise if used.

        Returns:
            ConflictBuilder: The conflict step; render it directly or continue with ``do()``.
        """
        if not targets:
            self._raise_sql_builder_error("on_conflict() requires at least one target column.")
        self._set_fragment("conflict", f"ON CONFLICT ({', '.join(targets)})")
        self._conflict_generation += 1
        self._conflict_step = "declared"
        return ConflictBuilder(self, self._conflict_generation)

    def _advance_conflict(self, generation: int, expected: str, step: str, misuse: str) -> None:
        """Move the ON CONFLICT clause from ``expected`` to ``step``.

        Raises:
            SQLBuilderError: If the handle belongs to a replaced clause, or the clause is not at ``expected``.
        """
        if generation != self._conflict_generation:
            self._raise_sql_builder_error("This ON CONFLICT clause was replaced by a later on_conflict() call.")
        if self._conflict_step != expected:
            self._raise_sql_builder_error(misuse)
        self._conflict_step = step

    def _compile_statement(self) -> tuple[str, list[Any]]:
        if not self._rows:
            self._raise_sql_builder_error(f"INSERT INTO {self._table} has no values.")
        width = len(self._columns) or len(self._rows[0])
        for row in self._rows:
            if len(row) != width:
                msg = f"INSERT INTO {self._table}: expected {width} values per row, got {len(row)}."
                self._raise_sql_builder_error(msg)

        head = f"INSERT INTO {self._table}"
        if self._columns:
            head = f"{head} ({', '.join(self._columns)})"
        rows_sql = ", ".join(f"({placeholders(len(row))})" for row in self._rows)
        sql = f"{head} VALUES {rows_sql}"
        parameters = [value for row in self._rows for value in row]

        tail_sql, tail_parameters = self._compile_fragments()
        if tail_sql:
            sql = f"{sql} {tail_sql}"
        return sql, [*parameters, *tail_parameters]


class ConflictBuilder:
    """``ON CONFLICT (<targets>)`` has been declared; no action chosen yet."""

    __slots__ = ("_generation", "_insert")

    def __init__(self, insert: InsertBuilder, generation: int) -> None:
        self._insert = insert
        self._generation = generation

    def do(self) -> "ConflictActionBuilder":
        """Choose the resolution action.

        Raises:
            SQLBuilderError: If ``do()`` was already called for this conflict clause,
                or a later ``on_conflict()`` replaced it.
        """
        self._insert._advance_conflict(
            self._generation, "declared", "do", "do() was already called for this ON CONFLICT clause."
        )
        return ConflictActionBuilder(self._insert, self._generation)

    def query(self) -> str:
        return self._insert.query()

    def build(self) -> SafeQuery:
        return self._insert.build()

    def __str__(self) -> str:
        return self.query()


class ConflictActionBuilder:
    """``DO`` has been chosen; exactly one of ``nothing()`` or ``update()`` follows."""

    __slots__ = ("_generation", "_insert")

    def __init__(self, insert: InsertBuilder, generation: int) -> None:
        self._insert = insert
        self._generation = generation

    def _choose(self, step: str) -> None:
        self._insert._advance_conflict(self._generation, "do", step, "The ON CONFLICT action was already chosen.")

    def nothing(self) -> InsertBuilder:
        """Append ``DO NOTHING`` and return to the INSERT builder."""
        self._choose("done")
        self._insert._append_fragment("conflict", "DO NOTHING")
        return self._insert

    def update(self, target: str = "") -> "ConflictUpdateBuilder":
        """Start ``DO UPDATE [<target>]``; the SET list follows with :meth:`ConflictUpdateBuilder.set`."""
        self._choose("update")
        return ConflictUpdateBuilder(self._insert, self._generation, target)


class ConflictUpdateBuilder:
    """``DO UPDATE`` has been chosen; waiting for the SET list."""

    __slots__ = ("_generation", "_insert", "_target")

    def __init__(self, insert: InsertBuilder, generation: int, target: str) -> None:
        self._insert = insert
        self._generation = generation
        self._target = target

    def set(self, fields: Sequence[Field]) -> InsertBuilder:
        """Append ``DO UPDATE [<target>] SET <name> = ?[, ...]`` binding each field's value.

        Raises:
            SQLBuilderError: If ``fields`` is empty, ``set`` was already called, or the
                conflict clause was replaced by a later ``on_conflict()``.

        Returns:
            InsertBuilder: The INSERT builder, for ``returning`` or rendering.
        """
        if not fields:
            msg = "set() requires at least one field."
            raise SQLBuilderError(msg)
        self._insert._advance_conflict(
            self._generation, "update", "done", "set() was already called for this ON CONFLICT clause."
        )

        action = f"DO UPDATE {self._target}" if self._target else "DO UPDATE"
        assignments = ", ".join(f"{field.name} = {PLACEHOLDER}" for field in fields)
        self._insert._append_fragment("conflict", f"{action} SET {assignments}", [field.value for field in fields])
        return self._insert
