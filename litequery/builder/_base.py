"""Base classes shared by every statement builder.

A builder accumulates clause fragments as its chained methods are called and
renders them exactly once, in a fixed per-statement order, when ``query()`` or
``build()`` is invoked. Rendering never reorders arguments relative to their
placeholders: every fragment carries the values bound to its own ``?`` marks
and fragments are concatenated in emission order.
"""

import contextlib
import time
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, NamedTuple, NoReturn

from litequery.config import BuilderConfig, get_builder_config
from litequery.exceptions import SQLBuilderError
from litequery.utils.logging import get_logger

if TYPE_CHECKING:
    from litequery.builder._with import WithQuery

__all__ = ("PLACEHOLDER", "Fragment", "QueryBuilder", "SafeQuery", "StatementBuilder", "placeholders")

logger = get_logger("builder")

PLACEHOLDER = "?"


class SafeQuery(NamedTuple):
    """A rendered statement and the positional values bound to its placeholders."""

    sql: str
    parameters: list[Any]


@dataclass(slots=True)
class Fragment:
    """One clause of a statement and the values bound inside it."""

    sql: str
    parameters: list[Any] = field(default_factory=list)


def placeholders(count: int) -> str:
    """Return ``count`` comma separated positional placeholders."""
    return ", ".join([PLACEHOLDER] * count)


class StatementBuilder(ABC):
    """Base class for builders that render statement text.

    Subclasses implement :meth:`_compile`; the base class appends the statement
    terminator, handles logging and exposes :meth:`query`.
    """

    __slots__ = ()

    terminator: ClassVar[str] = ";"

    @abstractmethod
    def _compile(self) -> tuple[str, list[Any]]:
        """Render the statement without its terminator.

        Returns:
            The statement text and the positional arguments it binds.
        """

    @staticmethod
    def _raise_sql_builder_error(message: str, cause: BaseException | None = None) -> NoReturn:
        """Helper to raise SQLBuilderError, potentially with a cause.

        Args:
            message: The error message.
            cause: The optional original exception to chain.

        Raises:
            SQLBuilderError: Always raises this exception.
        """
        raise SQLBuilderError(message) from cause

    @contextlib.contextmanager
    def _debug_build_phase(self, phase: str, config: BuilderConfig) -> Iterator[None]:
        """Time a render phase when ``debug_mode`` is enabled."""
        if not config.debug_mode:
            yield
            return
        logger.debug("Starting build phase: %s", phase, extra={"extra_fields": {"phase": phase}})
        start = time.perf_counter()
        try:
            yield
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.debug(
                "Completed build phase: %s in %.3fms",
                phase,
                duration_ms,
                extra={"extra_fields": {"phase": phase, "duration_ms": duration_ms}},
            )

    def _render(self) -> SafeQuery:
        config = get_builder_config()
        with self._debug_build_phase("compile", config):
            sql, parameters = self._compile()
        sql = f"{sql}{self.terminator}"

        if config.log_queries:
            self._log_render(sql, parameters)
        return SafeQuery(sql=sql, parameters=list(parameters))

    def _log_render(self, sql: str, parameters: list[Any]) -> None:
        """Log the rendered statement's shape; the SQL text and values are never logged.

        ``placeholder_count`` counts every ``?`` in the text, including any inside
        string literals of raw predicates. A count that differs from the number of
        bound values is logged as a warning.
        """
        builder_type = type(self).__name__
        placeholder_count = sql.count(PLACEHOLDER)
        fields = {
            "builder_type": builder_type,
            "statement": sql.split(" ", 1)[0].rstrip(self.terminator),
            "sql_length": len(sql),
            "placeholder_count": placeholder_count,
            "parameter_count": len(parameters),
        }
        if placeholder_count != len(parameters):
            logger.warning(
                "Built %s statement with %d placeholders for %d parameters",
                builder_type,
                placeholder_count,
                len(parameters),
                extra={"extra_fields": fields},
            )
            return
        logger.debug("Built %s statement", builder_type, extra={"extra_fields": fields})

    def query(self) -> str:
        """Render the statement text.

        Returns:
            str: The SQL text, without the bound arguments.
        """
        return self._render().sql

    def __str__(self) -> str:
        return self.query()


class QueryBuilder(StatementBuilder):
    """Base class for builders that bind positional arguments.

    Clause state is kept as named :class:`Fragment` slots. Each subclass lists
    its slots in ``clause_order``; rendering joins the filled slots with a single
    space in that order, whatever order the chained methods were called in.
    """

    __slots__ = ("_ctes", "_fragments", "_last_predicate")

    terminator: ClassVar[str] = ""
    clause_order: ClassVar[tuple[str, ...]] = ()

    def __init__(self) -> None:
        self._ctes: list[WithQuery] = []
        self._fragments: dict[str, Fragment] = {}
        self._last_predicate: str | None = None

    def _set_fragment(self, slot: str, sql: str, parameters: Sequence[Any] = ()) -> None:
        """Fill ``slot``, replacing anything a previous call put there."""
        self._fragments[slot] = Fragment(sql, list(parameters))

    def _append_fragment(self, slot: str, sql: str, parameters: Sequence[Any] = (), separator: str = " ") -> None:
        """Extend ``slot``, keeping what earlier calls added."""
        current = self._fragments.get(slot)
        if current is None:
            self._set_fragment(slot, sql, parameters)
            return
        current.sql = f"{current.sql}{separator}{sql}"
        current.parameters.extend(parameters)

    def _clear_fragment(self, slot: str) -> None:
        self._fragments.pop(slot, None)

    def _compile_fragments(self) -> tuple[str, list[Any]]:
        parts: list[str] = []
        parameters: list[Any] = []
        for slot in self.clause_order:
            fragment = self._fragments.get(slot)
            if fragment is None:
                continue
            parts.append(fragment.sql)
            parameters.extend(fragment.parameters)
        return " ".join(parts), parameters

    def _compile_statement(self) -> tuple[str, list[Any]]:
        """Render the statement body; subclasses with derived clauses override this."""
        return self._compile_fragments()

    def _compile(self) -> tuple[str, list[Any]]:
        sql, parameters = self._compile_statement()
        if not self._ctes:
            return sql, parameters

        definitions: list[str] = []
        cte_parameters: list[Any] = []
        for cte in self._ctes:
            cte_sql, cte_args = cte.query._compile()
            definitions.append(f"{cte.name} AS ({cte_sql})")
            cte_parameters.extend(cte_args)
        return f"WITH {', '.join(definitions)} {sql}", [*cte_parameters, *parameters]

    def build(self) -> SafeQuery:
        """Render the statement text and its positional arguments.

        Returns:
            SafeQuery: ``(sql, parameters)``, with one parameter per ``?`` in ``sql``, left to right.
        """
        return self._render()
